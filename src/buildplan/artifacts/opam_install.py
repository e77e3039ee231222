"""opam install manifest (<project>.install)."""

from buildplan.core.project import ProjectPlan

LIB_SUFFIXES = ["a", "annot", "cma", "cmi", "cmo", "cmt", "cmti", "cmx", "cmxa", "cmxs", "dll", "o"]

APP_SUFFIXES = ["byte", "native"]


def install_file(plan: ProjectPlan) -> list[str]:
    """lib, stublibs and (when there are apps) bin sections.

    Entries prefixed with "?" are optional: opam skips them when the build did
    not produce the file.
    """
    lines = ["lib: [", '  "_build/META"']
    for lib in plan.libs_names:
        qualified = plan.qualified_name(lib)
        for suffix in LIB_SUFFIXES:
            lines.append(f'  "?_build/lib/{qualified}.{suffix}" {{ "{lib}/{qualified}.{suffix}" }}')
    lines.append("]")

    lines.append("stublibs: [")
    for lib in plan.libs_names:
        lines.append(f'  "?_build/lib/dll{plan.qualified_name(lib)}_stub.so"')
    lines.append("]")

    bin_lines = [
        f'  "?_build/app/{app}.{suffix}" {{"{app}"}}'
        for app in plan.apps_names
        for suffix in APP_SUFFIXES
    ]
    if bin_lines:
        lines.extend(["bin: [", *bin_lines, "]"])
    return lines
