"""Toplevel init script (.ocamlinit) loading the project's libraries."""

from buildplan.core.project import ProjectPlan


def ocamlinit_file(plan: ProjectPlan) -> list[str]:
    """Load every eligible library in dependency-first order."""
    lines = [
        "let () =",
        '  try Topdirs.dir_directory (Sys.getenv "OCAML_TOPLEVEL_PATH")',
        "  with Not_found -> ()",
        ";;",
        "",
        '#use "topfind";;',
        "#thread;;",
    ]
    packages = plan.packages_for(plan.libs)
    if packages:
        lines.append(f'#require "{" ".join(packages)}";;')
    lines.extend(
        [
            "",
            "(* Load each lib provided by this project. *)",
            '#directory "_build/lib";;',
        ]
    )
    eligible = set(plan.libs)
    for item in plan.topologically_sorted():
        if item.is_lib and item in eligible:
            lines.append(f'#load "{plan.qualified_name(item.name)}.cma";;')
    lines.extend(plan.project.repl_init_postfix)
    return lines
