"""Make-level aggregation rules (Makefile.rules)."""

from buildplan.core.project import ProjectPlan


def makefile_rules_file(plan: ProjectPlan) -> list[str]:
    qualified_libs = [plan.qualified_name(lib) for lib in plan.libs_names]

    native = " ".join(
        [f"lib/{lib}.cmxa" for lib in qualified_libs]
        + [f"lib/{lib}.cmxs" for lib in qualified_libs]
        + [f"app/{app}.native" for app in plan.apps_names]
    )
    byte = " ".join(
        [f"lib/{lib}.cma" for lib in qualified_libs]
        + [f"app/{app}.byte" for app in plan.apps_names]
    )

    static = [
        "default: byte project_files.stamp",
        "%.cma %.cmxa %.cmxs %.native %.byte lib/%.mlpack:",
        "\t$(OCAMLBUILD) $@",
        "project_files.stamp META:",
        "\t$(OCAMLBUILD) $@",
        f".merlin {plan.name}.install .ocamlinit:",
        "\t$(OCAMLBUILD) $@ && ln -s _build/$@ $@",
        "clean:",
        "\t$(OCAMLBUILD) -clean",
        ".PHONY: default native byte clean",
    ]
    return static + [f"native: {native}".rstrip(), f"byte: {byte}".rstrip()]
