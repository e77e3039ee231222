"""findlib META file: one sub-package per eligible library."""

from buildplan.core.item import ItemKind
from buildplan.core.project import ProjectPlan


def meta_file(plan: ProjectPlan) -> list[str]:
    lines: list[str] = []
    for name in plan.libs_names:
        lib_name = plan.qualified_name(name)
        requires = plan.pkgs_deps_all(ItemKind.LIB, name) + [
            f"{plan.name}.{dep.name}" for dep in plan.lib_deps(ItemKind.LIB, name)
        ]
        lines.extend(
            [
                f'package "{name}" (',
                f'  directory = "{name}"',
                f'  version = "{plan.version}"',
                f'  archive(byte) = "{lib_name}.cma"',
                f'  archive(native) = "{lib_name}.cmxa"',
                f'  requires = "{" ".join(requires)}"',
                f'  exists_if = "{lib_name}.cma"',
                ")",
            ]
        )
    return lines
