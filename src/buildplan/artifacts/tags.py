"""ocamlbuild tag lines."""

from buildplan.core.item import ItemKind
from buildplan.core.project import ProjectPlan
from buildplan.core.sources.abc import SourceScanner
from buildplan.core.sources.modules import c_units_of_dir, capitalize_module

STATIC_TAGS = [
    "true: thread, bin_annot, annot, short_paths, safe_string, debug",
    "true: warn(A-4-33-41-42-44-45-48)",
    "true: use_menhir",
    '"lib": include',
]


def _use_tags(plan: ProjectPlan, lib_names: list[str], suffix: str = "") -> list[str]:
    return [f"use_{plan.qualified_name(name)}{suffix}" for name in lib_names]


def libs_with_stubs(plan: ProjectPlan, scanner: SourceScanner) -> list[str]:
    """Eligible libraries whose directory contains C units."""
    return [name for name in plan.libs_names if c_units_of_dir(scanner, f"lib/{name}")]


def tags_lines(plan: ProjectPlan, scanner: SourceScanner) -> list[str]:
    lines = list(STATIC_TAGS)
    stubbed = set(libs_with_stubs(plan, scanner))

    for name in plan.libs_names:
        pack = capitalize_module(plan.qualified_name(name))
        lines.append(f"<lib/{name}/*.cmx>: for-pack({pack})")

    # Libraries see their direct library deps
    for lib in plan.libs:
        deps = [d.name for d in plan.lib_deps(ItemKind.LIB, lib.name) if d.is_lib]
        if deps:
            lines.append(f"<lib/{lib.name}/*>: {', '.join(_use_tags(plan, deps))}")

    for name in plan.libs_names:
        if name in stubbed:
            qualified = plan.qualified_name(name)
            lines.append(f"<lib/{qualified}.{{cma,cmxa,cmxs}}>: use_{qualified}_stub")

    for lib in plan.libs:
        pkgs = plan.pkgs_deps_all(ItemKind.LIB, lib.name)
        if pkgs:
            lines.append(f"<lib/{lib.name}/*>: {', '.join(f'package({p})' for p in pkgs)}")

    # Applications link against every library they reach
    for app in plan.apps:
        deps = [d.name for d in plan.lib_deps_all(ItemKind.APP, app.name) if d.is_lib]
        if deps:
            lines.append(f"<app/{app.name}.*>: {', '.join(_use_tags(plan, deps))}")

    for app in plan.apps:
        pkgs = plan.pkgs_deps_all(ItemKind.APP, app.name)
        if pkgs:
            lines.append(f"<app/{app.name}.*>: {','.join(f'package({p})' for p in pkgs)}")

    for app in plan.apps:
        deps = [
            d.name
            for d in plan.lib_deps_all(ItemKind.APP, app.name)
            if d.is_lib and d.name in stubbed
        ]
        if deps:
            lines.append(f"<app/{app.name}.*>: {','.join(_use_tags(plan, deps, '_stub'))}")

    return lines
