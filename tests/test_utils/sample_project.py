"""A small project used across tests.

    lib core   packages: core_kernel
    lib io     -> lib core; packages: zlib; build only if zlib is installed
    app tool   -> lib io;   packages: cmdliner
"""

from collections.abc import Iterable
from pathlib import Path

from buildplan.config.loader import LoadedDeclaration, Settings
from buildplan.core.item import Condition, Item, app, lib
from buildplan.core.packages.fake import FakePackageOracle
from buildplan.core.project import Project, ProjectPlan
from buildplan.core.registry import ItemRegistry
from buildplan.core.sources.fake import FakeSourceScanner

SAMPLE_DIRS = {
    "lib/core": ["core.ml", "core.mli", "util.ml"],
    "lib/io": ["io.ml", "gz_stubs.c", "gz.h", "schema.atd"],
    "app": ["tool.ml"],
}


def sample_items() -> list[Item]:
    core = lib("core", packages=["core_kernel"])
    io = lib("io", internal_deps=[core], packages=["zlib"], build_if=[Condition.PKGS_INSTALLED])
    tool = app("tool", internal_deps=[io], packages=["cmdliner"])
    return [core, io, tool]


def sample_project(
    items: Iterable[Item] | None = None, repl_init_postfix: tuple[str, ...] = ()
) -> Project:
    return Project(
        name="solvuu",
        version="0.1.0",
        registry=ItemRegistry.from_items(items if items is not None else sample_items()),
        repl_init_postfix=repl_init_postfix,
    )


def sample_plan(installed: Iterable[str] = ("zlib",), **kwargs) -> ProjectPlan:
    return ProjectPlan.create(sample_project(**kwargs), FakePackageOracle(installed))


def sample_scanner() -> FakeSourceScanner:
    return FakeSourceScanner(SAMPLE_DIRS)


def sample_declaration(root: Path, **kwargs) -> LoadedDeclaration:
    return LoadedDeclaration(
        path=root / "buildplan.toml",
        project=sample_project(**kwargs),
        settings=Settings(package_command=("ocamlfind", "list")),
    )
