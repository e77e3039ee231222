"""Project declaration and the per-invocation build plan derived from it."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from buildplan.core import closure
from buildplan.core.eligibility import EligibilityEvaluator
from buildplan.core.graph import DependencyGraph
from buildplan.core.item import Item, ItemKind
from buildplan.core.packages.abc import PackageOracle
from buildplan.core.registry import ItemRegistry


@dataclass(frozen=True)
class Project:
    """A declared project: metadata plus its registry of items."""

    name: str
    version: str
    registry: ItemRegistry
    repl_init_postfix: tuple[str, ...] = field(default=())


@dataclass(frozen=True)
class ProjectPlan:
    """Snapshot of every query the artifact emitters need.

    Built once per invocation. Creating a plan builds the dependency graph,
    so an invalid declaration fails here before any artifact is rendered.
    """

    project: Project
    graph: DependencyGraph
    libs: tuple[Item, ...]  # eligible libraries, declaration order
    apps: tuple[Item, ...]  # eligible applications, declaration order
    eligibility: dict[Item, bool]

    @classmethod
    def create(cls, project: Project, packages: PackageOracle) -> "ProjectPlan":
        graph = DependencyGraph.build(project.registry)
        evaluator = EligibilityEvaluator(project.registry, packages)
        eligibility = {item: evaluator.should_build(item) for item in project.registry}
        return cls(
            project=project,
            graph=graph,
            libs=tuple(item for item in project.registry.libs() if eligibility[item]),
            apps=tuple(item for item in project.registry.apps() if eligibility[item]),
            eligibility=eligibility,
        )

    @property
    def name(self) -> str:
        return self.project.name

    @property
    def version(self) -> str:
        return self.project.version

    @property
    def registry(self) -> ItemRegistry:
        return self.project.registry

    @property
    def libs_names(self) -> list[str]:
        return [item.name for item in self.libs]

    @property
    def apps_names(self) -> list[str]:
        return [item.name for item in self.apps]

    def qualified_name(self, lib_name: str) -> str:
        """Archive/pack name of a library, e.g. "solvuu_core"."""
        return f"{self.project.name}_{lib_name}"

    def should_build(self, item: Item) -> bool:
        return self.eligibility[self.registry.resolve(item)]

    def lib_deps(self, kind: ItemKind, name: str) -> list[Item]:
        return self.registry.lib_deps(kind, name)

    def lib_deps_all(self, kind: ItemKind, name: str) -> list[Item]:
        return closure.lib_deps_all(self.registry, kind, name)

    def pkgs_deps(self, kind: ItemKind, name: str) -> list[str]:
        return self.registry.pkgs_deps(kind, name)

    def pkgs_deps_all(self, kind: ItemKind, name: str) -> list[str]:
        return closure.pkgs_deps_all(self.registry, kind, name)

    def all_packages(self) -> list[str]:
        return self.registry.all_packages()

    def packages_for(self, items: Iterable[Item]) -> list[str]:
        """Sorted union of the transitive packages of items."""
        packages: set[str] = set()
        for item in items:
            packages.update(self.pkgs_deps_all(item.kind, item.name))
        return sorted(packages)

    def topologically_sorted(self) -> list[Item]:
        """Every declared item, dependency-first."""
        return self.graph.topological_order()
