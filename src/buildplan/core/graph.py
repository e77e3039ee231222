"""Directed dependency graph over registered items.

Edges point from an item to each of its internal dependencies. The graph is
validated eagerly: duplicates, dangling references and cycles fail at build
time, before any query can run. Once built the underlying networkx graph is
frozen.

Ordering convention: topological_order() is dependency-first. Every item comes
after all the items it depends on; ties are broken by (kind, name).
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import networkx as nx

from buildplan.core.errors import CyclicDependencyError, UnknownItemError
from buildplan.core.item import Item
from buildplan.core.registry import ItemRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DependencyGraph:
    """Validated, immutable dependency graph."""

    registry: ItemRegistry
    graph: nx.DiGraph

    @classmethod
    def build(cls, items: ItemRegistry | Iterable[Item]) -> "DependencyGraph":
        """Build and validate the graph for a registry (or a plain item list).

        Raises:
            DuplicateIdentityError: If two items share kind and name
            UnknownItemError: If an internal dependency is not registered
            CyclicDependencyError: If internal dependencies form a cycle
        """
        registry = items if isinstance(items, ItemRegistry) else ItemRegistry.from_items(items)

        graph: nx.DiGraph = nx.DiGraph()
        for item in registry:
            graph.add_node(item)
        for item in registry:
            for dep in item.internal_deps:
                graph.add_edge(item, registry.resolve(dep, referenced_by=item))

        logger.debug(
            "Built dependency graph: vertices=%d, edges=%d",
            graph.number_of_nodes(),
            graph.number_of_edges(),
        )

        if not nx.is_directed_acyclic_graph(graph):
            edges = nx.find_cycle(graph)
            cycle = [u.label for u, _ in edges] + [edges[0][0].label]
            logger.debug("Cycle detected: %s", cycle)
            raise CyclicDependencyError(cycle)

        return cls(registry=registry, graph=nx.freeze(graph))

    @property
    def items(self) -> list[Item]:
        """Vertices in declaration order."""
        return list(self.registry.items)

    def _require(self, item: Item) -> None:
        if item not in self.graph:
            raise UnknownItemError(item.kind.value, item.name)

    def topological_order(self) -> list[Item]:
        """Items ordered so that every dependency precedes its dependents."""
        return list(
            nx.lexicographical_topological_sort(
                self.graph.reverse(copy=False), key=lambda item: item.sort_key
            )
        )

    def dependencies_of(self, item: Item) -> list[Item]:
        """Direct dependencies of item, canonically sorted."""
        self._require(item)
        return sorted(self.graph.successors(item))

    def dependents_of(self, item: Item) -> list[Item]:
        """Items that depend directly on item, canonically sorted."""
        self._require(item)
        return sorted(self.graph.predecessors(item))
