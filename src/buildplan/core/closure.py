"""Transitive dependency closures.

These functions can run against a registry that never went through graph
validation, so the walk keeps its own guard: an item reached again while it is
still on the current path, or a walk that exceeds MAX_VISITS edges, raises
LikelyCycleError instead of looping forever.

Results are de-duplicated and canonically sorted, so repeated calls with the
same input return identical lists.
"""

from collections.abc import Iterator

from buildplan.core.errors import LikelyCycleError
from buildplan.core.item import Identity, Item, ItemKind, sort_items
from buildplan.core.registry import ItemRegistry

MAX_VISITS = 10000


def _deps(item: Item, registry: ItemRegistry | None) -> Iterator[Item]:
    for dep in item.internal_deps:
        if registry is None:
            yield dep
        else:
            yield registry.resolve(dep, referenced_by=item)


def _reachable(item: Item, registry: ItemRegistry | None) -> tuple[Item, list[Item]]:
    """Walk internal deps depth-first from item.

    Returns:
        The start item (resolved through the registry when one is given) and
        every item reachable from it, excluding the start item itself.
    """
    start = registry.resolve(item) if registry is not None else item

    reached: dict[Identity, Item] = {}
    finished: set[Identity] = set()
    path: list[Item] = [start]
    on_path: set[Identity] = {start.identity}
    stack: list[Iterator[Item]] = [_deps(start, registry)]
    visits = 0

    while stack:
        dep = next(stack[-1], None)
        if dep is None:
            done = path.pop()
            on_path.discard(done.identity)
            finished.add(done.identity)
            stack.pop()
            continue

        visits += 1
        if visits > MAX_VISITS:
            raise LikelyCycleError(start.label, f"more than {MAX_VISITS} dependency edges visited")

        if dep.identity in on_path:
            index = next(i for i, p in enumerate(path) if p.identity == dep.identity)
            cycle = [p.label for p in path[index:]] + [dep.label]
            raise LikelyCycleError(start.label, " -> ".join(cycle))

        reached.setdefault(dep.identity, dep)
        if dep.identity in finished:
            continue

        path.append(dep)
        on_path.add(dep.identity)
        stack.append(_deps(dep, registry))

    return start, list(reached.values())


def internal_deps_transitive(item: Item, registry: ItemRegistry | None = None) -> list[Item]:
    """All items reachable from item through internal dependencies.

    Args:
        item: Item (or dependency reference) to start from
        registry: Optional registry used to resolve references by identity.
            Without one, the item's own dependency references are followed.

    Returns:
        Transitive internal dependencies in canonical (kind, name) order

    Raises:
        LikelyCycleError: If the walk finds a cycle
        UnknownItemError: If a reference does not resolve in the registry
    """
    _, reached = _reachable(item, registry)
    return sort_items(reached)


def external_deps_transitive(item: Item, registry: ItemRegistry | None = None) -> list[str]:
    """All packages required by item directly or through its internal deps.

    Returns:
        Sorted, de-duplicated package names

    Raises:
        LikelyCycleError: If the walk finds a cycle
        UnknownItemError: If a reference does not resolve in the registry
    """
    start, reached = _reachable(item, registry)
    packages = set(start.packages)
    for dep in reached:
        packages.update(dep.packages)
    return sorted(packages)


def lib_deps_all(registry: ItemRegistry, kind: ItemKind, name: str) -> list[Item]:
    """Transitive internal dependencies of the registered item (kind, name)."""
    return internal_deps_transitive(registry.get(kind, name), registry)


def pkgs_deps_all(registry: ItemRegistry, kind: ItemKind, name: str) -> list[str]:
    """Transitive package dependencies of the registered item (kind, name)."""
    return external_deps_transitive(registry.get(kind, name), registry)
