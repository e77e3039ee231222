"""Flat, ordered collection of declared items."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from buildplan.core.errors import DuplicateIdentityError, UnknownItemError
from buildplan.core.item import Identity, Item, ItemKind


@dataclass(frozen=True)
class ItemRegistry:
    """Immutable registry of items, unique by (kind, name).

    Declaration order is preserved for listings; graph and closure queries
    impose their own canonical order.
    """

    items: tuple[Item, ...]
    _by_identity: dict[Identity, Item] = field(repr=False, compare=False)

    @classmethod
    def from_items(cls, items: Iterable[Item]) -> "ItemRegistry":
        """Build a registry, rejecting duplicate identities.

        Raises:
            DuplicateIdentityError: If two items share kind and name
        """
        ordered: list[Item] = []
        by_identity: dict[Identity, Item] = {}
        for index, item in enumerate(items):
            if item.identity in by_identity:
                first = next(i for i, seen in enumerate(ordered) if seen.identity == item.identity)
                raise DuplicateIdentityError(
                    item.kind.value, item.name, (f"item #{first + 1}", f"item #{index + 1}")
                )
            by_identity[item.identity] = item
            ordered.append(item)
        return cls(items=tuple(ordered), _by_identity=by_identity)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, item: object) -> bool:
        return isinstance(item, Item) and item.identity in self._by_identity

    def get(self, kind: ItemKind, name: str) -> Item:
        """Look up an item by identity.

        Raises:
            UnknownItemError: If no item has this kind and name
        """
        item = self._by_identity.get((kind, name))
        if item is None:
            raise UnknownItemError(kind.value, name)
        return item

    def resolve(self, ref: Item, referenced_by: Item | None = None) -> Item:
        """Return the registered item matching a dependency reference."""
        item = self._by_identity.get(ref.identity)
        if item is None:
            raise UnknownItemError(
                ref.kind.value,
                ref.name,
                referenced_by=referenced_by.label if referenced_by is not None else None,
            )
        return item

    def libs(self) -> list[Item]:
        return [item for item in self.items if item.is_lib]

    def apps(self) -> list[Item]:
        return [item for item in self.items if item.is_app]

    def lib_deps(self, kind: ItemKind, name: str) -> list[Item]:
        """Direct internal dependencies of an item, as declared."""
        return list(self.get(kind, name).internal_deps)

    def pkgs_deps(self, kind: ItemKind, name: str) -> list[str]:
        """Direct package dependencies of an item, as declared."""
        return list(self.get(kind, name).packages)

    def all_packages(self) -> list[str]:
        """Sorted union of every package declared by any item."""
        return sorted({pkg for item in self.items for pkg in item.packages})
