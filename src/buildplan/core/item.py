"""Buildable item model.

An item is either a library or an application. Both variants share the same
fields and operations; consumers decide how to treat them from `kind`.

Identity is the pair (kind, name). Equality, hashing and ordering ignore the
dependency lists, so a dependency reference such as ``lib("core")`` compares
equal to the fully declared ``core`` library in a registry.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering


class ItemKind(Enum):
    """Kind of buildable item."""

    LIB = "lib"
    APP = "app"

    @property
    def rank(self) -> int:
        """Canonical ordering position: libraries sort before applications."""
        return 0 if self is ItemKind.LIB else 1

    @classmethod
    def parse(cls, value: str) -> "ItemKind":
        """Parse "lib"/"app" (case-insensitive) into an ItemKind.

        Raises:
            ValueError: If value is not a known kind
        """
        normalized = value.strip().lower()
        for kind in cls:
            if kind.value == normalized:
                return kind
        raise ValueError(f"Invalid item kind: {value!r} (expected 'lib' or 'app')")


class Condition(Enum):
    """Build condition attached to an item."""

    PKGS_INSTALLED = "pkgs_installed"  # every package in Item.packages is installed


Identity = tuple[ItemKind, str]


@total_ordering
@dataclass(frozen=True, eq=False)
class Item:
    """A declared library or application.

    Items do not own their internal dependencies; they hold references that the
    registry resolves by identity.
    """

    kind: ItemKind
    name: str
    internal_deps: tuple["Item", ...] = field(default=())
    packages: tuple[str, ...] = field(default=())
    build_if: tuple[Condition, ...] = field(default=())

    @property
    def identity(self) -> Identity:
        return (self.kind, self.name)

    @property
    def label(self) -> str:
        """Human-readable identity, e.g. "lib core"."""
        return f"{self.kind.value} {self.name}"

    @property
    def sort_key(self) -> tuple[int, str]:
        return (self.kind.rank, self.name)

    @property
    def is_lib(self) -> bool:
        return self.kind is ItemKind.LIB

    @property
    def is_app(self) -> bool:
        return self.kind is ItemKind.APP

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.identity == other.identity

    def __lt__(self, other: "Item") -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __hash__(self) -> int:
        return hash(self.identity)

    def __repr__(self) -> str:
        return f"Item({self.label})"


def lib(
    name: str,
    internal_deps: Iterable[Item] = (),
    packages: Iterable[str] = (),
    build_if: Iterable[Condition] = (),
) -> Item:
    """Declare a library."""
    return Item(
        kind=ItemKind.LIB,
        name=name,
        internal_deps=tuple(internal_deps),
        packages=tuple(packages),
        build_if=tuple(build_if),
    )


def app(
    name: str,
    internal_deps: Iterable[Item] = (),
    packages: Iterable[str] = (),
    build_if: Iterable[Condition] = (),
) -> Item:
    """Declare an application."""
    return Item(
        kind=ItemKind.APP,
        name=name,
        internal_deps=tuple(internal_deps),
        packages=tuple(packages),
        build_if=tuple(build_if),
    )


def sort_items(items: Iterable[Item]) -> list[Item]:
    """De-duplicate items by identity and return them in canonical order."""
    unique: dict[Identity, Item] = {}
    for item in items:
        unique.setdefault(item.identity, item)
    return sorted(unique.values(), key=lambda i: i.sort_key)
