"""Load buildplan.toml into a Project.

Example declaration:

    [project]
    name = "solvuu"
    version = "0.1.0"

    [[lib]]
    name = "core"

    [[lib]]
    name = "io"
    internal_deps = ["core"]
    packages = ["zlib"]
    build_if = ["pkgs_installed"]

    [[app]]
    name = "tool"
    internal_deps = ["io"]
"""

import logging
import tomllib
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import tomlkit
from pydantic import ValidationError

from buildplan.config.schema import DeclarationFile, ItemDeclaration
from buildplan.core.errors import (
    CyclicDependencyError,
    DeclarationError,
    DuplicateIdentityError,
    UnknownItemError,
)
from buildplan.core.item import Condition, Identity, Item, ItemKind
from buildplan.core.project import Project
from buildplan.core.registry import ItemRegistry

logger = logging.getLogger(__name__)

DECLARATION_FILENAME = "buildplan.toml"


@dataclass(frozen=True)
class Settings:
    """Tool settings from the [settings] table."""

    package_command: tuple[str, ...]


@dataclass(frozen=True)
class LoadedDeclaration:
    """A parsed declaration file and where it came from."""

    path: Path
    project: Project
    settings: Settings

    @property
    def root(self) -> Path:
        """Project root: the directory holding the declaration file."""
        return self.path.parent


def discover_declaration(start: Path) -> Path | None:
    """Walk up from start to find the nearest buildplan.toml."""
    cur = start.resolve()
    for parent in [cur, *cur.parents]:
        candidate = parent / DECLARATION_FILENAME
        if candidate.is_file():
            return candidate
    return None


def parse_reference(ref: str) -> Identity:
    """Parse "name", "lib:name" or "app:name" into an identity.

    A bare name refers to a library.
    """
    if ":" in ref:
        kind, name = ref.split(":", 1)
        return (ItemKind.parse(kind), name)
    return (ItemKind.LIB, ref)


def resolve_items(declarations: list[tuple[ItemKind, ItemDeclaration]]) -> list[Item]:
    """Turn declarations into immutable items, in declaration order.

    Every item is built after the items it references, walking references on
    an explicit stack.

    Raises:
        DuplicateIdentityError: If two declarations share kind and name
        UnknownItemError: If a reference names an undeclared item
        CyclicDependencyError: If references form a cycle
    """
    by_identity: dict[Identity, ItemDeclaration] = {}
    positions: dict[Identity, str] = {}
    per_kind: dict[ItemKind, int] = {}
    for kind, decl in declarations:
        per_kind[kind] = per_kind.get(kind, 0) + 1
        position = f"[[{kind.value}]] #{per_kind[kind]}"
        identity = (kind, decl.name)
        if identity in by_identity:
            raise DuplicateIdentityError(kind.value, decl.name, (positions[identity], position))
        by_identity[identity] = decl
        positions[identity] = position

    def references(identity: Identity) -> Iterator[Identity]:
        kind, name = identity
        for ref in by_identity[identity].internal_deps:
            dep_identity = parse_reference(ref)
            if dep_identity not in by_identity:
                dep_kind, dep_name = dep_identity
                raise UnknownItemError(dep_kind.value, dep_name, referenced_by=f"{kind.value} {name}")
            yield dep_identity

    built: dict[Identity, Item] = {}

    def make_item(identity: Identity) -> Item:
        kind, name = identity
        decl = by_identity[identity]
        return Item(
            kind=kind,
            name=name,
            internal_deps=tuple(built[parse_reference(ref)] for ref in decl.internal_deps),
            packages=tuple(decl.packages),
            build_if=tuple(Condition(c) for c in decl.build_if),
        )

    for kind, decl in declarations:
        root = (kind, decl.name)
        if root in built:
            continue
        path: list[Identity] = [root]
        on_path: set[Identity] = {root}
        stack: list[Iterator[Identity]] = [references(root)]
        while stack:
            dep = next(stack[-1], None)
            if dep is None:
                done = path.pop()
                on_path.discard(done)
                stack.pop()
                built[done] = make_item(done)
                continue
            if dep in built:
                continue
            if dep in on_path:
                cycle = path[path.index(dep) :] + [dep]
                raise CyclicDependencyError([f"{k.value} {n}" for k, n in cycle])
            path.append(dep)
            on_path.add(dep)
            stack.append(references(dep))

    return [built[(kind, decl.name)] for kind, decl in declarations]


def load_declaration(path: Path) -> LoadedDeclaration:
    """Load and validate a declaration file.

    Raises:
        FileNotFoundError: If path does not exist
        DeclarationError: If the file is not valid TOML or violates the schema
        DuplicateIdentityError, UnknownItemError, CyclicDependencyError:
            If the declared items are inconsistent
    """
    if not path.exists():
        raise FileNotFoundError(f"Declaration not found: {path}")

    logger.debug("Loading declaration: %s", path)
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise DeclarationError(f"Invalid TOML in {path}: {e}") from e

    try:
        parsed = DeclarationFile.model_validate(data)
    except ValidationError as e:
        raise DeclarationError(f"Invalid declaration in {path}:\n{e}") from e

    declarations = [(ItemKind.LIB, d) for d in parsed.lib] + [(ItemKind.APP, d) for d in parsed.app]
    items = resolve_items(declarations)
    logger.debug("Declared items: libs=%d, apps=%d", len(parsed.lib), len(parsed.app))

    project = Project(
        name=parsed.project.name,
        version=parsed.project.version,
        registry=ItemRegistry.from_items(items),
        repl_init_postfix=tuple(parsed.project.repl_init_postfix),
    )
    return LoadedDeclaration(
        path=path,
        project=project,
        settings=Settings(package_command=tuple(parsed.settings.package_command)),
    )


def write_declaration_template(path: Path, name: str, version: str = "0.1.0") -> None:
    """Write a starter buildplan.toml with one library and one application.

    Raises:
        FileExistsError: If path already exists
    """
    if path.exists():
        raise FileExistsError(f"Declaration already exists: {path}")

    doc = tomlkit.document()
    doc.add(tomlkit.comment("Build description for buildplan"))

    project = tomlkit.table()
    project["name"] = name
    project["version"] = version
    project["repl_init_postfix"] = tomlkit.array()
    doc["project"] = project

    libs = tomlkit.aot()
    core = tomlkit.table()
    core["name"] = "core"
    core["packages"] = tomlkit.array()
    libs.append(core)
    doc["lib"] = libs

    apps = tomlkit.aot()
    tool = tomlkit.table()
    tool["name"] = name
    tool["internal_deps"] = ["core"]
    apps.append(tool)
    doc["app"] = apps

    path.write_text(tomlkit.dumps(doc), encoding="utf-8")
