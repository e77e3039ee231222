"""buildplan.toml loading."""

from buildplan.config.loader import (
    DECLARATION_FILENAME,
    LoadedDeclaration,
    Settings,
    discover_declaration,
    load_declaration,
    write_declaration_template,
)

__all__ = [
    "DECLARATION_FILENAME",
    "LoadedDeclaration",
    "Settings",
    "discover_declaration",
    "load_declaration",
    "write_declaration_template",
]
