"""Schema of buildplan.toml."""

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Project and library names end up inside OCaml module and archive names
_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_REFERENCE_PATTERN = re.compile(r"^((lib|app):)?[A-Za-z_][A-Za-z0-9_]*$")


def is_valid_name(value: str) -> bool:
    return _NAME_PATTERN.match(value) is not None


def _validate_name(value: str) -> str:
    if not is_valid_name(value):
        msg = f"Invalid name {value!r}: use letters, digits and underscores"
        raise ValueError(msg)
    return value


class ProjectSection(BaseModel):
    """[project] table."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    version: str = Field(min_length=1)
    repl_init_postfix: list[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _validate_name(v)


class SettingsSection(BaseModel):
    """[settings] table."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    package_command: list[str] = Field(default_factory=lambda: ["ocamlfind", "list"], min_length=1)


class ItemDeclaration(BaseModel):
    """One [[lib]] or [[app]] entry."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    internal_deps: list[str] = Field(default_factory=list)
    packages: list[str] = Field(default_factory=list)
    build_if: list[Literal["pkgs_installed"]] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _validate_name(v)

    @field_validator("internal_deps")
    @classmethod
    def validate_references(cls, v: list[str]) -> list[str]:
        for ref in v:
            if not _REFERENCE_PATTERN.match(ref):
                msg = f"Invalid dependency reference {ref!r}: expected 'name', 'lib:name' or 'app:name'"
                raise ValueError(msg)
        return v

    @field_validator("packages")
    @classmethod
    def validate_packages(cls, v: list[str]) -> list[str]:
        for pkg in v:
            if not pkg.strip():
                raise ValueError("Package names must be non-empty")
        return v


class DeclarationFile(BaseModel):
    """Whole buildplan.toml document."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    project: ProjectSection
    settings: SettingsSection = Field(default_factory=SettingsSection)
    lib: list[ItemDeclaration] = Field(default_factory=list)
    app: list[ItemDeclaration] = Field(default_factory=list)
