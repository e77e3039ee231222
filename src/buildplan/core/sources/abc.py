"""Source directory scanning interface.

Paths are POSIX-style strings relative to the project root (e.g. "lib/core"),
matching how ocamlbuild names files in tags and pack files.
"""

from abc import ABC, abstractmethod


class SourceScanner(ABC):
    """Abstract read-only view of the project's source directories."""

    @abstractmethod
    def is_dir(self, rel_dir: str) -> bool:
        """Check whether rel_dir exists and is a directory."""
        ...

    @abstractmethod
    def list_dir(self, rel_dir: str) -> list[str]:
        """List file names in rel_dir.

        Returns:
            File names (not paths), or an empty list if rel_dir is not a directory
        """
        ...
