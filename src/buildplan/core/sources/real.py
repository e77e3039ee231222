"""Filesystem-backed source scanner."""

from pathlib import Path

from buildplan.core.sources.abc import SourceScanner


class RealSourceScanner(SourceScanner):
    """Reads directories below a project root."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def is_dir(self, rel_dir: str) -> bool:
        return (self.root / rel_dir).is_dir()

    def list_dir(self, rel_dir: str) -> list[str]:
        path = self.root / rel_dir
        if not path.is_dir():
            return []
        return sorted(entry.name for entry in path.iterdir())
