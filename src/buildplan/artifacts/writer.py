"""Artifact writers.

ArtifactWriter is the seam between rendering and the filesystem: the
filesystem implementation writes files, the dry-run one only reports them.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from buildplan.cli.output import user_output

logger = logging.getLogger(__name__)


def render_lines(lines: list[str]) -> str:
    """File content for a list of lines: each line terminated by a newline."""
    return "".join(f"{line}\n" for line in lines)


class ArtifactWriter(ABC):
    """Abstract sink for generated artifacts."""

    @abstractmethod
    def write(self, rel_path: str, lines: list[str]) -> None:
        """Write an artifact.

        Args:
            rel_path: Path relative to the output directory (POSIX separators)
            lines: Artifact content, one entry per line
        """
        ...


class FilesystemArtifactWriter(ArtifactWriter):
    """Writes artifacts below an output directory, creating parents as needed.

    Files whose content is unchanged are left untouched so their timestamps do
    not trigger rebuilds.
    """

    def __init__(self, out_dir: Path) -> None:
        self.out_dir = out_dir

    def write(self, rel_path: str, lines: list[str]) -> None:
        path = self.out_dir / rel_path
        content = render_lines(lines)

        if path.exists() and path.read_text(encoding="utf-8") == content:
            logger.debug("Unchanged: %s", path)
            return

        if not path.parent.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s (%d lines)", path, len(lines))


class DryRunArtifactWriter(ArtifactWriter):
    """Reports what would be written without touching the filesystem."""

    def __init__(self, out_dir: Path) -> None:
        self.out_dir = out_dir

    def write(self, rel_path: str, lines: list[str]) -> None:
        user_output(f"[DRY RUN] Would write {self.out_dir / rel_path} ({len(lines)} lines)")
