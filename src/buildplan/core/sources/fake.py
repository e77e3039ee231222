"""In-memory source scanner for tests."""

from collections.abc import Mapping

from buildplan.core.sources.abc import SourceScanner


class FakeSourceScanner(SourceScanner):
    """Serves directory listings from a mapping of rel_dir -> file names.

    Example:
        scanner = FakeSourceScanner({"lib/core": ["core.ml", "core.mli"]})
        assert scanner.list_dir("lib/core") == ["core.ml", "core.mli"]
    """

    def __init__(self, dirs: Mapping[str, list[str]] | None = None) -> None:
        self._dirs = {key.rstrip("/"): list(files) for key, files in (dirs or {}).items()}

    def is_dir(self, rel_dir: str) -> bool:
        return rel_dir.rstrip("/") in self._dirs

    def list_dir(self, rel_dir: str) -> list[str]:
        return list(self._dirs.get(rel_dir.rstrip("/"), []))
