"""Tests for artifact writers."""

from pathlib import Path

import pytest

from buildplan.artifacts.writer import DryRunArtifactWriter, FilesystemArtifactWriter, render_lines


def test_render_lines_terminates_every_line() -> None:
    assert render_lines(["a", "", "b"]) == "a\n\nb\n"
    assert render_lines([]) == ""


def test_filesystem_writer_creates_parents(tmp_path: Path) -> None:
    writer = FilesystemArtifactWriter(tmp_path)

    writer.write("lib/solvuu_core.mllib", ["lib/Solvuu_core"])

    assert (tmp_path / "lib" / "solvuu_core.mllib").read_text(encoding="utf-8") == "lib/Solvuu_core\n"


def test_filesystem_writer_overwrites_changed_content(tmp_path: Path) -> None:
    (tmp_path / "META").write_text("old\n", encoding="utf-8")
    writer = FilesystemArtifactWriter(tmp_path)

    writer.write("META", ["new"])

    assert (tmp_path / "META").read_text(encoding="utf-8") == "new\n"


def test_dry_run_writer_writes_nothing(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    writer = DryRunArtifactWriter(tmp_path)

    writer.write("_tags", ["true: debug"])

    assert not (tmp_path / "_tags").exists()
    assert "[DRY RUN] Would write" in capsys.readouterr().err
