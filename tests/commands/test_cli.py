"""Tests for the top-level group: help and declaration discovery."""

from pathlib import Path

from click.testing import CliRunner

from buildplan.cli.cli import cli


def test_subcommand_help_ignores_broken_declaration(tmp_path: Path) -> None:
    runner = CliRunner()

    with runner.isolated_filesystem(temp_dir=tmp_path):
        Path("buildplan.toml").write_text("[project\n", encoding="utf-8")

        result = runner.invoke(cli, ["items", "--help"])

    assert result.exit_code == 0, result.output
    assert "List declared libraries and applications." in result.output


def test_broken_declaration_is_reported(tmp_path: Path) -> None:
    runner = CliRunner()

    with runner.isolated_filesystem(temp_dir=tmp_path):
        Path("buildplan.toml").write_text("[project\n", encoding="utf-8")

        result = runner.invoke(cli, ["items"])

    assert result.exit_code == 1
    assert "Error: Invalid TOML" in result.output


def test_file_option_selects_declaration(tmp_path: Path) -> None:
    declaration = tmp_path / "other.toml"
    declaration.write_text(
        '[project]\nname = "p"\nversion = "1"\n[[lib]]\nname = "core"\n', encoding="utf-8"
    )
    runner = CliRunner()

    with runner.isolated_filesystem(temp_dir=tmp_path):
        result = runner.invoke(cli, ["--file", str(declaration), "order"])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["lib core"]
