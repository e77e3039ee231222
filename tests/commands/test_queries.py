"""Tests for the read-only commands: check, items, order, deps and show."""

from pathlib import Path

from click.testing import CliRunner

from buildplan.cli.cli import cli
from buildplan.core.context import BuildPlanContext
from buildplan.core.item import app, lib
from buildplan.core.packages.fake import FakePackageOracle
from tests.test_utils.sample_project import sample_declaration, sample_scanner


def _ctx(tmp_path: Path, installed: tuple[str, ...] = ("zlib",), **kwargs) -> BuildPlanContext:
    return BuildPlanContext.for_test(
        cwd=tmp_path,
        declaration=sample_declaration(tmp_path, **kwargs),
        packages=FakePackageOracle(installed),
        scanner=sample_scanner(),
    )


def test_commands_require_declaration() -> None:
    runner = CliRunner()
    ctx = BuildPlanContext.for_test()

    result = runner.invoke(cli, ["order"], obj=ctx)

    assert result.exit_code == 1
    assert "No buildplan.toml found" in result.output
    assert "buildplan init" in result.output


def test_check_reports_counts(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["check"], obj=_ctx(tmp_path))

    assert result.exit_code == 0, result.output
    assert "solvuu 0.1.0, 2 libraries, 1 applications" in result.output
    assert "skipped" not in result.output


def test_check_lists_skipped_items(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["check"], obj=_ctx(tmp_path, installed=()))

    assert result.exit_code == 0, result.output
    assert "skipped: lib io" in result.output
    assert "skipped: app tool" in result.output


def test_check_reports_cycle(tmp_path: Path) -> None:
    a = lib("a", internal_deps=[lib("b")])
    b = lib("b", internal_deps=[a])
    runner = CliRunner()

    result = runner.invoke(cli, ["check"], obj=_ctx(tmp_path, items=[a, b]))

    assert result.exit_code == 1
    assert "Error: internal dependencies form a cycle" in result.output


def test_items_table(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["items"], obj=_ctx(tmp_path, installed=()))

    assert result.exit_code == 0, result.output
    assert "core_kernel" in result.output
    assert "tool" not in result.output


def test_items_all_includes_skipped(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["items", "--all"], obj=_ctx(tmp_path, installed=()))

    assert result.exit_code == 0, result.output
    assert "tool" in result.output
    assert "lib io" in result.output


def test_order(tmp_path: Path) -> None:
    core = lib("core")
    items = [app("tool", internal_deps=[lib("io")]), lib("io", internal_deps=[core]), core]
    runner = CliRunner()

    result = runner.invoke(cli, ["order"], obj=_ctx(tmp_path, items=items))

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["lib core", "lib io", "app tool"]


def test_order_eligible_only(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["order", "--eligible"], obj=_ctx(tmp_path, installed=()))

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["lib core"]


def test_deps_direct_and_transitive(tmp_path: Path) -> None:
    runner = CliRunner()
    ctx = _ctx(tmp_path)

    direct = runner.invoke(cli, ["deps", "app", "tool"], obj=ctx)
    transitive = runner.invoke(cli, ["deps", "app", "tool", "--transitive"], obj=ctx)

    assert direct.output.splitlines() == ["lib io"]
    assert transitive.output.splitlines() == ["lib core", "lib io"]


def test_deps_packages(tmp_path: Path) -> None:
    runner = CliRunner()
    ctx = _ctx(tmp_path)

    direct = runner.invoke(cli, ["deps", "lib", "io", "--packages"], obj=ctx)
    transitive = runner.invoke(cli, ["deps", "app", "tool", "-t", "-p"], obj=ctx)

    assert direct.output.splitlines() == ["zlib"]
    assert transitive.output.splitlines() == ["cmdliner", "core_kernel", "zlib"]


def test_deps_unknown_item(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["deps", "lib", "nope"], obj=_ctx(tmp_path))

    assert result.exit_code == 1
    assert "Error: unknown lib nope" in result.output


def test_show_artifact(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["show", "merlin"], obj=_ctx(tmp_path))

    assert result.exit_code == 0, result.output
    assert result.output.splitlines()[-1] == "PKG zlib"


def test_show_rejects_unknown_artifact(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["show", "opam"], obj=_ctx(tmp_path))

    assert result.exit_code == 2
