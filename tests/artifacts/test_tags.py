"""Tests for the _tags emitter."""

from buildplan.artifacts.tags import STATIC_TAGS, libs_with_stubs, tags_lines
from tests.test_utils.sample_project import sample_plan, sample_scanner


def test_tags_for_sample_project() -> None:
    lines = tags_lines(sample_plan(), sample_scanner())

    assert lines == STATIC_TAGS + [
        "<lib/core/*.cmx>: for-pack(Solvuu_core)",
        "<lib/io/*.cmx>: for-pack(Solvuu_io)",
        "<lib/io/*>: use_solvuu_core",
        "<lib/solvuu_io.{cma,cmxa,cmxs}>: use_solvuu_io_stub",
        "<lib/core/*>: package(core_kernel)",
        "<lib/io/*>: package(core_kernel), package(zlib)",
        "<app/tool.*>: use_solvuu_core, use_solvuu_io",
        "<app/tool.*>: package(cmdliner),package(core_kernel),package(zlib)",
        "<app/tool.*>: use_solvuu_io_stub",
    ]


def test_ineligible_items_get_no_tags() -> None:
    lines = tags_lines(sample_plan(installed=[]), sample_scanner())

    assert not any("lib/io" in line or "app/tool" in line for line in lines)
    assert "<lib/core/*>: package(core_kernel)" in lines


def test_libs_with_stubs() -> None:
    assert libs_with_stubs(sample_plan(), sample_scanner()) == ["io"]
