"""Tests for the project-level artifacts: .merlin, META, .install,
.ocamlinit and Makefile.rules."""

from buildplan.artifacts.findlib_meta import meta_file
from buildplan.artifacts.makefile_rules import makefile_rules_file
from buildplan.artifacts.merlin import STATIC_MERLIN, merlin_file
from buildplan.artifacts.ocamlinit import ocamlinit_file
from buildplan.artifacts.opam_install import LIB_SUFFIXES, install_file
from buildplan.core.item import lib
from tests.test_utils.sample_project import sample_plan


def test_merlin_lists_every_package() -> None:
    assert merlin_file(sample_plan()) == STATIC_MERLIN + [
        "PKG cmdliner",
        "PKG core_kernel",
        "PKG zlib",
    ]


def test_meta_requires_packages_and_internal_deps() -> None:
    lines = meta_file(sample_plan())

    assert lines[:8] == [
        'package "core" (',
        '  directory = "core"',
        '  version = "0.1.0"',
        '  archive(byte) = "solvuu_core.cma"',
        '  archive(native) = "solvuu_core.cmxa"',
        '  requires = "core_kernel"',
        '  exists_if = "solvuu_core.cma"',
        ")",
    ]
    assert '  requires = "core_kernel zlib solvuu.core"' in lines
    assert len(lines) == 16


def test_install_sections() -> None:
    lines = install_file(sample_plan())

    assert lines[:2] == ["lib: [", '  "_build/META"']
    assert '  "?_build/lib/solvuu_io.cmxa" { "io/solvuu_io.cmxa" }' in lines
    assert '  "?_build/lib/dllsolvuu_core_stub.so"' in lines
    assert lines[-4:] == [
        "bin: [",
        '  "?_build/app/tool.byte" {"tool"}',
        '  "?_build/app/tool.native" {"tool"}',
        "]",
    ]
    assert lines.index("stublibs: [") == 2 + 2 * len(LIB_SUFFIXES) + 1


def test_install_without_apps_has_no_bin_section() -> None:
    lines = install_file(sample_plan(installed=[]))

    assert "bin: [" not in lines
    assert lines[-1] == "]"


def test_ocamlinit_loads_libraries_dependency_first() -> None:
    # Declared out of order: io before the core it depends on
    core = lib("core", packages=["core_kernel"])
    io = lib("io", internal_deps=[core])
    lines = ocamlinit_file(sample_plan(items=[io, core], repl_init_postfix=("open Solvuu_core",)))

    assert '#require "core_kernel";;' in lines
    assert lines[-3:] == [
        '#load "solvuu_core.cma";;',
        '#load "solvuu_io.cma";;',
        "open Solvuu_core",
    ]


def test_ocamlinit_without_packages_has_no_require() -> None:
    lines = ocamlinit_file(sample_plan(items=[lib("core")]))

    assert not any(line.startswith("#require") for line in lines)
    assert lines[-1] == '#load "solvuu_core.cma";;'


def test_makefile_rules_targets() -> None:
    lines = makefile_rules_file(sample_plan())

    assert lines[-2:] == [
        "native: lib/solvuu_core.cmxa lib/solvuu_io.cmxa "
        "lib/solvuu_core.cmxs lib/solvuu_io.cmxs app/tool.native",
        "byte: lib/solvuu_core.cma lib/solvuu_io.cma app/tool.byte",
    ]
    assert ".merlin solvuu.install .ocamlinit:" in lines


def test_merlin_omits_packages_of_skipped_items() -> None:
    assert merlin_file(sample_plan(installed=[])) == STATIC_MERLIN + ["PKG core_kernel"]


def test_ocamlinit_requires_only_packages_of_loaded_libraries() -> None:
    lines = ocamlinit_file(sample_plan(installed=[]))

    assert '#require "core_kernel";;' in lines
    assert not any("zlib" in line for line in lines)
