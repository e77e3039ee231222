"""Derive module and compilation-unit names from directory contents."""

from buildplan.core.sources.abc import SourceScanner

# Suffixes whose files each define one module named after the file
MODULE_SUFFIXES = (".ml", ".mli", ".ml.m4", ".mll", ".mly")

# atdgen turns foo.atd into foo_t.ml (types) and foo_j.ml (JSON serializers)
ATD_SUFFIX = ".atd"


def capitalize_module(name: str) -> str:
    """Uppercase only the first character, as OCaml module names require."""
    return name[:1].upper() + name[1:]


def modules_of_file(filename: str) -> list[str]:
    """Module names defined by a single source file.

    Returns:
        Zero, one or (for .atd files) two capitalised module names
    """
    if filename.endswith(ATD_SUFFIX):
        base = filename[: -len(ATD_SUFFIX)]
        return [capitalize_module(f"{base}_j"), capitalize_module(f"{base}_t")]

    for suffix in MODULE_SUFFIXES:
        if filename.endswith(suffix):
            return [capitalize_module(filename[: -len(suffix)])]
    return []


def modules_of_dir(scanner: SourceScanner, rel_dir: str) -> list[str]:
    """Sorted, unique module names for every source file in rel_dir."""
    modules: set[str] = set()
    for filename in scanner.list_dir(rel_dir):
        modules.update(modules_of_file(filename))
    return sorted(modules)


def c_units_of_dir(scanner: SourceScanner, rel_dir: str) -> list[str]:
    """C compilation units (file names without .c) in rel_dir."""
    return [f[: -len(".c")] for f in scanner.list_dir(rel_dir) if f.endswith(".c")]
