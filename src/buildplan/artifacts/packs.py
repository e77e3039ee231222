"""Pack, library and C-stub manifests (.mlpack, .mllib, .clib)."""

from buildplan.core.project import ProjectPlan
from buildplan.core.sources.abc import SourceScanner
from buildplan.core.sources.modules import c_units_of_dir, capitalize_module, modules_of_dir


def mlpack_file(scanner: SourceScanner, rel_dir: str) -> list[str]:
    """Every module of rel_dir, prefixed with the directory.

    Raises:
        FileNotFoundError: If rel_dir is not a directory
    """
    if not scanner.is_dir(rel_dir):
        raise FileNotFoundError(f"cannot create mlpack file for dir {rel_dir}")
    return [f"{rel_dir}/{module}" for module in modules_of_dir(scanner, rel_dir)]


def mllib_file(plan: ProjectPlan, scanner: SourceScanner, rel_dir: str, lib: str) -> list[str]:
    """The single packed module making up library lib.

    Raises:
        FileNotFoundError: If rel_dir/lib is not a directory
    """
    path = f"{rel_dir}/{lib}"
    if not scanner.is_dir(path):
        raise FileNotFoundError(f"cannot create mllib file for dir {path}")
    return [f"{rel_dir}/{capitalize_module(plan.qualified_name(lib))}"]


def clib_file(scanner: SourceScanner, rel_dir: str, lib: str) -> list[str] | None:
    """Object files for the C stubs of lib, or None when it has no C units."""
    units = c_units_of_dir(scanner, f"{rel_dir}/{lib}")
    if not units:
        return None
    return [f"{lib}/{unit}.o" for unit in units]
