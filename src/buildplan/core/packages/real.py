"""Real package oracle backed by the findlib command line."""

import logging
from collections.abc import Sequence

from buildplan.core.packages.abc import PackageOracle
from buildplan.core.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)

DEFAULT_PACKAGE_COMMAND = ("ocamlfind", "list")


def parse_package_listing(output: str) -> frozenset[str]:
    """Extract package names from `ocamlfind list` output.

    Each line looks like ``zlib    (version: 0.6)``; the package name is the
    first whitespace-separated field.
    """
    names: set[str] = set()
    for line in output.splitlines():
        fields = line.split()
        if fields:
            names.add(fields[0])
    return frozenset(names)


class RealPackageOracle(PackageOracle):
    """Queries installed packages by running the package listing command.

    The listing runs at most once per instance. A new instance is created for
    every CLI invocation, so availability is re-read by each process.
    """

    def __init__(self, command: Sequence[str] = DEFAULT_PACKAGE_COMMAND) -> None:
        self._command = tuple(command)
        self._installed: frozenset[str] | None = None

    def installed_packages(self) -> frozenset[str]:
        if self._installed is None:
            result = run_subprocess_with_context(
                self._command, operation_context="list installed findlib packages"
            )
            self._installed = parse_package_listing(result.stdout)
            logger.debug("Installed packages: count=%d", len(self._installed))
        return self._installed
