"""Package installation oracle.

Answers "is external package P available?" for the eligibility evaluator.
Injected rather than global so eligibility stays a pure function of its inputs
and can be tested with an in-memory fake.
"""

from abc import ABC, abstractmethod


class PackageOracle(ABC):
    """Abstract query interface over the installed findlib packages."""

    @abstractmethod
    def installed_packages(self) -> frozenset[str]:
        """Return every package currently installed."""
        ...

    def is_installed(self, package: str) -> bool:
        """Check whether a single package is installed.

        Args:
            package: Findlib package name (e.g. "zlib", "core.unix")
        """
        return package in self.installed_packages()
