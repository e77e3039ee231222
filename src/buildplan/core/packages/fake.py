"""Fake package oracle for testing.

FakePackageOracle answers from an in-memory set and records every query so
tests can assert how eligibility consulted it.
"""

from collections.abc import Iterable

from buildplan.core.packages.abc import PackageOracle


class FakePackageOracle(PackageOracle):
    """In-memory oracle. All state is provided via the constructor."""

    def __init__(self, installed: Iterable[str] = ()) -> None:
        self._installed = frozenset(installed)
        self._queries: list[str] = []

    @property
    def queries(self) -> list[str]:
        """Packages passed to is_installed(), in call order.

        This property is for test assertions only.
        """
        return self._queries

    def installed_packages(self) -> frozenset[str]:
        return self._installed

    def is_installed(self, package: str) -> bool:
        self._queries.append(package)
        return package in self._installed
