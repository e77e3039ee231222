"""Errors raised while validating and querying a build description.

All of these are static configuration errors: they are detected before any
compilation happens and abort the current invocation. Messages always name the
offending item so the author of the declaration can locate it.
"""

from collections.abc import Sequence


class BuildPlanError(ValueError):
    """Base class for build description errors."""


class DeclarationError(BuildPlanError):
    """The declaration file is malformed (bad TOML, unknown keys, wrong types)."""


class DuplicateIdentityError(BuildPlanError):
    """Two items share the same (kind, name) identity."""

    def __init__(self, kind: str, name: str, occurrences: Sequence[str] = ()) -> None:
        self.kind = kind
        self.name = name
        self.occurrences = list(occurrences)
        message = (
            "multiple libraries or apps have an identical name: "
            f"{kind} {name} is declared more than once"
        )
        if self.occurrences:
            message += f" ({' and '.join(self.occurrences)})"
        super().__init__(message)


class UnknownItemError(BuildPlanError):
    """A lookup by (kind, name) found nothing."""

    def __init__(self, kind: str, name: str, referenced_by: str | None = None) -> None:
        self.kind = kind
        self.name = name
        self.referenced_by = referenced_by
        message = f"unknown {kind} {name}"
        if referenced_by is not None:
            message += f" (referenced by {referenced_by})"
        super().__init__(message)


class CyclicDependencyError(BuildPlanError):
    """The internal dependency graph contains a directed cycle."""

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = list(cycle)
        path = " -> ".join(self.cycle)
        super().__init__(f"internal dependencies form a cycle: {path}")


class LikelyCycleError(BuildPlanError):
    """A dependency walk revisited an item on its own path or ran out of budget."""

    def __init__(self, start: str, detail: str) -> None:
        self.start = start
        super().__init__(
            f"max recursion exceeded while walking dependencies of {start}, "
            f"likely cycle in internal_deps: {detail}"
        )
