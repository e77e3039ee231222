"""CLI invariant checks with styled error output.

Every failure prints a red "Error:" prefixed message and exits with code 1.
"""

from typing import TYPE_CHECKING

import click

from buildplan.cli.output import user_output

if TYPE_CHECKING:
    from buildplan.config.loader import LoadedDeclaration
    from buildplan.core.context import BuildPlanContext


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def declaration_loaded(ctx: "BuildPlanContext") -> "LoadedDeclaration":
        """Ensure a buildplan.toml was found, returning it.

        Raises:
            SystemExit: If no declaration was found (with exit code 1)
        """
        from buildplan.core.context import NoDeclarationSentinel

        if isinstance(ctx.declaration, NoDeclarationSentinel):
            user_output(
                click.style("Error: ", fg="red")
                + ctx.declaration.message
                + "\nRun 'buildplan init' to create one."
            )
            raise SystemExit(1)
        return ctx.declaration
