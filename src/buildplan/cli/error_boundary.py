"""Error boundary handling for CLI commands.

This module provides a decorator to catch well-known exceptions at CLI entry
points and display clean error messages without stack traces.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click

from buildplan.cli.output import user_output
from buildplan.core.errors import BuildPlanError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - BuildPlanError: Invalid declarations (duplicates, unknown items, cycles)
        - ValueError: Invalid input
        - FileExistsError: File conflicts
        - FileNotFoundError: Missing declaration or source directories
        - RuntimeError: Failed external commands (e.g. package listing)

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (
            BuildPlanError,
            ValueError,
            FileExistsError,
            FileNotFoundError,
            RuntimeError,
        ) as e:
            logger.debug("Exception caught: %s: %s", type(e).__name__, str(e))
            logger.debug("Exception details:", exc_info=True)
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
