from pathlib import Path

import click

from buildplan.cli.commands.check import check_cmd
from buildplan.cli.commands.deps import deps_cmd
from buildplan.cli.commands.generate import generate_cmd
from buildplan.cli.commands.init import init_cmd
from buildplan.cli.commands.items import items_cmd
from buildplan.cli.commands.order import order_cmd
from buildplan.cli.commands.show import show_cmd
from buildplan.cli.error_boundary import cli_error_boundary
from buildplan.core.context import configure_logging, create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def _needs_declaration(ctx: click.Context) -> bool:
    """Whether the invoked subcommand will read buildplan.toml.

    init works without one, and help is printed before any command runs.
    """
    if ctx.invoked_subcommand == "init" or ctx.resilient_parsing:
        return False
    return not any(arg in CONTEXT_SETTINGS["help_option_names"] for arg in ctx.args)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="buildplan")
@click.option(
    "--file",
    "-f",
    "declaration_file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Path to buildplan.toml (default: nearest one above the current directory).",
)
@click.pass_context
@cli_error_boundary
def cli(ctx: click.Context, declaration_file: Path | None) -> None:
    """Plan OCaml builds from a declarative list of libraries and applications."""
    configure_logging()
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(
            declaration_file=declaration_file,
            load=_needs_declaration(ctx),
        )


# Register all commands
cli.add_command(init_cmd)
cli.add_command(check_cmd)
cli.add_command(items_cmd)
cli.add_command(order_cmd)
cli.add_command(deps_cmd)
cli.add_command(show_cmd)
cli.add_command(generate_cmd)


def main() -> None:
    """CLI entry point used by the `buildplan` console script."""
    cli()
