"""Items command implementation."""

import click
from rich.console import Console
from rich.table import Table

from buildplan.cli.ensure import Ensure
from buildplan.cli.error_boundary import cli_error_boundary
from buildplan.cli.output import user_output
from buildplan.core.context import BuildPlanContext


@click.command("items")
@click.option("--all", "-a", "show_all", is_flag=True, help="Include items that will not be built.")
@click.pass_obj
@cli_error_boundary
def items_cmd(ctx: BuildPlanContext, show_all: bool) -> None:
    """List declared libraries and applications."""
    Ensure.declaration_loaded(ctx)
    plan = ctx.build_plan()

    items = [item for item in plan.registry if show_all or plan.eligibility[item]]
    if not items:
        user_output("No items to build. Use --all to see every declared item.")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("kind", style="cyan", no_wrap=True)
    table.add_column("name", no_wrap=True)
    table.add_column("build", no_wrap=True)
    table.add_column("internal deps")
    table.add_column("packages")

    for item in items:
        build_cell = "[green]yes[/green]" if plan.eligibility[item] else "[yellow]no[/yellow]"
        table.add_row(
            item.kind.value,
            item.name,
            build_cell,
            ", ".join(dep.label for dep in item.internal_deps) or "-",
            ", ".join(item.packages) or "-",
        )

    # Output table to stderr (consistent with user_output convention)
    console = Console(stderr=True, width=200)
    console.print(table)
