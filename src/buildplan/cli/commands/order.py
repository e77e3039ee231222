"""Order command: print items dependency-first."""

import click

from buildplan.cli.ensure import Ensure
from buildplan.cli.error_boundary import cli_error_boundary
from buildplan.cli.output import machine_output
from buildplan.core.context import BuildPlanContext


@click.command("order")
@click.option("--eligible", is_flag=True, help="Only print items that will be built.")
@click.pass_obj
@cli_error_boundary
def order_cmd(ctx: BuildPlanContext, eligible: bool) -> None:
    """Print every item in build order, one "KIND NAME" per line.

    Each item appears after all of its internal dependencies.
    """
    Ensure.declaration_loaded(ctx)
    plan = ctx.build_plan()
    for item in plan.topologically_sorted():
        if eligible and not plan.eligibility[item]:
            continue
        machine_output(item.label)
