"""Show command: render one artifact to stdout."""

import click

from buildplan.artifacts.catalog import PROJECT_ARTIFACTS, render_artifact
from buildplan.cli.ensure import Ensure
from buildplan.cli.error_boundary import cli_error_boundary
from buildplan.cli.output import machine_output
from buildplan.core.context import BuildPlanContext


@click.command("show")
@click.argument("artifact", type=click.Choice(sorted(PROJECT_ARTIFACTS)))
@click.pass_obj
@cli_error_boundary
def show_cmd(ctx: BuildPlanContext, artifact: str) -> None:
    """Print ARTIFACT as it would be generated."""
    Ensure.declaration_loaded(ctx)
    plan = ctx.build_plan()
    for line in render_artifact(plan, ctx.scanner, artifact):
        machine_output(line)
