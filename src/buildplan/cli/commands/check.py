"""Check command: validate the declaration and report what will be built."""

import click

from buildplan.cli.ensure import Ensure
from buildplan.cli.error_boundary import cli_error_boundary
from buildplan.cli.output import user_output
from buildplan.core.context import BuildPlanContext


@click.command("check")
@click.pass_obj
@cli_error_boundary
def check_cmd(ctx: BuildPlanContext) -> None:
    """Validate buildplan.toml: identities, references, cycles and eligibility."""
    declaration = Ensure.declaration_loaded(ctx)
    plan = ctx.build_plan()

    registry = plan.registry
    user_output(
        click.style("✓ ", fg="green")
        + f"{declaration.path}: {plan.name} {plan.version}, "
        f"{len(registry.libs())} libraries, {len(registry.apps())} applications"
    )

    skipped = [item for item in registry if not plan.eligibility[item]]
    for item in skipped:
        user_output(click.style("  skipped: ", fg="yellow") + item.label)
