"""Init command: write a starter buildplan.toml."""

import click

from buildplan.cli.ensure import Ensure
from buildplan.cli.error_boundary import cli_error_boundary
from buildplan.cli.output import user_output
from buildplan.config.loader import DECLARATION_FILENAME, write_declaration_template
from buildplan.config.schema import is_valid_name
from buildplan.core.context import BuildPlanContext


def _default_project_name(ctx: BuildPlanContext) -> str:
    return ctx.cwd.name.replace("-", "_").replace(".", "_")


@click.command("init")
@click.argument("name", required=False)
@click.option("--force", is_flag=True, help="Overwrite an existing buildplan.toml.")
@click.pass_obj
@cli_error_boundary
def init_cmd(ctx: BuildPlanContext, name: str | None, force: bool) -> None:
    """Create buildplan.toml in the current directory.

    NAME defaults to the directory name.
    """
    project_name = name if name is not None else _default_project_name(ctx)
    Ensure.invariant(
        is_valid_name(project_name),
        f"Invalid project name {project_name!r}: use letters, digits and underscores",
    )

    path = ctx.cwd / DECLARATION_FILENAME
    if path.exists():
        Ensure.invariant(force, f"{path} already exists. Use --force to overwrite.")
        path.unlink()

    write_declaration_template(path, project_name)
    user_output(f"Created {path}")
