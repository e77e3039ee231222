"""Deps command: query an item's dependencies."""

import click

from buildplan.cli.ensure import Ensure
from buildplan.cli.error_boundary import cli_error_boundary
from buildplan.cli.output import machine_output
from buildplan.core.context import BuildPlanContext
from buildplan.core.item import ItemKind


@click.command("deps")
@click.argument("kind", type=click.Choice([k.value for k in ItemKind]))
@click.argument("name")
@click.option("--transitive", "-t", is_flag=True, help="Follow internal dependencies transitively.")
@click.option("--packages", "-p", is_flag=True, help="Print external packages instead of items.")
@click.pass_obj
@cli_error_boundary
def deps_cmd(ctx: BuildPlanContext, kind: str, name: str, transitive: bool, packages: bool) -> None:
    """Print the dependencies of KIND NAME, one per line."""
    Ensure.declaration_loaded(ctx)
    plan = ctx.build_plan()
    item_kind = ItemKind.parse(kind)

    if packages:
        pkgs = plan.pkgs_deps_all(item_kind, name) if transitive else plan.pkgs_deps(item_kind, name)
        for pkg in pkgs:
            machine_output(pkg)
        return

    deps = plan.lib_deps_all(item_kind, name) if transitive else plan.lib_deps(item_kind, name)
    for dep in deps:
        machine_output(dep.label)
