"""Generate command: write every artifact of the project."""

import logging
from pathlib import Path

import click

from buildplan.artifacts.catalog import project_artifacts
from buildplan.artifacts.writer import ArtifactWriter, DryRunArtifactWriter, FilesystemArtifactWriter
from buildplan.cli.ensure import Ensure
from buildplan.cli.error_boundary import cli_error_boundary
from buildplan.cli.output import user_output
from buildplan.core.context import BuildPlanContext

logger = logging.getLogger(__name__)


@click.command("generate")
@click.option(
    "--out",
    "-o",
    "out_dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Output directory (default: the project root).",
)
@click.option("--dry-run", is_flag=True, help="Print what would be written without writing.")
@click.pass_obj
@cli_error_boundary
def generate_cmd(ctx: BuildPlanContext, out_dir: Path | None, dry_run: bool) -> None:
    """Generate _tags, .merlin, META, the .install file, .ocamlinit,
    Makefile.rules and the per-library pack manifests."""
    declaration = Ensure.declaration_loaded(ctx)
    plan = ctx.build_plan()
    target = out_dir if out_dir is not None else declaration.root

    writer: ArtifactWriter
    if ctx.artifact_writer is not None:
        writer = ctx.artifact_writer
    elif dry_run:
        writer = DryRunArtifactWriter(target)
    else:
        writer = FilesystemArtifactWriter(target)

    files = project_artifacts(plan, ctx.scanner)
    for rel_path, lines in files.items():
        logger.debug("Rendering %s", rel_path)
        writer.write(rel_path, lines)

    if dry_run:
        user_output(f"[DRY RUN] {len(files)} artifacts for {plan.name}")
    else:
        user_output(click.style("✓ ", fg="green") + f"Generated {len(files)} artifacts in {target}")
