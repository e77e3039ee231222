"""Application context with dependency injection."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from buildplan.artifacts.writer import ArtifactWriter
from buildplan.config.loader import LoadedDeclaration, discover_declaration, load_declaration
from buildplan.core.packages.abc import PackageOracle
from buildplan.core.packages.fake import FakePackageOracle
from buildplan.core.packages.real import RealPackageOracle
from buildplan.core.project import ProjectPlan
from buildplan.core.sources.abc import SourceScanner
from buildplan.core.sources.fake import FakeSourceScanner
from buildplan.core.sources.real import RealSourceScanner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoDeclarationSentinel:
    """Sentinel value indicating that no buildplan.toml was found.

    Used when commands run outside a project (e.g. before init). Commands that
    require a declaration check for this sentinel and fail fast.
    """

    message: str = "No buildplan.toml found in this directory or any parent"


@dataclass(frozen=True)
class BuildPlanContext:
    """Immutable context holding all dependencies for buildplan operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    cwd: Path  # Current working directory at CLI invocation
    declaration: LoadedDeclaration | NoDeclarationSentinel
    packages: PackageOracle
    scanner: SourceScanner
    # None: generate builds a filesystem (or dry-run) writer for its --out directory
    artifact_writer: ArtifactWriter | None

    def build_plan(self) -> ProjectPlan:
        """Build the plan for the loaded declaration.

        Raises:
            ValueError: If no declaration was loaded
            CyclicDependencyError, UnknownItemError, LikelyCycleError:
                If the declared items are inconsistent
        """
        if isinstance(self.declaration, NoDeclarationSentinel):
            raise ValueError(self.declaration.message)
        return ProjectPlan.create(self.declaration.project, self.packages)

    @staticmethod
    def for_test(
        cwd: Path | None = None,
        declaration: LoadedDeclaration | NoDeclarationSentinel | None = None,
        packages: PackageOracle | None = None,
        scanner: SourceScanner | None = None,
        artifact_writer: ArtifactWriter | None = None,
    ) -> "BuildPlanContext":
        """Create test context with in-memory defaults.

        Args:
            cwd: Optional working directory. If None, uses Path("/test/default/cwd").
            declaration: Optional loaded declaration. If None, uses NoDeclarationSentinel().
            packages: Optional PackageOracle. If None, creates FakePackageOracle with
                      nothing installed.
            scanner: Optional SourceScanner. If None, creates empty FakeSourceScanner.
            artifact_writer: Optional ArtifactWriter used by generate.

        Example:
            >>> ctx = BuildPlanContext.for_test(packages=FakePackageOracle({"zlib"}))
        """
        return BuildPlanContext(
            cwd=cwd or Path("/test/default/cwd"),
            declaration=declaration or NoDeclarationSentinel(),
            packages=packages or FakePackageOracle(),
            scanner=scanner or FakeSourceScanner(),
            artifact_writer=artifact_writer,
        )


def configure_logging() -> None:
    """Enable debug logging when BUILDPLAN_DEBUG is set."""
    if os.getenv("BUILDPLAN_DEBUG"):
        logging.basicConfig(
            level=logging.DEBUG,
            format="[DEBUG %(name)s:%(lineno)d] %(message)s",
        )


def create_context(
    *, declaration_file: Path | None = None, load: bool = True
) -> BuildPlanContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        declaration_file: Explicit buildplan.toml. If None, the nearest one at or
                          above the working directory is used.
        load: If False, skip loading the declaration (used by init, which must
              work in directories without one)

    Raises:
        FileNotFoundError: If declaration_file is given but does not exist
        DeclarationError: If the declaration is malformed
    """
    # 1. Capture cwd (no deps)
    cwd = Path.cwd()

    # 2. Find and load the declaration
    declaration: LoadedDeclaration | NoDeclarationSentinel = NoDeclarationSentinel()
    if load:
        path = declaration_file if declaration_file is not None else discover_declaration(cwd)
        if path is not None:
            declaration = load_declaration(path)

    # 3. Create integrations that depend on the declaration
    if isinstance(declaration, NoDeclarationSentinel):
        logger.debug("No declaration loaded (cwd=%s)", cwd)
        packages = RealPackageOracle()
        scanner = RealSourceScanner(cwd)
    else:
        packages = RealPackageOracle(declaration.settings.package_command)
        scanner = RealSourceScanner(declaration.root)

    return BuildPlanContext(
        cwd=cwd,
        declaration=declaration,
        packages=packages,
        scanner=scanner,
        artifact_writer=None,
    )
