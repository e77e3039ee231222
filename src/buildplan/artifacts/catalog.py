"""Registry of every artifact a project generates."""

from collections.abc import Callable

from buildplan.artifacts.findlib_meta import meta_file
from buildplan.artifacts.makefile_rules import makefile_rules_file
from buildplan.artifacts.merlin import merlin_file
from buildplan.artifacts.ocamlinit import ocamlinit_file
from buildplan.artifacts.opam_install import install_file
from buildplan.artifacts.packs import clib_file, mlpack_file, mllib_file
from buildplan.artifacts.tags import tags_lines
from buildplan.core.project import ProjectPlan
from buildplan.core.sources.abc import SourceScanner

ArtifactRenderer = Callable[[ProjectPlan, SourceScanner], list[str]]

# Project-level artifacts by the name `buildplan show` accepts
PROJECT_ARTIFACTS: dict[str, ArtifactRenderer] = {
    "tags": tags_lines,
    "merlin": lambda plan, _scanner: merlin_file(plan),
    "meta": lambda plan, _scanner: meta_file(plan),
    "install": lambda plan, _scanner: install_file(plan),
    "ocamlinit": lambda plan, _scanner: ocamlinit_file(plan),
    "makefile-rules": lambda plan, _scanner: makefile_rules_file(plan),
}


def artifact_path(plan: ProjectPlan, artifact: str) -> str:
    """Output path of a project-level artifact, relative to the project root."""
    paths = {
        "tags": "_tags",
        "merlin": ".merlin",
        "meta": "META",
        "install": f"{plan.name}.install",
        "ocamlinit": ".ocamlinit",
        "makefile-rules": "Makefile.rules",
    }
    return paths[artifact]


def render_artifact(plan: ProjectPlan, scanner: SourceScanner, artifact: str) -> list[str]:
    """Render one project-level artifact by name.

    Raises:
        ValueError: If artifact is not a known name
    """
    renderer = PROJECT_ARTIFACTS.get(artifact)
    if renderer is None:
        available = ", ".join(sorted(PROJECT_ARTIFACTS))
        raise ValueError(f"Unknown artifact: {artifact} (available: {available})")
    return renderer(plan, scanner)


def project_artifacts(plan: ProjectPlan, scanner: SourceScanner) -> dict[str, list[str]]:
    """Every generated file, keyed by path relative to the project root.

    Per-library manifests come first (declaration order), then the
    project-level artifacts.
    """
    files: dict[str, list[str]] = {}
    for lib in plan.libs_names:
        qualified = plan.qualified_name(lib)
        files[f"lib/{qualified}.mlpack"] = mlpack_file(scanner, f"lib/{lib}")
        files[f"lib/{qualified}.mllib"] = mllib_file(plan, scanner, "lib", lib)
        stubs = clib_file(scanner, "lib", lib)
        if stubs is not None:
            files[f"lib/lib{qualified}_stub.clib"] = stubs

    for artifact, renderer in PROJECT_ARTIFACTS.items():
        files[artifact_path(plan, artifact)] = renderer(plan, scanner)
    return files
