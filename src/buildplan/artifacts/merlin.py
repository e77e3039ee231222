"""Editor configuration (.merlin)."""

from buildplan.core.project import ProjectPlan

STATIC_MERLIN = [
    "S ./lib/**",
    "S ./app/**",
    "B ./_build/lib",
    "B ./_build/lib/**",
    "B ./_build/app/**",
    "B +threads",
]


def merlin_file(plan: ProjectPlan) -> list[str]:
    """Source and build paths plus the packages of every item that will be built."""
    packages = plan.packages_for([*plan.libs, *plan.apps])
    return STATIC_MERLIN + [f"PKG {pkg}" for pkg in packages]
