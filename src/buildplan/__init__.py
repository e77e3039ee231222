"""buildplan: dependency-aware build descriptions for ocamlbuild projects.

Import from submodules:
- version: __version__
- core: item model, registry, dependency graph, closures, eligibility
- config: buildplan.toml loading
- artifacts: generated build configuration files
"""

from buildplan.version import __version__ as __version__
