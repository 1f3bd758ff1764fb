"""artifactforge: declarative, content-addressed build recipes.

Recipes declare an artifact's sources, per-platform build script and
dependencies. Building a recipe submits an immutable spec to a registrar
and yields a content-addressed handle that other recipes can consume:
  - Closed set of four platform tags, with explicit per-platform dispatch
  - Dependencies injected by the caller or built by the recipe itself
  - Dependency graph validated (cycles, missing, duplicates) before building
  - Identical specs register once and share one handle
  - Optional on-disk spec store
"""

__version__ = "0.1.0"
__description__ = "Declarative, content-addressed build recipes"

from artifactforge.core.context import BuildContext
from artifactforge.core.orchestrator import Orchestrator
from artifactforge.core.recipe import Recipe
from artifactforge.core.registrar import InMemoryRegistrar, StoreRegistrar
from artifactforge.models.platforms import Platform

__all__ = [
    "BuildContext",
    "InMemoryRegistrar",
    "Orchestrator",
    "Platform",
    "Recipe",
    "StoreRegistrar",
    "__version__",
]
