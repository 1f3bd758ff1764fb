"""Orchestrator: builds a declared set of recipes in dependency order.

The dependency graph is validated once, up front, so a cycle or a missing
dependency is reported before any spec is submitted. Each recipe is then
built with every dependency handle injected from the recipes built before
it, so within one run each artifact is assembled and submitted once.

The first failure aborts the run; there is no continue-on-error mode.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from artifactforge.config import ForgeConfig
from artifactforge.config import config as default_config
from artifactforge.core.context import BuildContext
from artifactforge.core.dependency_graph import DependencyGraph
from artifactforge.core.errors import ArtifactBuildError
from artifactforge.models.artifacts import DependencyHandle
from artifactforge.models.reports import RunSummary

if TYPE_CHECKING:
    from artifactforge.core.recipe import Recipe

logger = logging.getLogger(__name__)


class Orchestrator:
    """Top-level driver for a run.

    Parameters
    ----------
    recipes:
        Recipe classes to build, in declaration order. Defaults to the
        catalog's ``DEFAULT_BUILD`` sequence.
    context:
        Build context to use. Created from ``config`` if not provided.
    config:
        Settings used when no context is given.
    """

    def __init__(
        self,
        recipes: Sequence[type[Recipe]] | None = None,
        *,
        context: BuildContext | None = None,
        config: ForgeConfig | None = None,
    ) -> None:
        if recipes is None:
            from artifactforge.recipes import DEFAULT_BUILD

            recipes = DEFAULT_BUILD
        self.config = config or default_config
        self.context = context or BuildContext.from_config(self.config)
        self.graph = DependencyGraph(recipes)
        self.handles: dict[str, DependencyHandle] = {}

    # ------------------------------------------------------------------
    # Planning
    # ------------------------------------------------------------------

    def plan(self, only: Iterable[str] | None = None) -> list[str]:
        """Recipe names in the order they will be built."""
        if only is None:
            return self.graph.order
        return self.graph.closure(only)

    def blocked_by(self, name: str, only: Iterable[str] | None = None) -> list[str]:
        """Planned recipes that cannot be built once *name* has failed."""
        planned = set(self.plan(only))
        return [dep for dep in self.graph.get_dependents(name) if dep in planned]

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def build_all(self, only: Iterable[str] | None = None) -> dict[str, DependencyHandle]:
        """Build every planned recipe, sharing handles with later recipes.

        Returns name -> handle for the recipes built by this call.
        Raises the first ``ArtifactBuildError`` encountered.
        """
        order = self.plan(only)
        logger.info(
            "Building %d artifact(s) for %s", len(order), self.context.platform_tag
        )
        built: dict[str, DependencyHandle] = {}

        for name in order:
            recipe_cls = self.graph.get_recipe(name)
            recipe = recipe_cls()
            for dep in self.graph.get_dependencies(name):
                recipe.with_dependency(dep, self.handles[dep])
            try:
                handle = recipe.build(self.context)
            except ArtifactBuildError as exc:
                logger.error("Build aborted at %s (%s): %s", name, exc.stage, exc)
                raise
            self.handles[name] = handle
            built[name] = handle
            logger.debug("%s -> %s", name, handle.digest)

        return built

    def run(self, only: Iterable[str] | None = None) -> RunSummary:
        """Build the plan, then hand the handle set to the registrar's run phase."""
        built = self.build_all(only)
        return self.context.registrar.run(built.values(), self.context.platform_tag)
