"""Recipe dependency DAG, validated before any build step runs.

The graph enforces:
- Every dependency a recipe declares is part of the declared set.
- No recipe is declared twice.
- The dependency relation is acyclic.

Build order is a topological order with declaration order as tie-break,
so a hand-declared sequence that is already correct is kept as written.
"""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from artifactforge.core.recipe import Recipe


class CyclicDependencyError(ValueError):
    """Raised when the recipe dependency graph contains a cycle."""


class MissingDependencyError(ValueError):
    """Raised when a recipe depends on a recipe outside the declared set."""


class DuplicateRecipeError(ValueError):
    """Raised when two declared recipes share a name."""


class DependencyGraph:
    """Directed acyclic graph of recipe dependencies.

    Parameters
    ----------
    recipes:
        Recipe classes in declaration order.
    """

    def __init__(self, recipes: Sequence[type[Recipe]]) -> None:
        self._recipes: dict[str, type[Recipe]] = {}
        for recipe in recipes:
            if recipe.name in self._recipes:
                raise DuplicateRecipeError(f"Recipe {recipe.name!r} is declared twice")
            self._recipes[recipe.name] = recipe

        self._ordinal: dict[str, int] = {name: i for i, name in enumerate(self._recipes)}
        # Forward edges: name -> dependency names, in declared slot order
        self._dependencies: dict[str, list[str]] = {
            name: [dep.name for dep in recipe.dependencies]
            for name, recipe in self._recipes.items()
        }
        # Reverse edges: name -> recipes that depend on it
        self._dependents: dict[str, list[str]] = {name: [] for name in self._recipes}

        for name, deps in self._dependencies.items():
            for dep in deps:
                if dep not in self._recipes:
                    raise MissingDependencyError(
                        f"Recipe {name!r} depends on {dep!r}, which is not declared"
                    )
                self._dependents[dep].append(name)

        self._order = self._topological_order()

    def _topological_order(self) -> list[str]:
        """Kahn's algorithm; among ready recipes the earliest declared goes first."""
        in_degree = {name: len(deps) for name, deps in self._dependencies.items()}
        ready = [(self._ordinal[name], name) for name, deg in in_degree.items() if deg == 0]
        heapq.heapify(ready)
        result: list[str] = []

        while ready:
            _, node = heapq.heappop(ready)
            result.append(node)
            for dependent in self._dependents[node]:
                in_degree[dependent] -= 1
                if in_degree[dependent] == 0:
                    heapq.heappush(ready, (self._ordinal[dependent], dependent))

        if len(result) != len(self._recipes):
            stuck = sorted(set(self._recipes) - set(result), key=self._ordinal.__getitem__)
            raise CyclicDependencyError(
                f"Recipe dependency graph has a cycle among: {', '.join(stuck)}. "
                f"Ordered {len(result)}/{len(self._recipes)} recipes."
            )
        return result

    # ------------------------------------------------------------------
    # Query methods
    # ------------------------------------------------------------------

    @property
    def order(self) -> list[str]:
        """All recipe names in build order."""
        return list(self._order)

    def __contains__(self, name: object) -> bool:
        return name in self._recipes

    def __len__(self) -> int:
        return len(self._recipes)

    def get_recipe(self, name: str) -> type[Recipe]:
        return self._recipes[name]

    def get_dependencies(self, name: str) -> list[str]:
        """Direct dependency names for a recipe, in declared order."""
        return list(self._dependencies.get(name, []))

    def get_dependents(self, name: str) -> list[str]:
        """Every recipe that needs *name*, directly or transitively, in build order."""
        affected = {name}
        result: list[str] = []
        for node in self._order:
            if any(dep in affected for dep in self._dependencies[node]):
                affected.add(node)
                result.append(node)
        return result

    def closure(self, names: Iterable[str]) -> list[str]:
        """Selected recipes plus everything they depend on, in build order."""
        wanted: set[str] = set()
        stack = list(names)
        while stack:
            name = stack.pop()
            if name not in self._recipes:
                raise MissingDependencyError(f"Unknown recipe {name!r}")
            if name in wanted:
                continue
            wanted.add(name)
            stack.extend(self._dependencies[name])
        return [name for name in self._order if name in wanted]
