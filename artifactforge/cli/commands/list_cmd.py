"""``artifactforge list``: show the recipe catalog."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes import CATALOG, DEFAULT_BUILD

console = Console()


def list_cmd(
    default_only: bool = typer.Option(
        False,
        "--default",
        "-d",
        help="Only list recipes that are part of the default build.",
    ),
) -> None:
    """List every recipe with its version, platforms, and dependencies."""
    recipes = DEFAULT_BUILD if default_only else tuple(CATALOG.values())

    table = Table(title="Recipe Catalog")
    table.add_column("Name", style="cyan")
    table.add_column("Version", style="green")
    table.add_column("Platforms")
    table.add_column("Dependencies")

    for recipe in sorted(recipes, key=lambda r: r.name):
        if set(recipe.platforms) == set(DEFAULT_PLATFORMS):
            platforms = "all"
        else:
            platforms = ", ".join(p.value for p in recipe.platforms)
        deps = ", ".join(d.name for d in recipe.dependencies) or "[dim]-[/dim]"
        table.add_row(recipe.name, recipe.version, platforms, deps)

    console.print(table)
