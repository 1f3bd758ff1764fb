"""``artifactforge plan``: print the build order without building anything."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from artifactforge.cli.commands._common import recipe_set
from artifactforge.core.dependency_graph import DependencyGraph

console = Console()


def plan_cmd(
    only: Optional[list[str]] = typer.Option(
        None,
        "--only",
        "-o",
        help="Plan only these recipes and what they depend on (repeatable).",
    ),
) -> None:
    """Show the order recipes would be built in."""
    try:
        graph = DependencyGraph(recipe_set(only))
        order = graph.closure(only) if only else graph.order
    except ValueError as exc:
        console.print(f"[bold red]Invalid plan:[/bold red] {exc}")
        raise typer.Exit(code=1)

    table = Table(title=f"Build Plan ({len(order)} recipes)")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Recipe", style="cyan")
    table.add_column("Depends on")

    for i, name in enumerate(order, start=1):
        deps = ", ".join(graph.get_dependencies(name)) or "[dim]-[/dim]"
        table.add_row(str(i), name, deps)

    console.print(table)
