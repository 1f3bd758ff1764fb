"""``artifactforge show NAME``: assemble one recipe's spec and print it.

Dependencies are resolved the way a standalone build would resolve them,
so they are built (in memory) first. Nothing is persisted.
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from artifactforge.cli.commands._common import (
    load_config,
    lookup_recipe,
    make_context,
    report_definition_error,
    report_failure,
)
from artifactforge.core.errors import ArtifactBuildError, RecipeDefinitionError

console = Console()


def show_cmd(
    name: str = typer.Argument(..., help="Recipe name, e.g. tmux or libgpg-error."),
    system: Optional[str] = typer.Option(
        None,
        "--system",
        "-s",
        help="Target platform tag. Defaults to the host.",
    ),
) -> None:
    """Show the spec a recipe produces for a platform."""
    config = load_config(system, persist=False)
    recipe_cls = lookup_recipe(console, name)
    context = make_context(console, config)

    try:
        spec = recipe_cls().prepare(context)
    except ArtifactBuildError as exc:
        report_failure(console, exc)
        raise typer.Exit(code=1)
    except RecipeDefinitionError as exc:
        report_definition_error(console, exc)
        raise typer.Exit(code=1)

    summary = [
        f"[bold]Name:[/bold]       {spec.name}",
        f"[bold]Aliases:[/bold]    {', '.join(spec.aliases) or '-'}",
        f"[bold]Platform:[/bold]   {context.platform_tag}",
        f"[bold]Digest:[/bold]     {spec.digest}",
        f"[bold]Depends on:[/bold] {', '.join(r.name for r in spec.dependency_refs) or '-'}",
    ]
    for source in spec.sources:
        summary.append(f"[bold]Source:[/bold]     {source.path}")
    for env in spec.environments:
        summary.append(f"[bold]Env:[/bold]        {env}")

    console.print(
        Panel("\n".join(summary), title=f"[bold]{spec.name}[/bold]", border_style="cyan")
    )
    console.print(Syntax(spec.instructions, "bash", line_numbers=False))
