"""``artifactforge build``: build the default set (or a selection) and run it.

Specs are submitted to an in-memory registrar, or to the on-disk spec
store with ``--persist``. The first failure aborts the build with exit
code 1.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from artifactforge.cli.commands._common import (
    load_config,
    make_context,
    recipe_set,
    report_definition_error,
    report_failure,
)
from artifactforge.core.errors import ArtifactBuildError, RecipeDefinitionError
from artifactforge.core.orchestrator import Orchestrator

console = Console()


def build_cmd(
    only: Optional[list[str]] = typer.Option(
        None,
        "--only",
        "-o",
        help="Build only these recipes and what they depend on (repeatable).",
    ),
    system: Optional[str] = typer.Option(
        None,
        "--system",
        "-s",
        help="Target platform tag. Defaults to the host.",
    ),
    persist: Optional[bool] = typer.Option(
        None,
        "--persist/--no-persist",
        help="Write registered specs to the spec store.",
    ),
    store: Optional[Path] = typer.Option(
        None,
        "--store",
        help="Spec store directory used with --persist.",
    ),
) -> None:
    """Build recipes in dependency order and hand them to the run phase."""
    config = load_config(system, persist, store)
    context = make_context(console, config)

    try:
        orchestrator = Orchestrator(recipe_set(only), context=context, config=config)
    except ValueError as exc:
        console.print(f"[bold red]Invalid build:[/bold red] {exc}")
        raise typer.Exit(code=1)

    try:
        summary = orchestrator.run(only or None)
    except ArtifactBuildError as exc:
        report_failure(console, exc, orchestrator.blocked_by(exc.artifact, only or None))
        raise typer.Exit(code=1)
    except RecipeDefinitionError as exc:
        report_definition_error(console, exc)
        raise typer.Exit(code=1)
    except ValueError as exc:
        console.print(f"[bold red]Invalid build:[/bold red] {exc}")
        raise typer.Exit(code=1)

    table = Table(title=f"Registered for {summary.platform}")
    table.add_column("Artifact", style="cyan")
    table.add_column("Alias", style="green")
    table.add_column("Digest", style="dim")

    for entry in summary.entries:
        table.add_row(entry.name, ", ".join(entry.aliases), entry.digest[:19])

    console.print(table)
    console.print(
        f"[bold green]{len(summary.entries)} artifact(s)[/bold green] "
        f"from {summary.submissions} submission(s)"
    )
    if config.persist_specs:
        console.print(f"[dim]Specs stored in {config.store_path}[/dim]")
