"""Helpers shared by the CLI commands."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from artifactforge.config import ForgeConfig, config as settings
from artifactforge.core.context import BuildContext
from artifactforge.core.errors import ArtifactBuildError, RecipeDefinitionError
from artifactforge.core.recipe import Recipe
from artifactforge.models.platforms import UnknownPlatformTagError
from artifactforge.recipes import CATALOG, DEFAULT_BUILD


def configure_logging(config: ForgeConfig) -> None:
    level = "DEBUG" if config.debug else config.log_level.upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )


def load_config(
    system: str | None,
    persist: bool | None = None,
    store: Path | None = None,
) -> ForgeConfig:
    """Settings from the environment, overridden by command-line options."""
    overrides: dict[str, object] = {}
    if system is not None:
        overrides["system"] = system
    if persist is not None:
        overrides["persist_specs"] = persist
    if store is not None:
        overrides["store_path"] = store
    config = settings.model_copy(update=overrides)
    configure_logging(config)
    return config


def make_context(console: Console, config: ForgeConfig) -> BuildContext:
    try:
        return BuildContext.from_config(config)
    except UnknownPlatformTagError as exc:
        console.print(f"[bold red]{exc}[/bold red]")
        raise typer.Exit(code=1)


def recipe_set(only: Sequence[str] | None) -> tuple[type[Recipe], ...]:
    """The default build, or the whole catalog when specific names are asked for."""
    if only:
        return tuple(CATALOG.values())
    return DEFAULT_BUILD


def lookup_recipe(console: Console, name: str) -> type[Recipe]:
    try:
        return CATALOG[name]
    except KeyError:
        console.print(f"[bold red]Unknown recipe:[/bold red] {name}")
        console.print("[dim]See the catalog with: artifactforge list[/dim]")
        raise typer.Exit(code=1) from None


def report_failure(
    console: Console,
    exc: ArtifactBuildError,
    blocked: Sequence[str] = (),
) -> None:
    """Print the failing artifact, its stage and the innermost cause.

    *blocked* lists the planned artifacts that depend on the failure.
    """
    info = exc.describe()
    lines = [
        f"[bold]Artifact:[/bold]        {info['artifact']}",
        f"[bold]Stage:[/bold]           {info['stage']}",
    ]
    if info["failed_artifact"] != info["artifact"]:
        lines += [
            f"[bold]Failed artifact:[/bold] {info['failed_artifact']}",
            f"[bold]Failed stage:[/bold]    {info['failed_stage']}",
        ]
    if blocked:
        lines.append(f"[bold]Blocked:[/bold]         {', '.join(blocked)}")
    lines += ["", f"[red]{info['cause']}[/red]"]
    console.print(
        Panel(
            "\n".join(lines),
            title="[bold red]Build failed[/bold red]",
            border_style="red",
            padding=(1, 2),
        )
    )


def report_definition_error(console: Console, exc: RecipeDefinitionError) -> None:
    """Print a recipe whose declaration is inconsistent with its dispatch table."""
    lines = [
        f"[bold]Artifact:[/bold] {exc.artifact or '-'}",
        "",
        f"[red]{exc}[/red]",
    ]
    console.print(
        Panel(
            "\n".join(lines),
            title="[bold red]Invalid recipe[/bold red]",
            border_style="red",
            padding=(1, 2),
        )
    )
