"""Main Typer application: imports and registers all CLI commands.

Entry point: ``artifactforge`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import typer

from artifactforge.cli.commands.build import build_cmd
from artifactforge.cli.commands.list_cmd import list_cmd
from artifactforge.cli.commands.plan import plan_cmd
from artifactforge.cli.commands.show import show_cmd

app = typer.Typer(
    name="artifactforge",
    help="artifactforge: declarative, content-addressed build recipes.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="list", help="List the recipe catalog.")(list_cmd)
app.command(name="plan", help="Show the build order.")(plan_cmd)
app.command(name="show", help="Show the spec one recipe produces.")(show_cmd)
app.command(name="build", help="Build recipes and run them.")(build_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
