"""artifactforge CLI: Typer-based command-line interface.

Provides the ``artifactforge`` command with subcommands for listing the
recipe catalog, showing build plans and specs, and running builds.

All output uses Rich for formatted terminal display.
"""
