"""Single-file artifact whose content is supplied by the caller."""

from __future__ import annotations

from collections.abc import Sequence

from artifactforge.core.recipe import Recipe
from artifactforge.models.platforms import DEFAULT_PLATFORMS, Platform
from artifactforge.recipes._shell import shell


class File(Recipe):
    """Writes *content* to ``$BUILD_OUTPUT/<name>``.

    Unlike catalog recipes, name and platforms are chosen per instance.
    """

    name = "file"
    platforms = DEFAULT_PLATFORMS

    def __init__(
        self,
        name: str,
        content: str,
        platforms: Sequence[Platform] = DEFAULT_PLATFORMS,
    ) -> None:
        super().__init__()
        self.name = name
        self.platforms = tuple(platforms)
        self.content = content

    def script(self, params: None, deps: dict[str, str]) -> str:
        # content is spliced in after dedent so its own indentation survives
        header = shell("""
            #!/bin/bash
            set -euo pipefail
        """)
        return (
            f"{header}\n\n"
            f"cat << 'EOF' > $BUILD_OUTPUT/{self.name}\n"
            f"{self.content}\n"
            "EOF\n\n"
            f"chmod 644 $BUILD_OUTPUT/{self.name}"
        )
