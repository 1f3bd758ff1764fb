"""Neovim: the release archive carries bin/, lib/ and share/, installed whole."""

from __future__ import annotations

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._shell import shell


class Neovim(Recipe):
    name = "neovim"
    version = "0.11.5"
    platforms = DEFAULT_PLATFORMS

    def dispatcher(self) -> PlatformDispatcher[str]:
        return PlatformDispatcher(
            aarch64_darwin="macos-arm64",
            aarch64_linux="linux-arm64",
            x86_64_darwin="macos-x86_64",
            x86_64_linux="linux-x86_64",
        )

    def sources(self, params: str) -> list[ArtifactSource]:
        return [
            ArtifactSource(
                name=self.name,
                path=(
                    f"https://github.com/neovim/neovim/releases/download/v{self.version}/"
                    f"nvim-{params}.tar.gz"
                ),
            )
        ]

    def script(self, params: str, deps: dict[str, str]) -> str:
        return shell(f"""
            pushd ./source/{self.name}/nvim-{params}

            cp -Rv * "$BUILD_OUTPUT/."
        """)
