"""Go toolchain, the compiler for the recipes built from Go sources."""

from __future__ import annotations

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._shell import shell


class Go(Recipe):
    name = "go"
    version = "1.25.1"
    platforms = DEFAULT_PLATFORMS

    def dispatcher(self) -> PlatformDispatcher[str]:
        return PlatformDispatcher(
            aarch64_darwin="darwin-arm64",
            aarch64_linux="linux-arm64",
            x86_64_darwin="darwin-amd64",
            x86_64_linux="linux-amd64",
        )

    def sources(self, params: str) -> list[ArtifactSource]:
        return [
            ArtifactSource(
                name=self.name,
                path=f"https://go.dev/dl/go{self.version}.{params}.tar.gz",
            )
        ]

    def script(self, params: str, deps: dict[str, str]) -> str:
        return shell(f"""
            pushd ./source/{self.name}/go

            cp -Rv * "$BUILD_OUTPUT/."
        """)
