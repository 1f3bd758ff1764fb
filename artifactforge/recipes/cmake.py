"""CMake: macOS ships one universal archive, so both Darwin tags share a branch."""

from __future__ import annotations

from typing import NamedTuple

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._shell import shell


class CmakeTarget(NamedTuple):
    system: str
    contents: str  # directory holding bin/ and share/ inside the archive


class Cmake(Recipe):
    name = "cmake"
    version = "4.2.3"
    platforms = DEFAULT_PLATFORMS

    def dispatcher(self) -> PlatformDispatcher[CmakeTarget]:
        return PlatformDispatcher.collapse_darwin(
            darwin=CmakeTarget("macos-universal", "CMake.app/Contents"),
            aarch64_linux=CmakeTarget("linux-aarch64", ""),
            x86_64_linux=CmakeTarget("linux-x86_64", ""),
        )

    def sources(self, params: CmakeTarget) -> list[ArtifactSource]:
        return [
            ArtifactSource(
                name=self.name,
                path=(
                    f"https://github.com/Kitware/CMake/releases/download/v{self.version}/"
                    f"cmake-{self.version}-{params.system}.tar.gz"
                ),
            )
        ]

    def script(self, params: CmakeTarget, deps: dict[str, str]) -> str:
        root = f"./source/{self.name}/{self.name}-{self.version}-{params.system}"
        if params.contents:
            root = f"{root}/{params.contents}"
        return shell(f"""
            mkdir -pv "$BUILD_OUTPUT/bin"

            cp -v {root}/bin/* "$BUILD_OUTPUT/bin/"
            cp -rv {root}/share "$BUILD_OUTPUT/share"
        """)
