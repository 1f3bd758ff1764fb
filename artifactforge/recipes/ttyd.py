from __future__ import annotations

from typing import NamedTuple

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._shell import shell


class TtydAsset(NamedTuple):
    asset: str
    binary: str  # path of the executable once the source is unpacked


class Ttyd(Recipe):
    name = "ttyd"
    version = "1.7.7"
    platforms = DEFAULT_PLATFORMS

    def dispatcher(self) -> PlatformDispatcher[TtydAsset]:
        return PlatformDispatcher.collapse_darwin(
            darwin=TtydAsset("ttyd_darwin.zip", "ttyd"),
            aarch64_linux=TtydAsset("ttyd.aarch64", "ttyd.aarch64"),
            x86_64_linux=TtydAsset("ttyd.x86_64", "ttyd.x86_64"),
        )

    def sources(self, params: TtydAsset) -> list[ArtifactSource]:
        return [
            ArtifactSource(
                name=self.name,
                path=(
                    f"https://github.com/tsl0922/ttyd/releases/download/{self.version}/"
                    f"{params.asset}"
                ),
            )
        ]

    def script(self, params: TtydAsset, deps: dict[str, str]) -> str:
        return shell(f"""
            mkdir -pv "$BUILD_OUTPUT/bin"

            cp ./source/{self.name}/{params.binary} "$BUILD_OUTPUT/bin/ttyd"
            chmod +x "$BUILD_OUTPUT/bin/ttyd"
        """)
