from __future__ import annotations

from typing import NamedTuple

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._shell import shell

DOWNLOAD_ROOT = "https://download.java.net/java/GA/jdk25.0.1/2fbf10d8c78e40bd87641c434705079d/8/GPL"


class JdkArchive(NamedTuple):
    system: str
    affix: str  # macOS archives unpack to jdk-<version>.jdk


class Openjdk(Recipe):
    name = "openjdk"
    version = "25.0.1"
    platforms = DEFAULT_PLATFORMS

    def dispatcher(self) -> PlatformDispatcher[JdkArchive]:
        return PlatformDispatcher(
            aarch64_darwin=JdkArchive("macos-aarch64", ".jdk"),
            aarch64_linux=JdkArchive("linux-aarch64", ""),
            x86_64_darwin=JdkArchive("macos-x64", ".jdk"),
            x86_64_linux=JdkArchive("linux-x64", ""),
        )

    def sources(self, params: JdkArchive) -> list[ArtifactSource]:
        return [
            ArtifactSource(
                name=self.name,
                path=f"{DOWNLOAD_ROOT}/openjdk-{self.version}_{params.system}_bin.tar.gz",
            )
        ]

    def script(self, params: JdkArchive, deps: dict[str, str]) -> str:
        return shell(f"""
            pushd ./source/{self.name}/jdk-{self.version}{params.affix}

            cp -Rv * "$BUILD_OUTPUT/."
        """)
