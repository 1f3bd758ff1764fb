"""Base recipe for upstream release binaries.

Most tools in the catalog ship a prebuilt executable per platform: the
archive (or the bare binary) is fetched as the source and one file is
copied into ``$BUILD_OUTPUT/bin``. Subclasses provide the per-platform
asset table and the download URL.
"""

from __future__ import annotations

from typing import ClassVar

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.recipes._shell import shell


class ReleaseBinary(Recipe):
    """Install one executable from a per-platform release asset.

    Subclasses declare ``binary`` (the installed file name) and implement
    ``dispatcher`` and ``asset_url``. ``binary_path`` locates the
    executable inside the unpacked source when it is not at the top.
    """

    binary: ClassVar[str]

    def dispatcher(self) -> PlatformDispatcher[str]:
        raise NotImplementedError

    def asset_url(self, target: str) -> str:
        raise NotImplementedError

    def binary_path(self, target: str) -> str:
        return self.binary

    def sources(self, params: str) -> list[ArtifactSource]:
        return [ArtifactSource(name=self.name, path=self.asset_url(params))]

    def script(self, params: str, deps: dict[str, str]) -> str:
        installed = f'"$BUILD_OUTPUT/bin/{self.binary}"'
        return shell(f"""
            mkdir -pv "$BUILD_OUTPUT/bin"

            pushd ./source/{self.name}

            cp {self.binary_path(params)} {installed}
            chmod +x {installed}
        """)
