"""Flux CD command line, installed as ``flux``."""

from __future__ import annotations

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._release import ReleaseBinary


class Fluxcd(ReleaseBinary):
    name = "fluxcd"
    version = "2.7.5"
    platforms = DEFAULT_PLATFORMS
    binary = "flux"

    def dispatcher(self) -> PlatformDispatcher[str]:
        return PlatformDispatcher(
            aarch64_darwin="darwin_arm64",
            aarch64_linux="linux_arm64",
            x86_64_darwin="darwin_amd64",
            x86_64_linux="linux_amd64",
        )

    def asset_url(self, target: str) -> str:
        return (
            f"https://github.com/fluxcd/flux2/releases/download/v{self.version}/"
            f"flux_{self.version}_{target}.tar.gz"
        )
