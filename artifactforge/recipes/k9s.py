from __future__ import annotations

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._release import ReleaseBinary


class K9s(ReleaseBinary):
    name = "k9s"
    version = "0.50.18"
    platforms = DEFAULT_PLATFORMS
    binary = "k9s"

    def dispatcher(self) -> PlatformDispatcher[str]:
        return PlatformDispatcher(
            aarch64_darwin="Darwin_arm64",
            aarch64_linux="Linux_arm64",
            x86_64_darwin="Darwin_amd64",
            x86_64_linux="Linux_amd64",
        )

    def asset_url(self, target: str) -> str:
        return (
            f"https://github.com/derailed/k9s/releases/download/v{self.version}/"
            f"k9s_{target}.tar.gz"
        )
