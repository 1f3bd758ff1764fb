from __future__ import annotations

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._release import ReleaseBinary


class Doppler(ReleaseBinary):
    name = "doppler"
    version = "3.75.1"
    platforms = DEFAULT_PLATFORMS
    binary = "doppler"

    def dispatcher(self) -> PlatformDispatcher[str]:
        return PlatformDispatcher(
            aarch64_darwin="macOS_arm64",
            aarch64_linux="linux_arm64",
            x86_64_darwin="macOS_amd64",
            x86_64_linux="linux_amd64",
        )

    def asset_url(self, target: str) -> str:
        return (
            f"https://github.com/DopplerHQ/cli/releases/download/{self.version}/"
            f"doppler_{self.version}_{target}.tar.gz"
        )
