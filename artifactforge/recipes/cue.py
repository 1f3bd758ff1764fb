from __future__ import annotations

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._release import ReleaseBinary


class Cue(ReleaseBinary):
    name = "cue"
    version = "0.15.1"
    platforms = DEFAULT_PLATFORMS
    binary = "cue"

    def dispatcher(self) -> PlatformDispatcher[str]:
        return PlatformDispatcher(
            aarch64_darwin="darwin_arm64",
            aarch64_linux="linux_arm64",
            x86_64_darwin="darwin_amd64",
            x86_64_linux="linux_amd64",
        )

    def asset_url(self, target: str) -> str:
        return (
            f"https://github.com/cue-lang/cue/releases/download/v{self.version}/"
            f"cue_v{self.version}_{target}.tar.gz"
        )
