from __future__ import annotations

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._release import ReleaseBinary


class Lazygit(ReleaseBinary):
    name = "lazygit"
    version = "0.44.1"
    platforms = DEFAULT_PLATFORMS
    binary = "lazygit"

    def dispatcher(self) -> PlatformDispatcher[str]:
        return PlatformDispatcher(
            aarch64_darwin="Darwin_arm64",
            aarch64_linux="Linux_arm64",
            x86_64_darwin="Darwin_x86_64",
            x86_64_linux="Linux_x86_64",
        )

    def asset_url(self, target: str) -> str:
        return (
            f"https://github.com/jesseduffield/lazygit/releases/download/v{self.version}/"
            f"lazygit_{self.version}_{target}.tar.gz"
        )
