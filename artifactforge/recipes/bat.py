from __future__ import annotations

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._release import ReleaseBinary


class Bat(ReleaseBinary):
    name = "bat"
    version = "0.25.0"
    platforms = DEFAULT_PLATFORMS
    binary = "bat"

    def dispatcher(self) -> PlatformDispatcher[str]:
        return PlatformDispatcher(
            aarch64_darwin="aarch64-apple-darwin",
            aarch64_linux="aarch64-unknown-linux-gnu",
            x86_64_darwin="x86_64-apple-darwin",
            x86_64_linux="x86_64-unknown-linux-musl",
        )

    def asset_url(self, target: str) -> str:
        return (
            f"https://github.com/sharkdp/bat/releases/download/v{self.version}/"
            f"bat-v{self.version}-{target}.tar.gz"
        )

    def binary_path(self, target: str) -> str:
        return f"bat-v{self.version}-{target}/bat"
