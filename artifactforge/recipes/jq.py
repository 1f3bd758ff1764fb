from __future__ import annotations

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._release import ReleaseBinary


class Jq(ReleaseBinary):
    name = "jq"
    version = "1.8.1"
    platforms = DEFAULT_PLATFORMS
    binary = "jq"

    def dispatcher(self) -> PlatformDispatcher[str]:
        return PlatformDispatcher(
            aarch64_darwin="macos-arm64",
            aarch64_linux="linux-arm64",
            x86_64_darwin="macos-amd64",
            x86_64_linux="linux-amd64",
        )

    def asset_url(self, target: str) -> str:
        return f"https://github.com/jqlang/jq/releases/download/jq-{self.version}/jq-{target}"

    def binary_path(self, target: str) -> str:
        return f"jq-{target}"
