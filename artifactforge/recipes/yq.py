from __future__ import annotations

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._release import ReleaseBinary


class Yq(ReleaseBinary):
    name = "yq"
    version = "4.50.1"
    platforms = DEFAULT_PLATFORMS
    binary = "yq"

    def dispatcher(self) -> PlatformDispatcher[str]:
        return PlatformDispatcher(
            aarch64_darwin="darwin_arm64",
            aarch64_linux="linux_arm64",
            x86_64_darwin="darwin_amd64",
            x86_64_linux="linux_amd64",
        )

    def asset_url(self, target: str) -> str:
        return (
            f"https://github.com/mikefarah/yq/releases/download/v{self.version}/"
            f"yq_{target}.tar.gz"
        )

    def binary_path(self, target: str) -> str:
        return f"yq_{target}"
