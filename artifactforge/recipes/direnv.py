"""direnv: the release asset is the bare executable, not an archive.

The upstream version string carries its ``v`` prefix, so the alias reads
``direnv:v2.37.1``.
"""

from __future__ import annotations

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._release import ReleaseBinary


class Direnv(ReleaseBinary):
    name = "direnv"
    version = "v2.37.1"
    platforms = DEFAULT_PLATFORMS
    binary = "direnv"

    def dispatcher(self) -> PlatformDispatcher[str]:
        return PlatformDispatcher(
            aarch64_darwin="darwin-arm64",
            aarch64_linux="linux-arm64",
            x86_64_darwin="darwin-amd64",
            x86_64_linux="linux-amd64",
        )

    def asset_url(self, target: str) -> str:
        return f"https://github.com/direnv/direnv/releases/download/{self.version}/direnv.{target}"

    def binary_path(self, target: str) -> str:
        return f"direnv.{target}"
