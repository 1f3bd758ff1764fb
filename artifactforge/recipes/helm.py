"""Helm: the archive unpacks into a directory named after the target."""

from __future__ import annotations

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._release import ReleaseBinary


class Helm(ReleaseBinary):
    name = "helm"
    version = "4.0.4"
    platforms = DEFAULT_PLATFORMS
    binary = "helm"

    def dispatcher(self) -> PlatformDispatcher[str]:
        return PlatformDispatcher(
            aarch64_darwin="darwin-arm64",
            aarch64_linux="linux-arm64",
            x86_64_darwin="darwin-amd64",
            x86_64_linux="linux-amd64",
        )

    def asset_url(self, target: str) -> str:
        return f"https://get.helm.sh/helm-v{self.version}-{target}.tar.gz"

    def binary_path(self, target: str) -> str:
        return f"{target}/helm"
