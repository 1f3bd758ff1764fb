"""kubeseal, the client for Sealed Secrets."""

from __future__ import annotations

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._release import ReleaseBinary


class Kubeseal(ReleaseBinary):
    name = "kubeseal"
    version = "0.34.0"
    platforms = DEFAULT_PLATFORMS
    binary = "kubeseal"

    def dispatcher(self) -> PlatformDispatcher[str]:
        return PlatformDispatcher(
            aarch64_darwin="darwin-arm64",
            aarch64_linux="linux-arm64",
            x86_64_darwin="darwin-amd64",
            x86_64_linux="linux-amd64",
        )

    def asset_url(self, target: str) -> str:
        return (
            f"https://github.com/bitnami-labs/sealed-secrets/releases/download/v{self.version}/"
            f"kubeseal-{self.version}-{target}.tar.gz"
        )
