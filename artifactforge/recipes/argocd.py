from __future__ import annotations

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._release import ReleaseBinary


class Argocd(ReleaseBinary):
    name = "argocd"
    version = "3.2.3"
    platforms = DEFAULT_PLATFORMS
    binary = "argocd"

    def dispatcher(self) -> PlatformDispatcher[str]:
        return PlatformDispatcher(
            aarch64_darwin="darwin-arm64",
            aarch64_linux="linux-arm64",
            x86_64_darwin="darwin-amd64",
            x86_64_linux="linux-amd64",
        )

    def asset_url(self, target: str) -> str:
        return (
            f"https://github.com/argoproj/argo-cd/releases/download/v{self.version}/"
            f"argocd-{target}"
        )

    def binary_path(self, target: str) -> str:
        return f"argocd-{target}"
