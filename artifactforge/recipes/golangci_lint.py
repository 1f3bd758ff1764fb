from __future__ import annotations

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._release import ReleaseBinary


class GolangciLint(ReleaseBinary):
    name = "golangci-lint"
    version = "2.7.2"
    platforms = DEFAULT_PLATFORMS
    binary = "golangci-lint"

    def dispatcher(self) -> PlatformDispatcher[str]:
        return PlatformDispatcher(
            aarch64_darwin="darwin-arm64",
            aarch64_linux="linux-arm64",
            x86_64_darwin="darwin-amd64",
            x86_64_linux="linux-amd64",
        )

    def asset_url(self, target: str) -> str:
        return (
            f"https://github.com/golangci/golangci-lint/releases/download/v{self.version}/"
            f"golangci-lint-{self.version}-{target}.tar.gz"
        )

    def binary_path(self, target: str) -> str:
        return f"golangci-lint-{self.version}-{target}/golangci-lint"
