"""Terraform: HashiCorp publishes zip archives rather than tarballs."""

from __future__ import annotations

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._release import ReleaseBinary


class Terraform(ReleaseBinary):
    name = "terraform"
    version = "1.13.1"
    platforms = DEFAULT_PLATFORMS
    binary = "terraform"

    def dispatcher(self) -> PlatformDispatcher[str]:
        return PlatformDispatcher(
            aarch64_darwin="darwin_arm64",
            aarch64_linux="linux_arm64",
            x86_64_darwin="darwin_amd64",
            x86_64_linux="linux_amd64",
        )

    def asset_url(self, target: str) -> str:
        return (
            f"https://releases.hashicorp.com/terraform/{self.version}/"
            f"terraform_{self.version}_{target}.zip"
        )
