"""AWS CLI v2.

Linux uses the bundled installer; macOS unpacks the universal ``.pkg``
instead, so the two families have different build strategies.
"""

from __future__ import annotations

from typing import NamedTuple

from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._shell import OUTPUT, shell


class AwsInstall(NamedTuple):
    archive: str
    from_pkg: bool


class Awscli2(Recipe):
    name = "awscli2"
    version = "2.33.1"
    platforms = DEFAULT_PLATFORMS

    def dispatcher(self) -> PlatformDispatcher[AwsInstall]:
        pkg = AwsInstall(f"AWSCLIV2-{self.version}.pkg", from_pkg=True)
        return PlatformDispatcher.collapse_darwin(
            darwin=pkg,
            aarch64_linux=AwsInstall(f"awscli-exe-linux-aarch64-{self.version}.zip", False),
            x86_64_linux=AwsInstall(f"awscli-exe-linux-x86_64-{self.version}.zip", False),
        )

    def sources(self, params: AwsInstall) -> list[ArtifactSource]:
        return [ArtifactSource(name=self.name, path=f"https://awscli.amazonaws.com/{params.archive}")]

    def script(self, params: AwsInstall, deps: dict[str, str]) -> str:
        if not params.from_pkg:
            return shell(f"""
                mkdir -pv {OUTPUT}

                pushd ./source/{self.name}

                chmod +x ./aws/install

                ./aws/install --install-dir {OUTPUT} --bin-dir "$BUILD_OUTPUT/bin"
            """)

        return shell(f"""
            mkdir -pv "$BUILD_OUTPUT/bin"

            pushd ./source/{self.name}

            pkgutil --expand-full {params.archive} extracted

            cp -Rv extracted/aws-cli.pkg/Payload/aws-cli/* "$BUILD_OUTPUT/."

            test -f "$BUILD_OUTPUT/aws" || (echo 'ERROR: aws executable not found after extraction' && exit 1)
            test -f "$BUILD_OUTPUT/aws_completer" || (echo 'ERROR: aws_completer not found after extraction' && exit 1)

            ln -sf "$BUILD_OUTPUT/aws" "$BUILD_OUTPUT/bin/aws"
            ln -sf "$BUILD_OUTPUT/aws_completer" "$BUILD_OUTPUT/bin/aws_completer"
        """)
