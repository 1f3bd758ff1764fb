"""Base recipe for command line tools compiled from a Go source tarball.

The toolchain comes from the ``go`` recipe. Module downloads and the
build cache live under the working directory, and toolchain switching is
disabled so the pinned compiler is the one that runs.
"""

from __future__ import annotations

from typing import ClassVar

from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._shell import shell
from artifactforge.recipes.go import Go


class GoModule(Recipe):
    """Build ``package`` from the ``<name>-<version>`` tree into ``bin/<name>``."""

    platforms = DEFAULT_PLATFORMS
    dependencies = (Go,)

    repository: ClassVar[str]  # github owner/repo
    package: ClassVar[str] = "."
    build_tags: ClassVar[tuple[str, ...]] = ()

    def sources(self, params: None) -> list[ArtifactSource]:
        return [
            ArtifactSource(
                name=self.name,
                path=(
                    f"https://github.com/{self.repository}/archive/refs/tags/"
                    f"v{self.version}.tar.gz"
                ),
            )
        ]

    def script(self, params: None, deps: dict[str, str]) -> str:
        go = deps["go"]
        tags = f" -tags {','.join(self.build_tags)}" if self.build_tags else ""
        return shell(f"""
            mkdir -pv "$BUILD_OUTPUT/bin"

            export GOCACHE="$(pwd)/.cache/go-build"
            export GOMODCACHE="$(pwd)/.cache/go-mod"
            export GOTOOLCHAIN=local

            pushd ./source/{self.name}/{self.name}-{self.version}

            {go}/bin/go build -o "$BUILD_OUTPUT/bin/{self.name}"{tags} {self.package}
        """)
