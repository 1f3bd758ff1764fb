from __future__ import annotations

from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._shell import OUTPUT, shell


class PkgConfig(Recipe):
    name = "pkg-config"
    version = "0.29.2"
    platforms = DEFAULT_PLATFORMS

    def sources(self, params: None) -> list[ArtifactSource]:
        return [
            ArtifactSource(
                name=self.name,
                path=f"https://pkgconfig.freedesktop.org/releases/pkg-config-{self.version}.tar.gz",
            )
        ]

    def script(self, params: None, deps: dict[str, str]) -> str:
        return shell(f"""
            mkdir -pv "$BUILD_OUTPUT/bin"

            pushd ./source/{self.name}/pkg-config-{self.version}

            CFLAGS="-Wno-error=int-conversion" ./configure --prefix={OUTPUT} --with-internal-glib

            make
            make install
        """)
