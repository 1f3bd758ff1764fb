from __future__ import annotations

from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._shell import OUTPUT, shell


class Ncurses(Recipe):
    name = "ncurses"
    version = "6.5"
    platforms = DEFAULT_PLATFORMS

    def sources(self, params: None) -> list[ArtifactSource]:
        return [
            ArtifactSource(
                name=self.name,
                path=f"https://invisible-island.net/archives/ncurses/ncurses-{self.version}.tar.gz",
            )
        ]

    def script(self, params: None, deps: dict[str, str]) -> str:
        return shell(f"""
            mkdir -pv {OUTPUT}

            pushd ./source/{self.name}/{self.name}-{self.version}

            ./configure \\
                --enable-pc-files \\
                --prefix={OUTPUT} \\
                --with-pkg-config-libdir="$BUILD_OUTPUT/lib/pkgconfig" \\
                --with-shared \\
                --with-termlib

            make
            make install
        """)
