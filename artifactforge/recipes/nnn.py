from __future__ import annotations

from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._shell import OUTPUT, link_flags, shell
from artifactforge.recipes.ncurses import Ncurses
from artifactforge.recipes.pkg_config import PkgConfig
from artifactforge.recipes.readline import Readline


class Nnn(Recipe):
    name = "nnn"
    version = "5.1"
    platforms = DEFAULT_PLATFORMS
    dependencies = (Ncurses, PkgConfig, Readline)

    def sources(self, params: None) -> list[ArtifactSource]:
        return [
            ArtifactSource(
                name=self.name,
                path=f"https://github.com/jarun/nnn/archive/refs/tags/v{self.version}.tar.gz",
            )
        ]

    def script(self, params: None, deps: dict[str, str]) -> str:
        ncurses = deps["ncurses"]
        pkg_config = deps["pkg_config"]
        readline = deps["readline"]
        return shell(f"""
            mkdir -pv {OUTPUT}

            pushd ./source/{self.name}/nnn-{self.version}

            export PATH="{pkg_config}/bin:$PATH"
            export CPPFLAGS="-I{ncurses}/include -I{ncurses}/include/ncursesw -I{readline}/include"
            export LDFLAGS="{link_flags(ncurses, readline)}"
            export PKG_CONFIG_PATH="{ncurses}/lib/pkgconfig:{readline}/lib/pkgconfig"

            make PREFIX={OUTPUT}
            make PREFIX={OUTPUT} install
        """)
