from __future__ import annotations

from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._shell import OUTPUT, link_flags, shell
from artifactforge.recipes.ncurses import Ncurses


class Zsh(Recipe):
    name = "zsh"
    version = "5.9"
    platforms = DEFAULT_PLATFORMS
    dependencies = (Ncurses,)

    def sources(self, params: None) -> list[ArtifactSource]:
        return [
            ArtifactSource(
                name=self.name,
                path=(
                    "https://downloads.sourceforge.net/project/zsh/zsh/"
                    f"{self.version}/zsh-{self.version}.tar.xz"
                ),
            )
        ]

    def script(self, params: None, deps: dict[str, str]) -> str:
        ncurses = deps["ncurses"]
        return shell(f"""
            mkdir -pv {OUTPUT}

            pushd ./source/{self.name}/zsh-{self.version}

            export CFLAGS="-Wno-incompatible-pointer-types"
            export CPPFLAGS="-I{ncurses}/include -I{ncurses}/include/ncursesw"
            export LDFLAGS="{link_flags(ncurses)}"

            ./configure --prefix={OUTPUT}

            make
            make install
        """)
