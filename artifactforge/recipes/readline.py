from __future__ import annotations

from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._shell import OUTPUT, link_flags, shell
from artifactforge.recipes.ncurses import Ncurses


class Readline(Recipe):
    name = "readline"
    version = "8.2"
    platforms = DEFAULT_PLATFORMS
    dependencies = (Ncurses,)

    def sources(self, params: None) -> list[ArtifactSource]:
        return [
            ArtifactSource(
                name=self.name,
                path=f"https://ftpmirror.gnu.org/readline/readline-{self.version}.tar.gz",
            )
        ]

    def script(self, params: None, deps: dict[str, str]) -> str:
        ncurses = deps["ncurses"]
        return shell(f"""
            mkdir -pv {OUTPUT}

            pushd ./source/{self.name}/{self.name}-{self.version}

            export CPPFLAGS="-I{ncurses}/include -I{ncurses}/include/ncursesw"
            export LDFLAGS="{link_flags(ncurses)}"

            ./configure \\
                --prefix={OUTPUT} \\
                --with-curses

            make
            make install
        """)
