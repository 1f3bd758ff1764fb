from __future__ import annotations

from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._shell import OUTPUT, link_flags, shell
from artifactforge.recipes.libevent import Libevent
from artifactforge.recipes.ncurses import Ncurses


class Tmux(Recipe):
    name = "tmux"
    version = "3.5a"
    platforms = DEFAULT_PLATFORMS
    dependencies = (Libevent, Ncurses)

    def sources(self, params: None) -> list[ArtifactSource]:
        return [
            ArtifactSource(
                name=self.name,
                path=(
                    f"https://github.com/tmux/tmux/releases/download/{self.version}/"
                    f"tmux-{self.version}.tar.gz"
                ),
            )
        ]

    def script(self, params: None, deps: dict[str, str]) -> str:
        libevent = deps["libevent"]
        ncurses = deps["ncurses"]
        return shell(f"""
            mkdir -pv {OUTPUT}

            pushd ./source/{self.name}/tmux-{self.version}

            export CPPFLAGS="-I{libevent}/include -I{ncurses}/include -I{ncurses}/include/ncursesw"
            export LDFLAGS="{link_flags(libevent, ncurses)}"

            ./configure --disable-utf8proc --prefix={OUTPUT}

            make
            make install
        """)
