from __future__ import annotations

from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._shell import OUTPUT, include_flags, link_flags, shell
from artifactforge.recipes.libgpg_error import LibgpgError


class Libksba(Recipe):
    name = "libksba"
    version = "1.6.7"
    platforms = DEFAULT_PLATFORMS
    dependencies = (LibgpgError,)

    def sources(self, params: None) -> list[ArtifactSource]:
        return [
            ArtifactSource(
                name=self.name,
                path=f"https://gnupg.org/ftp/gcrypt/libksba/libksba-{self.version}.tar.bz2",
            )
        ]

    def script(self, params: None, deps: dict[str, str]) -> str:
        libgpg_error = deps["libgpg_error"]
        return shell(f"""
            mkdir -pv {OUTPUT}

            pushd ./source/{self.name}/libksba-{self.version}

            export PATH="{libgpg_error}/bin:$PATH"
            export CPPFLAGS="{include_flags(libgpg_error)}"
            export LDFLAGS="{link_flags(libgpg_error)}"

            ./configure --prefix={OUTPUT} --with-libgpg-error-prefix={libgpg_error}

            make
            make install
        """)
