"""GnuPG: the largest fan-in in the catalog (five libraries)."""

from __future__ import annotations

from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._shell import OUTPUT, include_flags, link_flags, shell
from artifactforge.recipes.libassuan import Libassuan
from artifactforge.recipes.libgcrypt import Libgcrypt
from artifactforge.recipes.libgpg_error import LibgpgError
from artifactforge.recipes.libksba import Libksba
from artifactforge.recipes.npth import Npth


class Gpg(Recipe):
    name = "gpg"
    version = "2.5.16"
    platforms = DEFAULT_PLATFORMS
    dependencies = (Libassuan, Libgcrypt, LibgpgError, Libksba, Npth)

    def sources(self, params: None) -> list[ArtifactSource]:
        return [
            ArtifactSource(
                name=self.name,
                path=f"https://gnupg.org/ftp/gcrypt/gnupg/gnupg-{self.version}.tar.bz2",
            )
        ]

    def script(self, params: None, deps: dict[str, str]) -> str:
        libassuan = deps["libassuan"]
        libgcrypt = deps["libgcrypt"]
        libgpg_error = deps["libgpg_error"]
        libksba = deps["libksba"]
        npth = deps["npth"]

        # libgpg-error first: every other library's configure script checks for it
        prefixes = [libgpg_error, npth, libgcrypt, libassuan, libksba]
        path = ":".join(f"{p}/bin" for p in prefixes)
        pkg_config_path = ":".join(f"{p}/lib/pkgconfig" for p in prefixes)
        return shell(f"""
            mkdir -pv {OUTPUT}

            pushd ./source/{self.name}/gnupg-{self.version}

            export PATH="{path}:$PATH"
            export PKG_CONFIG_PATH="{pkg_config_path}"
            export CPPFLAGS="{include_flags(*prefixes)}"
            export LDFLAGS="{link_flags(*prefixes)}"

            ./configure \\
                --prefix={OUTPUT} \\
                --with-libgpg-error-prefix={libgpg_error} \\
                --with-npth-prefix={npth} \\
                --with-libgcrypt-prefix={libgcrypt} \\
                --with-libassuan-prefix={libassuan} \\
                --with-ksba-prefix={libksba} \\
                --disable-doc

            make
            make install
        """)
