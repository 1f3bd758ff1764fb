from __future__ import annotations

from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._shell import OUTPUT, shell


class Libevent(Recipe):
    name = "libevent"
    version = "2.1.12"
    platforms = DEFAULT_PLATFORMS

    def sources(self, params: None) -> list[ArtifactSource]:
        release = f"release-{self.version}-stable"
        return [
            ArtifactSource(
                name=self.name,
                path=(
                    "https://github.com/libevent/libevent/releases/download/"
                    f"{release}/libevent-{self.version}-stable.tar.gz"
                ),
            )
        ]

    def script(self, params: None, deps: dict[str, str]) -> str:
        return shell(f"""
            mkdir -pv {OUTPUT}

            pushd ./source/{self.name}/{self.name}-{self.version}-stable

            ./configure \\
                --disable-openssl \\
                --enable-shared \\
                --prefix={OUTPUT}

            make
            make install
        """)
