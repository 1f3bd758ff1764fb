from __future__ import annotations

from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._shell import OUTPUT, shell


class Npth(Recipe):
    name = "npth"
    version = "1.8"
    platforms = DEFAULT_PLATFORMS

    def sources(self, params: None) -> list[ArtifactSource]:
        return [
            ArtifactSource(
                name=self.name,
                path=f"https://gnupg.org/ftp/gcrypt/npth/npth-{self.version}.tar.bz2",
            )
        ]

    def script(self, params: None, deps: dict[str, str]) -> str:
        return shell(f"""
            mkdir -pv {OUTPUT}

            pushd ./source/{self.name}/npth-{self.version}

            ./configure --prefix={OUTPUT}

            make
            make install
        """)
