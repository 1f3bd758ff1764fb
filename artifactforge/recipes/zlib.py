from __future__ import annotations

from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._shell import OUTPUT, shell


class Zlib(Recipe):
    name = "zlib"
    version = "1.3.2"
    platforms = DEFAULT_PLATFORMS

    def sources(self, params: None) -> list[ArtifactSource]:
        return [ArtifactSource(name=self.name, path=f"https://zlib.net/zlib-{self.version}.tar.gz")]

    def script(self, params: None, deps: dict[str, str]) -> str:
        return shell(f"""
            mkdir -pv {OUTPUT}

            pushd ./source/{self.name}/{self.name}-{self.version}

            ./configure --static --prefix={OUTPUT}

            make -j$(nproc 2>/dev/null || sysctl -n hw.ncpu) install
        """)
