from __future__ import annotations

from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DARWIN_PLATFORMS
from artifactforge.recipes._shell import OUTPUT, shell
from artifactforge.recipes.cmake import Cmake


class Mbedtls(Recipe):
    name = "mbedtls"
    version = "3.6.5"
    platforms = DARWIN_PLATFORMS
    dependencies = (Cmake,)

    def sources(self, params: None) -> list[ArtifactSource]:
        return [
            ArtifactSource(
                name=self.name,
                path=(
                    "https://github.com/Mbed-TLS/mbedtls/releases/download/"
                    f"mbedtls-{self.version}/mbedtls-{self.version}.tar.bz2"
                ),
            )
        ]

    def script(self, params: None, deps: dict[str, str]) -> str:
        cmake = deps["cmake"]
        return shell(f"""
            mkdir -pv {OUTPUT}

            BUILD_DIR="$(pwd)/build"
            mkdir -p "$BUILD_DIR"
            pushd "$BUILD_DIR"

            {cmake}/bin/cmake \\
                -DCMAKE_BUILD_TYPE=RELEASE \\
                -DCMAKE_INSTALL_PREFIX={OUTPUT} \\
                -DENABLE_TESTING=OFF \\
                -DUSE_SHARED_MBEDTLS_LIBRARY=OFF \\
                "$(pwd)/../source/{self.name}/mbedtls-{self.version}"

            make -j$(sysctl -n hw.ncpu) install

            popd
        """)
