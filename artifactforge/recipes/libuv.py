"""libuv: static build, macOS only."""

from __future__ import annotations

from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DARWIN_PLATFORMS
from artifactforge.recipes._shell import OUTPUT, shell
from artifactforge.recipes.cmake import Cmake


class Libuv(Recipe):
    name = "libuv"
    version = "1.52.0"
    platforms = DARWIN_PLATFORMS
    dependencies = (Cmake,)

    def sources(self, params: None) -> list[ArtifactSource]:
        return [
            ArtifactSource(
                name=self.name,
                path=f"https://github.com/libuv/libuv/archive/refs/tags/v{self.version}.tar.gz",
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
                -DCMAKE_C_FLAGS="-fPIC" \\
                -DBUILD_TESTING=OFF \\
                -DLIBUV_BUILD_SHARED=OFF \\
                "$(pwd)/../source/{self.name}/{self.name}-{self.version}"

            make -j$(sysctl -n hw.ncpu) install

            popd
        """)
