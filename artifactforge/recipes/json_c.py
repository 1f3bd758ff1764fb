"""json-c: static library build, macOS only."""

from __future__ import annotations

from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DARWIN_PLATFORMS
from artifactforge.recipes._shell import OUTPUT, shell
from artifactforge.recipes.cmake import Cmake


class JsonC(Recipe):
    name = "json-c"
    version = "0.18"
    platforms = DARWIN_PLATFORMS
    dependencies = (Cmake,)

    @property
    def tag(self) -> str:
        return f"json-c-{self.version}-20240915"

    def sources(self, params: None) -> list[ArtifactSource]:
        return [
            ArtifactSource(
                name=self.name,
                path=f"https://github.com/json-c/json-c/archive/refs/tags/{self.tag}.tar.gz",
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
                -DCMAKE_POLICY_VERSION_MINIMUM=3.5 \\
                -DBUILD_SHARED_LIBS=OFF \\
                -DBUILD_TESTING=OFF \\
                -DDISABLE_THREAD_LOCAL_STORAGE=ON \\
                "$(pwd)/../source/{self.name}/json-c-{self.tag}"

            make -j$(sysctl -n hw.ncpu) install

            popd
        """)
