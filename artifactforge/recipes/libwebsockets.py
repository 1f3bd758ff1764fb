"""libwebsockets: static, server-only build on libuv and mbedtls.

Inherits the macOS-only platform set of libuv and mbedtls.
"""

from __future__ import annotations

from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DARWIN_PLATFORMS
from artifactforge.recipes._shell import OUTPUT, shell
from artifactforge.recipes.cmake import Cmake
from artifactforge.recipes.libuv import Libuv
from artifactforge.recipes.mbedtls import Mbedtls
from artifactforge.recipes.zlib import Zlib

CMAKE_OPTIONS: tuple[str, ...] = (
    "-DLWS_WITHOUT_TESTAPPS=ON",
    "-DLWS_WITH_MBEDTLS=ON",
    "-DLWS_WITH_LIBUV=ON",
    "-DLWS_STATIC_PIC=ON",
    "-DLWS_WITH_SHARED=OFF",
    "-DLWS_UNIX_SOCK=ON",
    "-DLWS_IPV6=ON",
    "-DLWS_ROLE_RAW_FILE=OFF",
    "-DLWS_WITH_HTTP2=ON",
    "-DLWS_WITH_HTTP_BASIC_AUTH=OFF",
    "-DLWS_WITH_UDP=OFF",
    "-DLWS_WITHOUT_CLIENT=ON",
    "-DLWS_WITHOUT_EXTENSIONS=OFF",
    "-DLWS_WITH_LEJP=OFF",
    "-DLWS_WITH_LEJP_CONF=OFF",
    "-DLWS_WITH_LWSAC=OFF",
    "-DLWS_WITH_SEQUENCER=OFF",
    "-DLWS_WITH_SYS_FAULT_INJECTION=OFF",
    "-DLWS_WITH_SYS_METRICS=OFF",
    "-DLWS_WITH_DLO=OFF",
)


class Libwebsockets(Recipe):
    name = "libwebsockets"
    version = "4.5.2"
    # libuv and mbedtls are macOS-only, so this cannot build anywhere else
    platforms = DARWIN_PLATFORMS
    dependencies = (Cmake, Libuv, Mbedtls, Zlib)

    def sources(self, params: None) -> list[ArtifactSource]:
        return [
            ArtifactSource(
                name=self.name,
                path=(
                    "https://github.com/warmcat/libwebsockets/archive/refs/tags/"
                    f"v{self.version}.tar.gz"
                ),
            )
        ]

    def script(self, params: None, deps: dict[str, str]) -> str:
        cmake = deps["cmake"]
        prefix_path = ";".join([deps["zlib"], deps["libuv"], deps["mbedtls"]])
        options = " \\\n    ".join(CMAKE_OPTIONS)
        config_in = "$LWS_SRC/cmake/libwebsockets-config.cmake.in"
        # the exported cmake config must not reference the disabled shared target
        patch = (
            f"sed 's/ websockets_shared//g' \"{config_in}\" > \"{config_in}.tmp\"\n"
            f"mv \"{config_in}.tmp\" \"{config_in}\""
        )
        configure = (
            f"{cmake}/bin/cmake \\\n"
            "    -DCMAKE_BUILD_TYPE=RELEASE \\\n"
            f"    -DCMAKE_INSTALL_PREFIX={OUTPUT} \\\n"
            '    -DCMAKE_FIND_LIBRARY_SUFFIXES=".a" \\\n'
            f'    -DCMAKE_PREFIX_PATH="{prefix_path}" \\\n'
            f"    {options} \\\n"
            '    "$LWS_SRC"'
        )
        return "\n\n".join([
            f"mkdir -pv {OUTPUT}",
            f'LWS_SRC="$(pwd)/source/{self.name}/{self.name}-{self.version}"',
            patch,
            'BUILD_DIR="$(pwd)/build"\nmkdir -p "$BUILD_DIR"\npushd "$BUILD_DIR"',
            configure,
            "make -j$(nproc 2>/dev/null || sysctl -n hw.ncpu) install\n\npopd",
        ])
