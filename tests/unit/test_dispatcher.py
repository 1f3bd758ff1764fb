"""Tests for PlatformDispatcher: explicit per-platform selection."""

from __future__ import annotations

import pytest

from artifactforge.core.dispatcher import UNSUPPORTED, PlatformDispatcher
from artifactforge.core.errors import UnsupportedPlatformError
from artifactforge.models.platforms import DARWIN_PLATFORMS, DEFAULT_PLATFORMS, Platform


def _four_way() -> PlatformDispatcher[str]:
    return PlatformDispatcher(
        aarch64_darwin="macos-arm64",
        aarch64_linux="linux-arm64",
        x86_64_darwin="macos-amd64",
        x86_64_linux="linux-amd64",
    )


class TestConstruction:
    def test_all_four_tags_required(self):
        with pytest.raises(TypeError):
            PlatformDispatcher(aarch64_darwin="a", aarch64_linux="b", x86_64_darwin="c")

    def test_all_unsupported_rejected(self):
        with pytest.raises(ValueError):
            PlatformDispatcher(
                aarch64_darwin=UNSUPPORTED,
                aarch64_linux=UNSUPPORTED,
                x86_64_darwin=UNSUPPORTED,
                x86_64_linux=UNSUPPORTED,
            )

    def test_supported_lists_tags_in_canonical_order(self):
        table = PlatformDispatcher(
            aarch64_darwin="a",
            aarch64_linux=UNSUPPORTED,
            x86_64_darwin="c",
            x86_64_linux=UNSUPPORTED,
        )
        assert table.supported == DARWIN_PLATFORMS

    def test_unsupported_is_a_singleton(self):
        assert repr(UNSUPPORTED) == "UNSUPPORTED"
        assert type(UNSUPPORTED)() is UNSUPPORTED


class TestDispatch:
    @pytest.mark.parametrize(
        ("platform", "expected"),
        [
            (Platform.AARCH64_DARWIN, "macos-arm64"),
            (Platform.AARCH64_LINUX, "linux-arm64"),
            (Platform.X86_64_DARWIN, "macos-amd64"),
            (Platform.X86_64_LINUX, "linux-amd64"),
        ],
    )
    def test_selects_bundle_per_tag(self, platform, expected):
        assert _four_way().dispatch("jq", platform) == expected

    def test_accepts_plain_string_tag(self):
        assert _four_way().dispatch("jq", "x86_64-linux") == "linux-amd64"

    def test_unknown_tag_rejected(self):
        with pytest.raises(UnsupportedPlatformError) as excinfo:
            _four_way().dispatch("jq", "riscv64-linux")
        assert excinfo.value.artifact == "jq"
        assert excinfo.value.platform == "riscv64-linux"
        assert excinfo.value.stage == "dispatch"

    def test_unsupported_tag_rejected(self):
        table = PlatformDispatcher.uniform(DARWIN_PLATFORMS, "darwin")
        with pytest.raises(UnsupportedPlatformError, match="aarch64-linux"):
            table.dispatch("libuv", Platform.AARCH64_LINUX)

    def test_error_message_names_artifact_and_tag(self):
        table = PlatformDispatcher.uniform(DARWIN_PLATFORMS, None)
        with pytest.raises(UnsupportedPlatformError) as excinfo:
            table.dispatch("mbedtls", Platform.X86_64_LINUX)
        assert "mbedtls" in str(excinfo.value)
        assert "x86_64-linux" in str(excinfo.value)


class TestHelpers:
    def test_collapse_darwin_shares_bundle(self):
        table = PlatformDispatcher.collapse_darwin(
            darwin="universal", aarch64_linux="arm", x86_64_linux="x64"
        )
        assert table.dispatch("cmake", Platform.AARCH64_DARWIN) == "universal"
        assert table.dispatch("cmake", Platform.X86_64_DARWIN) == "universal"
        assert table.dispatch("cmake", Platform.AARCH64_LINUX) == "arm"

    def test_uniform_all_platforms(self):
        table = PlatformDispatcher.uniform(DEFAULT_PLATFORMS, 7)
        assert table.supported == DEFAULT_PLATFORMS
        assert {table.dispatch("x", p) for p in DEFAULT_PLATFORMS} == {7}

    def test_uniform_none_value_is_supported(self):
        """``None`` is a valid bundle, distinct from UNSUPPORTED."""
        table = PlatformDispatcher.uniform([Platform.X86_64_LINUX], None)
        assert table.supported == (Platform.X86_64_LINUX,)
        assert table.dispatch("zlib", Platform.X86_64_LINUX) is None
