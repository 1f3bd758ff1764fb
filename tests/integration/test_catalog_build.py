"""End-to-end integration tests: the default build through the orchestrator.

These tests exercise the recipe catalog, DependencyGraph, Orchestrator,
BuildContext, and registrars working together.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from artifactforge.core.context import BuildContext
from artifactforge.core.orchestrator import Orchestrator
from artifactforge.core.registrar import InMemoryRegistrar, StoreRegistrar
from artifactforge.models.platforms import DEFAULT_PLATFORMS, Platform
from artifactforge.models.reports import BuildEventKind
from artifactforge.recipes import CATALOG, DEFAULT_BUILD


class TestDefaultBuild:
    """The default build on every platform: one submission per artifact."""

    @pytest.mark.parametrize("platform", DEFAULT_PLATFORMS, ids=lambda p: p.value)
    def test_default_build_on_every_platform(self, platform: Platform):
        registrar = InMemoryRegistrar()
        context = BuildContext(platform, registrar)
        summary = Orchestrator(context=context).run()

        assert set(summary.names) == {r.name for r in DEFAULT_BUILD}
        assert summary.submissions == len(DEFAULT_BUILD)
        assert summary.registered == len(DEFAULT_BUILD)
        assert context.events_of(BuildEventKind.OWN_BUILD) == []

    def test_orchestrated_and_standalone_builds_agree(self):
        """Injected handles produce the same spec as building on demand."""
        orchestrated = Orchestrator(context=BuildContext(Platform.X86_64_LINUX)).build_all()

        standalone_context = BuildContext(Platform.X86_64_LINUX)
        gpg = CATALOG["gpg"]().build(standalone_context)

        assert gpg == orchestrated["gpg"]

    def test_platforms_produce_distinct_binaries(self):
        linux = Orchestrator(context=BuildContext(Platform.X86_64_LINUX)).build_all(["jq"])
        darwin = Orchestrator(context=BuildContext(Platform.X86_64_DARWIN)).build_all(["jq"])
        assert linux["jq"] != darwin["jq"]


class TestDarwinSelection:
    def test_libwebsockets_closure_on_darwin(self):
        context = BuildContext(Platform.AARCH64_DARWIN)
        orch = Orchestrator(tuple(CATALOG.values()), context=context)
        summary = orch.run(["libwebsockets"])
        assert summary.names[-1] == "libwebsockets"
        assert set(summary.names) == {"cmake", "libuv", "mbedtls", "zlib", "libwebsockets"}
        assert summary.submissions == 5


class TestPersistentStore:
    def test_second_run_reuses_store(self, tmp_path: Path):
        store_path = tmp_path / "specs"

        first = StoreRegistrar(store_path)
        Orchestrator(context=BuildContext(Platform.AARCH64_LINUX, first)).run()
        stored = first.store.addresses()
        assert len(stored) == len(DEFAULT_BUILD)

        second = StoreRegistrar(store_path)
        summary = Orchestrator(context=BuildContext(Platform.AARCH64_LINUX, second)).run()
        assert second.store.addresses() == stored
        assert sorted(e.digest for e in summary.entries) == stored
