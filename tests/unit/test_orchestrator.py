"""Tests for the Orchestrator: planning, shared handles, fail-fast."""

from __future__ import annotations

import pytest

from artifactforge.config import ForgeConfig
from artifactforge.config import config as default_config
from artifactforge.core.context import BuildContext
from artifactforge.core.dependency_graph import CyclicDependencyError, MissingDependencyError
from artifactforge.core.errors import UnsupportedPlatformError
from artifactforge.core.orchestrator import Orchestrator
from artifactforge.models.platforms import DARWIN_PLATFORMS, Platform
from artifactforge.models.reports import BuildEventKind
from artifactforge.recipes import DEFAULT_BUILD


@pytest.fixture
def diamond(make_recipe):
    """base <- left, base <- right, (left, right) <- top."""
    base = make_recipe("base")
    left = make_recipe("left", base)
    right = make_recipe("right", base)
    top = make_recipe("top", left, right)
    return base, left, right, top


class TestPlanning:
    def test_plan_is_dependency_order(self, diamond, context):
        base, left, right, top = diamond
        orch = Orchestrator([top, right, left, base], context=context)
        plan = orch.plan()
        assert plan[0] == "base"
        assert plan[-1] == "top"

    def test_plan_only(self, diamond, context):
        orch = Orchestrator(list(diamond), context=context)
        assert orch.plan(["left"]) == ["base", "left"]

    def test_invalid_graph_rejected_before_building(self, make_recipe, context, registrar):
        base = make_recipe("base")
        app = make_recipe("app", base)
        with pytest.raises(MissingDependencyError):
            Orchestrator([app], context=context)
        assert registrar.submissions == []

    def test_cycle_rejected_before_building(self, make_recipe, context, registrar):
        first = make_recipe("first")
        second = make_recipe("second", first)
        first.dependencies = (second,)
        with pytest.raises(CyclicDependencyError):
            Orchestrator([first, second], context=context)
        assert registrar.submissions == []

    def test_defaults_to_catalog_build(self, context):
        orch = Orchestrator(context=context)
        assert len(orch.graph) == len(DEFAULT_BUILD)

    def test_context_from_config(self, make_recipe):
        orch = Orchestrator([make_recipe("a")], config=ForgeConfig(system="aarch64-linux"))
        assert orch.context.get_active_platform() is Platform.AARCH64_LINUX

    def test_module_settings_used_by_default(self, context):
        assert Orchestrator(context=context).config is default_config


class TestBuildAll:
    def test_each_artifact_submitted_once(self, diamond, context, registrar):
        orch = Orchestrator(list(diamond), context=context)
        built = orch.build_all()
        assert list(built) == ["base", "left", "right", "top"]
        for name in built:
            assert registrar.submission_count(name) == 1

    def test_every_dependency_is_injected(self, diamond, context):
        Orchestrator(list(diamond), context=context).build_all()
        assert context.events_of(BuildEventKind.OWN_BUILD) == []
        injected = [(e.artifact, e.parent) for e in context.events_of(BuildEventKind.INJECTED)]
        assert injected == [
            ("base", "left"),
            ("base", "right"),
            ("left", "top"),
            ("right", "top"),
        ]

    def test_handles_are_shared(self, diamond, context, registrar):
        orch = Orchestrator(list(diamond), context=context)
        built = orch.build_all()
        top_spec = registrar.get_spec(built["top"])
        assert top_spec.dependency_refs == (built["left"], built["right"])
        assert orch.handles == built

    def test_only_builds_closure(self, diamond, context, registrar):
        orch = Orchestrator(list(diamond), context=context)
        built = orch.build_all(["right"])
        assert list(built) == ["base", "right"]
        assert [s.name for s in registrar.submissions] == ["base", "right"]

    def test_fail_fast(self, make_recipe, context, registrar):
        first = make_recipe("first")
        mac = make_recipe("mac", platforms=DARWIN_PLATFORMS)
        last = make_recipe("last")
        orch = Orchestrator([first, mac, last], context=context)
        with pytest.raises(UnsupportedPlatformError) as excinfo:
            orch.build_all()
        assert excinfo.value.artifact == "mac"
        assert [s.name for s in registrar.submissions] == ["first"]
        assert "last" not in orch.handles

    def test_blocked_by_lists_planned_dependents(self, make_recipe, context):
        mac = make_recipe("mac", platforms=DARWIN_PLATFORMS)
        tool = make_recipe("tool", mac)
        bundle = make_recipe("bundle", tool)
        other = make_recipe("other")
        orch = Orchestrator([mac, other, tool, bundle], context=context)
        with pytest.raises(UnsupportedPlatformError):
            orch.build_all()
        assert orch.blocked_by("mac") == ["tool", "bundle"]
        assert orch.blocked_by("mac", ["tool"]) == ["tool"]
        assert orch.blocked_by("other") == []

    def test_same_result_on_every_run(self, diamond):
        first = Orchestrator(list(diamond), context=BuildContext(Platform.X86_64_LINUX)).build_all()
        second = Orchestrator(list(diamond), context=BuildContext(Platform.X86_64_LINUX)).build_all()
        assert first == second


class TestRun:
    def test_run_returns_summary(self, diamond, context):
        summary = Orchestrator(list(diamond), context=context).run()
        assert summary.names == ["base", "left", "right", "top"]
        assert summary.platform == "x86_64-linux"
        assert summary.submissions == 4
        assert summary.registered == 4

    def test_run_only(self, diamond, context):
        summary = Orchestrator(list(diamond), context=context).run(["left"])
        assert summary.names == ["base", "left"]
