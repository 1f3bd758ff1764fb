"""Tests for registrars: content-addressed registration, references, run phase."""

from __future__ import annotations

from pathlib import Path

import pytest

from artifactforge.core.errors import RegistrarError
from artifactforge.core.registrar import (
    REFERENCE_PREFIX,
    InMemoryRegistrar,
    Registrar,
    StoreRegistrar,
)
from artifactforge.core.spec_store import SpecStore
from artifactforge.models.artifacts import ArtifactSpec, DependencyHandle
from artifactforge.models.platforms import DEFAULT_PLATFORMS


def _spec(name: str, instructions: str = "make", refs: tuple[DependencyHandle, ...] = ()) -> ArtifactSpec:
    return ArtifactSpec(
        name=name,
        aliases=(f"{name}:1.0",),
        platforms=DEFAULT_PLATFORMS,
        instructions=instructions,
        dependency_refs=refs,
    )


class TestInMemoryRegistrar:
    def test_satisfies_protocol(self, registrar):
        assert isinstance(registrar, Registrar)

    def test_submit_issues_content_addressed_handle(self, registrar):
        spec = _spec("zlib")
        handle = registrar.submit(spec)
        assert handle == DependencyHandle(name="zlib", digest=spec.digest)

    def test_identical_specs_register_once(self, registrar):
        first = registrar.submit(_spec("zlib"))
        second = registrar.submit(_spec("zlib"))
        assert first == second
        assert len(registrar.submissions) == 2
        assert registrar.registered == [first]
        assert registrar.submission_count("zlib") == 2

    def test_different_content_registers_separately(self, registrar):
        a = registrar.submit(_spec("zlib", "make"))
        b = registrar.submit(_spec("zlib", "make -j4"))
        assert a != b
        assert len(registrar.registered) == 2

    def test_is_cached(self, registrar):
        spec = _spec("zlib")
        assert not registrar.is_cached(spec)
        registrar.submit(spec)
        assert registrar.is_cached(spec)

    def test_unregistered_dependency_rejected(self, registrar):
        ghost = DependencyHandle(name="ghost", digest="sha256:" + "0" * 64)
        with pytest.raises(RegistrarError, match="ghost"):
            registrar.submit(_spec("app", refs=(ghost,)))
        assert registrar.registered == []
        assert registrar.submissions == []

    def test_rejected_submit_not_counted(self, registrar):
        ghost = DependencyHandle(name="ghost", digest="sha256:" + "0" * 64)
        with pytest.raises(RegistrarError):
            registrar.submit(_spec("app", refs=(ghost,)))
        zlib = registrar.submit(_spec("zlib"))
        registrar.submit(_spec("zlib"))
        assert registrar.submission_count("app") == 0
        assert registrar.registered == [zlib]
        assert registrar.run([zlib], "x86_64-linux").submissions == 2

    def test_registered_dependency_accepted(self, registrar):
        dep = registrar.submit(_spec("zlib"))
        app = registrar.submit(_spec("app", refs=(dep,)))
        assert registrar.get_spec(app).dependency_refs == (dep,)


class TestReference:
    def test_reference_format(self, registrar):
        handle = registrar.submit(_spec("jq"))
        ref = registrar.reference(handle)
        assert ref.startswith(REFERENCE_PREFIX)
        assert ref == f"$ARTIFACT_{handle.digest.removeprefix('sha256:')}"

    def test_reference_is_stable(self, registrar):
        handle = registrar.submit(_spec("jq"))
        assert registrar.reference(handle) == registrar.reference(handle)

    def test_unknown_handle_rejected(self, registrar):
        with pytest.raises(RegistrarError):
            registrar.reference(DependencyHandle(name="jq", digest="sha256:" + "1" * 64))

    def test_get_spec_unknown_handle(self, registrar):
        with pytest.raises(RegistrarError):
            registrar.get_spec(DependencyHandle(name="jq", digest="sha256:" + "1" * 64))


class TestRunPhase:
    def test_run_reports_in_registration_order(self, registrar):
        zlib = registrar.submit(_spec("zlib"))
        app = registrar.submit(_spec("app", refs=(zlib,)))
        summary = registrar.run([app, zlib], "x86_64-linux")
        assert summary.names == ["zlib", "app"]
        assert summary.platform == "x86_64-linux"
        assert summary.entries[1].dependencies == ("zlib",)
        assert summary.entries[0].aliases == ("zlib:1.0",)

    def test_run_only_requested_handles(self, registrar):
        registrar.submit(_spec("zlib"))
        jq = registrar.submit(_spec("jq"))
        assert registrar.run([jq], "x86_64-linux").names == ["jq"]

    def test_run_counts(self, registrar):
        handle = registrar.submit(_spec("zlib"))
        registrar.submit(_spec("zlib"))
        summary = registrar.run([handle], "x86_64-linux")
        assert summary.submissions == 2
        assert summary.registered == 1

    def test_run_unknown_handle_rejected(self, registrar):
        with pytest.raises(RegistrarError):
            registrar.run(
                [DependencyHandle(name="x", digest="sha256:" + "2" * 64)], "x86_64-linux"
            )


class TestStoreRegistrar:
    def test_persists_registered_specs(self, store_registrar, tmp_path: Path):
        handle = store_registrar.submit(_spec("zlib"))
        store = SpecStore(tmp_path / "specs")
        assert store.addresses() == [handle.digest]
        assert store.retrieve(handle.digest).name == "zlib"

    def test_specs_outlive_the_registrar(self, tmp_path: Path):
        first = StoreRegistrar(tmp_path / "specs")
        handle = first.submit(_spec("zlib"))
        second = StoreRegistrar(tmp_path / "specs")
        again = second.submit(_spec("zlib"))
        assert again == handle
        assert second.store.addresses() == [handle.digest]

    def test_corrupted_store_becomes_registrar_error(self, tmp_path: Path):
        spec = _spec("zlib")
        store = SpecStore(tmp_path / "specs")
        store.store(spec)
        digest = spec.digest.removeprefix("sha256:")
        path = tmp_path / "specs" / digest[:2] / digest[2:4] / f"{digest}.json"
        path.write_text("{not json")

        registrar = StoreRegistrar(tmp_path / "specs")
        with pytest.raises(RegistrarError, match="could not persist"):
            registrar.submit(spec)
        assert registrar.registered == []
        assert registrar.submissions == []

    def test_is_an_in_memory_registrar(self, store_registrar):
        assert isinstance(store_registrar, InMemoryRegistrar)
