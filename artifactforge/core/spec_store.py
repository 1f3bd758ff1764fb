"""Content-addressed, immutable store for registered artifact specs.

Storage layout: {base_path}/{sha256[0:2]}/{sha256[2:4]}/{sha256}.json
No delete method; a spec is immutable once stored.
"""

from __future__ import annotations

import json
from pathlib import Path

from artifactforge.core.hasher import canonical_json_bytes, content_address, extract_digest
from artifactforge.models.artifacts import ArtifactSpec


class SpecIntegrityError(RuntimeError):
    """Raised when a stored spec no longer matches its content address."""


class SpecStore:
    """SHA-256 keyed spec store that outlives a single run.

    Storing the same spec twice is a no-op (idempotent). There is no
    update or delete.

    Parameters
    ----------
    base_path:
        Root directory for spec storage.
    """

    def __init__(self, base_path: Path) -> None:
        self._base = Path(base_path)
        self._base.mkdir(parents=True, exist_ok=True)

    @property
    def base_path(self) -> Path:
        return self._base

    def _spec_path(self, digest: str) -> Path:
        return self._base / digest[:2] / digest[2:4] / f"{digest}.json"

    # ------------------------------------------------------------------
    # Store
    # ------------------------------------------------------------------

    def store(self, spec: ArtifactSpec) -> tuple[str, bool]:
        """Persist *spec* under its digest.

        Returns ``(address, created)``. If the address is already present,
        its integrity is verified and nothing is rewritten.
        """
        address = spec.digest
        digest = extract_digest(address)
        path = self._spec_path(digest)

        if path.exists():
            if not self.verify(address):
                raise SpecIntegrityError(
                    f"Stored spec at {address} failed integrity check"
                )
            return address, False

        record = {"identity": spec.identity(), "spec": spec.model_dump(mode="json")}
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(canonical_json_bytes(record))
        return address, True

    # ------------------------------------------------------------------
    # Retrieve and verify
    # ------------------------------------------------------------------

    def retrieve(self, address: str) -> ArtifactSpec:
        """Load a stored spec by content address (``sha256:<hex>`` or hex)."""
        path = self._spec_path(extract_digest(address))
        if not path.exists():
            raise FileNotFoundError(f"Spec not found: {address}")
        record = json.loads(path.read_bytes())
        return ArtifactSpec.model_validate(record["spec"])

    def verify(self, address: str) -> bool:
        """Re-hash the stored identity and compare it against the address."""
        digest = extract_digest(address)
        path = self._spec_path(digest)
        if not path.exists():
            return False
        try:
            record = json.loads(path.read_bytes())
        except ValueError:
            return False
        return content_address(record.get("identity")) == f"sha256:{digest}"

    def addresses(self) -> list[str]:
        """Every address currently in the store, sorted."""
        return sorted(f"sha256:{p.stem}" for p in self._base.glob("*/*/*.json"))
