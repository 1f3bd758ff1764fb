"""Registrars: the build engine's registration API, seen from the core.

The core only needs three operations from a registrar: accept a spec and
return a handle, turn a handle into a textual reference that can be
embedded in another spec's instructions, and run a set of handles.
Download, sandboxing, and execution stay on the engine's side.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

from artifactforge.core.errors import RegistrarError
from artifactforge.core.hasher import extract_digest
from artifactforge.core.spec_store import SpecIntegrityError, SpecStore
from artifactforge.models.artifacts import ArtifactSpec, DependencyHandle
from artifactforge.models.reports import RunEntry, RunSummary

logger = logging.getLogger(__name__)

REFERENCE_PREFIX = "$ARTIFACT_"


@runtime_checkable
class Registrar(Protocol):
    """What the core consumes from the external build engine."""

    def submit(self, spec: ArtifactSpec) -> DependencyHandle:
        """Register *spec*; identical specs must yield the same handle."""
        ...

    def reference(self, handle: DependencyHandle) -> str:
        """Return an opaque textual reference for a previously issued handle."""
        ...

    def run(self, handles: Iterable[DependencyHandle], platform: str) -> RunSummary:
        """Hand the final handle set to the engine's run phase."""
        ...


class InMemoryRegistrar:
    """Content-addressed registrar that keeps every spec in memory.

    Each distinct digest is registered at most once per registrar; a
    resubmission of an identical spec returns the existing handle.
    ``submissions`` records every accepted call in order, cache hits
    included; a spec rejected by validation or persistence is not counted.
    ``registered`` holds only the first registration of each digest.
    """

    def __init__(self) -> None:
        self._specs: dict[str, ArtifactSpec] = {}
        self._handles: dict[str, DependencyHandle] = {}
        self.submissions: list[ArtifactSpec] = []
        self.registered: list[DependencyHandle] = []

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def submit(self, spec: ArtifactSpec) -> DependencyHandle:
        address = spec.digest

        existing = self._handles.get(address)
        if existing is not None:
            logger.debug("Cache hit for %s (%s)", spec.name, address)
            self.submissions.append(spec)
            return existing

        for ref in spec.dependency_refs:
            if ref.digest not in self._handles:
                raise RegistrarError(
                    f"{spec.name} references unregistered dependency "
                    f"{ref.name} ({ref.digest})"
                )

        self._persist(spec)
        self.submissions.append(spec)
        handle = DependencyHandle(name=spec.name, digest=address)
        self._specs[address] = spec
        self._handles[address] = handle
        self.registered.append(handle)
        logger.info("Registered %s as %s", spec.name, address)
        return handle

    def _persist(self, spec: ArtifactSpec) -> None:
        """Hook for registrars that keep specs beyond the process."""

    def is_cached(self, spec: ArtifactSpec) -> bool:
        """Whether an identical spec has already been registered."""
        return spec.digest in self._handles

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def reference(self, handle: DependencyHandle) -> str:
        if handle.digest not in self._handles:
            raise RegistrarError(f"Unknown handle for {handle.name}: {handle.digest}")
        return f"{REFERENCE_PREFIX}{extract_digest(handle.digest)}"

    def get_spec(self, handle: DependencyHandle) -> ArtifactSpec:
        try:
            return self._specs[handle.digest]
        except KeyError:
            raise RegistrarError(
                f"Unknown handle for {handle.name}: {handle.digest}"
            ) from None

    def submission_count(self, name: str) -> int:
        """How many times a spec with *name* was submitted."""
        return sum(1 for s in self.submissions if s.name == name)

    # ------------------------------------------------------------------
    # Run phase
    # ------------------------------------------------------------------

    def run(self, handles: Iterable[DependencyHandle], platform: str) -> RunSummary:
        """Validate the handle set and summarise it in registration order.

        Execution itself belongs to the external engine.
        """
        requested = list(handles)
        for handle in requested:
            if handle.digest not in self._handles:
                raise RegistrarError(
                    f"Cannot run unknown handle for {handle.name}: {handle.digest}"
                )

        wanted = {h.digest for h in requested}
        entries = []
        for handle in self.registered:
            if handle.digest not in wanted:
                continue
            spec = self._specs[handle.digest]
            entries.append(
                RunEntry(
                    name=spec.name,
                    digest=handle.digest,
                    aliases=spec.aliases,
                    dependencies=tuple(r.name for r in spec.dependency_refs),
                )
            )

        logger.info(
            "Run phase: %d artifact(s), %d submission(s), %d registered",
            len(entries), len(self.submissions), len(self.registered),
        )
        return RunSummary(
            platform=platform,
            entries=tuple(entries),
            submissions=len(self.submissions),
            registered=len(self.registered),
        )


class StoreRegistrar(InMemoryRegistrar):
    """Registrar that also persists every registered spec to a ``SpecStore``.

    Parameters
    ----------
    store_path:
        Root directory of the on-disk spec store.
    """

    def __init__(self, store_path: Path) -> None:
        super().__init__()
        self.store = SpecStore(store_path)

    def _persist(self, spec: ArtifactSpec) -> None:
        try:
            address, created = self.store.store(spec)
        except (OSError, SpecIntegrityError) as exc:
            raise RegistrarError(f"could not persist {spec.name}: {exc}") from exc
        if not created:
            logger.debug("Spec %s already in store at %s", spec.name, address)
