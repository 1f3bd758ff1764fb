"""Build context threaded through every recipe build.

Holds the active platform tag and the registrar, and keeps an ordered
trace of what happened during the run. It is only ever touched by one
build step at a time.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from artifactforge.core.registrar import InMemoryRegistrar, Registrar, StoreRegistrar
from artifactforge.models.artifacts import ArtifactSpec, DependencyHandle
from artifactforge.models.platforms import Platform, detect_host_platform, parse_platform
from artifactforge.models.reports import BuildEvent, BuildEventKind

if TYPE_CHECKING:
    from artifactforge.config import ForgeConfig

logger = logging.getLogger(__name__)


class BuildContext:
    """Shared, single-threaded state for one run.

    Parameters
    ----------
    platform:
        Active platform tag. Strings that are not members of the closed
        set are kept as-is so recipes can reject them at dispatch.
    registrar:
        The registrar specs are submitted to. Defaults to an in-memory one.
    """

    def __init__(
        self,
        platform: Platform | str,
        registrar: Registrar | None = None,
    ) -> None:
        try:
            self._platform: Platform | str = Platform(platform)
        except ValueError:
            self._platform = platform
        self.registrar: Registrar = registrar if registrar is not None else InMemoryRegistrar()
        self.events: list[BuildEvent] = []

    @classmethod
    def from_config(cls, config: ForgeConfig) -> BuildContext:
        """Build a context from settings (platform override, persistence)."""
        if config.system:
            platform: Platform | str = (
                parse_platform(config.system) if config.strict_platforms else config.system
            )
        else:
            platform = detect_host_platform()

        registrar: Registrar
        if config.persist_specs:
            registrar = StoreRegistrar(config.store_path)
        else:
            registrar = InMemoryRegistrar()
        return cls(platform, registrar)

    # ------------------------------------------------------------------
    # Engine boundary
    # ------------------------------------------------------------------

    def get_active_platform(self) -> Platform | str:
        return self._platform

    @property
    def platform_tag(self) -> str:
        return getattr(self._platform, "value", str(self._platform))

    def submit(self, spec: ArtifactSpec) -> DependencyHandle:
        """Submit a spec to the registrar and record the event."""
        is_cached = getattr(self.registrar, "is_cached", None)
        cached = bool(is_cached(spec)) if is_cached is not None else False
        handle = self.registrar.submit(spec)
        self.record(
            BuildEventKind.CACHE_HIT if cached else BuildEventKind.SUBMIT,
            spec.name,
            detail=handle.digest,
        )
        return handle

    def resolve_handle_to_reference(self, handle: DependencyHandle) -> str:
        return self.registrar.reference(handle)

    # ------------------------------------------------------------------
    # Trace
    # ------------------------------------------------------------------

    def record(
        self,
        kind: BuildEventKind,
        artifact: str,
        *,
        parent: str | None = None,
        detail: str = "",
    ) -> BuildEvent:
        event = BuildEvent(kind=kind, artifact=artifact, parent=parent, detail=detail)
        self.events.append(event)
        return event

    def events_of(self, kind: BuildEventKind) -> list[BuildEvent]:
        return [e for e in self.events if e.kind == kind]

    def submitted_names(self) -> list[str]:
        """Artifact names in submission order, cache hits included."""
        return [
            e.artifact
            for e in self.events
            if e.kind in (BuildEventKind.SUBMIT, BuildEventKind.CACHE_HIT)
        ]
