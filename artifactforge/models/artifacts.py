"""Artifact declaration models (immutable once constructed)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from artifactforge.core.hasher import content_address
from artifactforge.models.platforms import DEFAULT_PLATFORMS, Platform


class ArtifactSource(BaseModel):
    """A source descriptor handed to the build engine.

    The core never downloads or inspects sources; ``digest`` is the
    expected content reference when the recipe pins one.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    digest: str | None = None
    includes: tuple[str, ...] = ()
    excludes: tuple[str, ...] = ()


class DependencyHandle(BaseModel):
    """Opaque, content-addressed reference to a registered artifact.

    Handles are only ever issued by a registrar. ``str(handle)`` is the
    digest, which is what other specs record as a dependency reference.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    digest: str  # "sha256:<hex>"

    def __str__(self) -> str:
        return self.digest


class ArtifactSpec(BaseModel):
    """Immutable description of one buildable unit for one platform.

    Platform dispatch has already happened by the time a spec exists:
    ``instructions`` is the procedure for the active platform only.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    aliases: tuple[str, ...] = ()
    platforms: tuple[Platform, ...]
    sources: tuple[ArtifactSource, ...] = ()
    instructions: str
    environments: tuple[str, ...] = ()
    dependency_refs: tuple[DependencyHandle, ...] = ()
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("artifact name must not be blank")
        return value

    @field_validator("platforms")
    @classmethod
    def _platforms_explicit(cls, value: tuple[Platform, ...]) -> tuple[Platform, ...]:
        if not value:
            raise ValueError("an artifact must declare at least one platform")
        if len(set(value)) != len(value):
            raise ValueError(f"duplicate platforms declared: {[p.value for p in value]}")
        return tuple(p for p in DEFAULT_PLATFORMS if p in value)

    def identity(self) -> dict[str, Any]:
        """Return the fields that define this artifact's content identity.

        Aliases and metadata are lookup conveniences and do not take part.
        """
        return {
            "name": self.name,
            "platforms": [p.value for p in self.platforms],
            "sources": [s.model_dump(mode="json") for s in self.sources],
            "instructions": self.instructions,
            "environments": list(self.environments),
            "dependency_refs": [h.digest for h in self.dependency_refs],
        }

    @property
    def digest(self) -> str:
        """Content address of this spec: ``sha256:<hex>``."""
        return content_address(self.identity())

    def same_artifact(self, other: ArtifactSpec) -> bool:
        """True when both specs describe the same logical artifact."""
        return self.digest == other.digest
