"""Build trace and run summary models."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class BuildEventKind(str, Enum):
    """What happened at one point of a build."""

    DISPATCH = "dispatch"
    INJECTED = "injected"
    OWN_BUILD = "own_build"
    SUBMIT = "submit"
    CACHE_HIT = "cache_hit"


class BuildEvent(BaseModel):
    """One entry in a build context's trace."""

    model_config = ConfigDict(frozen=True)

    kind: BuildEventKind
    artifact: str
    parent: str | None = None  # the artifact whose build triggered this event
    detail: str = ""


class RunEntry(BaseModel):
    """A registered artifact as reported by the run phase."""

    model_config = ConfigDict(frozen=True)

    name: str
    digest: str
    aliases: tuple[str, ...] = ()
    dependencies: tuple[str, ...] = ()


class RunSummary(BaseModel):
    """What a registrar reports when the run phase is handed a handle set."""

    model_config = ConfigDict(frozen=True)

    platform: str
    entries: tuple[RunEntry, ...] = ()
    submissions: int = 0
    registered: int = 0
    finished_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def names(self) -> list[str]:
        return [e.name for e in self.entries]
