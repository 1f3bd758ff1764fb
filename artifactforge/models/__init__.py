"""artifactforge data models: all Pydantic v2, all frozen (immutable)."""

from artifactforge.models.artifacts import ArtifactSource, ArtifactSpec, DependencyHandle
from artifactforge.models.platforms import (
    DARWIN_PLATFORMS,
    DEFAULT_PLATFORMS,
    Platform,
    UnknownPlatformTagError,
    detect_host_platform,
    parse_platform,
)
from artifactforge.models.reports import BuildEvent, BuildEventKind, RunEntry, RunSummary

__all__ = [
    # platforms
    "Platform",
    "DEFAULT_PLATFORMS",
    "DARWIN_PLATFORMS",
    "UnknownPlatformTagError",
    "parse_platform",
    "detect_host_platform",
    # artifacts
    "ArtifactSource",
    "ArtifactSpec",
    "DependencyHandle",
    # reports
    "BuildEvent",
    "BuildEventKind",
    "RunEntry",
    "RunSummary",
]
