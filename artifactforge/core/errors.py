"""Error taxonomy for recipe builds.

Every build failure names the artifact that failed and the stage it failed
at, and keeps the chain of causes so the innermost one can be reported:

- ``dispatch``   : the active platform has no branch for the artifact
- ``dependency`` : a recursively resolved dependency failed
- ``submit``     : the registrar rejected the spec
"""

from __future__ import annotations

from typing import Any


class ArtifactBuildError(RuntimeError):
    """Base class for failures of a recipe's terminal build step."""

    stage: str = "build"

    def __init__(self, artifact: str, message: str) -> None:
        super().__init__(message)
        self.artifact = artifact

    @property
    def root_cause(self) -> BaseException:
        """Walk the cause chain and return the innermost exception."""
        exc: BaseException = self
        while isinstance(exc, DependencyResolutionError):
            exc = exc.cause
        return exc

    def describe(self) -> dict[str, Any]:
        """Artifact, stage, and innermost cause, for display."""
        root = self.root_cause
        failed = getattr(root, "artifact", self.artifact)
        return {
            "artifact": self.artifact,
            "stage": self.stage,
            "failed_artifact": failed,
            "failed_stage": getattr(root, "stage", "unknown"),
            "cause": str(root),
        }


class UnsupportedPlatformError(ArtifactBuildError):
    """The active platform has no defined behavior for this artifact.

    Fatal for this artifact only; says nothing about other artifacts.
    """

    stage = "dispatch"

    def __init__(self, artifact: str, platform: Any) -> None:
        tag = getattr(platform, "value", platform)
        super().__init__(
            artifact, f"Unsupported platform {tag!r} for artifact {artifact!r}"
        )
        self.platform = tag


class DependencyResolutionError(ArtifactBuildError):
    """A dependency resolved on the artifact's behalf failed to build."""

    stage = "dependency"

    def __init__(self, artifact: str, dependency: str, cause: BaseException) -> None:
        super().__init__(
            artifact,
            f"Artifact {artifact!r} could not resolve dependency {dependency!r}: {cause}",
        )
        self.dependency = dependency
        self.cause = cause


class EngineError(ArtifactBuildError):
    """The registrar failed while accepting the artifact's spec."""

    stage = "submit"

    def __init__(self, artifact: str, message: str) -> None:
        super().__init__(artifact, f"Registrar failed for artifact {artifact!r}: {message}")


class RegistrarError(RuntimeError):
    """Raised by registrar implementations; surfaced to recipes as ``EngineError``."""


class BuilderConsumedError(RuntimeError):
    """Raised when a recipe builder is used after its terminal build step."""


class UnknownSlotError(KeyError):
    """Raised when injecting a handle for a dependency the recipe does not declare."""


class RecipeDefinitionError(TypeError):
    """Raised when a recipe class is declared inconsistently."""

    def __init__(self, message: str, artifact: str | None = None) -> None:
        super().__init__(message)
        self.artifact = artifact
