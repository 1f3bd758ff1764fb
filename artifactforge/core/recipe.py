"""Recipe builders and the dependency resolution protocol.

A recipe describes one artifact to the registrar. Each declared dependency
occupies a slot that is either ``Injected`` with a handle the caller
already holds, or left as ``OwnBuild``, in which case the terminal build
step builds that dependency itself, autonomously, with nothing injected.

Builders are one-shot: ``with_dependency`` configures, ``build`` (or
``prepare``) finalises, and any use after that raises
``BuilderConsumedError``.

Example
-------
>>> ncurses = Ncurses().build(context)
>>> Tmux(ncurses=ncurses).build(context)   # libevent is built on demand
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Union

from pydantic import BaseModel, ConfigDict

from artifactforge.core.context import BuildContext
from artifactforge.core.dispatcher import PlatformDispatcher
from artifactforge.core.errors import (
    ArtifactBuildError,
    BuilderConsumedError,
    DependencyResolutionError,
    EngineError,
    RecipeDefinitionError,
    RegistrarError,
    UnknownSlotError,
    UnsupportedPlatformError,
)
from artifactforge.models.artifacts import ArtifactSource, ArtifactSpec, DependencyHandle
from artifactforge.models.platforms import DEFAULT_PLATFORMS, Platform
from artifactforge.models.reports import BuildEventKind

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Dependency slots
# ---------------------------------------------------------------------------


class Injected(BaseModel):
    """Slot filled by the caller with an already-registered handle."""

    model_config = ConfigDict(frozen=True)

    handle: DependencyHandle


class OwnBuild(BaseModel):
    """Slot the recipe fills itself by building the dependency."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    recipe: Any  # type[Recipe]


DependencySlot = Union[Injected, OwnBuild]


def slot_key(name: str) -> str:
    """Slot key for a dependency name: ``libgpg-error`` -> ``libgpg_error``."""
    return name.replace("-", "_")


def resolve_slot(owner: str, slot: DependencySlot, context: BuildContext) -> DependencyHandle:
    """Turn one slot into a handle.

    Injected handles are returned verbatim. Otherwise the dependency's
    recipe is constructed with nothing injected and built synchronously;
    any failure is wrapped with the owning artifact's name.
    """
    if isinstance(slot, Injected):
        context.record(
            BuildEventKind.INJECTED, slot.handle.name, parent=owner, detail=slot.handle.digest
        )
        return slot.handle

    dependency = slot.recipe
    context.record(BuildEventKind.OWN_BUILD, dependency.name, parent=owner)
    logger.debug("%s builds its own %s", owner, dependency.name)
    try:
        return dependency().build(context)
    except ArtifactBuildError as exc:
        raise DependencyResolutionError(owner, dependency.name, exc) from exc


# ---------------------------------------------------------------------------
# Recipe base class
# ---------------------------------------------------------------------------


class Recipe:
    """Base class for every artifact recipe.

    Subclasses declare, in their own class body:

    name:
        Stable identifier, unique within a run.
    version:
        Upstream version; used for the ``name:version`` alias.
    platforms:
        Every platform the artifact is built for. Required, non-empty.
    dependencies:
        Recipe classes this artifact needs, in declared order.

    and implement ``sources`` and ``script``. Recipes with per-platform
    behavior override ``dispatcher``.
    """

    name: ClassVar[str]
    version: ClassVar[str] = ""
    platforms: ClassVar[tuple[Platform, ...]]
    dependencies: ClassVar[tuple[type[Recipe], ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "name" not in cls.__dict__:
            return  # intermediate base class
        if "platforms" not in cls.__dict__:
            raise RecipeDefinitionError(
                f"Recipe {cls.__name__} must declare its platforms explicitly"
            )
        if not cls.platforms or not set(cls.platforms) <= set(DEFAULT_PLATFORMS):
            raise RecipeDefinitionError(
                f"Recipe {cls.__name__} declares invalid platforms: {cls.platforms!r}"
            )
        keys = [slot_key(dep.name) for dep in cls.dependencies]
        if len(set(keys)) != len(keys):
            raise RecipeDefinitionError(
                f"Recipe {cls.__name__} declares a dependency twice: {keys}"
            )

    def __init__(self, **injected: DependencyHandle) -> None:
        self._slots: dict[str, DependencySlot] = {
            slot_key(dep.name): OwnBuild(recipe=dep) for dep in self.dependencies
        }
        self._consumed = False
        for key, handle in injected.items():
            self.with_dependency(key, handle)

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else "open"
        return f"<{type(self).__name__} {self.name} ({state})>"

    # ------------------------------------------------------------------
    # Configuration phase
    # ------------------------------------------------------------------

    def _ensure_open(self) -> None:
        if self._consumed:
            raise BuilderConsumedError(f"Recipe builder for {self.name} was already finalised")

    def with_dependency(self, name: str, handle: DependencyHandle) -> Recipe:
        """Inject an already-registered handle for dependency *name*."""
        self._ensure_open()
        key = slot_key(name)
        if key not in self._slots:
            raise UnknownSlotError(f"{self.name} has no dependency named {name!r}")
        if not isinstance(handle, DependencyHandle):
            raise TypeError(
                f"{self.name}.{key} expects a DependencyHandle, got {type(handle).__name__}"
            )
        self._slots[key] = Injected(handle=handle)
        return self

    def with_dependencies(self, handles: Mapping[str, DependencyHandle]) -> Recipe:
        """Inject every handle in *handles* whose name this recipe depends on."""
        for name, handle in handles.items():
            if slot_key(name) in self._slots:
                self.with_dependency(name, handle)
        return self

    @property
    def slots(self) -> dict[str, DependencySlot]:
        return dict(self._slots)

    @property
    def consumed(self) -> bool:
        return self._consumed

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def dispatcher(self) -> PlatformDispatcher[Any]:
        """Per-platform parameters. Default: no parameters, declared platforms only."""
        return PlatformDispatcher.uniform(self.platforms, None)

    def sources(self, params: Any) -> list[ArtifactSource]:
        return []

    def script(self, params: Any, deps: dict[str, str]) -> str:
        raise NotImplementedError

    def environments(self, params: Any, deps: dict[str, str]) -> list[str]:
        return []

    def aliases(self) -> list[str]:
        return [f"{self.name}:{self.version}"] if self.version else []

    # ------------------------------------------------------------------
    # Terminal step
    # ------------------------------------------------------------------

    def _dispatch(self, context: BuildContext) -> Any:
        table = self.dispatcher()
        if set(table.supported) != set(self.platforms):
            raise RecipeDefinitionError(
                f"{self.name} dispatches {[p.value for p in table.supported]} "
                f"but declares {[p.value for p in self.platforms]}",
                artifact=self.name,
            )
        platform = context.get_active_platform()
        params = table.dispatch(self.name, platform)
        if platform not in self.platforms:
            raise UnsupportedPlatformError(self.name, platform)
        context.record(BuildEventKind.DISPATCH, self.name, detail=context.platform_tag)
        return params

    def prepare(self, context: BuildContext) -> ArtifactSpec:
        """Finalise the builder and assemble its spec without submitting it.

        Dispatch happens first, so an unsupported platform fails before any
        dependency is built. Slots are then resolved in declared order.
        """
        self._ensure_open()
        self._consumed = True

        params = self._dispatch(context)

        handles: list[DependencyHandle] = []
        deps: dict[str, str] = {}
        for key, slot in self._slots.items():
            handle = resolve_slot(self.name, slot, context)
            handles.append(handle)
            try:
                deps[key] = context.resolve_handle_to_reference(handle)
            except RegistrarError as exc:
                raise EngineError(self.name, str(exc)) from exc

        return ArtifactSpec(
            name=self.name,
            aliases=tuple(self.aliases()),
            platforms=self.platforms,
            sources=tuple(self.sources(params)),
            instructions=self.script(params, deps),
            environments=tuple(self.environments(params, deps)),
            dependency_refs=tuple(handles),
            metadata={"version": self.version} if self.version else {},
        )

    def build(self, context: BuildContext) -> DependencyHandle:
        """Terminal build step: assemble the spec, submit it, return its handle."""
        spec = self.prepare(context)
        try:
            return context.submit(spec)
        except RegistrarError as exc:
            raise EngineError(self.name, str(exc)) from exc
