"""Shared test fixtures for artifactforge."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest

from artifactforge.core.context import BuildContext
from artifactforge.core.recipe import Recipe
from artifactforge.core.registrar import InMemoryRegistrar, StoreRegistrar
from artifactforge.core.spec_store import SpecStore
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DEFAULT_PLATFORMS, Platform


@pytest.fixture
def registrar() -> InMemoryRegistrar:
    """Provide a fresh in-memory registrar."""
    return InMemoryRegistrar()


@pytest.fixture
def context(registrar: InMemoryRegistrar) -> BuildContext:
    """Provide a build context for x86_64-linux backed by ``registrar``."""
    return BuildContext(Platform.X86_64_LINUX, registrar)


@pytest.fixture
def darwin_context(registrar: InMemoryRegistrar) -> BuildContext:
    """Provide a build context for aarch64-darwin backed by ``registrar``."""
    return BuildContext(Platform.AARCH64_DARWIN, registrar)


@pytest.fixture
def spec_store(tmp_path: Path) -> SpecStore:
    """Provide a fresh SpecStore in a temp directory."""
    return SpecStore(tmp_path / "specs")


@pytest.fixture
def store_registrar(tmp_path: Path) -> StoreRegistrar:
    """Provide a registrar that persists to a temp spec store."""
    return StoreRegistrar(tmp_path / "specs")


def _script(self: Recipe, params: Any, deps: dict[str, str]) -> str:
    refs = " ".join(deps.values())
    return f"build {self.name} {refs}".strip()


def _sources(self: Recipe, params: Any) -> list[ArtifactSource]:
    return [ArtifactSource(name=self.name, path=f"https://example.invalid/{self.name}.tar.gz")]


@pytest.fixture
def make_recipe() -> Callable[..., type[Recipe]]:
    """Factory for synthetic recipe classes.

    ``make_recipe("c", b)`` declares a recipe named ``c`` depending on the
    recipe class ``b``. Its script lists every dependency reference so
    tests can check what was substituted.
    """

    def factory(
        name: str,
        *dependencies: type[Recipe],
        platforms: Sequence[Platform] = DEFAULT_PLATFORMS,
        version: str = "1.0",
    ) -> type[Recipe]:
        attrs = {
            "name": name,
            "version": version,
            "platforms": tuple(platforms),
            "dependencies": tuple(dependencies),
            "script": _script,
            "sources": _sources,
        }
        class_name = "".join(part.capitalize() for part in name.replace("_", "-").split("-"))
        return type(class_name, (Recipe,), attrs)

    return factory
