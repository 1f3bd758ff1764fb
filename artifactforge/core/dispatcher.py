"""Platform dispatch: select per-platform parameters or reject explicitly.

A dispatcher table is built with one entry per platform tag. Leaving a tag
out is a ``TypeError`` at construction; a tag the artifact genuinely does
not support must be marked ``UNSUPPORTED``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from artifactforge.core.errors import UnsupportedPlatformError
from artifactforge.models.platforms import DEFAULT_PLATFORMS, Platform

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _Unsupported:
    """Sentinel marking a platform with no build behavior."""

    _instance: _Unsupported | None = None

    def __new__(cls) -> _Unsupported:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSUPPORTED"


UNSUPPORTED: Any = _Unsupported()


class PlatformDispatcher(Generic[T]):
    """Per-artifact table mapping every platform tag to a parameter bundle.

    Parameters
    ----------
    aarch64_darwin, aarch64_linux, x86_64_darwin, x86_64_linux:
        The bundle for each tag, or ``UNSUPPORTED``. All four are required.
    """

    def __init__(
        self,
        *,
        aarch64_darwin: T,
        aarch64_linux: T,
        x86_64_darwin: T,
        x86_64_linux: T,
    ) -> None:
        self._table: dict[Platform, T] = {
            Platform.AARCH64_DARWIN: aarch64_darwin,
            Platform.AARCH64_LINUX: aarch64_linux,
            Platform.X86_64_DARWIN: x86_64_darwin,
            Platform.X86_64_LINUX: x86_64_linux,
        }
        if not self.supported:
            raise ValueError("a dispatcher must support at least one platform")

    @classmethod
    def collapse_darwin(
        cls, *, darwin: T, aarch64_linux: T, x86_64_linux: T
    ) -> PlatformDispatcher[T]:
        """Share one bundle across both Darwin tags.

        Only for procedures that are byte-identical on both architectures,
        such as a universal binary.
        """
        return cls(
            aarch64_darwin=darwin,
            aarch64_linux=aarch64_linux,
            x86_64_darwin=darwin,
            x86_64_linux=x86_64_linux,
        )

    @classmethod
    def uniform(cls, platforms: Iterable[Platform], value: T) -> PlatformDispatcher[T]:
        """Map each listed tag to *value* and every other tag to ``UNSUPPORTED``."""
        listed = set(platforms)
        return cls(
            **{
                p.name.lower(): (value if p in listed else UNSUPPORTED)
                for p in DEFAULT_PLATFORMS
            }
        )

    @property
    def supported(self) -> tuple[Platform, ...]:
        """Tags that have a bundle, in canonical order."""
        return tuple(p for p in DEFAULT_PLATFORMS if self._table[p] is not UNSUPPORTED)

    def dispatch(self, artifact: str, platform: Platform | str) -> T:
        """Return the bundle for *platform*.

        Raises ``UnsupportedPlatformError`` naming the artifact and tag when
        the tag is marked unsupported or is not a member of the closed set.
        """
        if platform == Platform.AARCH64_DARWIN:
            bundle = self._table[Platform.AARCH64_DARWIN]
        elif platform == Platform.AARCH64_LINUX:
            bundle = self._table[Platform.AARCH64_LINUX]
        elif platform == Platform.X86_64_DARWIN:
            bundle = self._table[Platform.X86_64_DARWIN]
        elif platform == Platform.X86_64_LINUX:
            bundle = self._table[Platform.X86_64_LINUX]
        else:
            logger.debug("Rejecting unknown platform %r for %s", platform, artifact)
            raise UnsupportedPlatformError(artifact, platform)

        if bundle is UNSUPPORTED:
            raise UnsupportedPlatformError(artifact, platform)
        return bundle
