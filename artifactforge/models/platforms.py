"""Platform tags: the closed set of build targets."""

from __future__ import annotations

import platform as _host
from enum import Enum


class UnknownPlatformTagError(ValueError):
    """Raised when a string does not name one of the four platform tags."""


class Platform(str, Enum):
    """Target platforms an artifact can be built for.

    The set is closed; there is no wildcard member.
    """

    AARCH64_DARWIN = "aarch64-darwin"
    AARCH64_LINUX = "aarch64-linux"
    X86_64_DARWIN = "x86_64-darwin"
    X86_64_LINUX = "x86_64-linux"

    @property
    def is_darwin(self) -> bool:
        return self in (Platform.AARCH64_DARWIN, Platform.X86_64_DARWIN)

    @property
    def is_linux(self) -> bool:
        return self in (Platform.AARCH64_LINUX, Platform.X86_64_LINUX)


DEFAULT_PLATFORMS: tuple[Platform, ...] = (
    Platform.AARCH64_DARWIN,
    Platform.AARCH64_LINUX,
    Platform.X86_64_DARWIN,
    Platform.X86_64_LINUX,
)

DARWIN_PLATFORMS: tuple[Platform, ...] = (
    Platform.AARCH64_DARWIN,
    Platform.X86_64_DARWIN,
)

_MACHINE_ALIASES: dict[str, str] = {
    "arm64": "aarch64",
    "aarch64": "aarch64",
    "x86_64": "x86_64",
    "amd64": "x86_64",
}


def parse_platform(value: str | Platform) -> Platform:
    """Return the Platform member for *value*.

    Raises ``UnknownPlatformTagError`` for anything outside the closed set.
    """
    if isinstance(value, Platform):
        return value
    try:
        return Platform(value.strip().lower())
    except ValueError:
        valid = ", ".join(p.value for p in DEFAULT_PLATFORMS)
        raise UnknownPlatformTagError(
            f"Unknown platform tag {value!r}. Expected one of: {valid}"
        ) from None


def detect_host_platform() -> Platform | str:
    """Map the running host to a platform tag.

    Hosts outside the closed set come back as a raw ``"<machine>-<os>"``
    string so that dispatch can reject them explicitly.
    """
    machine = _host.machine().lower()
    system = _host.system().lower()
    tag = f"{_MACHINE_ALIASES.get(machine, machine)}-{system}"
    try:
        return Platform(tag)
    except ValueError:
        return tag
