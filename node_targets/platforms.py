"""Node.js platform names derived from the OS field of a target triple."""

from __future__ import annotations

import dataclasses
import enum
from typing import TypeAlias

__all__ = ["KnownPlatform", "NodePlatform", "UnknownPlatform", "parse_platform"]


class KnownPlatform(enum.StrEnum):
    """Platforms with a dedicated ``process.platform`` spelling."""

    DARWIN = "darwin"
    FREEBSD = "freebsd"
    OPENBSD = "openbsd"
    WIN32 = "win32"


@dataclasses.dataclass(frozen=True, slots=True)
class UnknownPlatform:
    """Any other OS field, kept verbatim."""

    name: str

    def __str__(self) -> str:
        return self.name


NodePlatform: TypeAlias = KnownPlatform | UnknownPlatform

_OS_NAMES: dict[str, KnownPlatform] = {
    "darwin": KnownPlatform.DARWIN,
    "freebsd": KnownPlatform.FREEBSD,
    "openbsd": KnownPlatform.OPENBSD,
    "windows": KnownPlatform.WIN32,
}


def parse_platform(os_name: str) -> NodePlatform:
    """Return the platform for ``os_name``; unrecognised names never fail.

    Examples
    --------
    >>> parse_platform("windows")
    <KnownPlatform.WIN32: 'win32'>
    >>> parse_platform("linux")
    UnknownPlatform(name='linux')
    """
    known = _OS_NAMES.get(os_name)
    return known if known is not None else UnknownPlatform(os_name)
