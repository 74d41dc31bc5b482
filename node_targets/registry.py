"""Target triples the release tooling knows how to build."""

from __future__ import annotations

__all__ = ["AVAILABLE_TARGETS", "DEFAULT_TARGETS", "is_available"]

AVAILABLE_TARGETS: tuple[str, ...] = (
    "aarch64-apple-darwin",
    "aarch64-linux-android",
    "aarch64-unknown-linux-gnu",
    "aarch64-unknown-linux-musl",
    "aarch64-pc-windows-msvc",
    "x86_64-apple-darwin",
    "x86_64-pc-windows-msvc",
    "x86_64-unknown-linux-gnu",
    "x86_64-unknown-linux-musl",
    "x86_64-unknown-freebsd",
    "i686-pc-windows-msvc",
    "armv7-unknown-linux-gnueabihf",
    "armv7-linux-androideabi",
)

# Used when no explicit selection is made.
DEFAULT_TARGETS: tuple[str, ...] = (
    "x86_64-apple-darwin",
    "x86_64-pc-windows-msvc",
    "x86_64-unknown-linux-gnu",
)

_AVAILABLE = frozenset(AVAILABLE_TARGETS)


def is_available(triple: str) -> bool:
    """Return True when ``triple`` is a registered target."""
    return triple in _AVAILABLE
