"""Error types raised while resolving target triples."""

from __future__ import annotations

__all__ = [
    "GithubOutputError",
    "MalformedTripleError",
    "TargetError",
    "TargetSelectionError",
    "UnregisteredTargetError",
    "UnsupportedArchitectureError",
]


class TargetError(RuntimeError):
    """Base class for target resolution failures."""


class UnsupportedArchitectureError(TargetError):
    """Raised when a triple names a CPU architecture with no Node.js equivalent."""

    def __init__(self, arch: str) -> None:
        super().__init__(f"unsupported cpu arch {arch}")
        self.arch = arch


class UnregisteredTargetError(TargetError):
    """Raised when a triple has no GitHub workflow configuration."""

    def __init__(self, triple: str) -> None:
        super().__init__(f"no workflow configuration for target {triple}")
        self.triple = triple


class MalformedTripleError(TargetError):
    """Raised when a triple has fewer than three dash-separated fields."""

    def __init__(self, triple: str) -> None:
        super().__init__(f"malformed target triple: {triple!r}")
        self.triple = triple


class TargetSelectionError(TargetError):
    """Raised when a requested target selection cannot be honoured."""


class GithubOutputError(RuntimeError):
    """Raised when step outputs cannot be exported to ``GITHUB_OUTPUT``."""
