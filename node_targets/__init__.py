"""Resolve Rust target triples into Node.js and GitHub Actions metadata.

The package maps a compilation target triple such as
``aarch64-unknown-linux-gnu`` to the ``process.platform``/``process.arch``
naming used by Node.js, the GitHub Actions runner that can build it, and the
``platform_abi`` key used to name build artefacts.
"""

from __future__ import annotations

from .arch import NodeArch
from .detail import TargetDetail
from .errors import (
    MalformedTripleError,
    TargetError,
    TargetSelectionError,
    UnregisteredTargetError,
    UnsupportedArchitectureError,
)
from .platforms import KnownPlatform, NodePlatform, UnknownPlatform, parse_platform
from .registry import AVAILABLE_TARGETS, DEFAULT_TARGETS, is_available
from .target import Target, resolve, resolve_all
from .workflow import (
    TARGET_CONFIG_MAP,
    GithubWorkflowConfig,
    missing_workflow_configs,
    workflow_config_for,
)

__all__ = [
    "AVAILABLE_TARGETS",
    "DEFAULT_TARGETS",
    "TARGET_CONFIG_MAP",
    "GithubWorkflowConfig",
    "KnownPlatform",
    "MalformedTripleError",
    "NodeArch",
    "NodePlatform",
    "Target",
    "TargetDetail",
    "TargetError",
    "TargetSelectionError",
    "UnknownPlatform",
    "UnregisteredTargetError",
    "UnsupportedArchitectureError",
    "is_available",
    "missing_workflow_configs",
    "parse_platform",
    "resolve",
    "resolve_all",
    "workflow_config_for",
]
