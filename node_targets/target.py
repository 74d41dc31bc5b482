"""Resolve target triples into complete build records."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses
import logging
import typing as typ

from .detail import TargetDetail
from .workflow import GithubWorkflowConfig, workflow_config_for

__all__ = ["Target", "resolve", "resolve_all"]

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class Target:
    """A registered target triple with its Node.js and CI metadata."""

    triple: str
    detail: TargetDetail
    github_workflow_config: GithubWorkflowConfig

    def to_dict(self) -> dict[str, typ.Any]:
        """Return the record embedded in generated CI configuration."""
        return {
            "triple": self.triple,
            **self.detail.to_dict(),
            "github_workflow_config": self.github_workflow_config.to_dict(),
        }


def resolve(triple: str) -> Target:
    """Resolve ``triple`` into a :class:`Target`.

    Parameters
    ----------
    triple
        A triple from :data:`~node_targets.registry.AVAILABLE_TARGETS`.

    Returns
    -------
    Target
        Parsed detail plus the registered workflow configuration.

    Raises
    ------
    UnsupportedArchitectureError
        If the CPU field of ``triple`` is not a known architecture.
    UnregisteredTargetError
        If ``triple`` has no workflow configuration.

    Examples
    --------
    >>> resolve("x86_64-apple-darwin").detail.platform_abi
    'darwin-x64'
    """
    detail = TargetDetail.from_triple(triple)
    config = workflow_config_for(triple)
    logger.debug("Resolved %s to %s on %s", triple, detail.platform_abi, config.host)
    return Target(triple=triple, detail=detail, github_workflow_config=config)


def resolve_all(triples: cabc.Iterable[str]) -> list[Target]:
    """Resolve each triple in order."""
    return [resolve(triple) for triple in triples]
