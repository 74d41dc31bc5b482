"""GitHub Actions build settings for each registered target."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses
import types
import typing as typ

from .errors import UnregisteredTargetError
from .registry import AVAILABLE_TARGETS

__all__ = [
    "TARGET_CONFIG_MAP",
    "GithubWorkflowConfig",
    "missing_workflow_configs",
    "workflow_config_for",
]


@dataclasses.dataclass(frozen=True, slots=True)
class GithubWorkflowConfig:
    """Runner, container and setup script used to build a target.

    ``setup`` holds the shell commands joined with ``&&``; use
    :attr:`setup_steps` for the individual commands.
    """

    host: str
    docker_image: str | None = None
    setup: str | None = None

    @property
    def setup_steps(self) -> tuple[str, ...]:
        """Return the trimmed commands making up :attr:`setup`."""
        if self.setup is None:
            return ()
        return tuple(step.strip() for step in self.setup.split("&&"))

    def to_dict(self) -> dict[str, typ.Any]:
        """Serialise, omitting unset optional fields."""
        data: dict[str, typ.Any] = {"host": self.host}
        if self.docker_image is not None:
            data["docker_image"] = self.docker_image
        if self.setup is not None:
            data["setup"] = list(self.setup_steps)
        return data


_MACOS = GithubWorkflowConfig(host="macos-latest")
_WINDOWS = GithubWorkflowConfig(host="windows-latest")
_UBUNTU = GithubWorkflowConfig(host="ubuntu-latest")

TARGET_CONFIG_MAP: cabc.Mapping[str, GithubWorkflowConfig] = types.MappingProxyType(
    {
        "x86_64-apple-darwin": _MACOS,
        "x86_64-pc-windows-msvc": _WINDOWS,
        "i686-pc-windows-msvc": _WINDOWS,
        "x86_64-unknown-linux-gnu": GithubWorkflowConfig(
            host="ubuntu-latest",
            docker_image="napi-rs/nodejs-rust:lts-debian",
        ),
        "x86_64-unknown-linux-musl": GithubWorkflowConfig(
            host="ubuntu-latest",
            docker_image="napi-rs/nodejs-rust:lts-alpine",
        ),
        # TODO: confirm FreeBSD builds need a VM action rather than a bare runner.
        "x86_64-unknown-freebsd": _UBUNTU,
        "aarch64-apple-darwin": _MACOS,
        "aarch64-unknown-linux-gnu": GithubWorkflowConfig(
            host="ubuntu-latest",
            setup=(
                "sudo apt-get update && "
                "sudo apt-get install g++-aarch64-linux-gnu gcc-aarch64-linux-gnu -y"
            ),
        ),
        "aarch64-unknown-linux-musl": GithubWorkflowConfig(
            host="ubuntu-latest",
            docker_image="napi-rs/nodejs-rust:lts-alpine",
        ),
        "aarch64-pc-windows-msvc": _WINDOWS,
        "aarch64-linux-android": _UBUNTU,
        "armv7-unknown-linux-gnueabihf": GithubWorkflowConfig(
            host="ubuntu-latest",
            setup=(
                "sudo apt-get update && "
                "sudo apt-get install gcc-arm-linux-gnueabihf "
                "g++-arm-linux-gnueabihf -y"
            ),
        ),
        "armv7-linux-androideabi": _UBUNTU,
    }
)


def workflow_config_for(triple: str) -> GithubWorkflowConfig:
    """Return the workflow configuration registered for ``triple``.

    Raises
    ------
    UnregisteredTargetError
        If ``triple`` has no entry in :data:`TARGET_CONFIG_MAP`.
    """
    try:
        return TARGET_CONFIG_MAP[triple]
    except KeyError:
        raise UnregisteredTargetError(triple) from None


def missing_workflow_configs(
    triples: cabc.Iterable[str] = AVAILABLE_TARGETS,
) -> list[str]:
    """Return the triples in ``triples`` that lack a workflow configuration."""
    return [triple for triple in triples if triple not in TARGET_CONFIG_MAP]
