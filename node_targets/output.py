"""Render resolved targets for GitHub Actions consumption."""

from __future__ import annotations

import collections.abc as cabc
import json
import os
import typing as typ
from pathlib import Path

import yaml

from .errors import GithubOutputError

if typ.TYPE_CHECKING:
    from .target import Target

__all__ = [
    "build_matrix",
    "render_json",
    "render_yaml",
    "require_github_output",
    "write_github_output",
]


def build_matrix(targets: cabc.Iterable[Target]) -> dict[str, list[dict[str, typ.Any]]]:
    """Return a ``strategy.matrix`` mapping with one ``include`` entry per target."""
    return {"include": [target.to_dict() for target in targets]}


def render_json(data: object, *, indent: int | None = None) -> str:
    """Serialise ``data`` as JSON, compact unless ``indent`` is given."""
    separators = (",", ":") if indent is None else None
    return json.dumps(data, indent=indent, separators=separators)


def render_yaml(data: object) -> str:
    """Serialise ``data`` as block-style YAML preserving key order."""
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)


def _format_list_output(key: str, values: list[str]) -> str:
    """Format a list value using the heredoc delimiter syntax."""
    delimiter = f"gh_{key.upper()}"
    content = "\n".join(values)
    return f"{key}<<{delimiter}\n{content}\n{delimiter}\n"


def _format_scalar_output(key: str, value: str) -> str:
    """Format a scalar value, escaping characters that would end the line."""
    escaped = value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    return f"{key}={escaped}\n"


def write_github_output(file: Path, values: dict[str, str | list[str]]) -> None:
    """Append ``values`` to the GitHub Actions output ``file``.

    Parameters
    ----------
    file
        Target ``GITHUB_OUTPUT`` file that receives the exported values.
    values
        Mapping of output names to strings or lists of strings.
    """
    file.parent.mkdir(parents=True, exist_ok=True)
    with file.open("a", encoding="utf-8") as handle:
        for key, value in sorted(values.items()):
            if isinstance(value, list):
                handle.write(_format_list_output(key, value))
            else:
                handle.write(_format_scalar_output(key, value))


def require_github_output() -> Path:
    """Return the file named by ``GITHUB_OUTPUT``.

    Raises
    ------
    GithubOutputError
        If the variable is unset or empty, as it is outside a workflow step.
    """
    value = os.environ.get("GITHUB_OUTPUT", "").strip()
    if not value:
        msg = "GITHUB_OUTPUT environment variable is not set"
        raise GithubOutputError(msg)
    return Path(value)
