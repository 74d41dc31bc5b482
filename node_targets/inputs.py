"""Normalise GitHub Actions inputs for the command-line interface.

GitHub Actions forwards every input as a string through ``INPUT_*``
environment variables, so booleans and target lists need coercion before use.
"""

from __future__ import annotations

import os
import re
import typing as typ

from .errors import TargetSelectionError
from .registry import AVAILABLE_TARGETS, DEFAULT_TARGETS, is_available

__all__ = [
    "coerce_bool",
    "normalize_input_env",
    "parse_target_selection",
]

_SWITCHES: dict[str, bool] = {
    **dict.fromkeys(("1", "true", "yes", "on"), True),
    **dict.fromkeys(("0", "false", "no", "off"), False),
}
_ALL_KEYWORD = "all"


def coerce_bool(value: object, *, default: bool) -> bool:
    """Interpret a CLI or ``INPUT_*`` switch such as ``all-targets``.

    Unset or blank inputs (an omitted ``with:`` key arrives as an empty
    string) fall back to ``default``. Genuine bools pass through untouched.

    Raises
    ------
    ValueError
        If a switch holds something other than 1/0, true/false, yes/no or
        on/off; the CLI reports it as a workflow error.

    Examples
    --------
    >>> coerce_bool("on", default=False)
    True
    >>> coerce_bool("", default=True)
    True
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    if isinstance(value, str):
        switch = value.strip().lower()
        if not switch:
            return default
        if switch in _SWITCHES:
            return _SWITCHES[switch]
    msg = (
        f"invalid boolean input {value!r}; "
        "expected true/false, yes/no, on/off or 1/0"
    )
    raise ValueError(msg)


def _split_tokens(values: typ.Iterable[str]) -> list[str]:
    """Split comma/whitespace separated entries, dropping duplicates."""
    seen: set[str] = set()
    ordered: list[str] = []
    for entry in values:
        for token in re.split(r"[\s,]+", entry.strip()):
            if token and token not in seen:
                seen.add(token)
                ordered.append(token)
    return ordered


def parse_target_selection(
    values: str | typ.Iterable[str] | None, *, all_targets: bool = False
) -> tuple[str, ...]:
    """Return the triples requested by ``values``.

    An empty selection yields :data:`DEFAULT_TARGETS`; ``all`` (or
    ``all_targets=True``) yields :data:`AVAILABLE_TARGETS`. Order is preserved
    and duplicates are dropped.

    Raises
    ------
    TargetSelectionError
        If a requested triple is not registered, or ``all`` is combined with
        explicit triples.

    Examples
    --------
    >>> parse_target_selection("x86_64-apple-darwin, x86_64-apple-darwin")
    ('x86_64-apple-darwin',)
    """
    if all_targets:
        return AVAILABLE_TARGETS
    if isinstance(values, str):
        values = [values]
    tokens = _split_tokens(values or [])
    if not tokens:
        return DEFAULT_TARGETS
    if _ALL_KEYWORD in tokens:
        if len(tokens) > 1:
            msg = f"'{_ALL_KEYWORD}' cannot be combined with explicit targets"
            raise TargetSelectionError(msg)
        return AVAILABLE_TARGETS
    if unknown := [token for token in tokens if not is_available(token)]:
        msg = f"unsupported target(s): {', '.join(unknown)}"
        raise TargetSelectionError(msg)
    return tuple(tokens)


def normalize_input_env(prefix: str = "INPUT_") -> None:
    """Fold dashed ``INPUT_`` keys (``INPUT_ALL-TARGETS``) into underscore keys.

    Existing underscore keys win over their dashed variants; dashed keys are
    removed either way.
    """
    alt_prefix = prefix.replace("_", "-")
    updates: dict[str, str] = {}
    removals: list[str] = []
    for key, value in os.environ.items():
        if not key.startswith((prefix, alt_prefix)) or "-" not in key:
            continue
        normalized = key.replace("-", "_")
        if normalized not in os.environ:
            updates[normalized] = value
        removals.append(key)
    for key, value in updates.items():
        os.environ[key] = value
    for key in removals:
        os.environ.pop(key, None)
