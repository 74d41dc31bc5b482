"""Command-line entry point exposing target resolution to CI workflows.

Every option may also be supplied through an ``INPUT_*`` environment variable,
which is how GitHub Actions forwards ``with:`` inputs.

Examples
--------
Emit the build matrix for the default targets::

    node-targets matrix

Emit every registered target and export it as the ``matrix`` step output::

    INPUT_ALL_TARGETS=true INPUT_GITHUB_OUTPUT=true node-targets matrix

Describe a single target as ``KEY=value`` lines::

    node-targets describe --target i686-pc-windows-msvc \
        --field arch --field host --output-format env
"""

from __future__ import annotations

import logging
import os
import sys
import typing as typ

import cyclopts
from cyclopts import App, Parameter

from .errors import GithubOutputError, TargetError
from .inputs import coerce_bool, normalize_input_env, parse_target_selection
from .output import (
    build_matrix,
    render_json,
    render_yaml,
    require_github_output,
    write_github_output,
)
from .registry import AVAILABLE_TARGETS, DEFAULT_TARGETS
from .target import Target, resolve, resolve_all

__all__ = ["app", "describe", "list_targets", "main", "matrix"]

logger = logging.getLogger(__name__)

app: App = App(
    name="node-targets",
    help="Resolve Rust target triples into Node.js and GitHub Actions metadata.",
    config=cyclopts.config.Env("INPUT_", command=False),
)

FieldName = typ.Literal[
    "triple",
    "platform",
    "arch",
    "abi",
    "platform-abi",
    "host",
    "host-arch",
    "docker-image",
    "setup",
]
OutputFormat = typ.Literal["plain", "env"]
MatrixFormat = typ.Literal["json", "yaml"]

_FIELD_GETTERS: dict[str, typ.Callable[[Target], str]] = {
    "triple": lambda target: target.triple,
    "platform": lambda target: str(target.detail.platform),
    "arch": lambda target: str(target.detail.arch),
    "abi": lambda target: target.detail.abi or "",
    "platform-abi": lambda target: target.detail.platform_abi,
    "host": lambda target: target.github_workflow_config.host,
    "host-arch": lambda target: target.detail.arch.github_action_arch,
    "docker-image": lambda target: target.github_workflow_config.docker_image or "",
    "setup": lambda target: render_json(
        list(target.github_workflow_config.setup_steps)
    ),
}


def _fail(exc: Exception) -> typ.NoReturn:
    """Report ``exc`` as a workflow error annotation and exit with status 1."""
    print(f"::error title=Target Resolution Failure::{exc}", file=sys.stderr)
    raise SystemExit(1) from exc


@app.command
def describe(
    *,
    target: typ.Annotated[str, Parameter(required=True)],
    field: typ.Annotated[list[FieldName] | None, Parameter(name="field")] = None,
    output_format: OutputFormat = "plain",
) -> None:
    """Print metadata for a single ``target``.

    Parameters
    ----------
    target
        Target triple to describe.
    field
        Fields to print, in order. Defaults to ``platform-abi``. ``setup``
        prints the runner setup commands as a compact JSON list.
    output_format
        ``plain`` prints the values separated by spaces; ``env`` prints one
        ``NAME=value`` line per field.
    """
    try:
        resolved = resolve(target.strip())
    except TargetError as exc:
        _fail(exc)

    requested = [item.lower() for item in field or ["platform-abi"]]
    values = [_FIELD_GETTERS[key](resolved) for key in requested]

    if output_format == "env":
        for key, value in zip(requested, values, strict=True):
            print(f"{key.upper().replace('-', '_')}={value}")
    else:
        print(" ".join(values))


@app.command
def matrix(
    *,
    targets: str = "",
    all_targets: str = "false",
    output_format: MatrixFormat = "json",
    github_output: str = "false",
) -> None:
    """Print a GitHub Actions build matrix for the selected targets.

    Parameters
    ----------
    targets
        Comma or whitespace separated triples, or ``all``. Empty selects the
        default targets.
    all_targets
        When true, ignore ``targets`` and select every registered triple.
    output_format
        ``json`` or ``yaml``.
    github_output
        When true, also append ``matrix=<json>`` and the ``targets`` list to
        the ``GITHUB_OUTPUT`` file.
    """
    try:
        selection = parse_target_selection(
            targets, all_targets=coerce_bool(all_targets, default=False)
        )
        resolved = resolve_all(selection)
        output_path = (
            require_github_output()
            if coerce_bool(github_output, default=False)
            else None
        )
    except (TargetError, GithubOutputError, ValueError) as exc:
        _fail(exc)

    data = build_matrix(resolved)
    if output_format == "yaml":
        print(render_yaml(data), end="")
    else:
        print(render_json(data, indent=2))

    if output_path is not None:
        write_github_output(
            output_path,
            {
                "matrix": render_json(data),
                "targets": [target.triple for target in resolved],
            },
        )
    logger.info("Emitted build matrix for %d target(s)", len(resolved))


@app.command(name="list")
def list_targets(*, defaults_only: str = "false") -> None:
    """Print the registered target triples, one per line.

    Parameters
    ----------
    defaults_only
        When true, print only the targets built when no selection is made.
    """
    try:
        only_defaults = coerce_bool(defaults_only, default=False)
    except ValueError as exc:
        _fail(exc)
    for triple in DEFAULT_TARGETS if only_defaults else AVAILABLE_TARGETS:
        print(triple)


def _runner_debug() -> bool:
    """Return True when Actions step debug logging is enabled (``RUNNER_DEBUG=1``)."""
    try:
        return coerce_bool(os.environ.get("RUNNER_DEBUG"), default=False)
    except ValueError:
        return False


def main() -> None:
    """Run the CLI after normalising the GitHub Actions environment."""
    normalize_input_env()
    logging.basicConfig(
        level=logging.DEBUG if _runner_debug() else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    app()


if __name__ == "__main__":
    main()
