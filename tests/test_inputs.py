"""Tests for :mod:`node_targets.inputs`."""

from __future__ import annotations

import os

import pytest

from node_targets.errors import TargetSelectionError
from node_targets.inputs import (
    coerce_bool,
    normalize_input_env,
    parse_target_selection,
)
from node_targets.registry import AVAILABLE_TARGETS, DEFAULT_TARGETS


class TestCoerceBool:
    """Tests for :func:`coerce_bool`."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, True),
            (False, False),
            ("true", True),
            ("TRUE", True),
            (" yes ", True),
            ("1", True),
            ("on", True),
            ("false", False),
            ("No", False),
            ("0", False),
            ("off", False),
        ],
    )
    def test_accepts_valid_values(
        self,
        value: bool | str,  # noqa: FBT001
        expected: bool,  # noqa: FBT001
    ) -> None:
        """Boolean-like strings are interpreted case-insensitively."""
        assert coerce_bool(value, default=not expected) is expected

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty_returns_default(self, value: str | None) -> None:
        """Missing values fall back to the default."""
        assert coerce_bool(value, default=True) is True
        assert coerce_bool(value, default=False) is False

    @pytest.mark.parametrize("value", ["maybe", 1, 2.5])
    def test_rejects_invalid(self, value: object) -> None:
        """Anything else raises ValueError."""
        with pytest.raises(ValueError, match="invalid boolean input"):
            coerce_bool(value, default=False)


class TestParseTargetSelection:
    """Tests for :func:`parse_target_selection`."""

    @pytest.mark.parametrize("value", [None, "", " \n ", []])
    def test_empty_selects_defaults(self, value: str | list[str] | None) -> None:
        """No explicit selection yields the default targets."""
        assert parse_target_selection(value) == DEFAULT_TARGETS

    def test_all_keyword(self) -> None:
        """The all keyword selects every registered target."""
        assert parse_target_selection("all") == AVAILABLE_TARGETS

    def test_all_targets_flag_overrides_values(self) -> None:
        """all_targets ignores the explicit selection."""
        result = parse_target_selection("x86_64-apple-darwin", all_targets=True)

        assert result == AVAILABLE_TARGETS

    def test_splits_commas_and_whitespace(self) -> None:
        """Entries may be separated by commas, spaces or newlines."""
        result = parse_target_selection(
            "aarch64-apple-darwin, i686-pc-windows-msvc\narmv7-linux-androideabi"
        )

        assert result == (
            "aarch64-apple-darwin",
            "i686-pc-windows-msvc",
            "armv7-linux-androideabi",
        )

    def test_accepts_iterables_and_dedupes(self) -> None:
        """Iterables are flattened with duplicates removed in order."""
        result = parse_target_selection(
            ["x86_64-apple-darwin", "aarch64-apple-darwin,x86_64-apple-darwin"]
        )

        assert result == ("x86_64-apple-darwin", "aarch64-apple-darwin")

    def test_rejects_unregistered_targets(self) -> None:
        """Unknown triples are reported together."""
        with pytest.raises(TargetSelectionError, match="sparc-sun-solaris, foo"):
            parse_target_selection("x86_64-apple-darwin sparc-sun-solaris foo")

    def test_rejects_all_with_explicit_targets(self) -> None:
        """The all keyword cannot be mixed with triples."""
        with pytest.raises(TargetSelectionError, match="cannot be combined"):
            parse_target_selection("all,x86_64-apple-darwin")


class TestNormalizeInputEnv:
    """Tests for :func:`normalize_input_env`."""

    @pytest.mark.usefixtures("clean_input_env")
    def test_folds_dashed_keys(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Dashed keys become underscore keys and are removed."""
        monkeypatch.setenv("INPUT_ALL-TARGETS", "true")
        monkeypatch.delenv("INPUT_ALL_TARGETS", raising=False)

        normalize_input_env()

        assert os.environ["INPUT_ALL_TARGETS"] == "true"
        assert "INPUT_ALL-TARGETS" not in os.environ

    @pytest.mark.usefixtures("clean_input_env")
    def test_existing_underscore_key_wins(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """An existing underscore key is not overwritten."""
        monkeypatch.setenv("INPUT_OUTPUT_FORMAT", "yaml")
        monkeypatch.setenv("INPUT_OUTPUT-FORMAT", "json")

        normalize_input_env()

        assert os.environ["INPUT_OUTPUT_FORMAT"] == "yaml"
        assert "INPUT_OUTPUT-FORMAT" not in os.environ

    @pytest.mark.usefixtures("clean_input_env")
    def test_ignores_other_prefixes(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Keys outside the prefix are left alone."""
        monkeypatch.setenv("OTHER-KEY", "value")

        normalize_input_env()

        assert os.environ["OTHER-KEY"] == "value"
