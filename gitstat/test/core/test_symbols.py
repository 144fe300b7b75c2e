"""Tests for gitstat.core.symbols module."""

import dataclasses

import pytest

from gitstat.core.symbols import Symbols


class TestSymbols:
    def test_defaults(self) -> None:
        s = Symbols()
        assert (s.prefix, s.suffix, s.sep, s.local) == ("[", "]", "|", "L")
        assert s.ahead == "↑·"
        assert s.behind == "↓·"
        assert s.staged == "● "
        assert s.conflict == "✖ "
        assert s.modified == "✚ "
        assert s.untracked == "…"
        assert s.stashed == "⚑ "
        assert s.clean == "✔"

    def test_override_single_field(self) -> None:
        s = Symbols(prefix="(", suffix=")")
        assert s.prefix == "("
        assert s.suffix == ")"
        assert s.sep == "|"

    def test_frozen(self) -> None:
        s = Symbols()
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.prefix = "<"  # type: ignore[misc]
