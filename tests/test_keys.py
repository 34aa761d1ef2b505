"""Tests for raw key normalization (cli/keys.py).

A stand-in module object with readchar-style constants is used so
platform differences do not matter.
"""

from __future__ import annotations

import types

import pytest

from price_editor.cli.keys import build_key_map, normalize_key


def _posix_key_module() -> types.ModuleType:
    mod = types.ModuleType("fake_readchar_key")
    mod.UP = "\x1b[A"
    mod.DOWN = "\x1b[B"
    mod.LEFT = "\x1b[D"
    mod.RIGHT = "\x1b[C"
    mod.HOME = "\x1b[H"
    mod.END = "\x1b[F"
    mod.DELETE = "\x1b[3~"
    mod.BACKSPACE = "\x7f"
    mod.ESC = "\x1b"
    mod.TAB = "\t"
    mod.ENTER = "\r"
    mod.CR = "\r"
    mod.LF = "\n"
    mod.CTRL_A = "\x01"
    mod.CTRL_C = "\x03"
    mod.CTRL_H = "\x08"
    mod.CTRL_I = "\t"
    mod.CTRL_M = "\r"
    mod.CTRL_ALT_A = "\x1b\x01"
    return mod


@pytest.fixture
def key_map() -> dict[str, str]:
    return build_key_map(_posix_key_module())


class TestBuildKeyMap:
    @pytest.mark.parametrize(
        ("raw", "name"),
        [
            ("\x1b[A", "up"),
            ("\x1b[B", "down"),
            ("\x1b[H", "home"),
            ("\x1b[F", "end"),
            ("\x1b[3~", "delete"),
            ("\x7f", "backspace"),
            ("\x1b", "esc"),
            ("\r", "enter"),
            ("\n", "enter"),
            ("\t", "tab"),
            ("\x03", "ctrl+c"),
            ("\x01", "ctrl+a"),
            ("\x08", "ctrl+h"),
            (" ", "space"),
        ],
    )
    def test_names(self, key_map: dict[str, str], raw: str, name: str) -> None:
        assert normalize_key(raw, key_map) == name

    def test_compound_ctrl_names_skipped(self, key_map: dict[str, str]) -> None:
        assert "\x1b\x01" not in key_map

    def test_windows_backspace_wins_over_ctrl_h(self) -> None:
        mod = _posix_key_module()
        mod.BACKSPACE = "\x08"
        assert build_key_map(mod)["\x08"] == "backspace"


class TestNormalizeKey:
    @pytest.mark.parametrize("raw", ["q", "G", "5", ".", "-"])
    def test_printable_passthrough(self, key_map: dict[str, str], raw: str) -> None:
        assert normalize_key(raw, key_map) == raw

    def test_unknown_sequence_passthrough(self, key_map: dict[str, str]) -> None:
        assert normalize_key("\x1b[1;5A", key_map) == "\x1b[1;5A"
