"""End-to-end tests for the edit command and the CLI error boundary (cli/app.py).

The terminal is replaced at the host-loop boundary: keys are scripted,
the console is a stub and ``rich.live.Live`` is a no-op fake.  Files
are written to ``tmp_path``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from price_editor.cli import exit_codes, host
from price_editor.cli.app import cli, main
from price_editor.core.models import Catalog
from price_editor.core.pricing import multiplier, round2
from price_editor.core.serializer import format_value
from price_editor.exceptions import PersistenceError, TerminalError


# ---------------------------------------------------------------------------
# Terminal stand-ins
# ---------------------------------------------------------------------------

class _Keys:
    def __init__(self, keys: list[str]) -> None:
        self._keys = list(keys)

    def read(self) -> str:
        return self._keys.pop(0)


class _Console:
    size = (100, 30)

    def clear(self) -> None:
        pass


class _Live:
    def __init__(self, *_args: Any, **_kwargs: Any) -> None:
        pass

    def __enter__(self) -> _Live:
        return self

    def __exit__(self, *_args: object) -> None:
        pass

    def update(self, *_args: Any, **_kwargs: Any) -> None:
        pass


@pytest.fixture
def terminal(monkeypatch: pytest.MonkeyPatch) -> Any:
    """Install fakes; call the returned function with the key script."""
    monkeypatch.setattr(host, "_import_rich_live", lambda: _Live)
    monkeypatch.setattr(host, "get_rich_console", lambda: _Console())

    def script(keys: list[str]) -> None:
        monkeypatch.setattr(host, "ReadcharKeySource", lambda: _Keys(keys))

    return script


@pytest.fixture
def abc_catalog() -> Any:
    with patch(
        "price_editor.core.catalog.default_catalog",
        side_effect=lambda: Catalog.from_pairs([("A", 10.0), ("B", 20.0), ("C", 5.0)]),
    ) as mocked:
        yield mocked


# ---------------------------------------------------------------------------
# Edit command
# ---------------------------------------------------------------------------

class TestEditCommand:
    def test_confirmed_increase_writes_listing(
        self,
        terminal: Any,
        abc_catalog: Any,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        out = tmp_path / "prices.ts"
        terminal(["space", "down", "space", "enter", "1", "0", "enter"])

        code = main(["--output", str(out)])

        assert code == exit_codes.SUCCESS
        text = out.read_text(encoding="utf-8")
        assert text == (
            "export const PRICES = {\n"
            "  A: 11.0,\n"
            "  B: 22.0,\n"
            "  C: 5.0,\n"
            "};\n"
        )
        assert "Wrote updated prices" in capsys.readouterr().err

    def test_export_name_flag(
        self, terminal: Any, abc_catalog: Any, tmp_path: Path,
    ) -> None:
        out = tmp_path / "prices.ts"
        terminal(["a", "enter", "0", "enter"])

        main(["--output", str(out), "--name", "RATES"])

        assert out.read_text(encoding="utf-8").startswith("export const RATES = {\n")

    def test_quit_immediately_writes_nothing(
        self, terminal: Any, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        out = tmp_path / "prices.ts"
        terminal(["q"])

        code = main(["--output", str(out)])

        assert code == exit_codes.SUCCESS
        assert not out.exists()
        assert "Wrote" not in capsys.readouterr().err

    def test_abandon_after_invalid_input_writes_nothing(
        self, terminal: Any, tmp_path: Path,
    ) -> None:
        out = tmp_path / "prices.ts"
        terminal(["space", "enter", "-", "1", "enter", "ctrl+c"])

        assert main(["--output", str(out)]) == exit_codes.SUCCESS
        assert not out.exists()

    def test_exponent_percentage_is_written(
        self, terminal: Any, abc_catalog: Any, tmp_path: Path,
    ) -> None:
        out = tmp_path / "prices.ts"
        terminal(["x", "enter", "1", "e", "3", "0", "enter"])

        assert main(["--output", str(out)]) == exit_codes.SUCCESS

        expected = format_value(round2(10.0 * multiplier(1e30)))
        lines = out.read_text(encoding="utf-8").splitlines()
        assert lines[1] == f"  A: {expected},"
        assert "e" not in expected
        assert lines[2] == "  B: 20.0,"

    def test_default_table_is_edited(self, terminal: Any, tmp_path: Path) -> None:
        out = tmp_path / "prices.ts"
        terminal(["enter", "space", "enter", "1", "0", "enter"])

        main(["--output", str(out)])

        lines = out.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 21
        assert lines[1] == "  XL_UPPER_WINDOW: 26.0,"
        assert lines[2] == "  L_UPPER_WINDOW: 16.06,"

    def test_unwritable_output_raises(
        self, terminal: Any, tmp_path: Path,
    ) -> None:
        terminal(["space", "enter", "5", "enter"])

        with pytest.raises(PersistenceError):
            main(["--output", str(tmp_path / "missing" / "prices.ts")])


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestCliBoundary:
    def _exit_code(self) -> int:
        with pytest.raises(SystemExit) as exc_info:
            cli()
        return int(exc_info.value.code)

    def test_success(self) -> None:
        with patch("price_editor.cli.app.main", return_value=exit_codes.SUCCESS):
            assert self._exit_code() == exit_codes.SUCCESS

    def test_persistence_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        error = PersistenceError("Failed to write file: denied", hint="Check the path.")
        with patch("price_editor.cli.app.main", side_effect=error):
            assert self._exit_code() == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Failed to write file: denied" in err
        assert "Check the path." in err

    def test_terminal_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("price_editor.cli.app.main", side_effect=TerminalError("Terminal error: boom")):
            assert self._exit_code() == exit_codes.GENERAL_ERROR
        assert "Terminal error: boom" in capsys.readouterr().err

    def test_keyboard_interrupt(self) -> None:
        with patch("price_editor.cli.app.main", side_effect=KeyboardInterrupt):
            assert self._exit_code() == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("price_editor.cli.app.main", side_effect=RuntimeError("kaboom")):
            assert self._exit_code() == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: kaboom" in capsys.readouterr().err
