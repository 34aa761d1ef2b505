"""Read-only style table for the editor views.

Styles are Rich style strings so the table itself needs no Rich import.
:data:`DEFAULT_THEME` is built once at import and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Theme:
    """Named styles used by :mod:`price_editor.cli.render`."""

    title: str = "bold bright_blue"
    cursor_line: str = "bold black on bright_blue"
    checked: str = "bright_green"
    unchecked: str = "bright_black"
    help: str = "bright_black"
    input_border: str = "bright_blue"
    placeholder: str = "bright_black"
    caret: str = "reverse"
    error: str = "bright_red"

    checked_marker: str = "●"
    unchecked_marker: str = "○"
    prompt: str = "> "


DEFAULT_THEME = Theme()
