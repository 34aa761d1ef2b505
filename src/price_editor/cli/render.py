"""Views for the editor: pure ``EditorState`` → Rich renderable.

This module is responsible for:

* The selection view — checklist of prices with the cursor highlighted.
* The input view — selected count, bordered percentage field, errors.
* Centering either view inside the last known terminal size.

Nothing here reads input or mutates state; every call re-derives the
output from the state passed in.
"""

from __future__ import annotations

from typing import Any

from price_editor.cli.theme import DEFAULT_THEME, Theme
from price_editor.core.editor import EditorState
from price_editor.core.models import PriceEntry, Stage
from price_editor.core.text_input import TextInput
from price_editor.exceptions import EnvironmentError

SELECT_TITLE: str = "Price Editor"
INPUT_TITLE: str = "Apply Percentage Increase"
SELECT_HELP: str = (
    "↑/k up  ↓/j down  g/G top/bottom  space/x toggle  a all  enter confirm  q quit"
)
INPUT_HELP: str = "enter confirm  esc back  ctrl+c quit"

KEY_WIDTH: int = 32
PRICE_WIDTH: int = 20


def _import_rich() -> Any:
    """Import the Rich modules the views need, lazily."""
    try:
        import rich.align
        import rich.box
        import rich.console
        import rich.panel
        import rich.text
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return rich


# ---------------------------------------------------------------------------
# Presentation helpers (pure string transforms)
# ---------------------------------------------------------------------------

def format_price(value: float) -> str:
    """Render a price as ``"$12.34"``."""
    return f"${value:.2f}"


def entry_columns(entry: PriceEntry) -> str:
    """Key padded to a fixed column, then the price right-aligned after it.

    Format: ``"XL_UPPER_WINDOW                               $23.64"``
    """
    price = format_price(entry.value)
    padding = " " * max(0, PRICE_WIDTH - len(price))
    return f"{entry.key:<{KEY_WIDTH}}{padding}{price}"


def selected_count_line(count: int) -> str:
    return f"{count} item(s) selected"


# ---------------------------------------------------------------------------
# Selection view
# ---------------------------------------------------------------------------

def render_selection(state: EditorState, theme: Theme = DEFAULT_THEME) -> Any:
    """Checklist of every catalog entry, cursor row highlighted."""
    rich = _import_rich()
    Text = rich.text.Text

    parts: list[Any] = [Text(SELECT_TITLE, style=theme.title), Text("")]

    for index, entry in enumerate(state.catalog):
        is_selected = index in state.selection
        marker = theme.checked_marker if is_selected else theme.unchecked_marker
        columns = entry_columns(entry)

        if index == state.cursor:
            parts.append(Text(f"{marker} {columns}", style=theme.cursor_line))
        else:
            marker_style = theme.checked if is_selected else theme.unchecked
            parts.append(Text.assemble((marker, marker_style), f" {columns}"))

    parts.append(Text(""))
    parts.append(Text(SELECT_HELP, style=theme.help))
    return rich.console.Group(*parts)


# ---------------------------------------------------------------------------
# Input view
# ---------------------------------------------------------------------------

def render_field(text_input: TextInput, theme: Theme = DEFAULT_THEME) -> Any:
    """The prompt, current text (or placeholder), and the caret."""
    Text = _import_rich().text.Text

    field = Text(theme.prompt)
    if not text_input.value:
        placeholder = text_input.placeholder or " "
        field.append(placeholder[0], style=theme.caret)
        field.append(placeholder[1:], style=theme.placeholder)
        return field

    value = text_input.value
    position = text_input.position
    field.append(value[:position])
    if position < len(value):
        field.append(value[position], style=theme.caret)
        field.append(value[position + 1 :])
    else:
        field.append(" ", style=theme.caret)
    return field


def render_input(state: EditorState, theme: Theme = DEFAULT_THEME) -> Any:
    """Percentage prompt for the current selection."""
    rich = _import_rich()
    Text = rich.text.Text

    parts: list[Any] = [
        Text(INPUT_TITLE, style=theme.title),
        Text(""),
        Text(selected_count_line(len(state.selection))),
        Text(""),
        rich.panel.Panel(
            render_field(state.text_input, theme),
            box=rich.box.ROUNDED,
            border_style=theme.input_border,
            padding=(0, 1),
            expand=False,
        ),
    ]
    if state.error:
        parts.append(Text(state.error, style=theme.error))
    parts.append(Text(""))
    parts.append(Text(INPUT_HELP, style=theme.help))
    return rich.console.Group(*parts)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def render(state: EditorState, theme: Theme = DEFAULT_THEME) -> Any:
    """Render the view for the current stage.

    When the terminal size is known the view is centered in it;
    otherwise it is returned as-is.
    """
    if state.stage is Stage.ENTERING_PERCENTAGE:
        content = render_input(state, theme)
    else:
        content = render_selection(state, theme)

    if not state.size.known:
        return content

    rich = _import_rich()
    return rich.align.Align(
        content,
        align="center",
        vertical="middle",
        width=state.size.width,
        height=state.size.height,
    )
