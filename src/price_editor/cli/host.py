"""Terminal host loop: read a key, apply it, redraw.

The loop is single-threaded.  Each iteration:

1. Feeds a :class:`ResizeEvent` when the console size changed.
2. Redraws the current view on a full-screen Rich ``Live`` display.
3. Blocks on exactly one key from :class:`ReadcharKeySource`.
4. Hands the key to :meth:`PriceEditor.handle` and stops on ``QUIT``.

Size changes are only noticed between keys: the loop blocks in
``readkey()`` and the display is refreshed manually, so after a resize
the view stays at its old position until the next key press.

Ctrl+C while waiting for a key is delivered to the editor as the
``"ctrl+c"`` key, so aborting never leaves the loop through an
exception.  Any failure of the terminal driver itself is re-raised as
:class:`~price_editor.exceptions.TerminalError`.
"""

from __future__ import annotations

from typing import Any, Protocol

from price_editor.cli.console import get_rich_console
from price_editor.cli.keys import build_key_map, normalize_key
from price_editor.cli.render import render
from price_editor.cli.theme import DEFAULT_THEME, Theme
from price_editor.core.editor import EditorState, PriceEditor
from price_editor.core.models import KeyEvent, ResizeEvent, Transition
from price_editor.exceptions import EnvironmentError, PriceEditorError, TerminalError


def _import_readchar() -> Any:
    """Import readchar lazily for raw key input."""
    try:
        import readchar
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "readchar is not installed. Install with: pip install readchar",
        ) from exc
    return readchar


def _import_rich_live() -> type[Any]:
    """Import rich live display lazily."""
    try:
        from rich.live import Live
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Live


class KeySource(Protocol):
    """Anything that blocks until the next key and returns its name."""

    def read(self) -> str:
        ...  # pragma: no cover


class ReadcharKeySource:
    """Reads raw keys from the terminal via ``readchar.readkey``."""

    def __init__(self) -> None:
        readchar = _import_readchar()
        self._readkey = readchar.readkey
        self._key_map: dict[str, str] = build_key_map(readchar.key)

    def read(self) -> str:
        return normalize_key(self._readkey(), self._key_map)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_editor(
    editor: PriceEditor,
    *,
    keys: KeySource | None = None,
    console: Any = None,
    theme: Theme = DEFAULT_THEME,
) -> EditorState:
    """Drive *editor* until it quits and return its final state.

    Parameters
    ----------
    editor:
        The state machine to drive.
    keys:
        Key source; defaults to :class:`ReadcharKeySource`.
    console:
        Rich console to draw on; defaults to a stderr console.
    theme:
        Style table for the views.

    Raises
    ------
    TerminalError
        When the terminal driver fails.
    EnvironmentError
        When rich or readchar is not installed.
    """
    if keys is None:
        keys = ReadcharKeySource()
    if console is None:
        console = get_rich_console()
    live_class = _import_rich_live()

    try:
        with live_class(
            render(editor.state, theme),
            console=console,
            screen=True,
            auto_refresh=False,
        ) as live:
            _event_loop(editor, keys, console, live, theme)
    except PriceEditorError:
        raise
    except Exception as exc:
        raise TerminalError(
            f"Terminal error: {exc}",
            hint="Run price-editor from an interactive terminal.",
        ) from exc
    finally:
        console.clear()

    return editor.state


def _event_loop(
    editor: PriceEditor,
    keys: KeySource,
    console: Any,
    live: Any,
    theme: Theme,
) -> None:
    """Handle events until the editor returns ``QUIT``."""
    while True:
        width, height = console.size
        size = editor.state.size
        if (width, height) != (size.width, size.height):
            editor.handle(ResizeEvent(width=width, height=height))

        live.update(render(editor.state, theme), refresh=True)

        try:
            key = keys.read()
        except KeyboardInterrupt:
            key = "ctrl+c"
        except EOFError:
            return

        if editor.handle(KeyEvent(key)) is Transition.QUIT:
            return
