"""Selection/edit state machine.

:class:`PriceEditor` owns the single mutable :class:`EditorState` and is
the only thing that changes it.  Each call to :meth:`PriceEditor.handle`
applies exactly one event and tells the host loop whether to keep going.

Guarantees
----------
* No I/O and no rendering; views are derived from the state elsewhere.
* The cursor always indexes a valid catalog entry.
* The selection only ever holds valid catalog indices.
* The catalog is changed only by a confirmed, valid percentage.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from price_editor.core.models import (
    Catalog,
    Event,
    KeyEvent,
    ResizeEvent,
    Stage,
    TerminalSize,
    Transition,
)
from price_editor.core.pricing import apply_increase, parse_percentage
from price_editor.core.text_input import DEFAULT_CHAR_LIMIT, TextInput
from price_editor.exceptions import CatalogError, InvalidPercentageError

# Selecting-stage bindings
KEYS_UP: frozenset[str] = frozenset({"up", "k"})
KEYS_DOWN: frozenset[str] = frozenset({"down", "j"})
KEYS_TOP: frozenset[str] = frozenset({"g", "home"})
KEYS_BOTTOM: frozenset[str] = frozenset({"G", "end"})
KEYS_TOGGLE: frozenset[str] = frozenset({"space", " ", "x"})
KEYS_ALL: frozenset[str] = frozenset({"a"})
KEYS_QUIT: frozenset[str] = frozenset({"q", "ctrl+c"})

# Shared / entering-stage bindings
KEY_CONFIRM: str = "enter"
KEY_BACK: str = "esc"
KEY_HARD_QUIT: str = "ctrl+c"


@dataclass(slots=True)
class EditorState:
    """Everything the views need, and nothing derived from it."""

    catalog: Catalog
    selection: set[int] = field(default_factory=set)
    cursor: int = 0
    stage: Stage = Stage.SELECTING
    text_input: TextInput = field(default_factory=TextInput)
    error: str | None = None
    size: TerminalSize = field(default_factory=TerminalSize)
    finished: bool = False

    @property
    def pending_text(self) -> str:
        return self.text_input.value


class PriceEditor:
    """Event-driven workflow: pick entries, then enter a percentage.

    Parameters
    ----------
    catalog:
        The price list to edit.  Must not be empty.
    char_limit:
        Maximum length of the percentage field.
    """

    def __init__(self, catalog: Catalog, *, char_limit: int = DEFAULT_CHAR_LIMIT) -> None:
        if len(catalog) == 0:
            raise CatalogError("Cannot edit an empty catalog.")
        self.state: EditorState = EditorState(
            catalog=catalog,
            text_input=TextInput(char_limit=char_limit),
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def handle(self, event: Event) -> Transition:
        """Apply one input event to the state."""
        if isinstance(event, ResizeEvent):
            self.state.size = TerminalSize(width=event.width, height=event.height)
            return Transition.CONTINUE

        if self.state.stage is Stage.SELECTING:
            return self._handle_selecting(event)
        return self._handle_entering(event)

    # ------------------------------------------------------------------
    # Selecting stage
    # ------------------------------------------------------------------

    def _handle_selecting(self, event: KeyEvent) -> Transition:
        key = event.key
        state = self.state
        last = len(state.catalog) - 1

        if key in KEYS_QUIT:
            return Transition.QUIT
        if key in KEYS_UP:
            state.cursor = max(0, state.cursor - 1)
        elif key in KEYS_DOWN:
            state.cursor = min(last, state.cursor + 1)
        elif key in KEYS_TOP:
            state.cursor = 0
        elif key in KEYS_BOTTOM:
            state.cursor = last
        elif key in KEYS_TOGGLE:
            state.selection ^= {state.cursor}
        elif key in KEYS_ALL:
            self.toggle_all()
        elif key == KEY_CONFIRM and state.selection:
            state.stage = Stage.ENTERING_PERCENTAGE
            state.error = None
        return Transition.CONTINUE

    def toggle_all(self) -> None:
        """Select everything, or clear the selection when everything is selected.

        A partial selection becomes a full one; it is not inverted.
        """
        if len(self.state.selection) == len(self.state.catalog):
            self.state.selection = set()
        else:
            self.state.selection = set(range(len(self.state.catalog)))

    # ------------------------------------------------------------------
    # Entering-percentage stage
    # ------------------------------------------------------------------

    def _handle_entering(self, event: KeyEvent) -> Transition:
        key = event.key
        state = self.state

        if key == KEY_HARD_QUIT:
            return Transition.QUIT
        if key == KEY_BACK:
            state.stage = Stage.SELECTING
            state.text_input.reset()
            state.error = None
            return Transition.CONTINUE
        if key == KEY_CONFIRM:
            return self._confirm_percentage()

        state.text_input.handle_key(key)
        return Transition.CONTINUE

    def _confirm_percentage(self) -> Transition:
        state = self.state
        try:
            percent = parse_percentage(state.text_input.value)
        except InvalidPercentageError as exc:
            state.error = str(exc)
            return Transition.CONTINUE

        apply_increase(state.catalog, state.selection, percent)
        state.finished = True
        return Transition.QUIT
