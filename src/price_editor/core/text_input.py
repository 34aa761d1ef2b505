"""Single-line text field with a caret and a length bound.

Keys are the normalized names produced by the CLI layer (see
:class:`~price_editor.core.models.KeyEvent`).  Editing bindings follow
the usual readline/emacs conventions.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CHAR_LIMIT: int = 10
DEFAULT_PLACEHOLDER: str = "e.g. 10.5"


@dataclass(slots=True)
class TextInput:
    """Editable text value plus caret position.

    ``position`` is an index between characters, ``0`` being before the
    first character and ``len(value)`` after the last.
    """

    value: str = ""
    position: int = 0
    char_limit: int = DEFAULT_CHAR_LIMIT
    placeholder: str = DEFAULT_PLACEHOLDER

    # ------------------------------------------------------------------
    # Programmatic edits
    # ------------------------------------------------------------------

    def set_value(self, text: str) -> None:
        """Replace the contents, truncated to the limit; caret to the end."""
        if self.char_limit > 0:
            text = text[: self.char_limit]
        self.value = text
        self.position = len(text)

    def reset(self) -> None:
        self.set_value("")

    def insert(self, text: str) -> None:
        """Insert *text* at the caret, dropping whatever exceeds the limit."""
        if self.char_limit > 0:
            room = self.char_limit - len(self.value)
            if room <= 0:
                return
            text = text[:room]
        self.value = self.value[: self.position] + text + self.value[self.position :]
        self.position += len(text)

    # ------------------------------------------------------------------
    # Key handling
    # ------------------------------------------------------------------

    def handle_key(self, key: str) -> bool:
        """Apply an editing key.  Returns ``False`` for keys it ignores."""
        if key == "space":
            key = " "
        if len(key) == 1:
            if not key.isprintable():
                return False
            self.insert(key)
            return True

        handler = _KEY_HANDLERS.get(key)
        if handler is None:
            return False
        handler(self)
        return True

    def _backspace(self) -> None:
        if self.position > 0:
            self.value = self.value[: self.position - 1] + self.value[self.position :]
            self.position -= 1

    def _delete(self) -> None:
        if self.position < len(self.value):
            self.value = self.value[: self.position] + self.value[self.position + 1 :]

    def _left(self) -> None:
        self.position = max(0, self.position - 1)

    def _right(self) -> None:
        self.position = min(len(self.value), self.position + 1)

    def _home(self) -> None:
        self.position = 0

    def _end(self) -> None:
        self.position = len(self.value)

    def _kill_to_start(self) -> None:
        self.value = self.value[self.position :]
        self.position = 0

    def _kill_to_end(self) -> None:
        self.value = self.value[: self.position]

    def _kill_word(self) -> None:
        start = self.position
        while start > 0 and self.value[start - 1] == " ":
            start -= 1
        while start > 0 and self.value[start - 1] != " ":
            start -= 1
        self.value = self.value[:start] + self.value[self.position :]
        self.position = start


_KEY_HANDLERS = {
    "backspace": TextInput._backspace,
    "ctrl+h": TextInput._backspace,
    "delete": TextInput._delete,
    "ctrl+d": TextInput._delete,
    "left": TextInput._left,
    "ctrl+b": TextInput._left,
    "right": TextInput._right,
    "ctrl+f": TextInput._right,
    "home": TextInput._home,
    "ctrl+a": TextInput._home,
    "end": TextInput._end,
    "ctrl+e": TextInput._end,
    "ctrl+u": TextInput._kill_to_start,
    "ctrl+k": TextInput._kill_to_end,
    "ctrl+w": TextInput._kill_word,
}
