"""Filesystem implementation of :class:`~price_editor.core.protocols.DocumentWriter`.

This module is the **only** place in the codebase that writes the
generated listing.  ``OSError`` is caught here and re-raised as
:class:`~price_editor.exceptions.PersistenceError`.
"""

from __future__ import annotations

from pathlib import Path

from price_editor.exceptions import PersistenceError

ENCODING: str = "utf-8"


class FileDocumentWriter:
    """Concrete :class:`DocumentWriter` that overwrites a file in one call.

    This class satisfies the :class:`~price_editor.core.protocols.DocumentWriter`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, *, encoding: str = ENCODING) -> None:
        self._encoding: str = encoding

    def write(self, path: Path, text: str) -> None:
        """Replace the file at *path* with *text*.

        Raises
        ------
        PersistenceError
            When the file cannot be opened or written.
        """
        try:
            with open(path, "w", encoding=self._encoding, newline="\n") as handle:
                handle.write(text)
        except OSError as exc:
            raise PersistenceError(
                f"Failed to write file: {exc}",
                hint=f"Check that {path.parent} exists and is writable, or pass --output.",
            ) from exc
