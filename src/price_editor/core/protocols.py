"""Protocols (interfaces) consumed outside the infrastructure layer.

These define the contracts that infrastructure adapters must satisfy.
Callers depend ONLY on these protocols — never on concrete
implementations — so tests can substitute in-memory writers.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class DocumentWriter(Protocol):
    """Contract for persisting the generated listing.

    Any object that implements :meth:`write` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def write(self, path: Path, text: str) -> None:
        """Replace the file at *path* with *text*.

        Implementations must map all backend-specific exceptions to
        :class:`~price_editor.exceptions.PriceEditorError` subclasses.

        Raises
        ------
        PersistenceError
            When the document cannot be written.
        """
        ...  # pragma: no cover
