"""Custom exception hierarchy for price-editor.

All exceptions that cross layer boundaries must inherit from
:class:`PriceEditorError`.  Raw ``OSError`` and terminal-driver
exceptions must never propagate beyond the layer that produced them —
they are caught and re-raised as a typed subclass defined here.

Hierarchy
---------
PriceEditorError
├── CatalogError
├── InvalidPercentageError
├── PersistenceError
├── TerminalError
├── ConfigError
└── EnvironmentError
"""

from __future__ import annotations


class PriceEditorError(Exception):
    """Base exception for all price-editor errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Catalog ---------------------------------------------------------------

class CatalogError(PriceEditorError):
    """Raised when a catalog is built from inconsistent entries."""


# --- Input validation ------------------------------------------------------

class InvalidPercentageError(PriceEditorError):
    """Raised when percentage text is not a non-negative number.

    This one never reaches the error boundary: the editor catches it and
    shows the message inline.
    """


# --- Output ----------------------------------------------------------------

class PersistenceError(PriceEditorError):
    """Raised when the generated listing cannot be written."""


# --- Terminal --------------------------------------------------------------

class TerminalError(PriceEditorError):
    """Raised when the terminal driver fails during the event loop."""


# --- Configuration ---------------------------------------------------------

class ConfigError(PriceEditorError):
    """Raised when command-line or environment settings are invalid."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(PriceEditorError):
    """Raised when a required runtime dependency is not available."""
