"""Core layer — catalog, workflow state machine, and pure transforms.

Rules
-----
* No ``print()`` calls.
* No filesystem or terminal I/O.
* No imports from ``cli`` or ``infra``.
* No third-party imports.
"""

from price_editor.core.catalog import DEFAULT_PRICES, default_catalog
from price_editor.core.editor import EditorState, PriceEditor
from price_editor.core.models import (
    Catalog,
    KeyEvent,
    PriceEntry,
    ResizeEvent,
    Stage,
    TerminalSize,
    Transition,
)
from price_editor.core.protocols import DocumentWriter
from price_editor.core.serializer import build_output

__all__: list[str] = [
    "DEFAULT_PRICES",
    "Catalog",
    "DocumentWriter",
    "EditorState",
    "KeyEvent",
    "PriceEditor",
    "PriceEntry",
    "ResizeEvent",
    "Stage",
    "TerminalSize",
    "Transition",
    "build_output",
    "default_catalog",
]
