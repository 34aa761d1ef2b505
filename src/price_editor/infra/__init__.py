"""Infrastructure layer — filesystem integration.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~price_editor.exceptions.PriceEditorError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from price_editor.infra.output_target import OutputTarget, detect_output_target
from price_editor.infra.persistence import FileDocumentWriter

__all__: list[str] = [
    "FileDocumentWriter",
    "OutputTarget",
    "detect_output_target",
]
