"""Render a catalog as the generated price listing.

Output shape::

    export const PRICES = {
      XL_UPPER_WINDOW: 23.64,
      FIRST_STORY_GUTTER: 1.0,
    };

The listing is a pure function of the catalog, so serializing an
unchanged catalog twice yields identical text.
"""

from __future__ import annotations

from decimal import Decimal

from price_editor.core.models import Catalog

DEFAULT_EXPORT_NAME: str = "PRICES"
INDENT: str = "  "


def format_value(value: float) -> str:
    """Return the shortest decimal text that round-trips *value*.

    Exponent notation is never used, and integral values keep one
    fractional digit (``3.0`` → ``"3.0"``, ``8.5`` → ``"8.5"``).
    """
    text = format(Decimal(repr(value)), "f")
    if "." not in text:
        text += ".0"
    return text


def build_output(catalog: Catalog, export_name: str = DEFAULT_EXPORT_NAME) -> str:
    """Build the full listing document for *catalog*."""
    lines = [f"export const {export_name} = {{"]
    lines.extend(
        f"{INDENT}{entry.key}: {format_value(entry.value)},"
        for entry in catalog
    )
    lines.append("};")
    return "\n".join(lines) + "\n"
