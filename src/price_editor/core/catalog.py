"""Built-in price table.

The order below is the order shown in the editor and the order written
to the generated listing.
"""

from __future__ import annotations

from price_editor.core.models import Catalog

DEFAULT_PRICES: tuple[tuple[str, float], ...] = (
    ("XL_UPPER_WINDOW", 23.64),
    ("L_UPPER_WINDOW", 16.06),
    ("M_UPPER_WINDOW", 8.59),
    ("S_UPPER_WINDOW", 6.85),
    ("XS_UPPER_WINDOW", 3.56),
    ("XL_LOWER_WINDOW", 17.98),
    ("L_LOWER_WINDOW", 11.43),
    ("M_LOWER_WINDOW", 6.49),
    ("S_LOWER_WINDOW", 4.31),
    ("XS_LOWER_WINDOW", 2.54),
    ("EXTERIOR_HALF_SCREEN", 2.72),
    ("WHOLE_INTERIOR_SCREEN", 3.12),
    ("EXTERIOR_HALF_SCREEN_INTERIOR", 4.0),
    ("SOLAR_SCREEN", 5.56),
    ("SCREW_SOLAR_SCREEN", 8.0),
    ("UPPER_WOODEN_SCREEN", 14.0),
    ("LOWER_WOODEN_SCREEN", 7.0),
    ("FIRST_STORY_GUTTER", 1.0),
    ("SECOND_STORY_GUTTER", 2.0),
)


def default_catalog() -> Catalog:
    """Return a fresh catalog seeded from :data:`DEFAULT_PRICES`."""
    return Catalog.from_pairs(DEFAULT_PRICES)
