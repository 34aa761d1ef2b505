"""Percentage parsing, two-decimal rounding, and the increase transform.

Every function in this module is deterministic and free of I/O.
Rounding goes through :mod:`decimal` so that a price like ``1.005``
becomes ``1.01`` instead of whatever its binary approximation would
truncate to.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, localcontext

from price_editor.core.models import Catalog
from price_editor.exceptions import InvalidPercentageError

INVALID_PERCENTAGE_MESSAGE: str = "Please enter a valid positive number."

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_CENT = Decimal("0.01")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_percentage(text: str) -> float:
    """Parse user-entered percentage text.

    Surrounding whitespace is ignored.  Plain decimal and exponent
    notation are accepted; ``nan``, ``inf``, digit separators and
    negative values are not.

    Raises
    ------
    InvalidPercentageError
        When *text* is not a non-negative decimal number.
    """
    stripped = text.strip()
    if not _NUMBER_RE.fullmatch(stripped):
        raise InvalidPercentageError(INVALID_PERCENTAGE_MESSAGE)
    value = float(stripped)
    if not math.isfinite(value) or value < 0:
        raise InvalidPercentageError(INVALID_PERCENTAGE_MESSAGE)
    return value


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------

def round2(value: float) -> float:
    """Round *value* to two decimal places, half away from zero.

    The float is first rendered as its shortest decimal string, so the
    rounding decision is made on the digits a reader would see.  The
    working precision grows with the magnitude of *value*, so very
    large prices are rounded rather than rejected.
    """
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + 3)
        return float(exact.quantize(_CENT, rounding=ROUND_HALF_UP))


# ---------------------------------------------------------------------------
# Transform
# ---------------------------------------------------------------------------

def multiplier(percent: float) -> float:
    """Return the factor that raises a price by *percent* percent."""
    return 1 + percent / 100


def apply_increase(catalog: Catalog, selection: Iterable[int], percent: float) -> None:
    """Raise every selected entry of *catalog* by *percent*, in place.

    Unselected entries are left untouched.  Applying the same increase
    twice compounds it.  When any raised price would overflow to
    infinity nothing is changed.
    """
    if percent < 0:
        raise InvalidPercentageError(INVALID_PERCENTAGE_MESSAGE)
    factor = multiplier(percent)
    raised = {
        index: catalog[index].value * factor for index in sorted(set(selection))
    }
    if not all(math.isfinite(value) for value in raised.values()):
        raise InvalidPercentageError(INVALID_PERCENTAGE_MESSAGE)
    for index, value in raised.items():
        catalog.set_value(index, round2(value))
