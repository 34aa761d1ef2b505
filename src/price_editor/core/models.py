"""Domain models for price-editor.

Value objects (:class:`PriceEntry`, :class:`TerminalSize`, the event
types) are **frozen** dataclasses.  :class:`Catalog` is the one mutable
collection: its length and key order are fixed at construction, and
only entry values may change afterwards.
"""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

from price_editor.exceptions import CatalogError


# ---------------------------------------------------------------------------
# Price entries
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PriceEntry:
    """A single priced line item."""

    key: str
    """Identifier emitted verbatim into the generated listing."""

    value: float
    """Non-negative amount in dollars."""


class Catalog:
    """Ordered, fixed-length collection of :class:`PriceEntry` items.

    Insertion order is the display order and the output order.  Keys
    are unique.  There are no insert or delete operations; the only
    mutator is :meth:`set_value`.

    Raises
    ------
    CatalogError
        When keys are empty or duplicated, or a value is negative or
        not finite.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[PriceEntry]) -> None:
        self._entries: list[PriceEntry] = list(entries)
        seen: set[str] = set()
        for entry in self._entries:
            if not entry.key:
                raise CatalogError("Catalog keys must not be empty.")
            if entry.key in seen:
                raise CatalogError(f"Duplicate catalog key: {entry.key}")
            seen.add(entry.key)
            _check_value(entry)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, float]]) -> Catalog:
        """Build a catalog from ``(key, value)`` tuples."""
        return cls(PriceEntry(key=key, value=float(value)) for key, value in pairs)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PriceEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> PriceEntry:
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Catalog):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"Catalog({self._entries!r})"

    def keys(self) -> list[str]:
        return [entry.key for entry in self._entries]

    def values(self) -> list[float]:
        return [entry.value for entry in self._entries]

    def set_value(self, index: int, value: float) -> None:
        """Replace the value of the entry at *index*, keeping its key."""
        if not 0 <= index < len(self._entries):
            raise IndexError(f"catalog index out of range: {index}")
        updated = replace(self._entries[index], value=value)
        _check_value(updated)
        self._entries[index] = updated


def _check_value(entry: PriceEntry) -> None:
    if not math.isfinite(entry.value) or entry.value < 0:
        raise CatalogError(
            f"Invalid price for {entry.key}: {entry.value}",
            hint="Prices must be finite and not negative.",
        )


# ---------------------------------------------------------------------------
# Editor workflow
# ---------------------------------------------------------------------------

class Stage(enum.Enum):
    """Which half of the workflow is active."""

    SELECTING = "selecting"
    ENTERING_PERCENTAGE = "entering_percentage"


class Transition(enum.Enum):
    """What the host loop should do after an event was handled."""

    CONTINUE = "continue"
    QUIT = "quit"


@dataclass(frozen=True, slots=True)
class TerminalSize:
    """Last known terminal dimensions.  ``0`` means unknown."""

    width: int = 0
    height: int = 0

    @property
    def known(self) -> bool:
        return self.width > 0 and self.height > 0


# ---------------------------------------------------------------------------
# Input events
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class KeyEvent:
    """A key press, named the way :func:`~price_editor.cli.keys.normalize_key` names it.

    Printable keys are the character itself (``"q"``, ``"G"``, ``"5"``);
    special keys use lowercase names (``"up"``, ``"enter"``, ``"esc"``,
    ``"space"``, ``"ctrl+c"``).
    """

    key: str


@dataclass(frozen=True, slots=True)
class ResizeEvent:
    """The terminal was resized to ``width`` x ``height`` cells."""

    width: int
    height: int


Event = KeyEvent | ResizeEvent
