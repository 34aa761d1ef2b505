"""Translate raw ``readchar`` key strings into editor key names.

``readchar.readkey()`` returns escape sequences that differ between
platforms.  The editor only ever sees the normalized names produced
here: ``"up"``, ``"enter"``, ``"ctrl+c"``, ``"space"``, or the
printable character itself.
"""

from __future__ import annotations

from types import ModuleType

# Names that win when several readchar constants share one sequence
# (ENTER/CR/CTRL_M, TAB/CTRL_I, BACKSPACE/CTRL_H on Windows, ...).
_PREFERRED_NAMES: tuple[str, ...] = (
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "HOME",
    "END",
    "PAGE_UP",
    "PAGE_DOWN",
    "INSERT",
    "DELETE",
    "BACKSPACE",
    "TAB",
    "ESC",
    "ENTER",
)


def build_key_map(key_module: ModuleType) -> dict[str, str]:
    """Map each sequence defined by ``readchar.key`` to an editor key name."""
    key_map: dict[str, str] = {}
    for attr in dir(key_module):
        if not attr.startswith("CTRL_") or attr.count("_") != 1:
            continue
        value = getattr(key_module, attr)
        if isinstance(value, str):
            key_map[value] = "ctrl+" + attr[len("CTRL_"):].lower()

    for attr in _PREFERRED_NAMES:
        value = getattr(key_module, attr, None)
        if isinstance(value, str):
            key_map[value] = attr.lower().replace("_", "")

    key_map["\r"] = "enter"
    key_map["\n"] = "enter"
    key_map[" "] = "space"
    return key_map


def normalize_key(raw: str, key_map: dict[str, str]) -> str:
    """Return the editor name for *raw*, or *raw* itself when unmapped."""
    return key_map.get(raw, raw)
