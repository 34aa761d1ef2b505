"""Infrastructure: probe where the generated listing will be written.

Used by ``price-editor doctor`` to warn about an output path that
cannot be written before any editing happens.

Rules
-----
* Detection via :func:`os.access` only — nothing is created or opened.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Probe result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OutputTarget:
    """Result of an output-path probe.

    Attributes
    ----------
    path : Path
        Absolute path the listing would be written to.
    exists : bool
        Whether a file is already present at *path*.
    writable : bool
        Whether the current user could write the listing there.
    hint : str
        Human-readable status (e.g. ``"will be overwritten"``).
    """

    path: Path
    exists: bool
    writable: bool
    hint: str


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_output_target(path: Path) -> OutputTarget:
    """Probe *path* without creating or opening anything.

    Returns an :class:`OutputTarget` regardless of the outcome; the
    caller decides whether to abort or merely warn.
    """
    resolved = path.expanduser().resolve()

    if resolved.is_dir():
        return OutputTarget(
            path=resolved,
            exists=True,
            writable=False,
            hint="is a directory",
        )

    if resolved.exists():
        writable = os.access(resolved, os.W_OK)
        return OutputTarget(
            path=resolved,
            exists=True,
            writable=writable,
            hint="will be overwritten" if writable else "file is read-only",
        )

    parent = resolved.parent
    if not parent.is_dir():
        return OutputTarget(
            path=resolved,
            exists=False,
            writable=False,
            hint=f"directory {parent} does not exist",
        )

    writable = os.access(parent, os.W_OK | os.X_OK)
    return OutputTarget(
        path=resolved,
        exists=False,
        writable=writable,
        hint="will be created" if writable else f"directory {parent} is read-only",
    )
