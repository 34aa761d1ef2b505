"""Runtime configuration resolved once at startup.

Precedence, highest first: command-line flags, environment variables,
built-in defaults.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from price_editor.core.serializer import DEFAULT_EXPORT_NAME
from price_editor.core.text_input import DEFAULT_CHAR_LIMIT
from price_editor.exceptions import ConfigError

DEFAULT_OUTPUT_PATH: Path = Path("../../lib/prices.ts")

ENV_OUTPUT: str = "PRICE_EDITOR_OUTPUT"
ENV_EXPORT_NAME: str = "PRICE_EDITOR_EXPORT_NAME"


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Settings for one editing session."""

    output_path: Path = DEFAULT_OUTPUT_PATH
    """Where the generated listing is written, relative to the cwd."""

    export_name: str = DEFAULT_EXPORT_NAME
    """Name of the exported mapping in the generated listing."""

    char_limit: int = DEFAULT_CHAR_LIMIT
    """Maximum length of the percentage field."""


def load_config(
    *,
    output: str | None = None,
    export_name: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> EditorConfig:
    """Resolve an :class:`EditorConfig` from flags and the environment.

    Raises
    ------
    ConfigError
        When the output path is blank or the export name is not a valid
        identifier.
    """
    env = os.environ if environ is None else environ

    raw_output = output if output is not None else env.get(ENV_OUTPUT)
    if raw_output is None:
        output_path = DEFAULT_OUTPUT_PATH
    elif not raw_output.strip():
        raise ConfigError(
            "Output path must not be empty.",
            hint=f"Pass --output PATH or unset {ENV_OUTPUT}.",
        )
    else:
        output_path = Path(raw_output.strip())

    name = export_name if export_name is not None else env.get(ENV_EXPORT_NAME)
    name = (name or DEFAULT_EXPORT_NAME).strip()
    if not name.isidentifier():
        raise ConfigError(
            f"Invalid export name: {name!r}",
            hint="Use letters, digits and underscores, not starting with a digit.",
        )

    return EditorConfig(output_path=output_path, export_name=name)
