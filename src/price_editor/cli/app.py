"""CLI application entry point and command routing for price-editor.

This module is the **sole error boundary** for the entire application.
It catches :class:`~price_editor.exceptions.PriceEditorError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — editing is delegated to the core
  state machine, drawing to the host loop, writing to the infra layer.
* ``print()`` is forbidden outside the CLI layer; the Rich console
  proxy is used for every message.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from price_editor.cli import exit_codes
from price_editor.cli.console import console
from price_editor.config import (
    DEFAULT_OUTPUT_PATH,
    ENV_EXPORT_NAME,
    ENV_OUTPUT,
    EditorConfig,
    load_config,
)
from price_editor.core.models import Catalog
from price_editor.core.protocols import DocumentWriter
from price_editor.exceptions import PriceEditorError
from price_editor.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``price-editor``          — open the editor (same as ``edit``)
    * ``price-editor doctor``   — environment diagnostics
    * ``price-editor --version``
    """
    parser = argparse.ArgumentParser(
        prog="price-editor",
        description=(
            "Apply a percentage increase to selected prices "
            "and regenerate the price listing."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help=f"File to write the listing to (env: {ENV_OUTPUT}, default: {DEFAULT_OUTPUT_PATH}).",
    )
    parser.add_argument(
        "--name",
        dest="export_name",
        default=None,
        help=f"Name of the exported mapping (env: {ENV_EXPORT_NAME}, default: PRICES).",
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=("edit", "doctor"),
        default="edit",
        help="'edit' (default) opens the editor; 'doctor' runs diagnostics.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _persist(catalog: Catalog, config: EditorConfig, writer: DocumentWriter) -> int:
    """Serialize *catalog* and write it to the configured path."""
    from price_editor.core.serializer import build_output

    document = build_output(catalog, config.export_name)
    writer.write(config.output_path, document)
    console.print(f"✓ Wrote updated prices to {config.output_path}")
    return exit_codes.SUCCESS


def _handle_edit(config: EditorConfig) -> int:
    """Run the interactive editor, then persist the result if confirmed.

    Flow:
    1. Seed the catalog from the built-in table.
    2. Drive the state machine from the terminal until it quits.
    3. If a percentage was confirmed, write the regenerated listing.
       An abandoned session writes nothing.
    """
    from price_editor.cli.host import run_editor
    from price_editor.core.catalog import default_catalog
    from price_editor.core.editor import PriceEditor
    from price_editor.infra.persistence import FileDocumentWriter

    editor = PriceEditor(default_catalog(), char_limit=config.char_limit)
    state = run_editor(editor)

    if not state.finished:
        return exit_codes.SUCCESS

    return _persist(state.catalog, config, FileDocumentWriter())


def _handle_doctor(config: EditorConfig) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from price_editor.cli.doctor import run_doctor

    return run_doctor(config.output_path)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the price-editor CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = load_config(output=args.output, export_name=args.export_name)

    if args.command == "doctor":
        return _handle_doctor(config)

    return _handle_edit(config)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except PriceEditorError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
