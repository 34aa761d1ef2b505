"""``price-editor doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment can run the editor and write the
listing.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  No business logic resides
here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import importlib
import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from price_editor.cli import exit_codes
from price_editor.cli.console import console
from price_editor.config import DEFAULT_OUTPUT_PATH
from price_editor.infra.output_target import detect_output_target
from price_editor.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    python_version = platform.python_version()
    major, minor = sys.version_info[:2]
    ok = (major, minor) >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", python_version, status


def _package_check(label: str, module_name: str) -> tuple[str, str, str]:
    """Return (label, value, status) for an importable runtime dependency."""
    try:
        importlib.import_module(module_name)
    except ImportError:
        return label, "NOT INSTALLED", "[red]FAIL[/red]"

    try:
        return label, version(label), "[green]OK[/green]"
    except PackageNotFoundError:
        return label, "unknown", "[green]OK[/green]"


def _rich_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the rich row."""
    return _package_check("rich", "rich")


def _readchar_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the readchar row."""
    return _package_check("readchar", "readchar")


def _output_check(path: Path) -> tuple[str, str, str]:
    """Return (label, value, status) for the output-file row."""
    target = detect_output_target(path)
    value = f"{target.path} ({target.hint})"
    if target.writable:
        return "Output", value, "[green]OK[/green]"
    return "Output", value, "[yellow]WARN[/yellow]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    release = platform.release()
    machine = platform.machine()
    value = f"{system_display} {release} ({machine})"
    return "OS", value, "[green]OK[/green]"


def _price_editor_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the price-editor version row."""
    return "price-editor", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nprice-editor doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<14} {'Value':<40} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        plain_status = _status_plain(status)
        print(f"{label:<14} {value:<40} {plain_status:<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(output_path: Path = DEFAULT_OUTPUT_PATH) -> int:
    """Execute all diagnostic checks and render a Rich summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
        An unwritable output path is only a warning.
    """
    checks = [
        _price_editor_version_check(),
        _python_version_check(),
        _rich_version_check(),
        _readchar_version_check(),
        _output_check(output_path),
        _os_check(),
    ]

    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="price-editor doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    if has_failure:
        if rich_available:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            print("Some checks failed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR

    if rich_available:
        console.print("[bold green]All checks passed.[/bold green]")
    else:
        print("All checks passed.", file=sys.stderr)
    return exit_codes.SUCCESS
