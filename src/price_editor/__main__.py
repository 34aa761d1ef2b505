"""Allow ``python -m price_editor`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m price_editor`` behaves identically to the
``price-editor`` console script.
"""

from __future__ import annotations

from price_editor.cli.app import cli

if __name__ == "__main__":
    cli()
