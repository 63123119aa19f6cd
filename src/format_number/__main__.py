"""Allow ``python -m format_number`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m format_number`` behaves identically to the
``format-number`` console script.
"""

from __future__ import annotations

from format_number.cli.app import cli

if __name__ == "__main__":
    cli()
