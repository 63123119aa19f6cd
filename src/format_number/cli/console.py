"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so every command path (``--help``, ``--version`` and the
conversion itself) remains functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from format_number.exceptions import FormatNumberError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``FormatNumberError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise FormatNumberError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance targeting stderr (or stdout)."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr, highlight=False, soft_wrap=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain print."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except FormatNumberError:
            print(*objects, file=sys.stderr if self._stderr else sys.stdout)
            return
        rich_console.print(*objects)


console = _ConsoleProxy(stderr=True)
"""Diagnostics: errors, hints, interruption notices."""

output = _ConsoleProxy(stderr=False)
"""Results: one line per rendered representation."""
