"""CLI application entry point for format-number.

This module is the **sole error boundary** for the entire application.
It catches :class:`~format_number.exceptions.FormatNumberError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No conversion logic lives here — all work is delegated to the core
  layer.
* Results go to stdout through ``output``; everything else goes to
  stderr through ``console``.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

import structlog

from format_number.cli import exit_codes
from format_number.cli.console import console, output
from format_number.core.converter import format_all_number_types
from format_number.core.models import NumberInput, NumberType
from format_number.exceptions import FormatNumberError, MissingArgumentError
from format_number.utils.logging import configure_logging
from format_number.version import __version__

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Parsed command-line options.  The only configuration source."""

    number: str | None
    """Numeral to convert, or ``None`` when omitted."""

    number_type: NumberType = NumberType.INTEGER
    """Declared base of :attr:`number`."""

    verbose: bool = False
    log_json: bool = False


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``format-number <number>``                       — decimal input
    * ``format-number -n hexadecimal <number>``        — other bases
    * ``format-number -n hexadecimal -- -0x10``        — negative non-decimal
    * ``format-number --version``
    """
    parser = argparse.ArgumentParser(
        prog="format-number",
        description=(
            "Print a number as an integer, in hexadecimal and in binary."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-n",
        "--number-type",
        choices=[number_type.value for number_type in NumberType],
        default=NumberType.INTEGER.value,
        help="Base of NUMBER (default: %(default)s).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Write debug log records to stderr.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Render log records as JSON lines.",
    )
    parser.add_argument(
        "number",
        nargs="?",
        default=None,
        help=(
            "Number to convert, e.g. 107, 0x6b or 0b1101011.  Put a "
            "negative non-decimal number after '--', e.g. "
            "'format-number -n hexadecimal -- -0x10'."
        ),
    )
    return parser


def parse_options(argv: list[str] | None = None) -> CommandOptions:
    """Parse *argv* into :class:`CommandOptions`.

    argparse exits with ``USAGE_ERROR`` on unknown flags or an invalid
    ``--number-type`` choice.
    """
    args = _build_parser().parse_args(argv)
    return CommandOptions(
        number=args.number,
        number_type=NumberType(args.number_type),
        verbose=args.verbose,
        log_json=args.log_json,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_convert(options: CommandOptions) -> int:
    """Convert ``options.number`` and print every representation."""
    if options.number is None:
        raise MissingArgumentError(
            "No value was entered",
            hint="Pass a number, e.g. 'format-number 42'.",
        )

    logger.debug(
        "convert_requested",
        number=options.number,
        number_type=options.number_type.value,
    )
    for formatted in format_all_number_types(
        NumberInput(raw=options.number, number_type=options.number_type),
    ):
        output.print(str(formatted))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the format-number CLI.

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
    options = parse_options(argv)
    configure_logging(verbose=options.verbose, log_json=options.log_json)
    return _handle_convert(options)


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
    except FormatNumberError as exc:
        logger.debug("conversion_failed", error=type(exc).__name__)
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
