"""Custom exception hierarchy for format-number.

All exceptions that cross layer boundaries must inherit from
:class:`FormatNumberError`.  Builtin parsing errors (``ValueError`` from
``int()``) must NEVER propagate beyond the core layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
FormatNumberError
├── MissingArgumentError
├── InvalidDigitError
└── NumberOverflowError
    ├── NumberTooLargeError
    └── NumberTooSmallError
"""

from __future__ import annotations


class FormatNumberError(Exception):
    """Base exception for all format-number errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input presence ----------------------------------------------------------

class MissingArgumentError(FormatNumberError):
    """Raised when no number was supplied, or the supplied text is empty."""


# --- Digits ------------------------------------------------------------------

class InvalidDigitError(FormatNumberError):
    """Raised when the numeral holds a character outside its base's digits."""


# --- Range -------------------------------------------------------------------

class NumberOverflowError(FormatNumberError):
    """Raised when the parsed value does not fit the supported integer range."""


class NumberTooLargeError(NumberOverflowError):
    """Raised when the value is above the largest supported integer."""


class NumberTooSmallError(NumberOverflowError):
    """Raised when the value is below the smallest supported integer."""
