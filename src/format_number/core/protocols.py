"""Protocols (interfaces) consumed by the core layer.

These define the contract every per-base formatter must satisfy.  The
converter depends ONLY on this protocol — never on a concrete
formatter class — so new representations plug in without touching it.
"""

from __future__ import annotations

from typing import Protocol

from format_number.core.models import NumberType


class NumberFormatter(Protocol):
    """Contract for reading and rendering one numeral base.

    Any object that implements :meth:`read` and :meth:`format` with the
    correct signatures satisfies this protocol structurally (no explicit
    inheritance required).
    """

    number_type: NumberType

    def read(self, raw: str) -> int:
        """Parse *raw* as a numeral of this formatter's base.

        Raises
        ------
        MissingArgumentError
            When *raw* is empty, or empty once its prefix is removed.
        InvalidDigitError
            When *raw* contains a character outside the base's digits.
        NumberOverflowError
            When the value lies outside the signed 128-bit range.
        """
        ...  # pragma: no cover

    def format(self, value: int) -> str:
        """Render *value* in this formatter's base.  Never fails."""
        ...  # pragma: no cover
