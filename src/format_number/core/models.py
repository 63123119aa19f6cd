"""Domain models for format-number.

All models are **frozen** dataclasses or enums — immutable value objects
with no behaviour beyond data access.  They carry zero I/O, zero
dependencies on external packages, and must remain pure across the
entire lifecycle.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

INT_BITS: int = 128
"""Width of the supported signed integer type."""

INT_MIN: int = -(1 << (INT_BITS - 1))
INT_MAX: int = (1 << (INT_BITS - 1)) - 1


# ---------------------------------------------------------------------------
# Number type
# ---------------------------------------------------------------------------

class NumberType(enum.Enum):
    """The kind of numeral read from, or rendered to, text.

    Declaration order is the output order: Integer, Hexadecimal, Binary.
    The member value doubles as the ``--number-type`` CLI choice.
    """

    INTEGER = "integer"
    HEXADECIMAL = "hexadecimal"
    BINARY = "binary"

    @property
    def label(self) -> str:
        """Capitalised display name (e.g. ``Hexadecimal``)."""
        return self.value.capitalize()

    @property
    def radix(self) -> int:
        return _RADIX[self]

    def __str__(self) -> str:
        return self.label


_RADIX: dict[NumberType, int] = {
    NumberType.INTEGER: 10,
    NumberType.HEXADECIMAL: 16,
    NumberType.BINARY: 2,
}


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NumberInput:
    """A raw numeral paired with the base it is declared to be in.

    Validity of ``raw`` is checked when it is converted, not here.
    """

    raw: str
    """Numeral exactly as typed by the user."""

    number_type: NumberType = NumberType.INTEGER
    """Declared base of ``raw``."""


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FormattedNumber:
    """One rendered representation of a value."""

    number_type: NumberType
    text: str

    def __str__(self) -> str:
        return f"{self.number_type.label}: {self.text}"
