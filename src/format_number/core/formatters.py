"""Per-base numeral formatters.

Each formatter pairs a strict reader (digit validation, optional prefix,
range check) with a renderer.  Python's ``int()`` is far more lenient
than the accepted grammar — it allows whitespace, underscores and its
own prefixes — so digits are validated here before it is called.

Grammar accepted by :meth:`read`::

    [+|-] [prefix] digit+

where *prefix* is ``0x`` for hexadecimal, ``0b`` for binary and absent
for integers.  The sign comes before the prefix and the prefix is
stripped at most once, so ``-0x10`` reads as -16 while ``0x-10`` and
``0x0x10`` are invalid digits.  Every character is validated before the
range is considered: an over-long numeral with a bad digit anywhere
reports the bad digit.
"""

from __future__ import annotations

import string

from format_number.core.models import INT_BITS, INT_MAX, INT_MIN, NumberType
from format_number.core.protocols import NumberFormatter
from format_number.exceptions import (
    InvalidDigitError,
    MissingArgumentError,
    NumberTooLargeError,
    NumberTooSmallError,
)

_TWOS_COMPLEMENT_MASK: int = (1 << INT_BITS) - 1

# Digits in the widest in-range magnitude, 2**127.  Longer numerals
# (leading zeros removed) are out of range without being parsed.
_MAX_DIGITS: dict[NumberType, int] = {
    NumberType.INTEGER: len(format(-INT_MIN, "d")),
    NumberType.HEXADECIMAL: len(format(-INT_MIN, "x")),
    NumberType.BINARY: len(format(-INT_MIN, "b")),
}


# ---------------------------------------------------------------------------
# Shared reading / rendering helpers
# ---------------------------------------------------------------------------

def _split_sign(raw: str) -> tuple[int, str]:
    if raw[0] in "+-":
        return (-1 if raw[0] == "-" else 1), raw[1:]
    return 1, raw


def _too_large() -> NumberTooLargeError:
    return NumberTooLargeError(
        "Number too large",
        hint=f"The largest supported value is {INT_MAX}.",
    )


def _too_small() -> NumberTooSmallError:
    return NumberTooSmallError(
        "Number too small",
        hint=f"The smallest supported value is {INT_MIN}.",
    )


def _check_range(value: int) -> int:
    if value > INT_MAX:
        raise _too_large()
    if value < INT_MIN:
        raise _too_small()
    return value


class _RadixFormatter:
    """Reader/renderer for one base, parameterised by class attributes."""

    number_type: NumberType
    digits: frozenset[str]
    prefix: str = ""

    def read(self, raw: str) -> int:
        if not raw:
            raise MissingArgumentError("No value was entered")

        sign, body = _split_sign(raw)
        if not body:
            raise InvalidDigitError(
                "Number contains an invalid digit",
                hint=f"{raw!r} has a sign but no digits.",
            )

        if self.prefix and body.startswith(self.prefix):
            body = body[len(self.prefix):]
            if not body:
                raise MissingArgumentError("No value was entered")

        for char in body:
            if char not in self.digits:
                raise InvalidDigitError(
                    "Number contains an invalid digit",
                    hint=(
                        f"{char!r} is not a valid "
                        f"{self.number_type.value} digit."
                    ),
                )

        body = body.lstrip("0") or "0"
        if len(body) > _MAX_DIGITS[self.number_type]:
            raise _too_small() if sign < 0 else _too_large()

        return _check_range(sign * int(body, self.number_type.radix))

    def format(self, value: int) -> str:
        if self.number_type is NumberType.INTEGER:
            return str(value)
        # Fixed-width integers print negatives as their bit pattern.
        if value < 0:
            value &= _TWOS_COMPLEMENT_MASK
        spec = "x" if self.number_type is NumberType.HEXADECIMAL else "b"
        return format(value, spec)


# ---------------------------------------------------------------------------
# Concrete formatters
# ---------------------------------------------------------------------------

class IntegerNumberFormatter(_RadixFormatter):
    """Decimal integers, e.g. ``-42``."""

    number_type = NumberType.INTEGER
    digits = frozenset(string.digits)


class HexadecimalNumberFormatter(_RadixFormatter):
    """Hexadecimal numerals, e.g. ``0xAbC3f09``; rendered lowercase."""

    number_type = NumberType.HEXADECIMAL
    digits = frozenset(string.hexdigits)
    prefix = "0x"


class BinaryNumberFormatter(_RadixFormatter):
    """Binary numerals, e.g. ``0b1101011``."""

    number_type = NumberType.BINARY
    digits = frozenset("01")
    prefix = "0b"


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

_FORMATTERS: dict[NumberType, NumberFormatter] = {
    NumberType.INTEGER: IntegerNumberFormatter(),
    NumberType.HEXADECIMAL: HexadecimalNumberFormatter(),
    NumberType.BINARY: BinaryNumberFormatter(),
}


def get_number_formatter(number_type: NumberType) -> NumberFormatter:
    """Return the formatter responsible for *number_type*."""
    return _FORMATTERS[number_type]
