"""Converter service — read a numeral once, render it in every base.

Every function in this module is a **pure** transformation apart from
debug logging.  Pipeline order (enforced by
:func:`format_all_number_types`):

1. **Read** — parse the raw numeral with its declared base's formatter.
2. **Render** — format the value with each formatter, in
   :class:`~format_number.core.models.NumberType` order.
"""

from __future__ import annotations

import structlog

from format_number.core.formatters import get_number_formatter
from format_number.core.models import FormattedNumber, NumberInput, NumberType

logger = structlog.get_logger(__name__)


def convert(raw: str, base: NumberType) -> int:
    """Parse *raw* as a numeral in *base* and return its value.

    Raises
    ------
    MissingArgumentError
        *raw* is empty.
    InvalidDigitError
        *raw* holds a character that is not a digit of *base*.
    NumberOverflowError
        The value does not fit a signed 128-bit integer.
    """
    value = get_number_formatter(base).read(raw)
    logger.debug("number_read", raw=raw, base=base.value, value=value)
    return value


def render(value: int, target: NumberType) -> str:
    """Render *value* in the *target* representation."""
    return get_number_formatter(target).format(value)


def format_all_number_types(number: NumberInput) -> list[FormattedNumber]:
    """Read *number* and render it once per :class:`NumberType`.

    The result always has one entry per number type, ordered
    Integer → Hexadecimal → Binary.
    """
    value = convert(number.raw, number.number_type)
    return [
        FormattedNumber(number_type=number_type, text=render(value, number_type))
        for number_type in NumberType
    ]
