"""Core / service layer — pure conversion logic and domain models.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from format_number.core.converter import convert, format_all_number_types, render
from format_number.core.formatters import get_number_formatter
from format_number.core.models import FormattedNumber, NumberInput, NumberType
from format_number.core.protocols import NumberFormatter

__all__: list[str] = [
    "FormattedNumber",
    "NumberFormatter",
    "NumberInput",
    "NumberType",
    "convert",
    "format_all_number_types",
    "get_number_formatter",
    "render",
]
