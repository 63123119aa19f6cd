"""format-number — print one number in integer, hexadecimal and binary form.

A small CLI built on a pure conversion core with a strict layered
architecture.
"""

from format_number.version import __version__

__all__: list[str] = ["__version__"]
