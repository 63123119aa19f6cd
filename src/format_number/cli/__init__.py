"""CLI layer — argument parsing, output, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core`` and ``utils``, but no other layer may import from ``cli``.
"""
