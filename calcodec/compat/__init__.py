"""Compatibility layer for decoding invalid calendar content.

This module provides switches for handling calendar content that does not
follow the format strictly. Each switch is a context manager that applies to
decoding within the current context.
"""

from . import duration_compat, parameter_compat, timezone_compat

__all__ = [
    "duration_compat",
    "parameter_compat",
    "timezone_compat",
]
