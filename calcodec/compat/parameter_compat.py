"""Compatibility layer for quoted parameter values containing delimiters.

By default a content line is split at the first `:` and its parameters at
every `;`, even inside a quoted parameter value. This module allows quoted
values such as `ALTREP="cid:part1@example.org"` to keep their delimiters.
"""

from collections.abc import Generator
import contextlib
import contextvars


_quoted_parameters = contextvars.ContextVar("quoted_parameters", default=False)


@contextlib.contextmanager
def enable_quoted_parameters() -> Generator[None]:
    """Context manager to ignore delimiters inside quoted parameter values."""
    token = _quoted_parameters.set(True)
    try:
        yield
    finally:
        _quoted_parameters.reset(token)


def is_quoted_parameters_enabled() -> bool:
    """Check if quoted parameter values are enabled."""
    return _quoted_parameters.get()
