"""Compatibility layer for DURATION properties with invalid values.

A property named DURATION must have a valid duration value or decoding fails,
while a value declared with VALUE=DURATION that can't be parsed is kept as
text. This module allows the DURATION property to be just as lenient.
"""

from collections.abc import Generator
import contextlib
import contextvars


_lenient_durations = contextvars.ContextVar("lenient_durations", default=False)


@contextlib.contextmanager
def enable_lenient_durations() -> Generator[None]:
    """Context manager to keep invalid DURATION property values as text."""
    token = _lenient_durations.set(True)
    try:
        yield
    finally:
        _lenient_durations.reset(token)


def is_lenient_durations_enabled() -> bool:
    """Check if lenient DURATION parsing is enabled."""
    return _lenient_durations.get()
