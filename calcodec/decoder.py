"""Decode calendar content into a Document.

This is an example of decoding calendar content read from a file:
```python
from pathlib import Path
from calcodec.decoder import decode

filename = Path("example/calendar.ics")
with filename.open() as ics_file:
    document = decode(ics_file.read())
    print(f"File contains {len(document.get('vcalendar').bodies)} calendar(s)")
```

Durations and time zones are resolved by the providers given to a `Decoder`,
which default to rfc5545 durations and the zoneinfo database.
"""

from __future__ import annotations

import logging

from .model import Document
from .parsing.component import parse_content
from .timezones import TimezoneProvider, ZoneInfoTimezones
from .types import DurationCodec, Rfc5545DurationCodec, ValueContext

__all__ = [
    "Decoder",
    "decode",
]

_LOGGER = logging.getLogger(__name__)


class Decoder:
    """Decodes calendar content using the configured providers."""

    def __init__(
        self,
        durations: DurationCodec | None = None,
        timezones: TimezoneProvider | None = None,
    ) -> None:
        """Initialize Decoder."""
        self._context = ValueContext(
            durations=durations or Rfc5545DurationCodec(),
            timezones=timezones or ZoneInfoTimezones(),
        )

    def decode(self, content: str) -> Document:
        """Decode calendar content into a Document.

        Will raise a CalendarParseError on failure, and no partial result
        is returned.
        """
        document = Document(entries=parse_content(content, self._context))
        _LOGGER.debug("Decoded %s top level entries", len(document))
        return document


def decode(
    content: str,
    *,
    durations: DurationCodec | None = None,
    timezones: TimezoneProvider | None = None,
) -> Document:
    """Decode calendar content into a Document."""
    return Decoder(durations=durations, timezones=timezones).decode(content)
