"""Library for diagnostics or debugging information about calendars."""

from __future__ import annotations

from collections.abc import Generator
import itertools

from .parsing.component import unfolded_lines
from .parsing.const import ESCAPED_NEWLINE, NEWLINE

__all__ = [
    "redact_ics",
]


PROPERTY_ALLOWLIST = {
    "BEGIN",
    "END",
    "DTSTAMP",
    "CREATED",
    "LAST-MODIFIED",
    "DTSTART",
    "DTEND",
    "DURATION",
    "RRULE",
    "PRODID",
    "TZID",
}
REDACT = "***"
MAX_CONTENTLINES = 5000


def property_sep(contentline: str) -> int:
    """Return the property name end index in the string."""
    colon = contentline.find(":")
    semi = contentline.find(";")
    if colon > -1 and semi > -1:
        return min(colon, semi)
    if colon > -1:
        return colon
    return semi


def redact_contentline(contentline: str, property_allowlist: set[str]) -> str:
    """Return a redacted version of a content line."""
    if (i := property_sep(contentline)) > -1:
        name = contentline[0:i]
        if name.upper() in property_allowlist:
            return contentline.replace(NEWLINE, ESCAPED_NEWLINE)
        return f"{name}:{REDACT}"
    return REDACT


def redact_ics(
    ics: str,
    max_contentlines: int = MAX_CONTENTLINES,
    property_allowlist: set[str] | None = None,
) -> Generator[str, None, None]:
    """Generate redacted calendar content one unfolded line at a time."""
    for contentline in itertools.islice(unfolded_lines(ics), max_contentlines):
        if contentline:
            yield redact_contentline(
                contentline, property_allowlist or PROPERTY_ALLOWLIST
            )
