"""Library for parsing and encoding DURATION values.

Durations are parsed and formatted by a `DurationCodec`, and the decoded value
is whatever the codec returns. The default codec handles the rfc5545 DURATION
format as a `datetime.timedelta`.
"""

from __future__ import annotations

import datetime
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from calcodec.model import Parameter

from .data_types import DATA_TYPE, ValueContext, get_parameter_value

_LOGGER = logging.getLogger(__name__)

DATE_PART = r"(\d+)D"
TIME_PART = r"T(?=\d)(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?"
DATETIME_PART = f"(?:{DATE_PART})?(?:{TIME_PART})?"
WEEKS_PART = r"(\d+)W"
DURATION_REGEX = re.compile(f"([-+]?)P(?:{WEEKS_PART}|{DATETIME_PART})$")
DURATION_PREFIX_REGEX = re.compile(r"^P")
ATTR_VALUE = "VALUE"
VALUE_DURATION = "DURATION"


class DurationCodec(Protocol):
    """Parses and formats duration literals."""

    def parse(self, value: str) -> Any:
        """Parse a duration literal, raising ValueError when invalid."""

    def format(self, value: Any) -> str:
        """Format a parsed duration as a literal."""


class Rfc5545DurationCodec:
    """Duration codec for rfc5545 DURATION values as a `datetime.timedelta`."""

    def parse(self, value: str) -> datetime.timedelta:
        """Parse a rfc5545 DURATION into a datetime.timedelta."""
        if not (match := DURATION_REGEX.fullmatch(value)):
            raise ValueError(f"Expected value to match DURATION pattern: {value}")
        sign, weeks, days, hours, minutes, seconds = match.groups()
        if not any((weeks, days, hours, minutes, seconds)):
            raise ValueError(f"Expected DURATION to have a date or time: {value}")
        result: datetime.timedelta
        if weeks:
            result = datetime.timedelta(weeks=int(weeks))
        else:
            result = datetime.timedelta(
                days=int(days or 0),
                hours=int(hours or 0),
                minutes=int(minutes or 0),
                seconds=int(seconds or 0),
            )
        if sign == "-":
            result = -result
        return result

    def format(self, value: datetime.timedelta) -> str:
        """Serialize a time delta as a DURATION value."""
        parts = []
        if value < datetime.timedelta(0):
            parts.append("-")
            value = -value
        parts.append("P")
        days = value.days
        if days and days % 7 == 0 and not value.seconds:
            parts.append(f"{days // 7}W")
            return "".join(parts)
        if days:
            parts.append(f"{days}D")
        if value.seconds or not days:
            parts.append("T")
            seconds = value.seconds
            hours, seconds = divmod(seconds, 3600)
            minutes, seconds = divmod(seconds, 60)
            if hours:
                parts.append(f"{hours}H")
            if minutes:
                parts.append(f"{minutes}M")
            if seconds or not (hours or minutes):
                parts.append(f"{seconds}S")
        return "".join(parts)


@DATA_TYPE.register("duration", parse_order=5)
@dataclass(frozen=True)
class Duration:
    """A duration as returned by the duration codec."""

    value: Any

    @classmethod
    def __parse_property_value__(
        cls, value: str, params: Sequence[Parameter], context: ValueContext
    ) -> Duration | None:
        """Parse a value declared with VALUE=DURATION.

        Values the codec can't parse are not an error here and are left for
        the fallback text type.
        """
        if not DURATION_PREFIX_REGEX.match(value):
            return None
        if get_parameter_value(params, ATTR_VALUE) != VALUE_DURATION:
            return None
        try:
            return cls(context.durations.parse(value))
        except ValueError as err:
            _LOGGER.debug("Keeping '%s' as text: %s", value, err)
            return None

    def __encode_property_value__(self, context: ValueContext) -> str:
        return context.durations.format(self.value)
