"""Library for parsing and encoding DATE-TIME values.

There are three forms of DATE-TIME values, distinguished by the shape of the
value and the TZID parameter:

  19980119T070000Z                     UTC time
  TZID=America/New_York:19980119T020000  local time in a specific zone
  19980118T230000                      floating local time, no zone
"""

from __future__ import annotations

import datetime
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

from calcodec.exceptions import InvalidValueError
from calcodec.model import Parameter
from calcodec.timezones import resolve_timezone

from .data_types import DATA_TYPE, ValueContext, get_parameter_value

_LOGGER = logging.getLogger(__name__)

LOCAL_DATETIME_REGEX = re.compile(r"^([0-9]{8})T([0-9]{6})$")
UTC_DATETIME_REGEX = re.compile(r"^([0-9]{8})T([0-9]{6})Z$")
TZID = "TZID"


def parse_datetime(date_value: str, time_value: str) -> datetime.datetime:
    """Parse the date and time parts of a DATE-TIME as a naive datetime."""
    try:
        return datetime.datetime(
            int(date_value[0:4]),
            int(date_value[4:6]),
            int(date_value[6:]),
            int(time_value[0:2]),
            int(time_value[2:4]),
            int(time_value[4:6]),
        )
    except ValueError as err:
        raise InvalidValueError(
            f"Invalid DATE-TIME value '{date_value}T{time_value}': {err}",
            detailed_error=f"{date_value}T{time_value}",
        ) from err


def format_datetime(value: datetime.datetime) -> str:
    """Format the wall clock time of a datetime as a DATE-TIME string."""
    return (
        f"{value.year:04}{value.month:02}{value.day:02}"
        f"T{value.hour:02}{value.minute:02}{value.second:02}"
    )


def _parse_local(value: str) -> datetime.datetime | None:
    if not (match := LOCAL_DATETIME_REGEX.fullmatch(value)):
        return None
    return parse_datetime(*match.groups())


@DATA_TYPE.register("zoned-date-time", parse_order=1)
@dataclass(frozen=True)
class ZonedDateTime:
    """A local time resolved in the zone named by the TZID parameter.

    The datetime keeps the wall clock time from the content along with the
    zone, so it is both an absolute instant and encodes back unchanged.
    """

    value: datetime.datetime

    @classmethod
    def __parse_property_value__(
        cls, value: str, params: Sequence[Parameter], context: ValueContext
    ) -> ZonedDateTime | LocalDateTime | None:
        if (tzid := get_parameter_value(params, TZID)) is None:
            return None
        if (local := _parse_local(value)) is None:
            return None
        if (result := resolve_timezone(local, tzid, context.timezones)) is None:
            return LocalDateTime(local)
        return cls(result)

    def __encode_property_value__(self, context: ValueContext) -> str:
        return format_datetime(self.value)


@DATA_TYPE.register("local-date-time", parse_order=2)
@dataclass(frozen=True)
class LocalDateTime:
    """A floating local time that is not bound to any zone."""

    value: datetime.datetime

    @classmethod
    def __parse_property_value__(
        cls, value: str, params: Sequence[Parameter], context: ValueContext
    ) -> LocalDateTime | None:
        if (local := _parse_local(value)) is None:
            return None
        return cls(local)

    def __encode_property_value__(self, context: ValueContext) -> str:
        return format_datetime(self.value)


@DATA_TYPE.register("utc-date-time", parse_order=3)
@dataclass(frozen=True)
class UtcDateTime:
    """An instant in UTC."""

    value: datetime.datetime

    @classmethod
    def __parse_property_value__(
        cls, value: str, params: Sequence[Parameter], context: ValueContext
    ) -> UtcDateTime | None:
        if not (match := UTC_DATETIME_REGEX.fullmatch(value)):
            return None
        result = parse_datetime(*match.groups()).replace(tzinfo=datetime.timezone.utc)
        _LOGGER.debug("UtcDateTime returned %s", result)
        return cls(result)

    def __encode_property_value__(self, context: ValueContext) -> str:
        value = self.value
        if value.tzinfo is not None:
            value = value.astimezone(datetime.timezone.utc)
        return f"{format_datetime(value)}Z"
