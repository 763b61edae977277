"""Library for resolving local timestamps against a TZID.

A TZID is either a synthetic fixed offset such as `GMT-0500`, which is resolved
with plain offset arithmetic, or the key of a zone in the IANA time zone
database. Lookups in the database go through a `TimezoneProvider` so that the
source of zone data can be substituted. The default provider follows the same
approach as zoneinfo for loading timezone data: it checks the system TZPATH,
then falls back to the tzdata python package.
"""

from __future__ import annotations

import datetime
import logging
import re
import zoneinfo
from functools import cache
from importlib import resources
from typing import Protocol

from .compat import timezone_compat
from .exceptions import InvalidTimeZoneError

__all__ = [
    "TimezoneProvider",
    "ZoneInfoTimezones",
    "resolve_timezone",
]

_LOGGER = logging.getLogger(__name__)

GMT_OFFSET_REGEX = re.compile(r"^GMT([+-])([0-9]{2})([0-9]{2})$")
_MAX_OFFSET = datetime.timedelta(hours=24)
_QUOTE = '"'


class TimezoneProvider(Protocol):
    """A database of time zones identified by key."""

    def is_known(self, key: str) -> bool:
        """Return True if the key names a zone in the database."""

    def localize(self, value: datetime.datetime, key: str) -> datetime.datetime:
        """Return the naive local timestamp as an aware datetime in the zone."""


@cache
def _read_system_timezones() -> set[str]:
    """Read and cache the set of system and tzdata timezones."""
    return zoneinfo.available_timezones()


@cache
def _read_tzdata_timezones() -> set[str]:
    """Returns the set of valid timezones from tzdata only."""
    try:
        with resources.files("tzdata").joinpath("zones").open(
            "r", encoding="utf-8"
        ) as zones_file:
            return {line.strip() for line in zones_file.readlines()}
    except ModuleNotFoundError:
        return set()


class ZoneInfoTimezones:
    """Time zone provider backed by zoneinfo and the tzdata package.

    Local times that are ambiguous or skipped by a daylight saving transition
    use the zoneinfo default of `fold=0`: an ambiguous time resolves to its
    first occurrence and a skipped time uses the offset in effect before the
    transition.
    """

    def is_known(self, key: str) -> bool:
        """Return True if the key is a system or tzdata timezone."""
        return key in _read_system_timezones() or key in _read_tzdata_timezones()

    def localize(self, value: datetime.datetime, key: str) -> datetime.datetime:
        """Attach the zone to the naive local timestamp."""
        return value.replace(tzinfo=zoneinfo.ZoneInfo(key), fold=0)


def _gmt_offset(tzid: str) -> datetime.timedelta | None:
    """Return the offset from UTC for a GMT offset literal."""
    if not (match := GMT_OFFSET_REGEX.fullmatch(tzid)):
        return None
    sign, hours, minutes = match.groups()
    offset = datetime.timedelta(hours=int(hours), minutes=int(minutes))
    # GMT-0500 is five hours behind UTC
    if sign == "-":
        offset = -offset
    return offset


def _apply_offset(
    value: datetime.datetime, offset: datetime.timedelta
) -> datetime.datetime:
    """Return the instant for a local time at a fixed offset from UTC.

    A tzinfo offset must be less than a day, so larger offsets are applied
    with plain arithmetic and the result is returned in UTC.
    """
    if abs(offset) < _MAX_OFFSET:
        return value.replace(tzinfo=datetime.timezone(offset))
    _LOGGER.debug("Applying offset %s to %s as UTC", offset, value)
    return (value - offset).replace(tzinfo=datetime.timezone.utc)


def _unquote(tzid: str) -> str:
    if len(tzid) >= 2 and tzid.startswith(_QUOTE) and tzid.endswith(_QUOTE):
        return tzid[1:-1]
    return tzid


def resolve_timezone(
    value: datetime.datetime, tzid: str, provider: TimezoneProvider
) -> datetime.datetime | None:
    """Resolve a naive local timestamp in the zone named by the TZID.

    Returns None when the TZID is unknown and invalid timezones are allowed,
    so the caller can keep the timestamp as floating local time. Otherwise an
    unknown TZID raises InvalidTimeZoneError.
    """
    value = value.replace(microsecond=0)
    key = _unquote(tzid)
    if (offset := _gmt_offset(key)) is not None:
        _LOGGER.debug("Resolved %s as fixed offset %s", tzid, offset)
        return _apply_offset(value, offset)
    if not provider.is_known(key):
        if timezone_compat.is_allow_invalid_timezones_enabled():
            _LOGGER.warning("Ignoring invalid time zone identifier '%s'", tzid)
            return None
        raise InvalidTimeZoneError(tzid)
    result = provider.localize(value, key)
    _LOGGER.debug("Resolved %s in %s as %s", value, key, result)
    return result.replace(microsecond=0)
