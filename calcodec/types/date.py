"""Library for parsing and encoding DATE values."""

from __future__ import annotations

import datetime
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

from calcodec.exceptions import InvalidValueError
from calcodec.model import Parameter

from .data_types import DATA_TYPE, ValueContext, get_parameter_value

_LOGGER = logging.getLogger(__name__)

DATE_REGEX = re.compile(r"^([0-9]{4})([0-9]{2})([0-9]{2})$")
ATTR_VALUE = "VALUE"
VALUE_DATE = "DATE"


def parse_date(value: str) -> datetime.date:
    """Parse an rfc5545 DATE string, e.g. 20070501."""
    if not (match := DATE_REGEX.fullmatch(value)):
        raise ValueError(f"Expected value to match DATE pattern: '{value}'")
    year, month, day = (int(part) for part in match.groups())
    try:
        return datetime.date(year, month, day)
    except ValueError as err:
        raise InvalidValueError(
            f"Invalid DATE value '{value}': {err}", detailed_error=value
        ) from err


def format_date(value: datetime.date) -> str:
    """Format a date as an rfc5545 DATE string."""
    return f"{value.year:04}{value.month:02}{value.day:02}"


@DATA_TYPE.register("date", parse_order=4)
@dataclass(frozen=True)
class Date:
    """A calendar date with no time component, declared with VALUE=DATE."""

    value: datetime.date

    @classmethod
    def __parse_property_value__(
        cls, value: str, params: Sequence[Parameter], context: ValueContext
    ) -> Date | None:
        """Parse a value as a date only when the parameters declare it."""
        if not DATE_REGEX.fullmatch(value):
            return None
        if get_parameter_value(params, ATTR_VALUE) != VALUE_DATE:
            return None
        result = parse_date(value)
        _LOGGER.debug("Date returned %s", result)
        return cls(result)

    def __encode_property_value__(self, context: ValueContext) -> str:
        return format_date(self.value)
