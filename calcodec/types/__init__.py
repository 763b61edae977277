"""Library for parsing and encoding property value data types.

Every decoded property value is exactly one of the types in `TypedValue`.
"""

from typing import Union

from .data_types import DATA_TYPE, ValueContext
from .date import Date
from .date_time import LocalDateTime, UtcDateTime, ZonedDateTime
from .duration import Duration, DurationCodec, Rfc5545DurationCodec
from .text import Text

TypedValue = Union[Text, UtcDateTime, ZonedDateTime, LocalDateTime, Date, Duration]

__all__ = [
    "DATA_TYPE",
    "Date",
    "Duration",
    "DurationCodec",
    "LocalDateTime",
    "Rfc5545DurationCodec",
    "Text",
    "TypedValue",
    "UtcDateTime",
    "ValueContext",
    "ZonedDateTime",
]
