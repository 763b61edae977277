"""Tests for the data type registry."""

import pytest

from calcodec.types import (
    DATA_TYPE,
    Date,
    Duration,
    LocalDateTime,
    Text,
    UtcDateTime,
    ZonedDateTime,
)
from calcodec.types.data_types import Registry


def test_parse_order() -> None:
    """Test the order that data types are tried when parsing."""
    assert sorted(DATA_TYPE.parse_order, key=DATA_TYPE.parse_order.__getitem__) == [
        ZonedDateTime,
        LocalDateTime,
        UtcDateTime,
        Date,
        Duration,
    ]
    assert Text not in DATA_TYPE.parse_order


def test_kinds() -> None:
    """Test every data type has a distinct discriminant."""
    assert DATA_TYPE.items == {
        "text": Text,
        "zoned-date-time": ZonedDateTime,
        "local-date-time": LocalDateTime,
        "utc-date-time": UtcDateTime,
        "date": Date,
        "duration": Duration,
    }
    assert UtcDateTime.kind == "utc-date-time"


def test_encode_unknown_type() -> None:
    """Test encoding a value that is not a registered data type."""
    with pytest.raises(ValueError, match="No data type registered"):
        DATA_TYPE.encode_value("20210601", None)  # type: ignore[arg-type]


def test_no_fallback() -> None:
    """Test parsing with a registry that has no fallback type."""
    registry = Registry()
    with pytest.raises(ValueError, match="No data type registered"):
        registry.parse_value("value", (), None)  # type: ignore[arg-type]
