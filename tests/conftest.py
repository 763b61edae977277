"""Test fixtures."""

import datetime
from typing import Any

import pytest

from calcodec.types import Rfc5545DurationCodec, ValueContext
from calcodec.timezones import ZoneInfoTimezones


class FakeDurationCodec:
    """Duration codec that only understands minutes, e.g. 'P15M'."""

    def parse(self, value: str) -> int:
        if not value.startswith("P") or not value.endswith("M"):
            raise ValueError(f"Unsupported duration '{value}'")
        return int(value[1:-1])

    def format(self, value: Any) -> str:
        return f"P{value}M"


class FakeTimezones:
    """Time zone provider that only knows a single fixed zone."""

    def __init__(self) -> None:
        self.calls: list[tuple[datetime.datetime, str]] = []

    def is_known(self, key: str) -> bool:
        return key == "Fake/Zone"

    def localize(self, value: datetime.datetime, key: str) -> datetime.datetime:
        self.calls.append((value, key))
        return value.replace(tzinfo=datetime.timezone(datetime.timedelta(hours=3)))


@pytest.fixture(name="context")
def mock_context() -> ValueContext:
    """Fixture for the default value context."""
    return ValueContext(
        durations=Rfc5545DurationCodec(), timezones=ZoneInfoTimezones()
    )


@pytest.fixture(name="fake_durations")
def mock_fake_durations() -> FakeDurationCodec:
    """Fixture for a fake duration codec."""
    return FakeDurationCodec()


@pytest.fixture(name="fake_timezones")
def mock_fake_timezones() -> FakeTimezones:
    """Fixture for a fake time zone provider."""
    return FakeTimezones()
