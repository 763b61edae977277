"""Library for parsing and encoding property value data types.

Each data type is a class registered with `DATA_TYPE`. A data type may
implement these class methods, all of which are optional:

  __parse_property_value__(value, params, context) -> instance | None
    Return an instance when the raw value text (and its parameters) has the
    shape of this data type, otherwise None so the next type is tried.

  __encode_property_value__(instance, context) -> str
    Return the content line text for a decoded value.

Types with a parse order are tried in ascending order and the first match
wins. A type registered as the fallback accepts anything that nothing else
matched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

from calcodec.model import Parameter, normalize_key

if TYPE_CHECKING:
    from calcodec.timezones import TimezoneProvider
    from .duration import DurationCodec

_LOGGER = logging.getLogger(__name__)

T_TYPE = TypeVar("T_TYPE", bound=type)

ParseFunc = Callable[[str, Sequence[Parameter], "ValueContext"], Any]
EncodeFunc = Callable[[Any, "ValueContext"], str]


def _default_durations() -> DurationCodec:
    from .duration import Rfc5545DurationCodec

    return Rfc5545DurationCodec()


def _default_timezones() -> TimezoneProvider:
    from calcodec.timezones import ZoneInfoTimezones

    return ZoneInfoTimezones()


@dataclass(frozen=True)
class ValueContext:
    """External capabilities used when parsing and encoding values."""

    durations: DurationCodec = field(default_factory=_default_durations)
    timezones: TimezoneProvider = field(default_factory=_default_timezones)


class DataType(Protocol):
    """Defines the protocol implemented by data types in this library."""

    kind: str

    @classmethod
    def __parse_property_value__(
        cls, value: str, params: Sequence[Parameter], context: ValueContext
    ) -> Any:
        """Parse the specified property value as this data type, or None."""

    def __encode_property_value__(self, context: ValueContext) -> str:
        """Encode the decoded value as content line text."""


def get_parameter_value(params: Sequence[Parameter], key: str) -> str | None:
    """Return the value of the first parameter with the specified name."""
    key = normalize_key(key)
    for param in params:
        if param.key == key:
            return param.value
    return None


class Registry:
    """Registry of data types."""

    def __init__(self) -> None:
        """Initialize Registry."""
        self._items: dict[str, type] = {}
        self._parse_property_value: dict[type, ParseFunc] = {}
        self._encode_property_value: dict[type, EncodeFunc] = {}
        self._parse_order: dict[type, int] = {}
        self._fallback: type | None = None

    def register(
        self,
        name: str,
        parse_order: int | None = None,
        fallback: bool = False,
    ) -> Callable[[T_TYPE], T_TYPE]:
        """Return decorator to register a type.

        The name is the discriminant stored on the type as `kind`.
        """

        def decorator(func: T_TYPE) -> T_TYPE:
            """Register decorated class."""
            self._items[name] = func
            setattr(func, "kind", name)
            if parse_property_value := getattr(func, "__parse_property_value__", None):
                self._parse_property_value[func] = parse_property_value
            if encode_property_value := getattr(
                func, "__encode_property_value__", None
            ):
                self._encode_property_value[func] = encode_property_value
            if parse_order is not None:
                self._parse_order[func] = parse_order
            if fallback:
                self._fallback = func
            return func

        return decorator

    @property
    def items(self) -> dict[str, type]:
        """Registry of data type names to classes."""
        return self._items

    @property
    def parse_order(self) -> dict[type, int]:
        """Return the parse ordering of the registered types."""
        return self._parse_order

    def parse_value(
        self, value: str, params: Sequence[Parameter], context: ValueContext
    ) -> Any:
        """Parse the raw value into the first data type that accepts it."""
        for data_type in sorted(self._parse_order, key=self._parse_order.__getitem__):
            parse = self._parse_property_value[data_type]
            if (result := parse(value, params, context)) is not None:
                _LOGGER.debug("Parsed '%s' as %s", value, data_type.__name__)
                return result
        if self._fallback is None:
            raise ValueError(f"No data type registered to parse value '{value}'")
        return self._parse_property_value[self._fallback](value, params, context)

    def encode_value(self, value: Any, context: ValueContext) -> str:
        """Encode a decoded value as content line text."""
        if not (encode := self._encode_property_value.get(type(value))):
            raise ValueError(f"No data type registered to encode {type(value)}")
        return encode(value, context)


DATA_TYPE: Registry = Registry()
