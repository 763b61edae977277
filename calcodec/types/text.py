"""Library for opaque TEXT values."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from calcodec.model import Parameter

from .data_types import DATA_TYPE, ValueContext


@DATA_TYPE.register("text", fallback=True)
@dataclass(frozen=True)
class Text:
    """A value that did not match any other data type, kept as written."""

    value: str

    @classmethod
    def __parse_property_value__(
        cls, value: str, params: Sequence[Parameter], context: ValueContext
    ) -> Text:
        return cls(value)

    def __encode_property_value__(self, context: ValueContext) -> str:
        return self.value
