"""Library for the decoded calendar data model.

A decoded calendar is a `Document`: an ordered sequence of entries, where each
entry is either a named `Block` (a BEGIN/END section) or a `Property` (a single
content line). Every sibling block with the same key is merged into a single
`Block` whose `bodies` hold each occurrence in the order they appeared.

For example, this content:

  BEGIN:VCALENDAR
  BEGIN:VEVENT
  DTSTART;VALUE=DATE:20070501
  END:VEVENT
  END:VCALENDAR

Decodes into this structure:

  Document(entries=(
    Block(key='vcalendar', bodies=((
      Block(key='vevent', bodies=((
        Property(
          key='dtstart',
          value=Date(value=datetime.date(2007, 5, 1)),
          params=(Parameter(key='value', value='DATE'),),
        ),
      ),)),
    ),)),
  ))

All objects are immutable once constructed.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from pydantic_core import to_json, to_jsonable_python

if TYPE_CHECKING:
    from .types import TypedValue

__all__ = [
    "Block",
    "Document",
    "Entry",
    "Parameter",
    "Property",
    "denormalize_key",
    "normalize_key",
]

MAX_KEY_LEN = 255


def normalize_key(key: str) -> str:
    """Return the identifier used for a block, property or parameter name."""
    return key.replace("-", "_").lower()[:MAX_KEY_LEN]


def denormalize_key(key: str) -> str:
    """Return the content line form of a normalized identifier."""
    return key.replace("_", "-").upper()


@dataclass(frozen=True)
class Parameter:
    """A property parameter with its raw value text.

    Values are kept verbatim, including any surrounding quotes, so they can
    be written back exactly as they were read. The value is None for a
    parameter written without an `=`.
    """

    key: str
    value: str | None


@dataclass(frozen=True)
class Property:
    """A property with a typed value and its ordered parameters."""

    key: str
    value: TypedValue
    params: tuple[Parameter, ...] = ()

    def get_parameter(self, key: str) -> Parameter | None:
        """Return the first parameter with the specified name."""
        key = normalize_key(key)
        for param in self.params:
            if param.key == key:
                return param
        return None

    def get_parameter_value(self, key: str) -> str | None:
        """Return the raw value of the first parameter with the specified name."""
        if not (param := self.get_parameter(key)):
            return None
        return param.value

    def as_dict(self) -> dict[str, Any]:
        """Convert the property into a json compatible dictionary."""
        return {
            "name": self.key,
            "kind": self.value.kind,
            "value": to_jsonable_python(self.value.value, fallback=str),
            "params": [{"name": p.key, "value": p.value} for p in self.params],
        }


@dataclass(frozen=True)
class Block:
    """A named block with one body for each occurrence in the content."""

    key: str
    bodies: tuple[tuple[Entry, ...], ...] = ()

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Return the entries of the first occurrence of the block."""
        return self.bodies[0] if self.bodies else ()

    def get(self, key: str) -> Entry | None:
        """Return the first entry with the key in the first occurrence."""
        return _find(self.entries, key)

    def as_dict(self) -> dict[str, Any]:
        """Convert the block into a json compatible dictionary."""
        return {
            "name": self.key,
            "bodies": [[entry.as_dict() for entry in body] for body in self.bodies],
        }


Entry = Union[Block, Property]


@dataclass(frozen=True)
class Document:
    """A decoded calendar document."""

    entries: tuple[Entry, ...] = ()

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def blocks(self) -> list[Block]:
        """Return the top level blocks in order."""
        return [entry for entry in self.entries if isinstance(entry, Block)]

    def get(self, key: str) -> Entry | None:
        """Return the top level entry with the specified key."""
        return _find(self.entries, key)

    def as_dict(self) -> dict[str, Any]:
        """Convert the document into a json compatible dictionary."""
        return {"entries": [entry.as_dict() for entry in self.entries]}

    def to_json(self) -> str:
        """Serialize the document as json."""
        return to_json(self.as_dict(), fallback=str).decode()


def _find(entries: tuple[Entry, ...], key: str) -> Entry | None:
    key = normalize_key(key)
    for entry in entries:
        if entry.key == key:
            return entry
    return None
