"""Library for handling content lines and blocks.

Content is read as physical lines which are unfolded into logical content
lines. Each logical line either opens a block (BEGIN:NAME), closes the
innermost open block (END:NAME) or is a property of the innermost open block.

Blocks created here have no semantic meaning: a block is only a name and
the entries found between its BEGIN and END lines. Sibling blocks with the
same name are merged into a single block with one body per occurrence.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Generator, Iterable
from dataclasses import dataclass, field

from calcodec.exceptions import UnterminatedBlockError
from calcodec.model import Block, Entry, Property, denormalize_key, normalize_key
from calcodec.types import ValueContext

from .const import (
    ATTR_BEGIN,
    ATTR_END,
    ESCAPED_NEWLINE,
    FOLD_INDENT,
    FOLD_LEN,
    LINES_SEP,
    NEWLINE,
)
from .property import encode_property, parse_property

_LOGGER = logging.getLogger(__name__)

LINES_RE = re.compile(r"\r?\n")


def unfolded_lines(content: str) -> Generator[str, None, None]:
    """Read content and unfold lines.

    A physical line starting with a single space continues the previous
    line. Escaped newlines are restored once a logical line is complete.
    Empty lines are kept, except for the one after a trailing separator.
    """
    lines = LINES_RE.split(content)
    if not lines[-1]:
        lines.pop()
    current: str | None = None
    for line in lines:
        if line.startswith(FOLD_INDENT):
            current = (current or "") + line[1:]
            continue
        if current is not None:
            yield current.replace(ESCAPED_NEWLINE, NEWLINE)
        current = line
    if current is not None:
        yield current.replace(ESCAPED_NEWLINE, NEWLINE)


@dataclass
class _Frame:
    """A block that is open while reading content lines."""

    name: str
    entries: list[Entry | _Accumulator] = field(default_factory=list)
    blocks: dict[str, _Accumulator] = field(default_factory=dict)

    def add_block(self, name: str, body: tuple[Entry, ...]) -> None:
        """Add a body to the block with this key, created at its first occurrence."""
        key = normalize_key(name)
        if (accumulator := self.blocks.get(key)) is None:
            accumulator = _Accumulator(key)
            self.blocks[key] = accumulator
            self.entries.append(accumulator)
        accumulator.bodies.append(body)

    def build(self) -> tuple[Entry, ...]:
        """Return the immutable entries read for this block."""
        return tuple(
            entry.build() if isinstance(entry, _Accumulator) else entry
            for entry in self.entries
        )


@dataclass
class _Accumulator:
    """Bodies of the sibling blocks sharing a key."""

    key: str
    bodies: list[tuple[Entry, ...]] = field(default_factory=list)

    def build(self) -> Block:
        return Block(key=self.key, bodies=tuple(self.bodies))


def parse_blocks(lines: Iterable[str], context: ValueContext) -> tuple[Entry, ...]:
    """Parse unfolded content lines into blocks and properties.

    This walks through each line and uses a stack to associate properties
    with the innermost open block, so deeply nested content does not recurse.
    An END line only closes the innermost block when the name matches
    exactly, which pairs nested blocks of the same name by depth. Any other
    END line is an ordinary property.
    """
    root = _Frame(name="")
    stack: list[_Frame] = [root]
    for line in lines:
        if line.startswith(ATTR_BEGIN):
            stack.append(_Frame(name=line[len(ATTR_BEGIN) :]))
        elif len(stack) > 1 and line == f"{ATTR_END}{stack[-1].name}":
            frame = stack.pop()
            stack[-1].add_block(frame.name, frame.build())
            _LOGGER.debug("Parsed block %s", frame.name)
        else:
            stack[-1].entries.append(parse_property(line, context))

    if len(stack) > 1:
        frame = stack[-1]
        raise UnterminatedBlockError(
            frame.name, detailed_error=f"{ATTR_BEGIN}{frame.name}"
        )
    return root.build()


def parse_content(content: str, context: ValueContext) -> tuple[Entry, ...]:
    """Parse content into blocks and typed properties.

    This includes all necessary unfolding of long lines into full properties.
    """
    return parse_blocks(unfolded_lines(content), context)


def _fold(contentline: str) -> list[str]:
    """Split a content line into physical lines of at most FOLD_LEN."""
    contentline = contentline.replace(NEWLINE, ESCAPED_NEWLINE)
    if not contentline:
        return [contentline]
    return [
        (FOLD_INDENT if pos else "") + contentline[pos : pos + FOLD_LEN]
        for pos in range(0, len(contentline), FOLD_LEN)
    ]


def encode_lines(
    entries: Iterable[Entry], context: ValueContext
) -> Generator[str, None, None]:
    """Generate logical content lines for the entries in order."""
    for entry in entries:
        if isinstance(entry, Property):
            yield encode_property(entry, context)
            continue
        name = denormalize_key(entry.key)
        for body in entry.bodies:
            yield f"{ATTR_BEGIN}{name}"
            yield from encode_lines(body, context)
            yield f"{ATTR_END}{name}"


def encode_content(entries: Iterable[Entry], context: ValueContext) -> str:
    """Encode blocks and properties into folded content."""
    return "".join(
        f"{line}{LINES_SEP}"
        for contentline in encode_lines(entries, context)
        for line in _fold(contentline)
    )
