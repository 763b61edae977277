"""Encode a Document as calendar content.

The output of `encode` can be decoded back into an equal Document, and for
content that is already in canonical form (upper case names, lines folded at
75 characters, CRLF line endings) `encode(decode(content)) == content`.
Property parameters are always written back exactly as they were decoded.
"""

from __future__ import annotations

import logging

from .model import Document
from .parsing.component import encode_content
from .types import DurationCodec, Rfc5545DurationCodec, ValueContext

__all__ = [
    "Encoder",
    "encode",
]

_LOGGER = logging.getLogger(__name__)


class Encoder:
    """Encodes a Document using the configured duration codec."""

    def __init__(self, durations: DurationCodec | None = None) -> None:
        """Initialize Encoder."""
        self._context = ValueContext(durations=durations or Rfc5545DurationCodec())

    def encode(self, document: Document) -> str:
        """Encode the Document as calendar content."""
        _LOGGER.debug("Encoding %s top level entries", len(document))
        return encode_content(document, self._context)


def encode(document: Document, *, durations: DurationCodec | None = None) -> str:
    """Encode the Document as calendar content."""
    return Encoder(durations=durations).encode(document)
