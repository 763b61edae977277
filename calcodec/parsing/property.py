"""Library for handling content line properties and parameters.

A property is a single content line inside a block, made of a name, zero or
more parameters and a value. For example, given a content line of:

  DUE;VALUE=DATE:20070501

This library would create a Property with this structure:

  Property(
    key='due',
    value=Date(value=datetime.date(2007, 5, 1)),
    params=(Parameter(key='value', value='DATE'),),
  )

Parameter values are kept verbatim, including quotes, so that a property can
be encoded back into exactly the content line it was decoded from. Values that
contain more than one `=` are kept whole rather than split apart, and a
parameter with no `=` at all has no value.

The value starts after the first `:` in the line and parameters are separated
by every `;`. See `calcodec.compat.parameter_compat` for quoted values that
contain either delimiter.
"""

from __future__ import annotations

import logging

from calcodec.exceptions import MalformedDurationError, MalformedPropertyError
from calcodec.compat import duration_compat, parameter_compat
from calcodec.model import Parameter, Property, denormalize_key, normalize_key
from calcodec.types import DATA_TYPE, Duration, Text, ValueContext

from .const import ATTR_DURATION

_LOGGER = logging.getLogger(__name__)

_QUOTE = '"'
_VALUE_SEP = ":"
_PARAM_SEP = ";"
_PARAM_VALUE_SEP = "="


def _find_unquoted(line: str, char: str) -> int:
    """Return the position of the first char outside of a quoted string."""
    quoted = False
    for pos, value in enumerate(line):
        if value == _QUOTE:
            quoted = not quoted
        elif value == char and not quoted:
            return pos
    return -1


def _split_unquoted(text: str, char: str) -> list[str]:
    """Split the text on every char outside of a quoted string."""
    parts = []
    while (pos := _find_unquoted(text, char)) != -1:
        parts.append(text[:pos])
        text = text[pos + 1 :]
    parts.append(text)
    return parts


def _parse_parameter(fragment: str) -> Parameter:
    key, sep, value = fragment.partition(_PARAM_VALUE_SEP)
    return Parameter(key=normalize_key(key), value=value if sep else None)


def _parse_duration(line: str, value: str, context: ValueContext) -> Duration | Text:
    try:
        return Duration(context.durations.parse(value))
    except ValueError as err:
        if duration_compat.is_lenient_durations_enabled():
            _LOGGER.debug("Keeping invalid DURATION '%s' as text", value)
            return Text(value)
        raise MalformedDurationError(
            f"Invalid DURATION value '{value}': {err}", detailed_error=line
        ) from err


def parse_property(line: str, context: ValueContext) -> Property:
    """Decode a Property from a single unfolded content line.

    Will raise a CalendarParseError on failure.
    """
    quoted = parameter_compat.is_quoted_parameters_enabled()
    pos = _find_unquoted(line, _VALUE_SEP) if quoted else -1
    if pos == -1:
        pos = line.find(_VALUE_SEP)
    if pos == -1:
        raise MalformedPropertyError(
            f"Property has no value: {line!r}", detailed_error=line
        )
    if quoted:
        name, *fragments = _split_unquoted(line[:pos], _PARAM_SEP)
    else:
        name, *fragments = line[:pos].split(_PARAM_SEP)
    raw_value = line[pos + 1 :]

    if name == ATTR_DURATION and not fragments:
        return Property(
            key=normalize_key(name), value=_parse_duration(line, raw_value, context)
        )

    params = tuple(_parse_parameter(fragment) for fragment in fragments)
    return Property(
        key=normalize_key(name),
        value=DATA_TYPE.parse_value(raw_value, params, context),
        params=params,
    )


def encode_property(prop: Property, context: ValueContext) -> str:
    """Encode a Property into a single unfolded content line."""
    result = [denormalize_key(prop.key)]
    for param in prop.params:
        result.append(f"{_PARAM_SEP}{denormalize_key(param.key)}")
        if param.value is not None:
            result.append(f"{_PARAM_VALUE_SEP}{param.value}")
    result.append(_VALUE_SEP)
    result.append(DATA_TYPE.encode_value(prop.value, context))
    return "".join(result)
