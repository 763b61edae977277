"""Tests for encoding calendar content."""

import datetime

from calcodec import Block, Document, Encoder, Parameter, Property, decode, encode
from calcodec.types import Date, Duration, LocalDateTime, Text, UtcDateTime

STRUCTURED_LOCATION = "\r\n".join(
    [
        "BEGIN:VCALENDAR",
        "BEGIN:VEVENT",
        'X-APPLE-STRUCTURED-LOCATION;VALUE=URI;X-ADDRESS="500 Nicollet St, Minneapol',
        ' is, MN, United Stat";X-APPLE-MAPKIT-HANDLE=CAEStwIIrk0QnsWIkObE3qLyARoS CVS',
        " PNLitEkpAEUGK8OV0pVrAIpoBCgZDYW5hZGESAkNBGgxTYXNrYXRjaGV3YW4iAlNLKg9EaXZpc2",
        " lvbiBOby4gMTEyCVNhc2thdG9vbjoHUzdOIDNQOUIMRm9yZXN0IEdyb3ZlUgpXZWJzdGVyIFN0W",
        " gM1MDJiDjUwMiBXZWJzdGVyIFN0igEWVW5pdmVyc2l0eSBIZWlnaHRzIFNEQYoBDEZvcmVzdCBH",
        " cm92ZSodRm9yZXN0IEdyb3ZlIENvbW11bml0eSBDaHVyY2gyDjUwMiBXZWJzdGVyIFN0MhRTYXN",
        " rYXRvb24gU0sgUzdOIDNQOTIGQ2FuYWRhOC9aJwolCJ7FiJDmxN6i8gESEglUjzS4rRJKQBFBiv",
        " DldKVawBiuTZADAQ==;X-APPLE-RADIUS=123.4774275404302;X-APPLE-REFERENCEFRAME=",
        " 1;X-TITLE=The Wedge:geo:42.145927,-100.585260",
        "END:VEVENT",
        "END:VCALENDAR",
        "",
    ]
)
MAPKIT_HANDLE = (
    "CAEStwIIrk0QnsWIkObE3qLyARoS CVSPNLitEkpAEUGK8OV0pVrAIpoBCgZDYW5hZGESAkNBGgxT"
    "YXNrYXRjaGV3YW4iAlNLKg9EaXZpc2lvbiBOby4gMTEyCVNhc2thdG9vbjoHUzdOIDNQOUIMRm9y"
    "ZXN0IEdyb3ZlUgpXZWJzdGVyIFN0WgM1MDJiDjUwMiBXZWJzdGVyIFN0igEWVW5pdmVyc2l0eSBI"
    "ZWlnaHRzIFNEQYoBDEZvcmVzdCBHcm92ZSodRm9yZXN0IEdyb3ZlIENvbW11bml0eSBDaHVyY2gy"
    "DjUwMiBXZWJzdGVyIFN0MhRTYXNrYXRvb24gU0sgUzdOIDNQOTIGQ2FuYWRhOC9aJwolCJ7FiJDm"
    "xN6i8gESEglUjzS4rRJKQBFBivDldKVawBiuTZADAQ=="
)
DECODED = Document(
    entries=(
        Block(
            key="vcalendar",
            bodies=(
                (
                    Block(
                        key="vevent",
                        bodies=(
                            (
                                Property(
                                    key="x_apple_structured_location",
                                    value=Text("geo:42.145927,-100.585260"),
                                    params=(
                                        Parameter(key="value", value="URI"),
                                        Parameter(
                                            key="x_address",
                                            value='"500 Nicollet St, Minneapolis, MN, United Stat"',
                                        ),
                                        Parameter(
                                            key="x_apple_mapkit_handle",
                                            value=MAPKIT_HANDLE,
                                        ),
                                        Parameter(
                                            key="x_apple_radius",
                                            value="123.4774275404302",
                                        ),
                                        Parameter(
                                            key="x_apple_referenceframe", value="1"
                                        ),
                                        Parameter(key="x_title", value="The Wedge"),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    )
)


def test_structured_location_decode() -> None:
    """Test decoding a structured location with quoted and unescaped values."""
    assert decode(STRUCTURED_LOCATION) == DECODED


def test_structured_location_encode() -> None:
    """Test encoding a structured location folds at the same columns."""
    assert encode(DECODED) == STRUCTURED_LOCATION


def test_empty() -> None:
    """Test encoding an empty document."""
    assert encode(Document()) == ""


def test_values() -> None:
    """Test the text of each kind of value and its parameters."""
    document = Document(
        entries=(
            Block(
                key="vtodo",
                bodies=(
                    (
                        Property(
                            key="dtstamp",
                            value=UtcDateTime(
                                datetime.datetime(
                                    2022, 7, 24, 12, tzinfo=datetime.timezone.utc
                                )
                            ),
                        ),
                        Property(
                            key="dtstart",
                            value=LocalDateTime(datetime.datetime(2022, 7, 24, 9, 30)),
                        ),
                        Property(
                            key="due",
                            value=Date(datetime.date(2022, 7, 25)),
                            params=(Parameter(key="value", value="DATE"),),
                        ),
                        Property(
                            key="duration",
                            value=Duration(datetime.timedelta(days=1, minutes=5)),
                        ),
                    ),
                ),
            ),
        )
    )
    assert encode(document) == (
        "BEGIN:VTODO\r\n"
        "DTSTAMP:20220724T120000Z\r\n"
        "DTSTART:20220724T093000\r\n"
        "DUE;VALUE=DATE:20220725\r\n"
        "DURATION:P1DT5M\r\n"
        "END:VTODO\r\n"
    )


def test_utc_from_other_zone() -> None:
    """Test a UTC value created in another zone is written in UTC."""
    value = datetime.datetime(
        2022, 7, 24, 12, tzinfo=datetime.timezone(datetime.timedelta(hours=2))
    )
    document = Document(entries=(Property(key="dtstamp", value=UtcDateTime(value)),))
    assert encode(document) == "DTSTAMP:20220724T100000Z\r\n"


def test_each_body_is_a_block() -> None:
    """Test a block is written once for each of its bodies."""
    document = Document(
        entries=(
            Block(
                key="vevent",
                bodies=(
                    (Property(key="uid", value=Text("1")),),
                    (Property(key="uid", value=Text("2")),),
                ),
            ),
        )
    )
    assert encode(document) == (
        "BEGIN:VEVENT\r\nUID:1\r\nEND:VEVENT\r\n"
        "BEGIN:VEVENT\r\nUID:2\r\nEND:VEVENT\r\n"
    )


def test_newlines_escaped() -> None:
    """Test newlines in a value are escaped."""
    document = Document(
        entries=(Property(key="description", value=Text("one\ntwo")),)
    )
    ics = encode(document)
    assert ics == "DESCRIPTION:one\\ntwo\r\n"
    assert decode(ics) == document


def test_fold_long_line() -> None:
    """Test a long line is folded into 75 character segments."""
    value = "x" * 200
    ics = encode(Document(entries=(Property(key="summary", value=Text(value)),)))
    lines = ics.split("\r\n")
    assert lines[-1] == ""
    assert [len(line) for line in lines[:-1]] == [75, 76, 59]
    assert all(line.startswith(" ") for line in lines[1:-1])
    assert decode(ics).get("summary") == Property(key="summary", value=Text(value))


def test_fold_exact_length() -> None:
    """Test a line of exactly 75 characters is not folded."""
    value = "x" * (75 - len("SUMMARY:"))
    ics = encode(Document(entries=(Property(key="summary", value=Text(value)),)))
    assert ics == f"SUMMARY:{value}\r\n"


def test_encoder_durations(fake_durations) -> None:
    """Test an encoder with a custom duration codec."""
    document = Document(entries=(Property(key="duration", value=Duration(15)),))
    assert Encoder(durations=fake_durations).encode(document) == "DURATION:P15M\r\n"
