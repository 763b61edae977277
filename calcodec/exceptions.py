"""Exceptions for calcodec library."""


class CalendarError(Exception):
    """Base exception for all calcodec errors."""


class CalendarParseError(CalendarError):
    """Exception raised when decoding calendar text.

    The 'message' attribute contains a human-readable message about the
    error that occurred. The 'detailed_error' attribute can provide additional
    information about the error, such as the content line that could not be
    decoded, useful for debugging purposes.
    """

    def __init__(self, message: str, *, detailed_error: str | None = None) -> None:
        """Initialize the CalendarParseError with a message."""
        super().__init__(message)
        self.message = message
        self.detailed_error = detailed_error


class MalformedPropertyError(CalendarParseError):
    """Exception raised when a content line has no value separator."""


class MalformedDurationError(CalendarParseError):
    """Exception raised when a DURATION property value can't be parsed."""


class InvalidValueError(CalendarParseError):
    """Exception raised when a DATE or DATE-TIME value is not a real date."""


class InvalidTimeZoneError(CalendarParseError):
    """Exception raised when a TZID does not name a known timezone.

    The 'tzid' attribute holds the offending identifier.
    """

    def __init__(self, tzid: str, *, detailed_error: str | None = None) -> None:
        """Initialize InvalidTimeZoneError for the specified identifier."""
        super().__init__(
            f"{tzid} is not a valid time zone identifier",
            detailed_error=detailed_error,
        )
        self.tzid = tzid


class UnterminatedBlockError(CalendarParseError):
    """Exception raised when a BEGIN line has no matching END line.

    The 'key' attribute holds the name of the block that was left open.
    """

    def __init__(self, key: str, *, detailed_error: str | None = None) -> None:
        """Initialize UnterminatedBlockError for the specified block name."""
        super().__init__(
            f"Block 'BEGIN:{key}' has no matching 'END:{key}'",
            detailed_error=detailed_error,
        )
        self.key = key
