"""Constants for calcodec parsing library."""

LINES_SEP = "\r\n"
FOLD_LEN = 75
FOLD_INDENT = " "
ESCAPED_NEWLINE = "\\n"
NEWLINE = "\n"
ATTR_BEGIN = "BEGIN:"
ATTR_END = "END:"
ATTR_DURATION = "DURATION"
