"""Library for parsing and encoding content lines and blocks."""
