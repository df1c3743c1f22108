"""
Parse failures. Conversions and derived operations never raise.
"""

from enum import Enum


class ParseErrorKind(str, Enum):
    UNKNOWN_FORMAT = "unknown_format"
    UNKNOWN_NAME = "unknown_name"
    INVALID_HEX = "invalid_hex"
    INVALID_ARGUMENT_COUNT = "invalid_argument_count"
    INVALID_NUMERIC_VALUE = "invalid_numeric_value"


class ParseError(ValueError):
    """A string could not be turned into a color."""

    kind = ParseErrorKind.UNKNOWN_FORMAT

    def __init__(self, text: str, detail: str = ""):
        self.text = text
        self.detail = detail
        message = f"{self.kind.value}: {text!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class UnknownFormatError(ParseError):
    kind = ParseErrorKind.UNKNOWN_FORMAT


class UnknownNameError(ParseError):
    kind = ParseErrorKind.UNKNOWN_NAME


class InvalidHexError(ParseError):
    kind = ParseErrorKind.INVALID_HEX


class InvalidArgumentCountError(ParseError):
    kind = ParseErrorKind.INVALID_ARGUMENT_COUNT


class InvalidNumericValueError(ParseError):
    kind = ParseErrorKind.INVALID_NUMERIC_VALUE
