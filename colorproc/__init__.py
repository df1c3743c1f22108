"""
Color parsing, conversion and formatting.

    >>> from colorproc import parse
    >>> parse("cornflowerblue").to_hsl_string()
    'hsl(218.54, 79.19%, 66.08%)'
"""

from .color import Color
from .errors import (
    InvalidArgumentCountError,
    InvalidHexError,
    InvalidNumericValueError,
    ParseError,
    ParseErrorKind,
    UnknownFormatError,
    UnknownNameError,
)
from .parser import parse, try_parse

__version__ = "1.0.0"

__all__ = [
    "Color",
    "ParseError",
    "ParseErrorKind",
    "UnknownFormatError",
    "UnknownNameError",
    "InvalidHexError",
    "InvalidArgumentCountError",
    "InvalidNumericValueError",
    "parse",
    "try_parse",
]
