"""
Parsing of color strings.

Supported: named colors, two-letter short names, temperature literals
(6500K), hex 3/4/6/8 (with or without #), and the functional forms
rgb/rgba, hsl/hsla, hsv/hsva, hwb/hwba, cmyk/cmyka, gray/graya (grey),
lab/laba and lch/lcha with comma separated arguments.

Matchers run in order and the first one that returns a color wins. A
matcher returns None when the string is not its grammar, and raises a
ParseError when it is its grammar but the content is invalid.
"""

import logging
import re
from typing import Callable, Dict, List, Optional, Tuple

from .color import Color
from .errors import (
    InvalidArgumentCountError,
    InvalidHexError,
    InvalidNumericValueError,
    ParseError,
    UnknownFormatError,
    UnknownNameError,
)
from .named import lookup_abbreviation, lookup_name
from .numeric import clamp, clamp01, percent_to_fraction

logger = logging.getLogger(__name__)

Matcher = Callable[[str], Optional[Color]]

# Regular expression patterns
HEX_DIGITS_RE = re.compile(r"[0-9a-f]+")
TEMPERATURE_RE = re.compile(r"^(\d+(?:\.\d+)?)\s*k$")
FUNCTION_RE = re.compile(r"^([a-z]+)\s*\((.*)\)$", re.DOTALL)
TOKEN_RE = re.compile(r"^([+-]?(?:\d+(?:\.\d*)?|\.\d+))\s*(%|deg|°)?$")
IDENT_RE = re.compile(r"^[a-z][a-z ]*$")

HEX_LENGTHS = (3, 4, 6, 8)


# Tokens ----------------------------------------------------------

def _token(s: str, tok: str) -> Tuple[float, str]:
    m = TOKEN_RE.match(tok)
    if not m:
        raise InvalidNumericValueError(s, f"cannot read {tok!r} as a number")
    unit = m.group(2) or ""
    return float(m.group(1)), "deg" if unit == "°" else unit


def _no_degrees(s: str, tok: str) -> Tuple[float, str]:
    v, unit = _token(s, tok)
    if unit == "deg":
        raise InvalidNumericValueError(s, f"{tok!r} is not an angle")
    return v, unit


def _channel(s: str, tok: str) -> float:
    """0-255, or a percentage of 255."""
    v, unit = _no_degrees(s, tok)
    if unit == "%":
        return percent_to_fraction(v) * 255
    return clamp(v, 0, 255)


def _hue(s: str, tok: str) -> float:
    v, unit = _token(s, tok)
    if unit == "%":
        raise InvalidNumericValueError(s, f"hue {tok!r} cannot be a percentage")
    return v


def _percent(s: str, tok: str) -> float:
    """Percentage to fraction; a bare number is read as a percentage."""
    v, _ = _no_degrees(s, tok)
    return percent_to_fraction(v)


def _alpha(s: str, args: List[str], index: int) -> float:
    if len(args) <= index:
        return 1.0
    v, unit = _no_degrees(s, args[index])
    return percent_to_fraction(v) if unit == "%" else clamp01(v)


def _lightness(s: str, tok: str) -> float:
    v, _ = _no_degrees(s, tok)
    return clamp(v, 0, 100)


def _plain(s: str, tok: str) -> float:
    v, unit = _token(s, tok)
    if unit:
        raise InvalidNumericValueError(s, f"{tok!r} takes no unit")
    return v


# Functional forms ------------------------------------------------

def _build_rgb(s: str, args: List[str]) -> Color:
    alpha = _alpha(s, args, 3)
    return Color.from_rgba(
        _channel(s, args[0]), _channel(s, args[1]), _channel(s, args[2]), alpha * 255
    )


def _build_hsl(s: str, args: List[str]) -> Color:
    return Color.from_hsla(
        _hue(s, args[0]), _percent(s, args[1]), _percent(s, args[2]), _alpha(s, args, 3)
    )


def _build_hsv(s: str, args: List[str]) -> Color:
    return Color.from_hsva(
        _hue(s, args[0]), _percent(s, args[1]), _percent(s, args[2]), _alpha(s, args, 3)
    )


def _build_hwb(s: str, args: List[str]) -> Color:
    return Color.from_hwba(
        _hue(s, args[0]), _percent(s, args[1]), _percent(s, args[2]), _alpha(s, args, 3)
    )


def _build_cmyk(s: str, args: List[str]) -> Color:
    cy, m, y, k = (_percent(s, tok) for tok in args[:4])
    return Color.from_cmyka(cy, m, y, k, _alpha(s, args, 4))


def _build_gray(s: str, args: List[str]) -> Color:
    return Color.from_gray(_channel(s, args[0]), _alpha(s, args, 1) * 255)


def _build_lab(s: str, args: List[str]) -> Color:
    return Color.from_laba(
        _lightness(s, args[0]), _plain(s, args[1]), _plain(s, args[2]), _alpha(s, args, 3)
    )


def _build_lch(s: str, args: List[str]) -> Color:
    return Color.from_lcha(
        _lightness(s, args[0]), _plain(s, args[1]), _hue(s, args[2]), _alpha(s, args, 3)
    )


# name -> (argument count, builder)
FUNCTIONS: Dict[str, Tuple[int, Callable[[str, List[str]], Color]]] = {
    "rgb": (3, _build_rgb),
    "rgba": (4, _build_rgb),
    "hsl": (3, _build_hsl),
    "hsla": (4, _build_hsl),
    "hsv": (3, _build_hsv),
    "hsva": (4, _build_hsv),
    "hwb": (3, _build_hwb),
    "hwba": (4, _build_hwb),
    "cmyk": (4, _build_cmyk),
    "cmyka": (5, _build_cmyk),
    "gray": (1, _build_gray),
    "graya": (2, _build_gray),
    "grey": (1, _build_gray),
    "greya": (2, _build_gray),
    "lab": (3, _build_lab),
    "laba": (4, _build_lab),
    "lch": (3, _build_lch),
    "lcha": (4, _build_lch),
}


# Matchers --------------------------------------------------------

def match_name(s: str) -> Optional[Color]:
    rgba = lookup_name(s)
    return Color.from_rgba(*rgba) if rgba else None


def match_abbreviation(s: str) -> Optional[Color]:
    rgba = lookup_abbreviation(s)
    return Color.from_rgba(*rgba) if rgba else None


def match_temperature(s: str) -> Optional[Color]:
    m = TEMPERATURE_RE.match(s)
    if not m:
        return None
    return Color.from_temperature(float(m.group(1)))


def match_hex(s: str) -> Optional[Color]:
    """#rgb, #rgba, #rrggbb, #rrggbbaa; the # may be left out."""
    if s.startswith("#"):
        digits = s[1:]
        if len(digits) not in HEX_LENGTHS:
            raise InvalidHexError(s, f"expected 3, 4, 6 or 8 digits, got {len(digits)}")
        if not HEX_DIGITS_RE.fullmatch(digits):
            raise InvalidHexError(s, "contains a non-hex digit")
    elif len(s) in HEX_LENGTHS and HEX_DIGITS_RE.fullmatch(s):
        digits = s
    else:
        return None

    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    alpha = int(digits[6:8], 16) if len(digits) == 8 else 255
    return Color.from_rgba(
        int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16), alpha
    )


def match_function(s: str) -> Optional[Color]:
    m = FUNCTION_RE.match(s)
    if not m:
        return None
    name, body = m.group(1), m.group(2)
    if name not in FUNCTIONS:
        raise UnknownFormatError(s, f"unknown color function {name!r}")
    arity, build = FUNCTIONS[name]
    args = [a.strip() for a in body.split(",")] if body.strip() else []
    if len(args) != arity:
        raise InvalidArgumentCountError(
            s, f"{name}() takes {arity} arguments, got {len(args)}"
        )
    return build(s, args)


MATCHERS: Tuple[Matcher, ...] = (
    match_name,
    match_abbreviation,
    match_temperature,
    match_hex,
    match_function,
)


def _first_match(s: str) -> Color:
    if not s:
        raise UnknownFormatError(s, "empty string")
    for matcher in MATCHERS:
        color = matcher(s)
        if color is not None:
            return color
    if IDENT_RE.match(s):
        raise UnknownNameError(s)
    raise UnknownFormatError(s)


def parse(text: str) -> Color:
    """
    Parse a color string. The returned color keeps `text` verbatim as its
    original_string. Raises a ParseError subclass on failure.
    """
    if not isinstance(text, str):
        raise UnknownFormatError(repr(text), "not a string")
    normalized = text.strip().lower()
    try:
        color = _first_match(normalized)
    except ParseError as exc:
        logger.debug("Rejected color string %r: %s", text, exc)
        raise
    return color.model_copy(update={"original_string": text})


def try_parse(text: str) -> Optional[Color]:
    """Like parse(), but returns None instead of raising."""
    try:
        return parse(text)
    except ParseError:
        return None
