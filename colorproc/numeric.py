"""
Clamping, rounding and percentage helpers used by every conversion.
"""

import math

from .constants import CHANNEL_MAX, HUE_MAX


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi. NaN collapses to lo."""
    if v != v:
        return lo
    return max(lo, min(hi, v))


def clamp01(v: float) -> float:
    return clamp(v, 0.0, 1.0)


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if x < 0:
        return -int(math.floor(-x + 0.5))
    return int(math.floor(x + 0.5))


def round_to(x: float, digits: int) -> float:
    """Round to a fixed number of decimal places (halves away from zero)."""
    m = 10 ** digits
    return round_half_up(x * m) / m


def clamp_channel(v: float) -> int:
    """Turn any number into a valid 0-255 channel value."""
    if v != v:
        return 0
    if v == math.inf:
        return CHANNEL_MAX
    if v == -math.inf:
        return 0
    return int(clamp(round_half_up(v), 0, CHANNEL_MAX))


def normalize_hue(h: float) -> float:
    """Wrap a hue in degrees into [0, 360)."""
    if h != h or math.isinf(h):
        return 0.0
    h = h % HUE_MAX
    return 0.0 if h >= HUE_MAX else h


def percent_to_fraction(p: float) -> float:
    return clamp01(p / 100.0)


def fraction_to_percent(f: float) -> float:
    return f * 100.0


def alpha_to_byte(a: float) -> int:
    """Alpha fraction (0.0-1.0) to a channel byte."""
    return clamp_channel(clamp01(a) * CHANNEL_MAX)


def byte_to_alpha(a: int) -> float:
    return a / CHANNEL_MAX


def format_number(x: float, digits: int) -> str:
    """Render with at most `digits` decimals, trailing zeros stripped."""
    v = round_to(x, digits) + 0.0
    if v == 0:
        return "0"
    text = f"{v:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
