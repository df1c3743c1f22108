"""
Rendering of a color into its textual forms.

Hue, percentages and LAB/LCH components render with up to two decimals,
trailing zeros stripped, so whole values print as integers. Alpha renders
as a 0-1 fraction with up to three decimals, enough to recover the exact
alpha byte.
"""

from typing import TYPE_CHECKING, Optional

from . import constants as c
from . import converters as conv
from .named import name_for_rgba
from .numeric import byte_to_alpha, format_number, normalize_hue, round_half_up, round_to

if TYPE_CHECKING:
    from .color import Color


def _deg(h: float) -> str:
    return format_number(normalize_hue(round_to(h, c.HUE_DIGITS)), c.HUE_DIGITS)


def _pct(x: float) -> str:
    return f"{format_number(x * 100, c.PERCENT_DIGITS)}%"


def _alpha(rgba: "Color") -> str:
    return format_number(byte_to_alpha(rgba.alpha), c.ALPHA_DIGITS)


def _functional(name: str, parts, rgba: "Color", with_alpha: bool) -> str:
    if with_alpha:
        return f"{name}a({', '.join(parts)}, {_alpha(rgba)})"
    return f"{name}({', '.join(parts)})"


def rgba_to_hex(rgba: "Color", with_alpha: bool = False) -> str:
    """Uppercase #RRGGBB, with a trailing AA byte only when asked and not opaque."""
    out = f"#{rgba.red:02X}{rgba.green:02X}{rgba.blue:02X}"
    if with_alpha and rgba.alpha != c.CHANNEL_MAX:
        out += f"{rgba.alpha:02X}"
    return out


def rgba_to_rgb_string(rgba: "Color", with_alpha: bool = False) -> str:
    parts = [str(rgba.red), str(rgba.green), str(rgba.blue)]
    return _functional("rgb", parts, rgba, with_alpha)


def rgba_to_hsl_string(rgba: "Color", with_alpha: bool = False) -> str:
    h, s, l = conv.rgb_to_hsl(rgba.red, rgba.green, rgba.blue)
    return _functional("hsl", [_deg(h), _pct(s), _pct(l)], rgba, with_alpha)


def rgba_to_hsv_string(rgba: "Color", with_alpha: bool = False) -> str:
    h, s, v = conv.rgb_to_hsv(rgba.red, rgba.green, rgba.blue)
    return _functional("hsv", [_deg(h), _pct(s), _pct(v)], rgba, with_alpha)


def rgba_to_hwb_string(rgba: "Color", with_alpha: bool = False) -> str:
    h, w, bl = conv.rgb_to_hwb(rgba.red, rgba.green, rgba.blue)
    return _functional("hwb", [_deg(h), _pct(w), _pct(bl)], rgba, with_alpha)


def rgba_to_cmyk_string(rgba: "Color", with_alpha: bool = False) -> str:
    parts = [_pct(x) for x in conv.rgb_to_cmyk(rgba.red, rgba.green, rgba.blue)]
    return _functional("cmyk", parts, rgba, with_alpha)


def rgba_to_gray_string(rgba: "Color") -> str:
    """BT.601 gray level; the alpha form is used only for translucent colors."""
    wr, wg, wb = c.LUMA_BT601
    level = round_half_up(rgba.red * wr + rgba.green * wg + rgba.blue * wb)
    return _functional("gray", [str(level)], rgba, rgba.alpha != c.CHANNEL_MAX)


def rgba_to_lab_string(rgba: "Color", with_alpha: bool = False) -> str:
    L, a, b = conv.rgb_to_lab(rgba.red, rgba.green, rgba.blue)
    parts = [format_number(v, c.LAB_DIGITS) for v in (L, a, b)]
    return _functional("lab", parts, rgba, with_alpha)


def rgba_to_lch_string(rgba: "Color", with_alpha: bool = False) -> str:
    L, C, h = conv.rgb_to_lch(rgba.red, rgba.green, rgba.blue)
    parts = [format_number(v, c.LAB_DIGITS) for v in (L, C, h)]
    return _functional("lch", parts, rgba, with_alpha)


def rgba_to_temperature_string(rgba: "Color") -> str:
    return f"{conv.rgb_to_temperature(rgba.red, rgba.green, rgba.blue)}K"


def rgba_to_named(rgba: "Color") -> Optional[str]:
    return name_for_rgba(rgba.red, rgba.green, rgba.blue, rgba.alpha)
