"""
Stateless conversions between 8-bit sRGB and the other color models.

RGB inputs/outputs are 0-255 channel values. Hue is in degrees,
saturation/lightness/value/whiteness/blackness and CMYK components are
fractions in [0, 1]. LAB/LCH use CIELAB units with a D65 white point.
"""

import math
from typing import Tuple

from . import constants as c
from .numeric import clamp, clamp01, clamp_channel, normalize_hue, round_half_up

RGB = Tuple[int, int, int]


def _unit(r: int, g: int, b: int) -> Tuple[float, float, float]:
    return r / c.CHANNEL_MAX, g / c.CHANNEL_MAX, b / c.CHANNEL_MAX


def _hue(r: float, g: float, b: float, mx: float, delta: float) -> float:
    # max channel decides the sector; ties resolve red, then green, then blue
    if delta == 0:
        return 0.0
    if mx == r:
        h = ((g - b) / delta) % 6.0
    elif mx == g:
        h = (b - r) / delta + 2.0
    else:
        h = (r - g) / delta + 4.0
    return normalize_hue(h * c.HUE_SECTOR)


def _sector_to_rgb(h: float, chroma: float, m: float) -> RGB:
    h = normalize_hue(h)
    hp = h / c.HUE_SECTOR
    x = chroma * (1 - abs((hp % 2) - 1))

    if hp < 1:
        r1, g1, b1 = chroma, x, 0.0
    elif hp < 2:
        r1, g1, b1 = x, chroma, 0.0
    elif hp < 3:
        r1, g1, b1 = 0.0, chroma, x
    elif hp < 4:
        r1, g1, b1 = 0.0, x, chroma
    elif hp < 5:
        r1, g1, b1 = x, 0.0, chroma
    else:
        r1, g1, b1 = chroma, 0.0, x

    return (
        clamp_channel((r1 + m) * c.CHANNEL_MAX),
        clamp_channel((g1 + m) * c.CHANNEL_MAX),
        clamp_channel((b1 + m) * c.CHANNEL_MAX),
    )


# HSL -------------------------------------------------------------

def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[float, float, float]:
    rr, gg, bb = _unit(r, g, b)
    mx, mn = max(rr, gg, bb), min(rr, gg, bb)
    delta = mx - mn
    l = (mx + mn) / 2
    s = 0.0
    if delta != 0:
        s = delta / (1 - abs(2 * l - 1))
    return _hue(rr, gg, bb, mx, delta), clamp01(s), l


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert HSL to RGB. h in deg, s,l in [0,1]."""
    s, l = clamp01(s), clamp01(l)
    chroma = (1 - abs(2 * l - 1)) * s
    return _sector_to_rgb(h, chroma, l - chroma / 2)


# HSV -------------------------------------------------------------

def rgb_to_hsv(r: int, g: int, b: int) -> Tuple[float, float, float]:
    rr, gg, bb = _unit(r, g, b)
    mx, mn = max(rr, gg, bb), min(rr, gg, bb)
    if mx == 0:
        return 0.0, 0.0, 0.0
    delta = mx - mn
    return _hue(rr, gg, bb, mx, delta), delta / mx, mx


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """Convert HSV to RGB. h in deg, s,v in [0,1]."""
    s, v = clamp01(s), clamp01(v)
    chroma = v * s
    return _sector_to_rgb(h, chroma, v - chroma)


# HWB -------------------------------------------------------------

def rgb_to_hwb(r: int, g: int, b: int) -> Tuple[float, float, float]:
    rr, gg, bb = _unit(r, g, b)
    mx, mn = max(rr, gg, bb), min(rr, gg, bb)
    return _hue(rr, gg, bb, mx, mx - mn), mn, 1 - mx


def hwb_to_rgb(h: float, w: float, bl: float) -> RGB:
    """Convert HWB to RGB. Whiteness + blackness above 1 is normalized to a gray."""
    w, bl = clamp01(w), clamp01(bl)
    total = w + bl
    if total >= 1:
        gray = clamp_channel(w / total * c.CHANNEL_MAX)
        return gray, gray, gray
    v = 1 - bl
    return hsv_to_rgb(h, 1 - w / v, v)


# CMYK ------------------------------------------------------------

def rgb_to_cmyk(r: int, g: int, b: int) -> Tuple[float, float, float, float]:
    rr, gg, bb = _unit(r, g, b)
    k = 1 - max(rr, gg, bb)
    white = 1 - k
    if white == 0:
        return 0.0, 0.0, 0.0, 1.0
    return (
        (1 - rr - k) / white,
        (1 - gg - k) / white,
        (1 - bb - k) / white,
        k,
    )


def cmyk_to_rgb(cy: float, m: float, y: float, k: float) -> RGB:
    cy, m, y, k = clamp01(cy), clamp01(m), clamp01(y), clamp01(k)
    return (
        clamp_channel(c.CHANNEL_MAX * (1 - cy) * (1 - k)),
        clamp_channel(c.CHANNEL_MAX * (1 - m) * (1 - k)),
        clamp_channel(c.CHANNEL_MAX * (1 - y) * (1 - k)),
    )


# LAB / LCH -------------------------------------------------------

def srgb_to_linear(v: int, threshold: float = c.SRGB_TO_LINEAR_TH) -> float:
    """sRGB companding of a 0-255 channel."""
    cs = v / c.CHANNEL_MAX
    if cs <= threshold:
        return cs / c.SRGB_SLOPE
    return ((cs + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def linear_to_srgb(v: float) -> float:
    """Linear light to a 0-255 channel value (unclamped)."""
    if v <= c.LINEAR_TO_SRGB_TH:
        return c.CHANNEL_MAX * (c.SRGB_SLOPE * v)
    return c.CHANNEL_MAX * (c.SRGB_DIVISOR * v ** (1 / c.SRGB_GAMMA) - c.SRGB_OFFSET)


def rgb_to_xyz(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """sRGB D65 to XYZ."""
    lin = (srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    x, y, z = (sum(m * v for m, v in zip(row, lin)) for row in c.M_SRGB_XYZ)
    return x, y, z


def _xyz_lab(t: float) -> float:
    if t > c.LAB_T3:
        return t ** (1 / 3)
    return t / c.LAB_T2 + c.LAB_T0


def _lab_xyz(t: float) -> float:
    if t > c.LAB_T1:
        return t * t * t
    return c.LAB_T2 * (t - c.LAB_T0)


def rgb_to_lab(r: int, g: int, b: int) -> Tuple[float, float, float]:
    x, y, z = rgb_to_xyz(r, g, b)
    fx = _xyz_lab(x / c.D65_X)
    fy = _xyz_lab(y / c.D65_Y)
    fz = _xyz_lab(z / c.D65_Z)
    L = max(0.0, 116 * fy - 16)
    return L, 500 * (fx - fy), 200 * (fy - fz)


def lab_to_rgb(L: float, a: float, b: float) -> RGB:
    """Convert LAB to RGB. Out-of-gamut results are clipped."""
    L = clamp(L, 0.0, c.LAB_L_MAX)
    a = 0.0 if a != a else a
    b = 0.0 if b != b else b
    fy = (L + 16) / 116
    fx = fy + a / 500
    fz = fy - b / 200
    xyz = (c.D65_X * _lab_xyz(fx), c.D65_Y * _lab_xyz(fy), c.D65_Z * _lab_xyz(fz))
    r, g, bl = (linear_to_srgb(sum(m * v for m, v in zip(row, xyz))) for row in c.M_XYZ_SRGB)
    return clamp_channel(r), clamp_channel(g), clamp_channel(bl)


def lab_to_lch(L: float, a: float, b: float) -> Tuple[float, float, float]:
    chroma = math.hypot(a, b)
    if chroma < c.ACHROMATIC_CHROMA:
        return L, chroma, 0.0
    return L, chroma, normalize_hue(math.degrees(math.atan2(b, a)))


def lch_to_lab(L: float, C: float, h: float) -> Tuple[float, float, float]:
    h = math.radians(normalize_hue(h))
    C = max(0.0, C)
    return L, math.cos(h) * C, math.sin(h) * C


def rgb_to_lch(r: int, g: int, b: int) -> Tuple[float, float, float]:
    return lab_to_lch(*rgb_to_lab(r, g, b))


def lch_to_rgb(L: float, C: float, h: float) -> RGB:
    return lab_to_rgb(*lch_to_lab(L, C, h))


# Color temperature ----------------------------------------------

def _fit(coeffs: Tuple[float, float, float], x: float) -> float:
    a, b, cc = coeffs
    return a + b * x + cc * math.log(x)


def temperature_to_rgb(kelvin: float) -> RGB:
    """Approximate black-body color for a temperature in Kelvin."""
    temp = clamp(kelvin, c.TEMPERATURE_MIN, c.TEMPERATURE_MAX) / 100.0
    if temp < 66:
        red = 255.0
        green = _fit(c.TEMP_GREEN_LOW, temp - 2)
        blue = 0.0 if temp < 20 else _fit(c.TEMP_BLUE, temp - 10)
    else:
        red = _fit(c.TEMP_RED, temp - 55)
        green = _fit(c.TEMP_GREEN_HIGH, temp - 50)
        blue = 255.0
    return clamp_channel(red), clamp_channel(green), clamp_channel(blue)


def rgb_to_temperature(r: int, g: int, b: int) -> int:
    """Bisect the black-body curve for the temperature with the same blue/red ratio."""
    target = b / r if r else math.inf
    lo, hi = float(c.TEMPERATURE_MIN), float(c.TEMPERATURE_MAX)
    temp = lo
    while hi - lo > c.TEMPERATURE_EPS:
        temp = (hi + lo) / 2
        tr, _, tb = temperature_to_rgb(int(temp))
        ratio = tb / tr if tr else math.inf
        if ratio >= target:
            hi = temp
        else:
            lo = temp
    return round_half_up(temp)


# Luminance -------------------------------------------------------

def relative_luminance(r: int, g: int, b: int) -> float:
    wr, wg, wb = c.LUMA_HDTV
    return (
        wr * srgb_to_linear(r, c.LUMINANCE_TH)
        + wg * srgb_to_linear(g, c.LUMINANCE_TH)
        + wb * srgb_to_linear(b, c.LUMINANCE_TH)
    )
