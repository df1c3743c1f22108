"""
The canonical color value.

A Color holds four 0-255 channels and, when it came out of the parser, the
verbatim input string. It is frozen: every operation returns a new Color.
"""

from typing import Any, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import constants as c
from . import converters as conv
from . import formatting as fmt
from .numeric import (
    alpha_to_byte,
    byte_to_alpha,
    clamp01,
    clamp_channel,
    normalize_hue,
    round_to,
)

Tuple4 = Tuple[float, float, float, float]


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _lerp_hue(h1: float, h2: float, t: float) -> float:
    """Interpolate along the shorter arc of the hue circle."""
    delta = ((h2 - h1 + 180.0) % c.HUE_MAX) - 180.0
    return normalize_hue(h1 + delta * t)


def _endpoint_hues(h1: float, gray1: bool, h2: float, gray2: bool) -> Tuple[float, float]:
    # a gray endpoint has no hue of its own; borrow the other one
    if gray1 and not gray2:
        return h2, h2
    if gray2 and not gray1:
        return h1, h1
    return h1, h2


class Color(BaseModel):
    model_config = ConfigDict(frozen=True)

    red: int = Field(default=0, ge=0, le=255)
    green: int = Field(default=0, ge=0, le=255)
    blue: int = Field(default=0, ge=0, le=255)
    alpha: int = Field(default=255, ge=0, le=255)
    original_string: Optional[str] = Field(default=None, exclude=True, repr=False)

    @field_validator("red", "green", "blue", "alpha", mode="before")
    @classmethod
    def clamp_channels(cls, v: Any) -> Any:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            return v
        return clamp_channel(v)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_rgba() == other.to_rgba()

    def __hash__(self) -> int:
        return hash(self.to_rgba())

    def __str__(self) -> str:
        return self.to_hexa_string()

    # Constructors ------------------------------------------------

    @classmethod
    def from_rgb(cls, red: float, green: float, blue: float) -> "Color":
        return cls(red=red, green=green, blue=blue)

    @classmethod
    def from_rgba(cls, red: float, green: float, blue: float, alpha: float = 255) -> "Color":
        """Channels and alpha all on the 0-255 scale."""
        return cls(red=red, green=green, blue=blue, alpha=alpha)

    @classmethod
    def _from_triplet(cls, rgb: Tuple[int, int, int], alpha: float) -> "Color":
        r, g, b = rgb
        return cls(red=r, green=g, blue=b, alpha=alpha_to_byte(alpha))

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float) -> "Color":
        return cls.from_hsla(hue, saturation, lightness, 1.0)

    @classmethod
    def from_hsla(cls, hue: float, saturation: float, lightness: float, alpha: float) -> "Color":
        """Hue in degrees, saturation/lightness/alpha as fractions 0-1."""
        return cls._from_triplet(conv.hsl_to_rgb(hue, saturation, lightness), alpha)

    @classmethod
    def from_hsv(cls, hue: float, saturation: float, value: float) -> "Color":
        return cls.from_hsva(hue, saturation, value, 1.0)

    @classmethod
    def from_hsva(cls, hue: float, saturation: float, value: float, alpha: float) -> "Color":
        return cls._from_triplet(conv.hsv_to_rgb(hue, saturation, value), alpha)

    @classmethod
    def from_hwb(cls, hue: float, whiteness: float, blackness: float) -> "Color":
        return cls.from_hwba(hue, whiteness, blackness, 1.0)

    @classmethod
    def from_hwba(cls, hue: float, whiteness: float, blackness: float, alpha: float) -> "Color":
        return cls._from_triplet(conv.hwb_to_rgb(hue, whiteness, blackness), alpha)

    @classmethod
    def from_cmyk(cls, cyan: float, magenta: float, yellow: float, key: float) -> "Color":
        return cls.from_cmyka(cyan, magenta, yellow, key, 1.0)

    @classmethod
    def from_cmyka(cls, cyan: float, magenta: float, yellow: float, key: float, alpha: float) -> "Color":
        return cls._from_triplet(conv.cmyk_to_rgb(cyan, magenta, yellow, key), alpha)

    @classmethod
    def from_lab(cls, lightness: float, a: float, b: float) -> "Color":
        return cls.from_laba(lightness, a, b, 1.0)

    @classmethod
    def from_laba(cls, lightness: float, a: float, b: float, alpha: float) -> "Color":
        """CIELAB (D65). Colors outside the sRGB gamut are clipped."""
        return cls._from_triplet(conv.lab_to_rgb(lightness, a, b), alpha)

    @classmethod
    def from_lch(cls, lightness: float, chroma: float, hue: float) -> "Color":
        return cls.from_lcha(lightness, chroma, hue, 1.0)

    @classmethod
    def from_lcha(cls, lightness: float, chroma: float, hue: float, alpha: float) -> "Color":
        return cls._from_triplet(conv.lch_to_rgb(lightness, chroma, hue), alpha)

    @classmethod
    def from_gray(cls, level: float, alpha: float = 255) -> "Color":
        return cls(red=level, green=level, blue=level, alpha=alpha)

    @classmethod
    def from_temperature(cls, kelvin: float) -> "Color":
        """Black-body approximation; kelvin is clamped to 1000-40000."""
        r, g, b = conv.temperature_to_rgb(kelvin)
        return cls(red=r, green=g, blue=b)

    @classmethod
    def from_numeric_code(cls, code: int) -> "Color":
        """Decode a 32-bit ARGB integer (signed or unsigned)."""
        code &= 0xFFFFFFFF
        return cls(
            red=(code >> 16) & 0xFF,
            green=(code >> 8) & 0xFF,
            blue=code & 0xFF,
            alpha=(code >> 24) & 0xFF,
        )

    @classmethod
    def from_string(cls, text: str) -> "Color":
        from .parser import parse

        return parse(text)

    # Accessors ---------------------------------------------------

    def _alpha_fraction(self) -> float:
        return round_to(byte_to_alpha(self.alpha), c.ALPHA_DIGITS)

    def _round_polar(self, h: float, x: float, y: float) -> Tuple4:
        return (
            normalize_hue(round_to(h, c.HUE_DIGITS)),
            round_to(x, c.FRACTION_DIGITS),
            round_to(y, c.FRACTION_DIGITS),
            self._alpha_fraction(),
        )

    def to_rgba(self) -> Tuple[int, int, int, int]:
        return self.red, self.green, self.blue, self.alpha

    def to_hsla(self) -> Tuple4:
        return self._round_polar(*conv.rgb_to_hsl(self.red, self.green, self.blue))

    def to_hsva(self) -> Tuple4:
        return self._round_polar(*conv.rgb_to_hsv(self.red, self.green, self.blue))

    def to_hwba(self) -> Tuple4:
        return self._round_polar(*conv.rgb_to_hwb(self.red, self.green, self.blue))

    def to_cmyka(self) -> Tuple[float, float, float, float, float]:
        cy, m, y, k = conv.rgb_to_cmyk(self.red, self.green, self.blue)
        return (
            round_to(cy, c.FRACTION_DIGITS),
            round_to(m, c.FRACTION_DIGITS),
            round_to(y, c.FRACTION_DIGITS),
            round_to(k, c.FRACTION_DIGITS),
            self._alpha_fraction(),
        )

    def to_laba(self) -> Tuple4:
        L, a, b = conv.rgb_to_lab(self.red, self.green, self.blue)
        return (
            round_to(L, c.LAB_DIGITS),
            round_to(a, c.LAB_DIGITS),
            round_to(b, c.LAB_DIGITS),
            self._alpha_fraction(),
        )

    def to_lcha(self) -> Tuple4:
        L, C, h = conv.rgb_to_lch(self.red, self.green, self.blue)
        return (
            round_to(L, c.LAB_DIGITS),
            round_to(C, c.LAB_DIGITS),
            normalize_hue(round_to(h, c.LAB_DIGITS)),
            self._alpha_fraction(),
        )

    def to_temperature(self) -> int:
        return conv.rgb_to_temperature(self.red, self.green, self.blue)

    def to_numeric_code(self) -> int:
        """32-bit ARGB packed into a signed integer."""
        code = (self.alpha << 24) | (self.red << 16) | (self.green << 8) | self.blue
        return code - (1 << 32) if code & 0x80000000 else code

    # Formatting --------------------------------------------------

    def to_hex_string(self) -> str:
        return fmt.rgba_to_hex(self)

    def to_hexa_string(self) -> str:
        return fmt.rgba_to_hex(self, True)

    def to_rgb_string(self) -> str:
        return fmt.rgba_to_rgb_string(self)

    def to_rgba_string(self) -> str:
        return fmt.rgba_to_rgb_string(self, True)

    def to_hsl_string(self) -> str:
        return fmt.rgba_to_hsl_string(self)

    def to_hsla_string(self) -> str:
        return fmt.rgba_to_hsl_string(self, True)

    def to_hsv_string(self) -> str:
        return fmt.rgba_to_hsv_string(self)

    def to_hsva_string(self) -> str:
        return fmt.rgba_to_hsv_string(self, True)

    def to_hwb_string(self) -> str:
        return fmt.rgba_to_hwb_string(self)

    def to_hwba_string(self) -> str:
        return fmt.rgba_to_hwb_string(self, True)

    def to_cmyk_string(self) -> str:
        return fmt.rgba_to_cmyk_string(self)

    def to_cmyka_string(self) -> str:
        return fmt.rgba_to_cmyk_string(self, True)

    def to_gray_string(self) -> str:
        return fmt.rgba_to_gray_string(self)

    def to_lab_string(self) -> str:
        return fmt.rgba_to_lab_string(self)

    def to_laba_string(self) -> str:
        return fmt.rgba_to_lab_string(self, True)

    def to_lch_string(self) -> str:
        return fmt.rgba_to_lch_string(self)

    def to_lcha_string(self) -> str:
        return fmt.rgba_to_lch_string(self, True)

    def to_temperature_string(self) -> str:
        return fmt.rgba_to_temperature_string(self)

    def to_name(self) -> Optional[str]:
        return fmt.rgba_to_named(self)

    # Derived operations ------------------------------------------

    def _with_rgb(self, r: float, g: float, b: float) -> "Color":
        return Color(red=r, green=g, blue=b, alpha=self.alpha)

    def _luma(self, weights: Tuple[float, float, float]) -> "Color":
        wr, wg, wb = weights
        level = self.red * wr + self.green * wg + self.blue * wb
        return self._with_rgb(level, level, level)

    def grayscale(self) -> "Color":
        """BT.601 weighted gray."""
        return self._luma(c.LUMA_BT601)

    def grayscale_average(self) -> "Color":
        level = (self.red + self.green + self.blue) / 3
        return self._with_rgb(level, level, level)

    def grayscale_hdtv(self) -> "Color":
        return self._luma(c.LUMA_HDTV)

    def grayscale_hdr(self) -> "Color":
        return self._luma(c.LUMA_HDR)

    def monochrome(self) -> "Color":
        """Black or white depending on the HDTV luma."""
        if self.grayscale_hdtv().red < c.MONOCHROME_THRESHOLD:
            return self._with_rgb(0, 0, 0)
        return self._with_rgb(255, 255, 255)

    def invert(self) -> "Color":
        return self._with_rgb(255 - self.red, 255 - self.green, 255 - self.blue)

    def invert_luminescence(self) -> "Color":
        h, s, l = conv.rgb_to_hsl(self.red, self.green, self.blue)
        return self._with_rgb(*conv.hsl_to_rgb(h, s, 1 - l))

    def colorize(self, hue: float) -> "Color":
        """Swap in a new hue, keeping saturation and lightness."""
        _, s, l = conv.rgb_to_hsl(self.red, self.green, self.blue)
        return self._with_rgb(*conv.hsl_to_rgb(hue, s, l))

    def colorize_with(self, other: Union["Color", str]) -> "Color":
        """Multiply every channel (alpha included) with another color."""
        if isinstance(other, str):
            other = Color.from_string(other)
        return Color(
            red=self.red * other.red / 255,
            green=self.green * other.green / 255,
            blue=self.blue * other.blue / 255,
            alpha=self.alpha * other.alpha / 255,
        )

    def darken(self, amount: float) -> "Color":
        h, s, l = conv.rgb_to_hsl(self.red, self.green, self.blue)
        return self._with_rgb(*conv.hsl_to_rgb(h, s, l * (1 - clamp01(amount))))

    def brighten(self, amount: float) -> "Color":
        h, s, l = conv.rgb_to_hsl(self.red, self.green, self.blue)
        return self._with_rgb(*conv.hsl_to_rgb(h, s, l + (1 - l) * clamp01(amount)))

    def mix_additive(self, other: "Color") -> "Color":
        return Color(
            red=min(255, self.red + other.red),
            green=min(255, self.green + other.green),
            blue=min(255, self.blue + other.blue),
            alpha=max(self.alpha, other.alpha),
        )

    def mix_subtractive(self, other: "Color") -> "Color":
        # CMY product: 1 - (1 - c1)(1 - c2) on the ink side is r1 * r2 on the light side
        return Color(
            red=self.red * other.red / 255,
            green=self.green * other.green / 255,
            blue=self.blue * other.blue / 255,
            alpha=max(self.alpha, other.alpha),
        )

    def _is_gray(self) -> bool:
        return self.red == self.green == self.blue

    def _lerp_alpha(self, other: "Color", t: float) -> float:
        return byte_to_alpha(_lerp(self.alpha, other.alpha, t))

    def interpolate_rgb(self, other: "Color", t: float) -> "Color":
        t = clamp01(t)
        return Color(
            red=_lerp(self.red, other.red, t),
            green=_lerp(self.green, other.green, t),
            blue=_lerp(self.blue, other.blue, t),
            alpha=_lerp(self.alpha, other.alpha, t),
        )

    def interpolate_hsl(self, other: "Color", t: float) -> "Color":
        t = clamp01(t)
        h1, s1, l1 = conv.rgb_to_hsl(self.red, self.green, self.blue)
        h2, s2, l2 = conv.rgb_to_hsl(other.red, other.green, other.blue)
        h1, h2 = _endpoint_hues(h1, self._is_gray(), h2, other._is_gray())
        return Color.from_hsla(
            _lerp_hue(h1, h2, t), _lerp(s1, s2, t), _lerp(l1, l2, t), self._lerp_alpha(other, t)
        )

    def interpolate_hsv(self, other: "Color", t: float) -> "Color":
        t = clamp01(t)
        h1, s1, v1 = conv.rgb_to_hsv(self.red, self.green, self.blue)
        h2, s2, v2 = conv.rgb_to_hsv(other.red, other.green, other.blue)
        h1, h2 = _endpoint_hues(h1, self._is_gray(), h2, other._is_gray())
        return Color.from_hsva(
            _lerp_hue(h1, h2, t), _lerp(s1, s2, t), _lerp(v1, v2, t), self._lerp_alpha(other, t)
        )

    def interpolate_hwb(self, other: "Color", t: float) -> "Color":
        t = clamp01(t)
        h1, w1, b1 = conv.rgb_to_hwb(self.red, self.green, self.blue)
        h2, w2, b2 = conv.rgb_to_hwb(other.red, other.green, other.blue)
        h1, h2 = _endpoint_hues(h1, self._is_gray(), h2, other._is_gray())
        return Color.from_hwba(
            _lerp_hue(h1, h2, t), _lerp(w1, w2, t), _lerp(b1, b2, t), self._lerp_alpha(other, t)
        )

    def interpolate_lch(self, other: "Color", t: float) -> "Color":
        t = clamp01(t)
        L1, C1, h1 = conv.rgb_to_lch(self.red, self.green, self.blue)
        L2, C2, h2 = conv.rgb_to_lch(other.red, other.green, other.blue)
        h1, h2 = _endpoint_hues(
            h1, self._is_gray() or C1 < c.ACHROMATIC_CHROMA,
            h2, other._is_gray() or C2 < c.ACHROMATIC_CHROMA,
        )
        return Color.from_lcha(
            _lerp(L1, L2, t), _lerp(C1, C2, t), _lerp_hue(h1, h2, t), self._lerp_alpha(other, t)
        )

    def interpolate(self, other: "Color", t: float, space: str = "rgb") -> "Color":
        method = getattr(self, f"interpolate_{space.lower()}", None)
        if method is None:
            raise ValueError(f"Unsupported interpolation space: {space}")
        return method(other, t)

    def get_luminance(self) -> float:
        """WCAG relative luminance, 0 (black) to 1 (white)."""
        return conv.relative_luminance(self.red, self.green, self.blue)

    def get_contrast(self, other: "Color") -> float:
        """WCAG contrast ratio, 1 to 21. Symmetric in its arguments."""
        l1, l2 = self.get_luminance(), other.get_luminance()
        if l1 < l2:
            l1, l2 = l2, l1
        return (l1 + c.WCAG_OFFSET) / (l2 + c.WCAG_OFFSET)
