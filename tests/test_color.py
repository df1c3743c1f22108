"""Tests for the Color value: construction, accessors and derived operations."""

import math

import pytest
from pydantic import ValidationError

from colorproc import Color, parse

RED = Color.from_rgb(255, 0, 0)
LIME = Color.from_rgb(0, 255, 0)
BLUE = Color.from_rgb(0, 0, 255)
BLACK = Color.from_rgb(0, 0, 0)
WHITE = Color.from_rgb(255, 255, 255)


class TestConstruction:

    def test_defaults_to_opaque_black(self):
        assert Color().to_rgba() == (0, 0, 0, 255)

    def test_channels_are_clamped_and_rounded(self):
        assert Color.from_rgb(300, -1, 12.6).to_rgba() == (255, 0, 13, 255)
        assert Color.from_rgba(math.nan, math.inf, 0, 999).to_rgba() == (0, 255, 0, 255)

    def test_from_rgba_takes_alpha_byte(self):
        assert Color.from_rgba(1, 2, 3, 64).alpha == 64

    def test_other_spaces_take_alpha_fraction(self):
        assert Color.from_hsla(0, 1, 0.5, 0.5).to_rgba() == (255, 0, 0, 128)
        assert Color.from_laba(0, 0, 0, 0).alpha == 0

    @pytest.mark.parametrize("color", [
        Color.from_hsl(0, 1, 0.5),
        Color.from_hsl(360, 2, 0.5),
        Color.from_hsv(0, 1, 1),
        Color.from_hwb(0, 0, 0),
        Color.from_cmyk(0, 1, 1, 0),
        Color.from_cmyk(-1, 1, 5, 0),
    ])
    def test_red_from_each_space(self, color):
        assert color == RED

    def test_lab_and_lch(self):
        assert Color.from_lab(100, 0, 0) == WHITE
        assert Color.from_lab(150, 0, 0) == WHITE
        assert Color.from_lch(0, 0, 0) == BLACK

    def test_gray(self):
        assert Color.from_gray(300).to_rgba() == (255, 255, 255, 255)
        assert Color.from_gray(10, 20).to_rgba() == (10, 10, 10, 20)

    def test_numeric_code(self):
        assert Color.from_numeric_code(0x00FF0000).to_rgba() == (255, 0, 0, 0)
        assert Color.from_numeric_code(-13408615).to_rgba() == (0x33, 0x66, 0x99, 0xFF)
        assert Color.from_numeric_code(0xFF336699) == Color.from_numeric_code(-13408615)

    def test_frozen(self):
        with pytest.raises(ValidationError):
            RED.red = 0


class TestIdentity:

    def test_original_string_is_not_identity(self):
        parsed = parse("red")
        assert parsed.original_string == "red"
        assert RED.original_string is None
        assert parsed == RED
        assert hash(parsed) == hash(RED)

    def test_not_equal_to_other_types(self):
        assert RED != (255, 0, 0, 255)

    def test_original_string_not_serialized(self):
        assert "original_string" not in parse("red").model_dump()


class TestAccessors:

    def test_polar_tuples(self):
        assert RED.to_hsla() == (0.0, 1.0, 0.5, 1.0)
        assert RED.to_hsva() == (0.0, 1.0, 1.0, 1.0)
        assert RED.to_hwba() == (0.0, 0.0, 0.0, 1.0)

    def test_alpha_in_tuples(self):
        assert Color.from_rgba(255, 0, 0, 128).to_hsla()[3] == 0.502

    def test_cmyka(self):
        assert RED.to_cmyka() == (0.0, 1.0, 1.0, 0.0, 1.0)

    def test_laba_and_lcha(self):
        L, a, b, alpha = RED.to_laba()
        assert (L, a, b) == pytest.approx((53.24, 80.09, 67.2), abs=0.05)
        assert alpha == 1.0
        L, C, h, _ = RED.to_lcha()
        assert C == pytest.approx(math.hypot(a, b), abs=0.05)
        assert 0 <= h < 360

    def test_numeric_code_is_signed(self):
        assert Color.from_rgb(0x33, 0x66, 0x99).to_numeric_code() == -13408615
        assert Color.from_rgba(255, 0, 0, 0).to_numeric_code() == 0x00FF0000

    def test_temperature(self):
        assert Color.from_temperature(3000).to_temperature() == pytest.approx(3000, abs=50)


class TestGrayscale:

    def test_variants(self):
        assert RED.grayscale().to_rgba() == (76, 76, 76, 255)
        assert RED.grayscale_average().to_rgba() == (85, 85, 85, 255)
        assert RED.grayscale_hdtv().to_rgba() == (54, 54, 54, 255)
        assert RED.grayscale_hdr().to_rgba() == (67, 67, 67, 255)

    def test_alpha_preserved(self):
        assert Color.from_rgba(255, 0, 0, 10).grayscale().alpha == 10

    def test_monochrome(self):
        assert RED.monochrome() == BLACK
        assert Color.from_rgb(255, 255, 0).monochrome() == WHITE


class TestAdjustments:

    def test_invert(self):
        assert RED.invert() == Color.from_rgb(0, 255, 255)
        assert Color.from_rgba(0, 0, 0, 7).invert().to_rgba() == (255, 255, 255, 7)

    def test_invert_luminescence(self):
        assert WHITE.invert_luminescence() == BLACK
        assert RED.invert_luminescence() == RED

    def test_colorize(self):
        assert RED.colorize(120) == LIME
        assert RED.colorize(480) == LIME

    def test_colorize_with(self):
        assert WHITE.colorize_with(RED) == RED
        assert WHITE.colorize_with("red") == RED
        assert Color.from_rgba(255, 255, 255, 128).colorize_with(RED).alpha == 128

    def test_darken(self):
        assert RED.darken(0.5) == Color.from_rgb(128, 0, 0)
        assert RED.darken(0) == RED
        assert RED.darken(5) == BLACK

    def test_brighten(self):
        assert RED.brighten(0.5) == Color.from_rgb(255, 128, 128)
        assert RED.brighten(1) == WHITE

    def test_operations_return_new_instances(self):
        color = parse("red")
        darker = color.darken(0.2)
        assert darker is not color
        assert color == RED


class TestMixing:

    def test_additive(self):
        assert RED.mix_additive(LIME) == Color.from_rgb(255, 255, 0)
        assert WHITE.mix_additive(WHITE) == WHITE

    def test_additive_alpha_is_max(self):
        assert Color.from_rgba(0, 0, 0, 10).mix_additive(Color.from_rgba(0, 0, 0, 200)).alpha == 200

    def test_subtractive(self):
        assert WHITE.mix_subtractive(RED) == RED
        yellow = Color.from_rgb(255, 255, 0)
        cyan = Color.from_rgb(0, 255, 255)
        assert yellow.mix_subtractive(cyan) == LIME


class TestInterpolation:

    def test_rgb_midpoint(self):
        assert BLACK.interpolate_rgb(WHITE, 0.5) == Color.from_rgb(128, 128, 128)

    def test_hsl_takes_shorter_arc(self):
        assert RED.interpolate_hsl(BLUE, 0.5) == Color.from_rgb(255, 0, 255)

    def test_gray_endpoint_borrows_hue(self):
        assert WHITE.interpolate_hsl(RED, 0.5) == Color.from_rgb(223, 159, 159)

    def test_fraction_is_clamped(self):
        assert RED.interpolate_rgb(BLUE, 2) == BLUE
        assert RED.interpolate_hsv(BLUE, -1) == RED

    def test_alpha_is_interpolated(self):
        start = Color.from_rgba(0, 0, 0, 0)
        end = Color.from_rgba(0, 0, 0, 255)
        assert start.interpolate_rgb(end, 0.5).alpha == 128
        assert start.interpolate_hwb(end, 0.5).alpha == 128

    @pytest.mark.parametrize("space", ["rgb", "hsl", "hsv", "hwb", "lch", "LCH"])
    def test_dispatch(self, space):
        assert RED.interpolate(BLUE, 1, space) == BLUE

    def test_unknown_space(self):
        with pytest.raises(ValueError):
            RED.interpolate(BLUE, 0.5, "lab")


class TestContrast:

    def test_luminance(self):
        assert BLACK.get_luminance() == 0
        assert WHITE.get_luminance() == pytest.approx(1.0)

    def test_black_on_white(self):
        assert BLACK.get_contrast(WHITE) == pytest.approx(21)
        assert WHITE.get_contrast(BLACK) == pytest.approx(21)

    def test_same_color(self):
        assert RED.get_contrast(RED) == pytest.approx(1)
