"""Tests for color string parsing."""

import pytest

from colorproc import (
    Color,
    InvalidArgumentCountError,
    InvalidHexError,
    InvalidNumericValueError,
    ParseError,
    ParseErrorKind,
    UnknownFormatError,
    UnknownNameError,
    parse,
    try_parse,
)


class TestNamesAndHex:

    def test_named_color_is_case_insensitive(self):
        assert parse("CornflowerBlue") == Color.from_rgb(100, 149, 237)

    def test_original_string_kept_verbatim(self):
        color = parse("  Red ")
        assert color == Color.from_rgb(255, 0, 0)
        assert color.original_string == "  Red "

    def test_transparent(self):
        assert parse("transparent").to_rgba() == (0, 0, 0, 0)

    def test_grey_spelling(self):
        assert parse("darkgrey") == parse("darkgray")

    def test_abbreviations(self):
        assert parse("bk") == Color.from_rgb(0, 0, 0)
        assert parse("wh") == Color.from_rgb(255, 255, 255)

    @pytest.mark.parametrize("text,rgba", [
        ("#f00", (255, 0, 0, 255)),
        ("#f008", (255, 0, 0, 136)),
        ("#FF8000", (255, 128, 0, 255)),
        ("#ff800040", (255, 128, 0, 64)),
        ("ff0000", (255, 0, 0, 255)),
        ("abc", (170, 187, 204, 255)),
    ])
    def test_hex(self, text, rgba):
        assert parse(text).to_rgba() == rgba

    def test_temperature_literal(self):
        assert parse("6500K") == Color.from_temperature(6500)
        assert parse("2700 k") == Color.from_temperature(2700)


class TestFunctionalForms:

    @pytest.mark.parametrize("text,rgba", [
        ("rgb(255, 0, 0)", (255, 0, 0, 255)),
        ("rgb(100%, 0%, 50%)", (255, 0, 128, 255)),
        ("rgb(300, -5, 10)", (255, 0, 10, 255)),
        ("rgba(255, 0, 0, 0.5)", (255, 0, 0, 128)),
        ("rgba(255,0,0,50%)", (255, 0, 0, 128)),
        ("RGB( 1 , 2 , 3 )", (1, 2, 3, 255)),
        ("hsl(120, 100%, 25%)", (0, 128, 0, 255)),
        ("hsl(120deg, 100%, 25%)", (0, 128, 0, 255)),
        ("hsl(120°, 100, 25)", (0, 128, 0, 255)),
        ("hsla(0, 100%, 50%, 0)", (255, 0, 0, 0)),
        ("hsv(0, 100%, 100%)", (255, 0, 0, 255)),
        ("hwb(0, 60%, 60%)", (128, 128, 128, 255)),
        ("cmyk(0%, 100%, 100%, 0%)", (255, 0, 0, 255)),
        ("cmyka(0%, 0%, 0%, 100%, 1)", (0, 0, 0, 255)),
        ("gray(50%)", (128, 128, 128, 255)),
        ("grey(128)", (128, 128, 128, 255)),
        ("graya(0, 0.5)", (0, 0, 0, 128)),
        ("lab(100, 0, 0)", (255, 255, 255, 255)),
        ("lch(0, 0, 0)", (0, 0, 0, 255)),
    ])
    def test_parse(self, text, rgba):
        assert parse(text).to_rgba() == rgba

    def test_lab_matches_constructor(self):
        assert parse("lab(53.24, 80.09, 67.2)") == Color.from_lab(53.24, 80.09, 67.2)


class TestErrors:

    @pytest.mark.parametrize("text,error", [
        ("", UnknownFormatError),
        ("   ", UnknownFormatError),
        ("12", UnknownFormatError),
        ("notacolor", UnknownNameError),
        ("light blue", UnknownNameError),
        ("#12345", InvalidHexError),
        ("#ggg", InvalidHexError),
        ("rgb(1, 2)", InvalidArgumentCountError),
        ("rgba(1, 2, 3)", InvalidArgumentCountError),
        ("rgb()", InvalidArgumentCountError),
        ("rgb(a, b, c)", InvalidNumericValueError),
        ("rgb(10deg, 0, 0)", InvalidNumericValueError),
        ("hsl(50%, 100%, 50%)", InvalidNumericValueError),
        ("lab(50, 10%, 0)", InvalidNumericValueError),
        ("foo(1, 2, 3)", UnknownFormatError),
        ("rgb(1, 2, 3", UnknownFormatError),
    ])
    def test_rejected(self, text, error):
        with pytest.raises(error):
            parse(text)

    def test_error_carries_kind_and_text(self):
        with pytest.raises(ParseError) as exc_info:
            parse("#12345")
        assert exc_info.value.kind is ParseErrorKind.INVALID_HEX
        assert exc_info.value.text == "#12345"
        assert "invalid_hex" in str(exc_info.value)

    def test_parse_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse("nope nope")

    def test_non_string_input(self):
        with pytest.raises(UnknownFormatError):
            parse(None)

    def test_try_parse(self):
        assert try_parse("red") == Color.from_rgb(255, 0, 0)
        assert try_parse("rgb(1, 2)") is None

    def test_from_string_delegates_to_parser(self):
        assert Color.from_string("lime") == Color.from_rgb(0, 255, 0)
