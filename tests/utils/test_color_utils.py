"""
Tests for color conversions.
"""

import pytest

from docx2udf.utils import BLACK_ARGB, hex_to_rgb, hex_to_rgb_int, normalize_hex


class TestHexToRgb:
    def test_six_digits(self):
        assert hex_to_rgb("#1F4E79") == (31, 78, 121)

    def test_short_form(self):
        assert hex_to_rgb("f00") == (255, 0, 0)

    @pytest.mark.parametrize("value", [None, "", "#12345", "zzzzzz"])
    def test_invalid(self, value):
        assert hex_to_rgb(value) is None


class TestNormalizeHex:
    """WordprocessingML color values to #RRGGBB."""

    @pytest.mark.parametrize("value, expected", [
        ("FF0000", "#FF0000"),
        ("1f4e79", "#1F4E79"),
        ("#00ff00", "#00FF00"),
        ("abc", "#AABBCC"),
    ])
    def test_valid(self, value, expected):
        assert normalize_hex(value) == expected

    @pytest.mark.parametrize("value", ["auto", "AUTO", None, "", "nothex"])
    def test_absent(self, value):
        assert normalize_hex(value) is None


class TestHexToRgbInt:
    """Signed ARGB integers with opaque alpha."""

    @pytest.mark.parametrize("value, expected", [
        ("#FF0000", -65536),
        ("#000000", -16777216),
        ("#FFFFFF", -1),
        ("#0000FF", -16776961),
        ("#333333", -13421773),
    ])
    def test_conversion(self, value, expected):
        assert hex_to_rgb_int(value) == expected

    def test_missing_color_is_black(self):
        assert hex_to_rgb_int(None) == BLACK_ARGB == -16777216
