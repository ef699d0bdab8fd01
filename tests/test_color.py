"""Tests for colors and their conversion to rich colors."""

import pytest
from rich.color import ColorType

from promptstyle.color import (
    AnsiValue,
    Color,
    Rgb,
    format_color,
    is_color,
    parse_color,
    to_rich_color,
)
from promptstyle.errors import InvalidColorError


class TestToRichColor:
    """Every color variant maps to exactly one rich color."""

    @pytest.mark.parametrize(
        "color, number",
        [
            (Color.BLACK, 0),
            (Color.DARK_RED, 1),
            (Color.DARK_GREEN, 2),
            (Color.DARK_YELLOW, 3),
            (Color.DARK_BLUE, 4),
            (Color.DARK_MAGENTA, 5),
            (Color.DARK_CYAN, 6),
            (Color.GREY, 7),
            (Color.DARK_GREY, 8),
            (Color.RED, 9),
            (Color.GREEN, 10),
            (Color.YELLOW, 11),
            (Color.BLUE, 12),
            (Color.MAGENTA, 13),
            (Color.CYAN, 14),
            (Color.WHITE, 15),
        ],
    )
    def test_named_colors_map_to_standard_palette(self, color, number):
        rich_color = to_rich_color(color)
        assert rich_color.type == ColorType.STANDARD
        assert rich_color.number == number

    def test_mapping_is_total_and_distinct(self):
        numbers = {to_rich_color(color).number for color in Color}
        assert numbers == set(range(16))

    def test_rgb_keeps_channels(self):
        rich_color = to_rich_color(Rgb(12, 200, 255))
        assert rich_color.type == ColorType.TRUECOLOR
        assert tuple(rich_color.triplet) == (12, 200, 255)

    @pytest.mark.parametrize("index", [0, 7, 16, 128, 255])
    def test_ansi_value_keeps_index(self, index):
        assert to_rich_color(AnsiValue(index)).number == index

    def test_rejects_non_color(self):
        with pytest.raises(TypeError):
            to_rich_color("green")


class TestColorValues:

    def test_structural_equality(self):
        assert Rgb(1, 2, 3) == Rgb(1, 2, 3)
        assert AnsiValue(5) == AnsiValue(5)
        assert Rgb(1, 2, 3) != Rgb(3, 2, 1)
        assert len({Rgb(1, 2, 3), Rgb(1, 2, 3), AnsiValue(1)}) == 2

    def test_immutable(self):
        color = Rgb(1, 2, 3)
        with pytest.raises(AttributeError):
            color.r = 10

    @pytest.mark.parametrize("channels", [(-1, 0, 0), (0, 256, 0), (0, 0, 1.5), (True, 0, 0)])
    def test_rgb_out_of_range(self, channels):
        with pytest.raises(InvalidColorError):
            Rgb(*channels)

    def test_ansi_out_of_range(self):
        with pytest.raises(InvalidColorError):
            AnsiValue(256)

    def test_invalid_color_is_value_error(self):
        with pytest.raises(ValueError):
            AnsiValue(-1)

    def test_is_color(self):
        assert is_color(Color.RED)
        assert is_color(Rgb(0, 0, 0))
        assert is_color(AnsiValue(0))
        assert not is_color("red")
        assert not is_color(None)


class TestParseColor:

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("green", Color.GREEN),
            ("Dark-Grey", Color.DARK_GREY),
            ("dark gray", Color.DARK_GREY),
            ("gray", Color.GREY),
            ("#7FA6D9", Rgb(0x7F, 0xA6, 0xD9)),
            ("rgb(1, 2, 3)", Rgb(1, 2, 3)),
            ("ansi(42)", AnsiValue(42)),
            ("42", AnsiValue(42)),
            (42, AnsiValue(42)),
            ([10, 20, 30], Rgb(10, 20, 30)),
            ({"r": 1, "g": 2, "b": 3}, Rgb(1, 2, 3)),
            (Color.CYAN, Color.CYAN),
        ],
    )
    def test_accepted_forms(self, value, expected):
        assert parse_color(value) == expected

    @pytest.mark.parametrize(
        "value",
        ["purple", "#12345", "rgb(1, 2)", "rgb(1, 2, 300)", 999, [1, 2], {"r": 1, "g": 2}, True, 1.5],
    )
    def test_rejected_forms(self, value):
        with pytest.raises(InvalidColorError):
            parse_color(value)

    def test_format_is_inverse(self):
        for color in [Color.DARK_MAGENTA, Rgb(255, 0, 16), AnsiValue(200)]:
            assert parse_color(format_color(color)) == color

    def test_format_rgb_as_hex(self):
        assert format_color(Rgb(255, 0, 16)) == "#ff0010"
