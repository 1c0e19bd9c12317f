"""Tests for text measurement, wrapping and number formatting."""

import pytest

from radial_gauge.models.primitives import TextLabel
from radial_gauge.utils.text import (
    AverageWidthMeasurer,
    format_number,
    plain_number,
    text_bounds,
    wrap_text,
)


def test_average_width_measurer():
    extent = AverageWidthMeasurer().measure("abcd", 10)
    assert extent.width == pytest.approx(24)
    assert extent.height == pytest.approx(10)


def test_forty_character_label_wraps_at_width_100():
    measurer = AverageWidthMeasurer(char_width_ratio=0.5)
    text = "abcdefghi " * 4
    assert len(text) == 40
    lines = wrap_text(text, 100, 10, measurer)
    assert lines == ["abcdefghi abcdefghi", "abcdefghi abcdefghi"]
    for line in lines:
        assert measurer.measure(line, 10).width <= 100


def test_short_text_stays_on_one_line():
    assert wrap_text("Sales", 100, 10, AverageWidthMeasurer()) == ["Sales"]


def test_overlong_word_gets_its_own_line():
    lines = wrap_text("a supercalifragilistic b", 30, 10, AverageWidthMeasurer())
    assert lines == ["a", "supercalifragilistic", "b"]


def test_blank_text_wraps_to_nothing():
    assert wrap_text("   ", 100, 10, AverageWidthMeasurer()) == []


@pytest.mark.parametrize(
    "align, xmin",
    [("start", 50.0), ("middle", 44.0), ("end", 38.0)],
)
def test_text_bounds_alignment(align, xmin):
    label = TextLabel(text="ab", anchor_x=50, anchor_y=100, font_size=10, horizontal_align=align, lines=["ab"])
    box = text_bounds(label, AverageWidthMeasurer())
    assert box == pytest.approx((xmin, 92, xmin + 12, 102))


def test_text_bounds_multiline():
    label = TextLabel(text="ab cd", anchor_y=100, font_size=10, lines=["ab", "cd"], line_height=14)
    _, ymin, _, ymax = text_bounds(label, AverageWidthMeasurer())
    assert ymin == pytest.approx(92)
    assert ymax == pytest.approx(116)


@pytest.mark.parametrize(
    "fmt, value, expected",
    [
        ("", 100.0, "100"),
        ("", 2.5, "2.5"),
        (",.2f", 1234.5, "1,234.50"),
        (".0%", 0.25, "25%"),
        ("not a format", 3.0, "3"),
    ],
)
def test_format_number(fmt, value, expected):
    assert format_number(fmt, value) == expected


def test_plain_number_accepts_ints():
    assert plain_number(7) == "7"
