from __future__ import annotations

import pytest

from ogimage.utils.colors import DEFAULT_BG_COLOR, hex_to_rgb


@pytest.mark.parametrize(
    "value,expected",
    [
        ("#1a1a2e", (0x1A, 0x1A, 0x2E)),
        ("16a085", (0x16, 0xA0, 0x85)),
        ("#000000", (0, 0, 0)),
        ("#ffffff", (255, 255, 255)),
    ],
)
def test_parses_six_digit_hex(value, expected):
    assert hex_to_rgb(value) == expected


@pytest.mark.parametrize("value", ["#fff", "#gggggg", "", None, "#-12345", "#1_2345", "#1a1a2e00"])
def test_invalid_values_fall_back_to_default(value):
    assert hex_to_rgb(value) == DEFAULT_BG_COLOR == (26, 26, 46)


@pytest.mark.parametrize("upper,lower", [("#1A1A2E", "#1a1a2e"), ("#FFFFFF", "#ffffff"), ("#AbCdEf", "#abcdef")])
def test_case_insensitive(upper, lower):
    assert hex_to_rgb(upper) == hex_to_rgb(lower)


def test_custom_default():
    assert hex_to_rgb("nope", default=(1, 2, 3)) == (1, 2, 3)
