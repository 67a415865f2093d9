from __future__ import annotations

from PIL import Image, ImageDraw

from conftest import requires_freetype
from ogimage.utils.text_helpers import PillowMeasurer, get_text_bbox, load_font, measure_font_height


@requires_freetype
def test_longer_text_is_wider():
    font = load_font(None, 40)
    short_width, _ = get_text_bbox("Hello", font)
    long_width, _ = get_text_bbox("Hello World", font)
    assert 0 < short_width < long_width


@requires_freetype
def test_reference_height_covers_descenders():
    font = load_font(None, 40)
    _, cap_height = get_text_bbox("M", font)
    assert measure_font_height(font) > cap_height


@requires_freetype
def test_line_height_grows_with_size():
    measurer = PillowMeasurer()
    assert measurer.line_height(None, 72) > measurer.line_height(None, 40)


@requires_freetype
def test_fonts_are_cached_per_size():
    measurer = PillowMeasurer()
    assert measurer.font(None, 40) is measurer.font(None, 40)
    assert measurer.font(None, 40) is not measurer.font(None, 20)


@requires_freetype
def test_bound_and_sized_measures_agree():
    measurer = PillowMeasurer()
    expected = measurer.measure("Hello World", None, 40)
    assert measurer.bind(None, 40)("Hello World") == expected
    assert measurer.sized(None)("Hello World", 40) == expected


@requires_freetype
def test_width_is_advance_not_ink():
    font = load_font(None, 40)
    # a trailing space has no ink but moves the pen
    assert get_text_bbox("a ", font)[0] > get_text_bbox("a", font)[0]
    draw = ImageDraw.Draw(Image.new("RGB", (1, 1)))
    assert get_text_bbox("Hello World", font)[0] == draw.textlength("Hello World", font=font)


@requires_freetype
def test_line_height_is_reference_glyph_height():
    measurer = PillowMeasurer()
    assert measurer.line_height(None, 72) == measure_font_height(measurer.font(None, 72))
