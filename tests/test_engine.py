from __future__ import annotations

from ogimage.layout.engine import CaptionLayout, PlacedLine, layout_caption, layout_title


def test_title_lines_are_balanced_and_placed_on_grid(measure):
    placed = layout_title("Hello World Foo Bar", 150, 135, 20, 1.5, measure)
    assert placed == [
        PlacedLine(text="Hello World", y=155),
        PlacedLine(text="Foo Bar", y=185),
    ]


def test_empty_title_has_no_lines(measure):
    assert layout_title("", 150, 135, 20, 1.5, measure) == []


def test_single_line_title_sits_on_first_baseline(measure):
    assert layout_title("Hello", 1000, 100, 40, 1.5, measure) == [PlacedLine(text="Hello", y=140)]


def test_caption_uses_title_grid(sized_measure):
    caption = layout_caption("https://example.com", 1080, 40, 16, 2,
                             title_line_height=50, top_margin=135, bottom_margin=None,
                             canvas_height=628, spacing=1.5, measure=sized_measure)
    assert caption == CaptionLayout(text="https://example.com", y=485, font_size=40, fits=True)


def test_caption_position_ignores_caption_size(sized_measure):
    url = "https://example.com/" + "a" * 80
    big = layout_caption(url, 2000, 40, 16, 2, 50, 135, None, 628, 1.5, sized_measure)
    small = layout_caption(url, 600, 40, 16, 2, 50, 135, None, 628, 1.5, sized_measure)
    assert big.font_size > small.font_size
    assert big.y == small.y == 485


def test_caption_overflow_is_flagged(sized_measure):
    caption = layout_caption("x" * 200, 100, 40, 16, 2, 50, 135, None, 628, 1.5, sized_measure)
    assert caption.font_size == 16
    assert caption.fits is False


def test_caption_respects_explicit_bottom_margin(sized_measure):
    caption = layout_caption("url", 1080, 40, 16, 2, 50, 135, 0, 628, 1.5, sized_measure)
    assert caption.y == 560
