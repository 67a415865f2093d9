"""
Card text layout.

Combines wrapping, orphan prevention, grid placement and size fitting into
the two operations renderers call: laying out the title block and placing
the URL caption.
"""

from dataclasses import dataclass
from typing import Optional

from ogimage.layout.fit import SizedMeasure, fit_font_size
from ogimage.layout.grid import BaselineGrid
from ogimage.layout.orphans import prevent_orphans
from ogimage.layout.wrap import LineMeasure, wrap_words


@dataclass(frozen=True)
class PlacedLine:
    """A line of text and the y coordinate of its baseline"""
    text: str
    y: float


@dataclass(frozen=True)
class CaptionLayout:
    """
    Placement of a single-line caption.

    Attributes:
        text: Caption text
        y: Baseline y coordinate
        font_size: Size chosen by fitting
        fits: False when the caption overflows at the minimum size
    """
    text: str
    y: float
    font_size: float
    fits: bool


def layout_title(text: str, max_width: float, top_margin: float, line_height: float,
                 spacing: float, measure: LineMeasure) -> list[PlacedLine]:
    """
    Wrap the title and put each line on the baseline grid.

    Args:
        text: Title text
        max_width: Maximum line width in pixels
        top_margin: Top margin in pixels
        line_height: Reference glyph height of the title font
        spacing: Line spacing multiplier
        measure: Measures a string with the title font

    Returns:
        Placed lines, top to bottom (empty for blank text)
    """
    grid = BaselineGrid(top_margin=top_margin, line_height=line_height, spacing=spacing)
    lines = prevent_orphans(wrap_words(text, max_width, measure))
    return [PlacedLine(text=line, y=grid.baseline(i)) for i, line in enumerate(lines)]


def layout_caption(text: str, max_width: float, max_font_size: float, min_font_size: float,
                   step: float, title_line_height: float, top_margin: float,
                   bottom_margin: Optional[float], canvas_height: float, spacing: float,
                   measure: SizedMeasure) -> CaptionLayout:
    """
    Size the caption and place it on the lowest title grid line.

    The grid is built from the title's line height and top margin, never
    from the caption font, so both texts share the same rhythm.

    Args:
        text: Caption text
        max_width: Available width in pixels
        max_font_size: Largest caption size to try
        min_font_size: Smallest caption size allowed
        step: Size decrement between attempts
        title_line_height: Reference glyph height of the title font
        top_margin: Top margin in pixels
        bottom_margin: Space to keep free at the bottom (None: top_margin)
        canvas_height: Canvas height in pixels
        spacing: Line spacing multiplier of the title grid
        measure: Measures a string with the caption font at a size

    Returns:
        CaptionLayout with size and baseline
    """
    fit = fit_font_size(text, max_width, max_font_size, min_font_size, step, measure)
    grid = BaselineGrid(top_margin=top_margin, line_height=title_line_height, spacing=spacing)
    y = grid.last_baseline_within(canvas_height, bottom_margin)
    return CaptionLayout(text=text, y=y, font_size=fit.size, fits=fit.fits)
