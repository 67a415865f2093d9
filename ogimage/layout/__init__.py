"""
Text layout engine for og-image-generator.

Pure functions over text and measurements: no fonts are loaded and
nothing is drawn here.
"""

from ogimage.layout.wrap import wrap_words
from ogimage.layout.orphans import prevent_orphans, balance_lines_upward
from ogimage.layout.grid import REFERENCE_GLYPHS, BaselineGrid, grid_baseline
from ogimage.layout.fit import FitResult, fit_font_size
from ogimage.layout.engine import CaptionLayout, PlacedLine, layout_caption, layout_title

__all__ = [
    "wrap_words",
    "prevent_orphans",
    "balance_lines_upward",
    "REFERENCE_GLYPHS",
    "BaselineGrid",
    "grid_baseline",
    "FitResult",
    "fit_font_size",
    "CaptionLayout",
    "PlacedLine",
    "layout_caption",
    "layout_title",
]
