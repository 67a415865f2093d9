"""
Utility functions for og-image-generator.

Helpers for text measurement and color parsing.
"""

from ogimage.utils.text_helpers import (
    PillowMeasurer,
    get_text_bbox,
    load_font,
    measure_font_height,
)
from ogimage.utils.colors import DEFAULT_BG_COLOR, hex_to_rgb

__all__ = [
    "PillowMeasurer",
    "get_text_bbox",
    "load_font",
    "measure_font_height",
    "DEFAULT_BG_COLOR",
    "hex_to_rgb",
]
