"""
Text measurement helpers.

Wraps Pillow font loading and measurement behind the small interface the
layout engine expects: measure(text, font_ref, size) -> (width, height).
"""

from typing import Optional, Union
from PIL import Image, ImageDraw, ImageFont

from ogimage.layout.grid import REFERENCE_GLYPHS


Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


def get_text_bbox(text: str, font: Font, draw: Optional[ImageDraw.ImageDraw] = None) -> tuple[float, int]:
    """
    Get the size of text.

    Width is the advance width (where the next glyph would start), not the
    ink extent, so trailing side bearings count. Height is the ink extent.

    Args:
        text: Text to measure
        font: Font to use for measurement
        draw: Draw object to measure with (default: a throwaway 1x1 canvas)

    Returns:
        Tuple of (width, height) in pixels
    """
    if draw is None:
        draw = ImageDraw.Draw(Image.new('RGB', (1, 1)))

    width = draw.textlength(text, font=font)
    bbox = draw.textbbox((0, 0), text, font=font)
    height = bbox[3] - bbox[1]

    return (width, height)


def measure_font_height(font: Font, draw: Optional[ImageDraw.ImageDraw] = None) -> int:
    """
    Get the full height of a font from its reference glyphs.

    Args:
        font: Loaded font
        draw: Draw object to measure with (default: a throwaway 1x1 canvas)

    Returns:
        Height in pixels covering ascender and descender
    """
    _, height = get_text_bbox(REFERENCE_GLYPHS, font, draw)
    return height


def load_font(font_ref: Optional[str], size: float) -> Font:
    """
    Load a font at a point size.

    Args:
        font_ref: Path to a TrueType/OpenType file, or None for Pillow's
            bundled default font
        size: Point size

    Returns:
        Loaded font

    Raises:
        OSError: If the font file can't be read
    """
    if font_ref is None:
        return ImageFont.load_default(size)
    return ImageFont.truetype(font_ref, size)


class PillowMeasurer:
    """
    Measures text with Pillow fonts.

    Loaded faces are cached per (font_ref, size). The cache and the
    scratch canvas are not thread safe, so each render should own its
    measurer.
    """

    def __init__(self):
        """Initialize with an empty font cache"""
        self._fonts: dict[tuple[Optional[str], float], Font] = {}
        self._draw = ImageDraw.Draw(Image.new('RGB', (1, 1)))

    def font(self, font_ref: Optional[str], size: float) -> Font:
        """Get a loaded font, loading it on first use."""
        key = (font_ref, size)
        if key not in self._fonts:
            self._fonts[key] = load_font(font_ref, size)
        return self._fonts[key]

    def measure(self, text: str, font_ref: Optional[str], size: float) -> tuple[float, int]:
        return get_text_bbox(text, self.font(font_ref, size), self._draw)

    def line_height(self, font_ref: Optional[str], size: float) -> int:
        """Height of the reference glyphs in the given font."""
        return measure_font_height(self.font(font_ref, size), self._draw)

    def bind(self, font_ref: Optional[str], size: float):
        """
        Get a single-font measuring function for wrapping.

        Returns:
            Callable text -> (width, height)
        """
        return lambda text: self.measure(text, font_ref, size)

    def sized(self, font_ref: Optional[str]):
        """
        Get a measuring function that takes the size, for fitting.

        Returns:
            Callable (text, size) -> (width, height)
        """
        return lambda text, size: self.measure(text, font_ref, size)
