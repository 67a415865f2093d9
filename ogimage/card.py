"""
Social card description.

A SocialCard holds everything needed for one render. It is built fresh
from the command line (or the demo) and handed to a renderer.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SocialCard:
    """
    Input for a single social image render.

    Attributes:
        title: Article title, wrapped over as many lines as needed
        url: Article URL, drawn as a single-line caption
        width: Canvas width in pixels
        height: Canvas height in pixels
        bg_color: Background color as hex string
        title_font: Title font path (None: Pillow default font)
        url_font: URL font path (None: Pillow default font)
        debug: Draw the baseline grid over the image
    """
    title: str
    url: str
    width: int = 1200
    height: int = 628
    bg_color: str = "#1a1a2e"
    title_font: Optional[str] = None
    url_font: Optional[str] = None
    debug: bool = False
