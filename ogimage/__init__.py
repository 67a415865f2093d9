"""
og-image-generator: Open Graph social preview images from a title and URL.

Wraps the title with orphan prevention and sets title and URL on a shared
baseline grid, then renders the result with Pillow.
"""

__version__ = "0.1.0"

# Import main classes for convenience
from ogimage.card import SocialCard
from ogimage.config import Typography
from ogimage.renderers.base import Renderer

__all__ = [
    "SocialCard",
    "Typography",
    "Renderer",
]
