"""
Renderers for og-image-generator.

Renderers convert a SocialCard to specific output formats.
"""

from ogimage.renderers.base import Renderer
from ogimage.renderers.bitmap import SocialImageRenderer
from ogimage.renderers.ascii import TerminalPreviewRenderer

__all__ = [
    "Renderer",
    "SocialImageRenderer",
    "TerminalPreviewRenderer",
]
