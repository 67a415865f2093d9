"""
Base class for renderers.

Renderers turn a SocialCard into a specific output format
(PNG-ready images, terminal previews, etc.)
"""

from abc import ABC, abstractmethod
from typing import Any
from ogimage.card import SocialCard


class Renderer(ABC):
    """
    Base class for renderers.

    The return type of render() varies by renderer implementation.
    """

    @abstractmethod
    def render(self, card: SocialCard) -> Any:
        """
        Render a SocialCard to the target format.

        Args:
            card: Title, URL and canvas settings for one image

        Returns:
            Rendered output (type varies by renderer implementation)
            - SocialImageRenderer: PIL Image.Image
            - TerminalPreviewRenderer: str

        Raises:
            OSError: If a font file can't be loaded
        """
        pass
