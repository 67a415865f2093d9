"""
Terminal preview renderer.

Renders the social image, shrinks it to terminal width and prints it
with the half-block technique: every character cell shows two pixels
stacked vertically, the upper one as background color and the lower
one as foreground color of "▄".
"""

import os
from typing import Optional
from PIL import Image
from ogimage.card import SocialCard
from ogimage.config import Typography
from ogimage.renderers.base import Renderer
from ogimage.renderers.bitmap import SocialImageRenderer


RESET = "\033[0m"
LOWER_HALF_BLOCK = "▄"


class TerminalPreviewRenderer(Renderer):
    """
    Renders a SocialCard as colored half-block characters.

    Uses 24-bit color when the terminal advertises it through COLORTERM
    and the 256-color palette otherwise.
    """

    def __init__(self, columns: int = 80, typography: Optional[Typography] = None,
                 quiet: bool = False):
        """
        Initialize terminal preview renderer.

        Args:
            columns: Preview width in terminal cells (default: 80)
            typography: Typography passed to the bitmap renderer
            quiet: If True, don't print layout warnings
        """
        self.columns = columns
        self.bitmap_renderer = SocialImageRenderer(typography, quiet=quiet)
        self.true_color = os.environ.get("COLORTERM", "").lower() in ("truecolor", "24bit")

    def render(self, card: SocialCard) -> str:
        """
        Render the card as an ANSI string.

        Args:
            card: Title, URL and canvas settings

        Returns:
            Multi-line string, one line per pair of pixel rows
        """
        return self.render_image(self.bitmap_renderer.render(card))

    def render_image(self, img: Image.Image) -> str:
        """Preview an already rendered image."""
        return self.image_to_ansi(self._shrink(img))

    def _shrink(self, img: Image.Image) -> Image.Image:
        """Scale to the preview width, keeping the aspect ratio."""
        width = max(1, self.columns)
        height = max(2, round(img.height * width / img.width))
        return img.convert('RGB').resize((width, height), Image.Resampling.LANCZOS)

    def image_to_ansi(self, img: Image.Image) -> str:
        """
        Convert an RGB image to half-block ANSI art.

        Args:
            img: Image to convert

        Returns:
            ANSI colored string
        """
        img = img.convert('RGB')
        pixels = img.load()
        rows = []

        for y in range(0, img.height, 2):
            cells = []
            for x in range(img.width):
                top = pixels[x, y]
                # Odd heights: pad the last row with black
                bottom = pixels[x, y + 1] if y + 1 < img.height else (0, 0, 0)
                cells.append(self._cell(top, bottom))
            rows.append("".join(cells) + RESET)

        return "\n".join(rows)

    def _cell(self, top: tuple, bottom: tuple) -> str:
        if self.true_color:
            return (f"\033[48;2;{top[0]};{top[1]};{top[2]}m"
                    f"\033[38;2;{bottom[0]};{bottom[1]};{bottom[2]}m{LOWER_HALF_BLOCK}")
        return f"\033[48;5;{rgb_to_256(top)}m\033[38;5;{rgb_to_256(bottom)}m{LOWER_HALF_BLOCK}"


def rgb_to_256(rgb: tuple) -> int:
    """
    Quantize an RGB color to the xterm 256-color palette.

    Grays use the 24-step ramp (232-255), everything else the 6x6x6
    color cube (16-231).

    Args:
        rgb: (r, g, b) with values 0-255

    Returns:
        Palette index in 16-255
    """
    r, g, b = rgb

    if r == g == b:
        if r < 8:
            return 16
        if r > 247:
            return 231
        return 232 + round((r - 8) / 247 * 23)

    return 16 + round(r / 255 * 5) * 36 + round(g / 255 * 5) * 6 + round(b / 255 * 5)
