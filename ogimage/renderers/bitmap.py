"""
Bitmap renderer for social preview images.

Renders a SocialCard to a PIL Image: colored background, translucent
panel, wrapped title with drop shadow and the URL caption on the title's
baseline grid.
"""

from typing import Optional
from PIL import Image, ImageDraw
from ogimage.card import SocialCard
from ogimage.config import Typography
from ogimage.layout.engine import CaptionLayout, PlacedLine, layout_caption, layout_title
from ogimage.layout.grid import BaselineGrid
from ogimage.renderers.base import Renderer
from ogimage.utils.colors import hex_to_rgb
from ogimage.utils.text_helpers import Font, PillowMeasurer


SHADOW_COLOR = (0, 0, 0, 255)
TEXT_COLOR = (255, 255, 255, 255)
MUTED_TEXT_COLOR = (200, 200, 200, 220)
DEBUG_COLOR = (255, 0, 0, 255)


class SocialImageRenderer(Renderer):
    """
    Renders a SocialCard to a PIL Image (RGBA).

    Each render creates its own PillowMeasurer, so one renderer can be used
    for many cards in sequence.
    """

    def __init__(self, typography: Optional[Typography] = None, quiet: bool = False):
        """
        Initialize social image renderer.

        Args:
            typography: Sizes, margins and spacing (default: Typography())
            quiet: If True, don't print layout warnings
        """
        self.typography = typography or Typography()
        self.quiet = quiet

    def render(self, card: SocialCard) -> Image.Image:
        """
        Render the card.

        Args:
            card: Title, URL and canvas settings

        Returns:
            PIL Image (RGBA mode) of card.width x card.height

        Raises:
            OSError: If a font file can't be loaded
        """
        measurer = PillowMeasurer()

        img = self._draw_background(card)
        draw = ImageDraw.Draw(img)

        title_font = measurer.font(card.title_font, self.typography.title_font_size)
        title_line_height = measurer.line_height(card.title_font, self.typography.title_font_size)

        for line in self.layout_title(card, measurer, title_line_height):
            self.draw_text_with_shadow(draw, line.text, self.typography.side_margin, line.y, title_font)

        if card.debug:
            self._draw_debug_baselines(draw, card, title_line_height)

        caption = self.layout_caption(card, measurer, title_line_height)
        if not caption.fits and not self.quiet:
            print(f"[SocialImageRenderer] Warning: URL overflows at minimum size "
                  f"{caption.font_size:g}pt: {card.url}")

        # Muted caption is translucent, so it is composited from its own layer
        layer = Image.new('RGBA', img.size, (0, 0, 0, 0))
        self.draw_line(
            ImageDraw.Draw(layer),
            caption.text,
            self.typography.side_margin,
            caption.y,
            measurer.font(card.url_font, caption.font_size),
            MUTED_TEXT_COLOR
        )

        return Image.alpha_composite(img, layer)

    def layout_title(self, card: SocialCard, measurer: PillowMeasurer,
                     title_line_height: float) -> list[PlacedLine]:
        """
        Lay out the title lines for a card.

        Args:
            card: Card to lay out
            measurer: Measurer owned by the current render
            title_line_height: Reference glyph height of the title font

        Returns:
            Placed title lines
        """
        return layout_title(
            card.title,
            self.typography.max_text_width(card.width),
            self.typography.top_margin,
            title_line_height,
            self.typography.line_spacing,
            measurer.bind(card.title_font, self.typography.title_font_size)
        )

    def layout_caption(self, card: SocialCard, measurer: PillowMeasurer,
                       title_line_height: float) -> CaptionLayout:
        """
        Fit and place the URL caption on the title grid.

        Args:
            card: Card to lay out
            measurer: Measurer owned by the current render
            title_line_height: Reference glyph height of the title font

        Returns:
            Caption size and baseline
        """
        return layout_caption(
            card.url,
            self.typography.max_text_width(card.width),
            self.typography.url_font_size,
            self.typography.url_min_font_size,
            self.typography.url_font_step,
            title_line_height,
            self.typography.top_margin,
            self.typography.bottom_margin_or_default,
            card.height,
            self.typography.line_spacing,
            measurer.sized(card.url_font)
        )

    def draw_line(self, draw: ImageDraw.ImageDraw, text: str, x: float, y: float,
                  font: Font, fill: tuple) -> None:
        """Draw one line of text with its baseline at y."""
        draw.text((x, y), text, font=font, fill=fill, anchor="ls")

    def draw_text_with_shadow(self, draw: ImageDraw.ImageDraw, text: str, x: float, y: float,
                              font: Font) -> None:
        """Draw a line in the text color over an offset black copy."""
        offset = self.typography.shadow_offset
        self.draw_line(draw, text, x + offset, y + offset, font, SHADOW_COLOR)
        self.draw_line(draw, text, x, y, font, TEXT_COLOR)

    def _draw_background(self, card: SocialCard) -> Image.Image:
        """
        Create the canvas with the background color and dark panel.

        The panel is inset by the background margin on all sides and has
        rounded corners at the top only.

        Args:
            card: Card with canvas size and background color

        Returns:
            New RGBA image
        """
        bg_rgb = hex_to_rgb(card.bg_color)
        img = Image.new('RGBA', (card.width, card.height), bg_rgb + (255,))

        margin = self.typography.background_margin
        panel = Image.new('RGBA', img.size, (0, 0, 0, 0))
        ImageDraw.Draw(panel).rounded_rectangle(
            [(margin, margin), (card.width - margin, card.height - margin)],
            radius=self.typography.corner_radius,
            fill=(0, 0, 0, self.typography.overlay_alpha),
            corners=(True, True, False, False)
        )

        return Image.alpha_composite(img, panel)

    def _draw_debug_baselines(self, draw: ImageDraw.ImageDraw, card: SocialCard,
                              title_line_height: float) -> None:
        """
        Draw the top margin and every grid baseline as red hairlines.

        Args:
            draw: Draw object for the canvas
            card: Card being rendered
            title_line_height: Reference glyph height of the title font
        """
        grid = BaselineGrid(
            top_margin=self.typography.top_margin,
            line_height=title_line_height,
            spacing=self.typography.line_spacing
        )

        top = self.typography.top_margin
        draw.line([(0, top), (card.width, top)], fill=DEBUG_COLOR, width=2)

        for y in grid.baselines_below(card.height):
            rounded_y = round(y * 2) / 2
            draw.line([(0, rounded_y), (card.width, rounded_y)], fill=DEBUG_COLOR, width=2)
