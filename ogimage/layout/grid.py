"""
Baseline grid calculation.

All text on the card sits on one arithmetic grid of baselines derived
from the title font. The URL caption uses the same grid even though it is
set in a different font and size, which keeps the vertical rhythm intact.
"""

from dataclasses import dataclass
from typing import Iterator, Optional


# Capital with a full ascender plus a descender, so measuring it gives
# the full height of the face regardless of the actual text
REFERENCE_GLYPHS = "Mg"


def grid_baseline(index: int, top_margin: float, line_height: float, spacing: float) -> float:
    """
    Get the y coordinate of a baseline on the grid.

    The first baseline sits one line height below the top margin so the
    ascent of the first line clears the margin.

    Args:
        index: Zero-based grid line
        top_margin: Top margin in pixels
        line_height: Reference glyph height of the grid font
        spacing: Line spacing multiplier

    Returns:
        Baseline y coordinate in pixels
    """
    return top_margin + line_height + index * line_height * spacing


@dataclass(frozen=True)
class BaselineGrid:
    """
    Baseline grid seeded from one font's metrics.

    Attributes:
        top_margin: Top margin in pixels
        line_height: Reference glyph height of the grid font
        spacing: Line spacing multiplier
    """
    top_margin: float
    line_height: float
    spacing: float

    @property
    def step(self) -> float:
        """Distance between consecutive baselines"""
        return self.line_height * self.spacing

    def baseline(self, index: int) -> float:
        return grid_baseline(index, self.top_margin, self.line_height, self.spacing)

    def baselines(self, limit: float) -> Iterator[float]:
        """Yield baselines while they are at or above limit (y <= limit)."""
        if self.step <= 0:
            return
        index = 0
        y = self.baseline(index)
        while y <= limit:
            yield y
            index += 1
            y = self.baseline(index)

    def baselines_below(self, limit: float) -> Iterator[float]:
        """Yield baselines strictly above limit (y < limit)."""
        for y in self.baselines(limit):
            if y >= limit:
                return
            yield y

    def last_baseline_within(self, canvas_height: float,
                             bottom_margin: Optional[float] = None) -> float:
        """
        Find the lowest baseline that respects the bottom margin.

        Args:
            canvas_height: Canvas height in pixels
            bottom_margin: Space to keep free at the bottom
                (default: same as the top margin)

        Returns:
            Lowest baseline y with y <= canvas_height - bottom_margin,
            or the first baseline if none fits
        """
        if bottom_margin is None:
            bottom_margin = self.top_margin

        target = self.baseline(0)
        for y in self.baselines(canvas_height - bottom_margin):
            target = y
        return target
