"""
Font size fitting for single-line text.
"""

from dataclasses import dataclass
from typing import Callable


# Measures a string at a point size: (text, size) -> (width, height)
SizedMeasure = Callable[[str, float], tuple[float, float]]


@dataclass(frozen=True)
class FitResult:
    """
    Chosen font size.

    Attributes:
        size: Font size to render with
        fits: False when the text overflows even at the minimum size
    """
    size: float
    fits: bool


def fit_font_size(text: str, max_width: float, max_size: float, min_size: float,
                  step: float, measure: SizedMeasure) -> FitResult:
    """
    Find the largest font size at which text fits on one line.

    Steps down from max_size by step. Text that is still too wide at
    min_size is accepted at min_size and reported with fits=False; it is
    drawn overflowing rather than truncated. An inverted range (min_size
    above max_size) only tries max_size.

    Args:
        text: Text to fit
        max_width: Available width in pixels
        max_size: Size to try first
        min_size: Smallest size allowed
        step: Decrement between attempts
        measure: Function returning (width, height) of text at a size

    Returns:
        FitResult with the chosen size

    Raises:
        ValueError: If step is not positive
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if min_size > max_size:
        width, _ = measure(text, max_size)
        return FitResult(size=max_size, fits=width <= max_width)

    size = max_size
    while size >= min_size:
        width, _ = measure(text, size)
        if width <= max_width:
            return FitResult(size=size, fits=True)
        last_tried = size
        size -= step

    # step doesn't divide the range evenly, min_size itself is still untried
    if last_tried != min_size:
        width, _ = measure(text, min_size)
        return FitResult(size=min_size, fits=width <= max_width)

    return FitResult(size=min_size, fits=False)
