"""
Greedy word wrapping.

Breaks a block of text into lines that fit a pixel width, measuring
each candidate line with a caller-supplied measurement function.
"""

from typing import Callable


# Measures a string with an already-loaded font: text -> (width, height)
LineMeasure = Callable[[str], tuple[float, float]]


def wrap_words(text: str, max_width: float, measure: LineMeasure) -> list[str]:
    """
    Wrap text to fit within a maximum width.

    Single pass, no backtracking: each word is appended to the current
    line until the line would overflow, then a new line is started.
    Words are never split, so a word wider than max_width ends up on
    a line of its own.

    Args:
        text: Text to wrap
        max_width: Maximum line width in pixels
        measure: Function returning (width, height) of a string

    Returns:
        List of wrapped lines (empty for blank text)
    """
    words = text.split()
    lines = []
    current_line = ""

    for word in words:
        test_line = current_line + (" " if current_line else "") + word
        test_width, _ = measure(test_line)

        if test_width > max_width and current_line:
            lines.append(current_line)
            current_line = word
        else:
            current_line = test_line

    if current_line:
        lines.append(current_line)

    return lines
