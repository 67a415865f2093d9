"""
Color parsing helpers.
"""

from typing import Optional


DEFAULT_BG_COLOR = (26, 26, 46)


def hex_to_rgb(hex_color: Optional[str], default: tuple[int, int, int] = DEFAULT_BG_COLOR) -> tuple[int, int, int]:
    """
    Convert a hex color string to an RGB tuple.

    Accepts "#rrggbb" or "rrggbb" in any letter case. Anything else
    (short forms, bad digits, empty) gives the default.

    Args:
        hex_color: Color string
        default: Color to return for invalid input

    Returns:
        (r, g, b) tuple
    """
    value = (hex_color or "").strip()
    if value.startswith("#"):
        value = value[1:]

    # int(..., 16) would also accept signs and underscores
    if len(value) != 6 or not all(c in "0123456789abcdefABCDEF" for c in value):
        return default

    rgb = int(value, 16)
    return ((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)
