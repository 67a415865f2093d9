"""
Font file discovery.

Finds a usable TrueType font: an explicit path, the bundled font in
fonts/, or the first common system font that exists.
"""

import os
from typing import Optional, Sequence


BUNDLED_FONT = os.path.join("fonts", "OpenSans-Bold.ttf")

DEFAULT_SYSTEM_FONT_PATHS = [
    "/System/Library/Fonts/SFCompact.ttf",
    "/System/Library/Fonts/SFNSDisplay.ttf",
    "/System/Library/Fonts/Arial.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
    "C:\\Windows\\Fonts\\arial.ttf",
]


def resolve_font_path(custom_font: Optional[str] = None,
                      system_paths: Sequence[str] = DEFAULT_SYSTEM_FONT_PATHS,
                      bundled_font: str = BUNDLED_FONT,
                      quiet: bool = False) -> Optional[str]:
    """
    Resolve the font file to render with.

    Args:
        custom_font: Font path given by the user (must exist if set)
        system_paths: System font locations to search, in order
        bundled_font: Path of the font shipped alongside the tool
        quiet: If True, don't print a warning when falling back

    Returns:
        Path to a font file, or None to use Pillow's default font

    Raises:
        FileNotFoundError: If custom_font is set but doesn't exist
    """
    if custom_font:
        if not os.path.exists(custom_font):
            raise FileNotFoundError(f"font file not found: {custom_font}")
        return custom_font

    if os.path.exists(bundled_font):
        return bundled_font

    for path in system_paths:
        if os.path.exists(path):
            return path

    if not quiet:
        print(f"[fonts] Warning: no font found at {bundled_font} or in system fonts, "
              f"using Pillow default font")
    return None
