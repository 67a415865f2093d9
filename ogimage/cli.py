"""
og-image-generator command line.

Renders a social preview PNG from a title and URL.
"""

import argparse
import sys
from typing import Optional, Sequence

from ogimage import __version__
from ogimage.card import SocialCard
from ogimage.config import get_config
from ogimage.fonts import resolve_font_path
from ogimage.renderers import SocialImageRenderer, TerminalPreviewRenderer


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="og-image-generator",
        description="og-image-generator - Open Graph social preview images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  og-image-generator --title "Hello World" --url https://example.com
  og-image-generator --title "Hello World" --url https://example.com --debug --preview
        """
    )
    parser.add_argument("--title", help="Article title (required)")
    parser.add_argument("--url", help="Article URL (required)")
    parser.add_argument("--output", default="social-image.png", help="Output file path")
    parser.add_argument("--width", type=int, help="Image width in pixels (default: 1200)")
    parser.add_argument("--height", type=int, help="Image height in pixels (default: 628)")
    parser.add_argument("--bg", help="Background color (hex, default: #1a1a2e)")
    parser.add_argument("--title-font", help="Title font file path (TTF)")
    parser.add_argument("--url-font", help="URL font file path (TTF)")
    parser.add_argument("--config", help="Config file (default: config.json if present)")
    parser.add_argument("--debug", action="store_true", help="Draw debug baselines")
    parser.add_argument("--preview", action="store_true",
                        help="Also print a color preview to the terminal")
    parser.add_argument("--quiet", action="store_true", help="Suppress warnings")
    parser.add_argument("--version", action="version",
                        version=f"og-image-generator version {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Arguments (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.title or not args.url:
        parser.error("title and url are required")

    try:
        config = get_config(args.config)
        canvas = config.get_canvas_config()
        fonts = config.get_font_config()
        typography = config.get_typography()

        card = SocialCard(
            title=args.title,
            url=args.url,
            width=int(canvas["width"]) if args.width is None else args.width,
            height=int(canvas["height"]) if args.height is None else args.height,
            bg_color=args.bg or canvas["background"],
            title_font=resolve_font_path(args.title_font or fonts["title"], quiet=args.quiet),
            url_font=resolve_font_path(args.url_font or fonts["url"], quiet=args.quiet),
            debug=args.debug,
        )

        renderer = SocialImageRenderer(typography, quiet=args.quiet)
        image = renderer.render(card)
        image.convert('RGB').save(args.output, format="PNG")

        if args.preview:
            print(TerminalPreviewRenderer(typography=typography).render_image(image))

    except Exception as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    print(f"Social image generated: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
