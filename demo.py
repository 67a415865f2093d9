#!/usr/bin/env python3
"""
og-image-generator Demo Script

Renders a gallery of example cards into out/ and shows how the title
layout reacts to orphans, long titles and custom canvas sizes.
"""

import os
from ogimage.card import SocialCard
from ogimage.fonts import resolve_font_path
from ogimage.layout import prevent_orphans, wrap_words
from ogimage.renderers import SocialImageRenderer
from ogimage.utils.text_helpers import PillowMeasurer


OUTPUT_DIR = "out"

EXAMPLES = [
    ("social-image.png", dict(title="How to Build APIs in Go", url="https://example.com/go-apis")),
    ("do-first-understand-later.png", dict(title="Do first, and then understand later",
                                           url="https://example.com/go-apis")),
    ("dark-image.png", dict(title="Mastering Concurrency in Go",
                            url="https://example.com/concurrency", bg_color="#0f0f1e")),
    ("wide-image.png", dict(title="Building Production Systems",
                            url="https://example.com/production", width=1600, height=900)),
    ("long-title.png", dict(title="Advanced Patterns for Building High-Performance, Scalable, "
                                  "and Maintainable Web Services with Go",
                            url="https://example.com/advanced-patterns", bg_color="#2c3e50")),
    ("short-words.png", dict(title="The as via or with can alt vip run task bib bit lip too "
                                   "lid not eql mut var let const",
                             url="https://example.com/advanced-patterns", bg_color="#cc00cc")),
    ("debug-baselines.png", dict(title="The as via or with can alt vip run task bib bit lip "
                                       "too lid not eql mut var let const",
                                 url="https://example.com/advanced-patterns", bg_color="#00cccc",
                                 debug=True)),
    ("orphan-prevented.png", dict(title="Building High-Performance Web Services Today",
                                  url="https://example.com/web-services", bg_color="#1e3a5f")),
    ("orphan-prevented-2.png", dict(title="Modern API Development with Go",
                                    url="https://example.com/api-dev", bg_color="#2d3436")),
    ("three-line-orphan.png", dict(title="Understanding Distributed Systems and Building "
                                         "Reliable Microservices Architecture",
                                   url="https://example.com/distributed", bg_color="#6c5ce7")),
]


def demo_orphan_prevention(font_path):
    """
    Show the wrapped title before and after orphan prevention.
    """
    print("=" * 64)
    print("Orphan Prevention Demo")
    print("=" * 64)
    print()

    measure = PillowMeasurer().bind(font_path, 72)
    for _, example in EXAMPLES:
        lines = wrap_words(example["title"], 1080, measure)
        balanced = prevent_orphans(lines)
        if lines != balanced:
            print(f"  wrapped:  {lines}")
            print(f"  balanced: {balanced}")
            print()


def demo_gallery(font_path):
    """
    Render every example card to OUTPUT_DIR.
    """
    print("=" * 64)
    print("Gallery Demo")
    print("=" * 64)
    print()

    os.makedirs(OUTPUT_DIR, exist_ok=True)
    renderer = SocialImageRenderer()

    for filename, example in EXAMPLES:
        card = SocialCard(title_font=font_path, url_font=font_path, **example)
        path = os.path.join(OUTPUT_DIR, filename)
        renderer.render(card).convert('RGB').save(path)
        print(f"✓ {path} ({card.width}x{card.height})")
    print()


def main():
    """Run all demos."""
    font_path = resolve_font_path()
    demo_orphan_prevention(font_path)
    demo_gallery(font_path)


if __name__ == "__main__":
    main()
