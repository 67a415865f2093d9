from __future__ import annotations

import pytest
from PIL import features


CHAR_WIDTH = 10
LINE_HEIGHT = 20


def fixed_advance(text: str) -> tuple[int, int]:
    """Every character is CHAR_WIDTH wide, like a monospace font."""
    return (len(text) * CHAR_WIDTH, LINE_HEIGHT)


def fixed_advance_sized(text: str, size: float) -> tuple[float, float]:
    """Monospace measurement where a character is as wide as half the size."""
    return (len(text) * size / 2, size)


@pytest.fixture
def measure():
    return fixed_advance


@pytest.fixture
def sized_measure():
    return fixed_advance_sized


requires_freetype = pytest.mark.skipif(
    not features.check("freetype2"), reason="Pillow built without FreeType"
)
