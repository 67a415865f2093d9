from __future__ import annotations

import pytest

from ogimage.layout.grid import REFERENCE_GLYPHS, BaselineGrid, grid_baseline


@pytest.fixture
def grid():
    return BaselineGrid(top_margin=135, line_height=50, spacing=1.5)


def test_first_baseline_is_one_line_below_margin():
    assert grid_baseline(0, 135, 50, 1.5) == 185


def test_baselines_step_by_scaled_line_height():
    assert grid_baseline(1, 135, 50, 1.5) == 260
    assert grid_baseline(4, 135, 50, 1.5) == 485


@pytest.mark.parametrize("line_height,spacing", [(1, 1.0), (50, 1.5), (83.5, 1.2), (12, 3)])
def test_baselines_strictly_increase(line_height, spacing):
    ys = [grid_baseline(i, 100, line_height, spacing) for i in range(50)]
    assert all(a < b for a, b in zip(ys, ys[1:]))


def test_grid_matches_function(grid):
    assert grid.step == 75
    assert [grid.baseline(i) for i in range(3)] == [185, 260, 335]


def test_baselines_limit_is_inclusive(grid):
    assert list(grid.baselines(485)) == [185, 260, 335, 410, 485]
    assert list(grid.baselines_below(485)) == [185, 260, 335, 410]


def test_baselines_above_first_line_is_empty(grid):
    assert list(grid.baselines(100)) == []


def test_degenerate_grid_yields_nothing():
    assert list(BaselineGrid(top_margin=0, line_height=0, spacing=1.5).baselines(600)) == []


def test_caption_sits_on_lowest_line_inside_bottom_margin(grid):
    # 628 - 135 = 493, lines at 485 and 560
    assert grid.last_baseline_within(628) == 485
    assert grid.last_baseline_within(628, bottom_margin=135) == 485


def test_smaller_bottom_margin_allows_a_lower_line(grid):
    assert grid.last_baseline_within(628, bottom_margin=0) == 560


def test_bound_is_inclusive(grid):
    assert grid.last_baseline_within(620, bottom_margin=135) == 485


def test_falls_back_to_first_baseline_on_tiny_canvas(grid):
    assert grid.last_baseline_within(200) == 185


def test_reference_glyphs_cover_ascender_and_descender():
    assert REFERENCE_GLYPHS == "Mg"
