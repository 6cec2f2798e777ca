import itertools
import random

import pytest

from panelkit.components.panel import PanelType, color_panels
from panelkit.constants import GRID_COLS, GRID_ROWS
from panelkit.engine.grid import (
    apply_gravity,
    clear_grid,
    column_panels,
    grid_dimensions,
    grid_from_rows,
    grid_to_rows,
    set_cell,
)


def _random_grid(rng: random.Random, fill: float = 0.5):
    grid = clear_grid()
    choices = color_panels()
    for row, col in itertools.product(range(GRID_ROWS), range(GRID_COLS)):
        if rng.random() < fill:
            grid = set_cell(grid, row, col, rng.choice(choices))
    return grid


def test_clear_grid_dimensions_and_contents():
    grid = clear_grid()
    assert grid_dimensions(grid) == (12, 6)
    assert all(panel is PanelType.EMPTY for row in grid for panel in row)


def test_set_cell_leaves_original_untouched():
    original = clear_grid()
    updated = set_cell(original, 3, 2, PanelType.BLUE)
    assert updated[3][2] is PanelType.BLUE
    assert original[3][2] is PanelType.EMPTY
    changed = [
        (r, c) for r in range(GRID_ROWS) for c in range(GRID_COLS)
        if updated[r][c] != original[r][c]
    ]
    assert changed == [(3, 2)]


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (12, 0), (0, 6)])
def test_set_cell_rejects_out_of_range(row, col):
    with pytest.raises(IndexError):
        set_cell(clear_grid(), row, col, PanelType.RED)


def test_gravity_stacks_panels_at_bottom_in_order():
    grid = grid_from_rows([
        "R.....",
        "......",
        "G..Y..",
        "......",
        "B.....",
    ])
    settled = apply_gravity(grid)
    rows = grid_to_rows(settled)
    assert rows[-3:] == [
        "R.....",
        "G.....",
        "B..Y..",
    ]
    assert all(line == "......" for line in rows[:-3])


def test_gravity_does_not_move_panels_between_columns():
    grid = grid_from_rows(["RGBYPK"])
    settled = apply_gravity(grid)
    assert grid_to_rows(settled)[-1] == "RGBYPK"
    assert grid_to_rows(settled)[0] == "......"


def test_gravity_is_idempotent_on_random_grids():
    rng = random.Random(1234)
    for _ in range(25):
        grid = _random_grid(rng)
        once = apply_gravity(grid)
        assert apply_gravity(once) == once


def test_gravity_preserves_column_contents_and_order():
    rng = random.Random(99)
    for _ in range(25):
        grid = _random_grid(rng, fill=0.35)
        settled = apply_gravity(grid)
        for col in range(GRID_COLS):
            assert column_panels(settled, col) == column_panels(grid, col)
            # Everything below the first panel is filled.
            filled = [not settled[row][col].is_empty for row in range(GRID_ROWS)]
            if True in filled:
                first = filled.index(True)
                assert all(filled[first:])


def test_gravity_on_empty_grid_returns_empty_grid():
    assert apply_gravity(clear_grid()) == clear_grid()


def test_gravity_leaves_input_grid_unchanged():
    grid = grid_from_rows(["R....."])
    apply_gravity(grid)
    assert grid[0][0] is PanelType.RED


def test_grid_from_rows_rejects_unknown_symbol():
    with pytest.raises(ValueError):
        grid_from_rows(["RX...."])


def test_custom_grid_size():
    grid = clear_grid(4, 3)
    assert grid_dimensions(grid) == (4, 3)
    grid = set_cell(grid, 0, 2, PanelType.PINK)
    assert grid_to_rows(apply_gravity(grid)) == ["...", "...", "...", "..K"]
