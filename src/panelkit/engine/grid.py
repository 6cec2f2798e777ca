"""Pure operations on the puzzle grid.

A grid is an immutable tuple of row tuples. Row 0 is the top; gravity pulls
panels toward the last row. Every operation returns a new grid (or a report)
and leaves its input untouched.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from panelkit.components.match import Match, MatchAxis
from panelkit.components.panel import PanelType
from panelkit.constants import GRID_COLS, GRID_ROWS, MIN_MATCH_LENGTH

Grid = Tuple[Tuple[PanelType, ...], ...]

# One-character symbols used by grid_from_rows / grid_to_rows.
PANEL_SYMBOLS: Dict[PanelType, str] = {
    PanelType.EMPTY: ".",
    PanelType.RED: "R",
    PanelType.GREEN: "G",
    PanelType.BLUE: "B",
    PanelType.YELLOW: "Y",
    PanelType.PURPLE: "P",
    PanelType.PINK: "K",
}
SYMBOL_TO_PANEL = {v: k for k, v in PANEL_SYMBOLS.items()}


def clear_grid(rows: int = GRID_ROWS, cols: int = GRID_COLS) -> Grid:
    """Return a fresh grid with every cell empty."""
    return tuple(tuple(PanelType.EMPTY for _ in range(cols)) for _ in range(rows))


def grid_dimensions(grid: Grid) -> Tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    return rows, cols


def set_cell(grid: Grid, row: int, col: int, panel: PanelType) -> Grid:
    """Return a copy of grid with (row, col) holding panel."""
    rows, cols = grid_dimensions(grid)
    if not (0 <= row < rows and 0 <= col < cols):
        raise IndexError(f"Cell ({row}, {col}) outside {rows}x{cols} grid")
    updated = grid[row][:col] + (panel,) + grid[row][col + 1:]
    return grid[:row] + (updated,) + grid[row + 1:]


def column_panels(grid: Grid, col: int) -> List[PanelType]:
    """Non-empty panels in a column, top to bottom."""
    return [row[col] for row in grid if not row[col].is_empty]


def apply_gravity(grid: Grid) -> Grid:
    """Compact every column toward the bottom, keeping panel order."""
    rows, cols = grid_dimensions(grid)
    columns: List[List[PanelType]] = []
    for col in range(cols):
        stacked = column_panels(grid, col)
        columns.append([PanelType.EMPTY] * (rows - len(stacked)) + stacked)
    return tuple(tuple(columns[col][row] for col in range(cols)) for row in range(rows))


def _scan_line(
    cells: Sequence[PanelType],
    axis: MatchAxis,
    fixed_index: int,
    min_length: int,
) -> List[Match]:
    matches: List[Match] = []
    run_start = 0
    run_type = PanelType.EMPTY
    # A trailing EMPTY sentinel flushes the run that reaches the line end.
    for index, panel in enumerate(list(cells) + [PanelType.EMPTY]):
        if panel == run_type and not panel.is_empty:
            continue
        length = index - run_start
        if not run_type.is_empty and length >= min_length:
            matches.append(Match(axis=axis, color=run_type, fixed_index=fixed_index,
                                 start_index=run_start, length=length))
        run_start = index
        run_type = panel
    return matches


def scan_matches(grid: Grid, *, min_length: int = MIN_MATCH_LENGTH) -> List[Match]:
    """Detect contiguous runs of identical non-empty panels.

    All row matches come first (top row first), then all column matches (left
    column first). The two axes are scanned independently, so a cell can be
    covered by both a row and a column match.
    """
    rows, cols = grid_dimensions(grid)
    matches: List[Match] = []
    for row in range(rows):
        matches.extend(_scan_line(grid[row], MatchAxis.ROW, row, min_length))
    for col in range(cols):
        column = [grid[row][col] for row in range(rows)]
        matches.extend(_scan_line(column, MatchAxis.COLUMN, col, min_length))
    return matches


def grid_from_rows(lines: Iterable[str], *, rows: int = GRID_ROWS, cols: int = GRID_COLS) -> Grid:
    """Build a grid from symbol strings, e.g. ``"RRG..."``.

    Lines fill the grid from the top; missing lines and missing trailing
    cells are empty.
    """
    grid = clear_grid(rows, cols)
    for row, line in enumerate(lines):
        for col, symbol in enumerate(line):
            if symbol not in SYMBOL_TO_PANEL:
                raise ValueError(f"Unknown panel symbol {symbol!r} at ({row}, {col})")
            grid = set_cell(grid, row, col, SYMBOL_TO_PANEL[symbol])
    return grid


def grid_to_rows(grid: Grid) -> List[str]:
    return ["".join(PANEL_SYMBOLS[panel] for panel in row) for row in grid]
