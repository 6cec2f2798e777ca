from panelkit.components.match import Match, MatchAxis
from panelkit.components.panel import PanelType
from panelkit.engine.grid import apply_gravity, clear_grid, grid_from_rows, scan_matches


def test_empty_grid_has_no_matches():
    assert scan_matches(clear_grid()) == []


def test_full_row_is_single_match():
    grid = grid_from_rows(["......"] * 11 + ["RRRRRR"])
    assert scan_matches(grid) == [
        Match(axis=MatchAxis.ROW, color=PanelType.RED, fixed_index=11, start_index=0, length=6)
    ]


def test_threshold_is_inclusive():
    grid = grid_from_rows(["GGG...", "YY...."])
    matches = scan_matches(grid)
    assert len(matches) == 1
    assert matches[0].length == 3
    assert matches[0].color is PanelType.GREEN


def test_run_at_row_end_is_flushed():
    grid = grid_from_rows(["RG.BBB"])
    assert scan_matches(grid) == [
        Match(axis=MatchAxis.ROW, color=PanelType.BLUE, fixed_index=0, start_index=3, length=3)
    ]


def test_two_runs_in_one_row():
    grid = grid_from_rows(["RRRBBB"])
    matches = scan_matches(grid)
    assert [(m.color, m.start_index, m.length) for m in matches] == [
        (PanelType.RED, 0, 3),
        (PanelType.BLUE, 3, 3),
    ]


def test_empty_cells_break_runs():
    grid = grid_from_rows(["RR.RR."])
    assert scan_matches(grid) == []


def test_column_match_reaching_bottom():
    grid = grid_from_rows(["......"] * 9 + [".P....", ".P....", ".P...."])
    assert scan_matches(grid) == [
        Match(axis=MatchAxis.COLUMN, color=PanelType.PURPLE, fixed_index=1, start_index=9, length=3)
    ]


def test_cross_cluster_reported_on_both_axes():
    grid = grid_from_rows([
        "......",
        "..Y...",
        ".YYY..",
        "..Y...",
    ])
    matches = scan_matches(grid)
    assert matches == [
        Match(axis=MatchAxis.ROW, color=PanelType.YELLOW, fixed_index=2, start_index=1, length=3),
        Match(axis=MatchAxis.COLUMN, color=PanelType.YELLOW, fixed_index=2, start_index=1, length=3),
    ]
    shared = set(matches[0].positions()) & set(matches[1].positions())
    assert shared == {(2, 2)}


def test_l_shape_reported_on_both_axes():
    grid = grid_from_rows(["......"] * 9 + ["K.....", "K.....", "KKKK.."])
    matches = scan_matches(grid)
    assert [(m.axis, m.fixed_index, m.start_index, m.length) for m in matches] == [
        (MatchAxis.ROW, 11, 0, 4),
        (MatchAxis.COLUMN, 0, 9, 3),
    ]


def test_rows_are_reported_before_columns_in_scan_order():
    grid = grid_from_rows([
        "BBB..R",
        ".....R",
        "GGG..R",
    ])
    matches = scan_matches(grid)
    assert [(m.axis, m.fixed_index) for m in matches] == [
        (MatchAxis.ROW, 0),
        (MatchAxis.ROW, 2),
        (MatchAxis.COLUMN, 5),
    ]


def test_scan_does_not_clear_or_move_panels():
    grid = apply_gravity(grid_from_rows(["RRR..."]))
    before = grid
    scan_matches(grid)
    assert grid == before


def test_match_positions_and_end_index():
    match = Match(axis=MatchAxis.COLUMN, color=PanelType.RED, fixed_index=4, start_index=2, length=3)
    assert match.end_index == 4
    assert match.positions() == [(2, 4), (3, 4), (4, 4)]


def test_custom_minimum_length():
    grid = grid_from_rows(["RRR...", "GGGG.."])
    matches = scan_matches(grid, min_length=4)
    assert [(m.color, m.length) for m in matches] == [(PanelType.GREEN, 4)]
