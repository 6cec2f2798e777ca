from __future__ import annotations

import logging

from esper import World

from panelkit.components.editor import PuzzleEditor
from panelkit.components.panel import PanelType
from panelkit.constants import UNDO_DEPTH
from panelkit.engine.grid import Grid, apply_gravity, clear_grid, grid_dimensions, set_cell
from panelkit.events.bus import (
    EVENT_CELL_CLICK,
    EVENT_GRAVITY_REQUEST,
    EVENT_GRID_CHANGED,
    EVENT_GRID_CLEAR_REQUEST,
    EVENT_PANEL_TYPE_SELECTED,
    EVENT_UNDO_REQUEST,
    EventBus,
)
from panelkit.utils.editor_state import get_editor

logger = logging.getLogger(__name__)


def _cell_index(value) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


class PuzzleEditorSystem:
    """Applies editor input to the grid held in the PuzzleEditor component."""

    def __init__(self, world: World, event_bus: EventBus, *, undo_depth: int = UNDO_DEPTH) -> None:
        self.world = world
        self.event_bus = event_bus
        self.undo_depth = max(0, int(undo_depth))
        self.event_bus.subscribe(EVENT_PANEL_TYPE_SELECTED, self._on_panel_type_selected)
        self.event_bus.subscribe(EVENT_CELL_CLICK, self._on_cell_click)
        self.event_bus.subscribe(EVENT_GRID_CLEAR_REQUEST, self._on_clear_request)
        self.event_bus.subscribe(EVENT_GRAVITY_REQUEST, self._on_gravity_request)
        self.event_bus.subscribe(EVENT_UNDO_REQUEST, self._on_undo_request)

    @property
    def editor(self) -> PuzzleEditor:
        return get_editor(self.world)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def _on_panel_type_selected(self, sender, **payload) -> None:
        panel_type = payload.get("panel_type")
        if not isinstance(panel_type, PanelType):
            return
        self.editor.selected = panel_type

    def _on_cell_click(self, sender, **payload) -> None:
        row = payload.get("row")
        col = payload.get("col")
        row = _cell_index(row)
        col = _cell_index(col)
        if row is None or col is None:
            return
        editor = self.editor
        rows, cols = grid_dimensions(editor.grid)
        if not (0 <= row < rows and 0 <= col < cols):
            return
        if editor.grid[row][col] == editor.selected:
            return
        self._replace_grid(set_cell(editor.grid, row, col, editor.selected), reason="place")

    def _on_clear_request(self, sender, **payload) -> None:
        editor = self.editor
        rows, cols = grid_dimensions(editor.grid)
        editor.matches = ()
        editor.report = ""
        self._replace_grid(clear_grid(rows, cols), reason="clear")

    def _on_gravity_request(self, sender, **payload) -> None:
        editor = self.editor
        settled = apply_gravity(editor.grid)
        if settled == editor.grid:
            logger.debug("Gravity left the grid unchanged")
            return
        self._replace_grid(settled, reason="gravity")

    def _on_undo_request(self, sender, **payload) -> None:
        editor = self.editor
        if not editor.history:
            return
        editor.grid = editor.history.pop()
        self.event_bus.emit(EVENT_GRID_CHANGED, reason="undo", grid=editor.grid)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _replace_grid(self, grid: Grid, *, reason: str) -> None:
        editor = self.editor
        if self.undo_depth:
            editor.history.append(editor.grid)
            del editor.history[:-self.undo_depth]
        editor.grid = grid
        logger.debug("Grid changed (%s)", reason)
        self.event_bus.emit(EVENT_GRID_CHANGED, reason=reason, grid=grid)
