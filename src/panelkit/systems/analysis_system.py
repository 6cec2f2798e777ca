from __future__ import annotations

import logging
from typing import List

from esper import World

from panelkit.components.editor import PendingAnalysis
from panelkit.constants import ANALYSIS_DELAY
from panelkit.engine.grid import Grid, scan_matches
from panelkit.events.bus import (
    EVENT_ANALYSIS_CANCELLED,
    EVENT_ANALYSIS_COMPLETE,
    EVENT_ANALYSIS_REQUEST,
    EVENT_ANALYSIS_STARTED,
    EVENT_EDITOR_CLOSED,
    EVENT_GRID_CLEAR_REQUEST,
    EVENT_TICK,
    EventBus,
)
from panelkit.utils.editor_state import get_editor
from panelkit.utils.match_report import format_report

logger = logging.getLogger(__name__)


class AnalysisSystem:
    """Runs the match scan after a short "analyzing" pause.

    The grid is captured when the request arrives; the pause only delays
    delivery. Pending work is dropped on clear or when the editor closes so a
    stale result is never written back.
    """

    def __init__(self, world: World, event_bus: EventBus, *, delay: float = ANALYSIS_DELAY) -> None:
        self.world = world
        self.event_bus = event_bus
        self.delay = max(0.0, float(delay))
        self.event_bus.subscribe(EVENT_ANALYSIS_REQUEST, self._on_analysis_request)
        self.event_bus.subscribe(EVENT_TICK, self._on_tick)
        self.event_bus.subscribe(EVENT_GRID_CLEAR_REQUEST, self._on_grid_clear)
        self.event_bus.subscribe(EVENT_EDITOR_CLOSED, self._on_editor_closed)

    def pending(self) -> List[int]:
        return [entity for entity, _ in self.world.get_component(PendingAnalysis)]

    def _on_analysis_request(self, sender, **payload) -> None:
        editor = get_editor(self.world)
        if editor.analyzing or self.pending():
            logger.debug("Analysis already pending; request ignored")
            return
        editor.analyzing = True
        self.event_bus.emit(EVENT_ANALYSIS_STARTED, delay=self.delay)
        if self.delay <= 0.0:
            self._complete(editor.grid)
            return
        self.world.create_entity(PendingAnalysis(grid=editor.grid, remaining=self.delay))

    def _on_tick(self, sender, **payload) -> None:
        dt = payload.get("dt", 1 / 60)
        for entity, pending in list(self.world.get_component(PendingAnalysis)):
            pending.remaining -= dt
            if pending.remaining > 0.0:
                continue
            self.world.delete_entity(entity, immediate=True)
            self._complete(pending.grid)

    def _on_grid_clear(self, sender, **payload) -> None:
        self._cancel("clear")

    def _on_editor_closed(self, sender, **payload) -> None:
        self._cancel("closed")

    def _cancel(self, reason: str) -> None:
        entities = self.pending()
        if not entities:
            return
        for entity in entities:
            self.world.delete_entity(entity, immediate=True)
        get_editor(self.world).analyzing = False
        logger.info("Analysis cancelled (%s)", reason)
        self.event_bus.emit(EVENT_ANALYSIS_CANCELLED, reason=reason)

    def _complete(self, grid: Grid) -> None:
        matches = scan_matches(grid)
        report = format_report(matches)
        editor = get_editor(self.world)
        editor.matches = tuple(matches)
        editor.report = report
        editor.analyzing = False
        logger.debug("Analysis found %d match(es)", len(matches))
        self.event_bus.emit(EVENT_ANALYSIS_COMPLETE, matches=matches, report=report)
