from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from panelkit.components.match import Match
from panelkit.components.panel import PanelType
from panelkit.engine.grid import Grid


@dataclass(slots=True)
class PuzzleEditor:
    """Singleton component with the puzzle editor's grid and selection.

    The grid itself is an immutable value; every edit replaces it and pushes
    the previous value onto ``history``.
    """

    grid: Grid
    selected: PanelType = PanelType.RED
    history: List[Grid] = field(default_factory=list)
    matches: Tuple[Match, ...] = ()
    report: str = ""
    analyzing: bool = False


@dataclass(slots=True)
class PendingAnalysis:
    """Deferred match scan waiting out the analyzing delay."""

    grid: Grid
    remaining: float
