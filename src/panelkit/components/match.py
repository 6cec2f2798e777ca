from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from panelkit.components.panel import PanelType

Position = Tuple[int, int]


class MatchAxis(Enum):
    ROW = "row"
    COLUMN = "column"


@dataclass(frozen=True, slots=True)
class Match:
    """A run of identical panels found by the match scan.

    ``fixed_index`` is the row number for row matches and the column number
    for column matches; ``start_index`` runs along the other axis.
    """

    axis: MatchAxis
    color: PanelType
    fixed_index: int
    start_index: int
    length: int

    @property
    def end_index(self) -> int:
        """Last covered index along the scan axis (inclusive)."""
        return self.start_index + self.length - 1

    def positions(self) -> List[Position]:
        if self.axis is MatchAxis.ROW:
            return [(self.fixed_index, col) for col in range(self.start_index, self.start_index + self.length)]
        return [(row, self.fixed_index) for row in range(self.start_index, self.start_index + self.length)]
