from enum import Enum
from typing import Dict, List, Tuple


class PanelType(Enum):
    """Contents of a single grid cell: one of six colours or empty."""
    EMPTY = "empty"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    PURPLE = "purple"
    PINK = "pink"

    @property
    def is_empty(self) -> bool:
        return self is PanelType.EMPTY


# Display colours for the palette and grid cells.
PANEL_COLORS: Dict[PanelType, Tuple[int, int, int]] = {
    PanelType.EMPTY:  (229, 231, 235),  # #E5E7EB
    PanelType.RED:    (239, 68, 68),    # #EF4444
    PanelType.GREEN:  (34, 197, 94),    # #22C55E
    PanelType.BLUE:   (59, 130, 246),   # #3B82F6
    PanelType.YELLOW: (234, 179, 8),    # #EAB308
    PanelType.PURPLE: (168, 85, 247),   # #A855F7
    PanelType.PINK:   (236, 72, 153),   # #EC4899
}

PANEL_NAMES: Dict[PanelType, str] = {
    PanelType.EMPTY: "empty",
    PanelType.RED: "red",
    PanelType.GREEN: "green",
    PanelType.BLUE: "blue",
    PanelType.YELLOW: "yellow",
    PanelType.PURPLE: "purple",
    PanelType.PINK: "pink",
}


def palette() -> List[PanelType]:
    """Panel types in the order the palette shows them."""
    return list(PanelType)


def color_panels() -> List[PanelType]:
    return [panel for panel in PanelType if not panel.is_empty]
