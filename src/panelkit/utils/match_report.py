from __future__ import annotations

from typing import Sequence

from panelkit.components.match import Match, MatchAxis
from panelkit.components.panel import PANEL_NAMES

NO_MATCH_MESSAGE = "No matching panels found. Place 3 or more panels of the same colour next to each other."


def describe_match(match: Match) -> str:
    """One report line; rows and columns are numbered from 1."""
    name = PANEL_NAMES[match.color]
    start = match.start_index + 1
    end = match.end_index + 1
    if match.axis is MatchAxis.ROW:
        return f"Horizontal {name} panels: row {match.fixed_index + 1}, columns {start}-{end} ({match.length})"
    return f"Vertical {name} panels: column {match.fixed_index + 1}, rows {start}-{end} ({match.length})"


def format_report(matches: Sequence[Match]) -> str:
    if not matches:
        return NO_MATCH_MESSAGE
    lines = "\n".join(describe_match(match) for match in matches)
    return f"Matches found:\n{lines}\n\n{len(matches)} matching group(s) found."
