from __future__ import annotations

from typing import Any

from panelkit.components.progress import ProgressState, StageId
from panelkit.constants import HOURS_MAX, MINUTES_MAX, SECONDS_MAX


def coerce_time_field(value: Any, upper: int) -> int:
    """Read a form value as an integer clamped to [0, upper].

    Non-numeric input counts as 0, the way an empty number field does.
    """
    if isinstance(value, bool):
        value = int(value)
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        try:
            number = int(float(str(value).strip()))
        except (TypeError, ValueError, OverflowError):
            number = 0
    return max(0, min(upper, number))


_FALSE_WORDS = {"", "0", "false", "no", "off"}


def coerce_flag(value: Any) -> bool:
    """Read a checkbox value; form strings such as "false" or "off" are False."""
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_WORDS
    return bool(value)


def build_progress_state(
    stage: StageId | str,
    hours: Any = 0,
    minutes: Any = 0,
    seconds: Any = 0,
    back_side: Any = False,
) -> ProgressState:
    """Clamp raw form values into a ProgressState the codec accepts."""
    stage_id = stage if isinstance(stage, StageId) else StageId.parse(stage)
    return ProgressState(
        stage=stage_id,
        hours=coerce_time_field(hours, HOURS_MAX),
        minutes=coerce_time_field(minutes, MINUTES_MAX),
        seconds=coerce_time_field(seconds, SECONDS_MAX),
        back_side=coerce_flag(back_side),
    )
