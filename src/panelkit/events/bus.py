from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# PUZZLE EDITOR
# ============================================================================
EVENT_PANEL_TYPE_SELECTED = "panel_type_selected"  # payload: panel_type=PanelType
EVENT_CELL_CLICK = "cell_click"                    # payload: row, col
EVENT_GRID_CLEAR_REQUEST = "grid_clear_request"    # payload: none
EVENT_GRAVITY_REQUEST = "gravity_request"          # payload: none
EVENT_UNDO_REQUEST = "undo_request"                # payload: none
EVENT_GRID_CHANGED = "grid_changed"                # payload: reason=str, grid=Grid
EVENT_EDITOR_CLOSED = "editor_closed"              # payload: none


# ============================================================================
# ANALYSIS
# ============================================================================
EVENT_ANALYSIS_REQUEST = "analysis_request"        # payload: none
EVENT_ANALYSIS_STARTED = "analysis_started"        # payload: delay=float
EVENT_ANALYSIS_CANCELLED = "analysis_cancelled"    # payload: reason=str
EVENT_ANALYSIS_COMPLETE = "analysis_complete"      # payload: matches=list[Match], report=str


# ============================================================================
# CONTINUE PASSWORD
# ============================================================================
EVENT_PROGRESS_CHANGED = "progress_changed"        # payload: any of stage, hours, minutes, seconds, back_side
EVENT_PASSWORD_GENERATED = "password_generated"    # payload: password=str, state=ProgressState
