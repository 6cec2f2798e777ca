from __future__ import annotations

from typing import Any, Dict, List, Tuple

from panelkit.events.bus import EVENT_TICK, EventBus
from panelkit.systems.analysis_system import AnalysisSystem
from panelkit.systems.puzzle_editor_system import PuzzleEditorSystem
from panelkit.world import create_world


def drive_ticks(bus: EventBus, count: int = 30, dt: float = 0.02) -> None:
    for _ in range(count):
        bus.emit(EVENT_TICK, dt=dt)


def record(bus: EventBus, name: str) -> List[Dict[str, Any]]:
    """Subscribe to an event and collect every payload it carries."""
    received: List[Dict[str, Any]] = []
    bus.subscribe(name, lambda sender, **payload: received.append(payload))
    return received


def editor_setup(*, delay: float = 0.5) -> Tuple[EventBus, Any]:
    bus = EventBus()
    world = create_world()
    PuzzleEditorSystem(world, bus)
    AnalysisSystem(world, bus, delay=delay)
    return bus, world
