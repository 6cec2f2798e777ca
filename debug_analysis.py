import sys, os
ROOT = os.path.dirname(__file__)
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)
import logging
from panelkit.events.bus import EventBus
from panelkit.events.bus import (EVENT_CELL_CLICK, EVENT_TICK, EVENT_GRAVITY_REQUEST, EVENT_PANEL_TYPE_SELECTED,
                                 EVENT_ANALYSIS_REQUEST, EVENT_ANALYSIS_COMPLETE, EVENT_PROGRESS_CHANGED,
                                 EVENT_PASSWORD_GENERATED)
from panelkit.components.panel import PANEL_COLORS, PanelType, palette
from panelkit.engine.grid import grid_to_rows
from panelkit.systems.puzzle_editor_system import PuzzleEditorSystem
from panelkit.systems.analysis_system import AnalysisSystem
from panelkit.systems.password_system import PasswordSystem
from panelkit.utils.editor_state import get_editor
from panelkit.world import create_world

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

def drive(bus, ticks):
    for _ in range(ticks):
        bus.emit(EVENT_TICK, dt=0.02)

bus=EventBus()
world=create_world()
PuzzleEditorSystem(world,bus)
AnalysisSystem(world,bus)
PasswordSystem(world,bus)
bus.subscribe(EVENT_ANALYSIS_COMPLETE, lambda s, **k: print(k['report']))
bus.subscribe(EVENT_PASSWORD_GENERATED, lambda s, **k: print('password', k['state'], k['password']))

for panel in palette():
    print(panel.value, "#%02X%02X%02X" % PANEL_COLORS[panel])

# Floating L of blue panels, then drop it.
bus.emit(EVENT_PANEL_TYPE_SELECTED, panel_type=PanelType.BLUE)
for r, c in [(2,0),(3,0),(4,0),(4,1),(4,2)]:
    bus.emit(EVENT_CELL_CLICK, row=r, col=c)
bus.emit(EVENT_GRAVITY_REQUEST)
print('\n'.join(grid_to_rows(get_editor(world).grid)))
bus.emit(EVENT_ANALYSIS_REQUEST)
drive(bus, 30)

bus.emit(EVENT_PROGRESS_CHANGED, stage='3-4', hours=5, minutes=5, seconds=5)
bus.emit(EVENT_PROGRESS_CHANGED, back_side=True)
