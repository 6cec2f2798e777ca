from esper import World

from panelkit.codec.password import PasswordCodec, get_scheme
from panelkit.components.editor import PuzzleEditor
from panelkit.components.panel import PanelType
from panelkit.components.progress import PasswordForm
from panelkit.constants import DEFAULT_STAGE, GRID_COLS, GRID_ROWS
from panelkit.engine.grid import clear_grid
from panelkit.utils.progress_input import build_progress_state


def create_world(
    *,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
    scheme_name: str = "world-level",
    selected: PanelType = PanelType.RED,
) -> World:
    """Create the world holding the editor grid and the password form."""
    world = World()

    world.create_entity(PuzzleEditor(grid=clear_grid(rows, cols), selected=selected))

    # Password screen starts at the first stage, zero time, front side.
    state = build_progress_state(DEFAULT_STAGE)
    codec = PasswordCodec(get_scheme(scheme_name))
    world.create_entity(
        PasswordForm(scheme_name=scheme_name, state=state, password=codec.generate(state))
    )
    return world
