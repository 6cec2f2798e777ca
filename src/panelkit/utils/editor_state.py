from __future__ import annotations

from esper import World

from panelkit.components.editor import PuzzleEditor
from panelkit.components.progress import PasswordForm


def get_editor(world: World) -> PuzzleEditor:
    for _, editor in world.get_component(PuzzleEditor):
        return editor
    raise RuntimeError("PuzzleEditor component not found")


def get_password_form(world: World) -> PasswordForm:
    for _, form in world.get_component(PasswordForm):
        return form
    raise RuntimeError("PasswordForm component not found")
