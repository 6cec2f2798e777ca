from __future__ import annotations

import logging

from esper import World

from panelkit.codec.password import PasswordCodec, get_scheme
from panelkit.components.progress import PasswordForm
from panelkit.events.bus import EVENT_PASSWORD_GENERATED, EVENT_PROGRESS_CHANGED, EventBus
from panelkit.utils.editor_state import get_password_form
from panelkit.utils.progress_input import build_progress_state

logger = logging.getLogger(__name__)


class PasswordSystem:
    """Keeps the password form's output in step with its inputs.

    Any ``EVENT_PROGRESS_CHANGED`` carries one or more of ``stage``,
    ``hours``, ``minutes``, ``seconds`` and ``back_side``; fields that are
    absent keep their current value.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        form = get_password_form(world)
        self.codec = PasswordCodec(get_scheme(form.scheme_name))
        self.event_bus.subscribe(EVENT_PROGRESS_CHANGED, self._on_progress_changed)

    @property
    def form(self) -> PasswordForm:
        return get_password_form(self.world)

    def _on_progress_changed(self, sender, **payload) -> None:
        form = self.form
        current = form.state
        try:
            state = build_progress_state(
                payload.get("stage", current.stage),
                payload.get("hours", current.hours),
                payload.get("minutes", current.minutes),
                payload.get("seconds", current.seconds),
                payload.get("back_side", current.back_side),
            )
        except ValueError:
            logger.warning("Ignoring progress update with bad stage %r", payload.get("stage"))
            return
        form.state = state
        form.password = self.codec.generate(state)
        logger.debug("Password for %s %d:%02d:%02d back=%s -> %s",
                     state.stage, state.hours, state.minutes, state.seconds,
                     state.back_side, form.password)
        self.event_bus.emit(EVENT_PASSWORD_GENERATED, password=form.password, state=state)
