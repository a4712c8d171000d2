"""
AddressInput - the address field and its TextField adapter.

Navigation keys are published as KeyPressed events on the field's bus
before the field does anything with them. When no handler prevents the
default:
    - horizontal keys fall through to the Input's own caret bindings
    - vertical keys move the selection of the search session
    - Enter commits the search session's current selection
"""

from typing import Callable

from textual import events
from textual.widgets import Input

from autoselect.domain.events import EventBus, KeyPressed
from autoselect.domain.protocols import SearchController
from autoselect.domain.types import HORIZONTAL_KEYS, VERTICAL_KEYS, Key, Modifiers
from autoselect.logger import get_logger

logger = get_logger("address_input")


class AddressInput(Input):
    """Single-line address field publishing its navigation keys."""

    BORDER_TITLE = "Address"

    def __init__(self, bus: EventBus, **kwargs):
        """
        Args:
            bus: The field's event bus
        """
        self.bus = bus
        self.session: SearchController | None = None
        super().__init__(placeholder="Search or enter address", **kwargs)

    def on_key(self, event: events.Key) -> None:
        *modifier_names, name = event.key.split("+")
        key = Key.from_name(name)
        if key is Key.OTHER:
            return

        pressed = KeyPressed(key=key, modifiers=Modifiers.from_names(set(modifier_names)))
        self.bus.publish(pressed)

        if pressed.default_prevented:
            logger.debug(f"Default handling of {event.key!r} prevented")
            event.prevent_default()
            event.stop()
            return

        if key in HORIZONTAL_KEYS or self.session is None:
            return

        if key in VERTICAL_KEYS:
            event.prevent_default()
            event.stop()
            self.session.navigate(key)
        elif key is Key.ENTER and not pressed.modifiers.any:
            event.prevent_default()
            event.stop()
            self.session.commit_selection()


class AddressField:
    """TextField adapter over an AddressInput.

    Values written through the adapter do not post ``Input.Changed``, so
    programmatic updates (navigation, restores) never restart a search. The
    Input only has a caret, so the selection start and end coincide.
    """

    def __init__(self, widget: AddressInput, on_commit: Callable[[str], None] | None = None):
        self.widget = widget
        self.on_commit = on_commit

    @property
    def value(self) -> str:
        return self.widget.value

    @value.setter
    def value(self, value: str) -> None:
        with self.widget.prevent(Input.Changed):
            self.widget.value = value
        self.widget.cursor_position = len(value)

    @property
    def selection_start(self) -> int:
        return self.widget.cursor_position

    @selection_start.setter
    def selection_start(self, offset: int) -> None:
        self.widget.cursor_position = offset

    @property
    def selection_end(self) -> int:
        return self.widget.cursor_position

    def commit_current_text(self) -> None:
        value = self.widget.value
        logger.info(f"Committing typed text {value!r}")
        if self.on_commit is not None:
            self.on_commit(value)
