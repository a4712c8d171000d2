"""Event types published on a field's EventBus."""

from dataclasses import dataclass, field

from autoselect.domain.types import Key, Modifiers

__all__ = ["Event", "EntryAppended", "KeyPressed"]


class Event:
    """Base class for all events."""


@dataclass
class EntryAppended(Event):
    """The suggestion list appended an entry (published after the append).

    Attributes:
        index: Position of the new entry
        count: Entry count after the append
    """

    index: int
    count: int


@dataclass
class KeyPressed(Event):
    """A key was pressed in the text field, before the host handles it.

    Handlers call ``prevent_default()`` to stop the host's own handling;
    the publisher checks ``default_prevented`` after publishing.
    """

    key: Key
    modifiers: Modifiers = field(default_factory=Modifiers)
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True
