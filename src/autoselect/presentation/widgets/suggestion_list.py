"""
SuggestionList - the asynchronously populated list beneath the address field.

The list keeps its own selection index (which may point past the entries
received so far) and mirrors it onto the OptionList highlight whenever the
index is in range. Every append is published as an EntryAppended event on
the field's bus, after the entry is in place.
"""

from textual.widgets import OptionList
from textual.widgets.option_list import Option

from autoselect.domain.events import EntryAppended, EventBus
from autoselect.domain.types import NO_SELECTION, Suggestion
from autoselect.logger import get_logger

logger = get_logger("suggestion_list")


class SuggestionList(OptionList):
    """Suggestion popup implementing the SuggestionList protocol."""

    can_focus = False

    def __init__(self, bus: EventBus, **kwargs):
        super().__init__(**kwargs)
        self.bus = bus
        self._entries: list[Suggestion] = []
        self._selected_index = NO_SELECTION
        self.display = False

    @property
    def count(self) -> int:
        return len(self._entries)

    @property
    def is_open(self) -> bool:
        return bool(self.display)

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @selected_index.setter
    def selected_index(self, index: int) -> None:
        self._selected_index = index
        self._sync_highlight()

    def selected_entry(self) -> Suggestion | None:
        if 0 <= self._selected_index < len(self._entries):
            return self._entries[self._selected_index]
        return None

    def _sync_highlight(self) -> None:
        index = self._selected_index
        self.highlighted = index if 0 <= index < self.option_count else None

    def append_entry(self, suggestion: Suggestion) -> None:
        self._entries.append(suggestion)
        self.add_option(Option(suggestion.label))
        self._sync_highlight()
        self.bus.publish(EntryAppended(index=len(self._entries) - 1, count=len(self._entries)))

    def clear_entries(self) -> None:
        self._entries.clear()
        self._selected_index = NO_SELECTION
        self.clear_options()

    def open(self) -> None:
        self.display = True

    def close(self) -> None:
        self.display = False
