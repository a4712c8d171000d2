"""
SearchSession - the demo host's search driver for the address field.

Every edit restarts a search. A search appends the default "search for"
entry at index 0 together with the first history match, then the remaining
matches one by one, so results keep arriving while the user acts.
"""

import asyncio
from typing import Callable, Sequence

from autoselect.domain.protocols import TextField
from autoselect.domain.types import NO_SELECTION, Key, SearchStatus, Suggestion, SuggestionKind
from autoselect.logger import get_logger
from autoselect.presentation.widgets import SuggestionList

logger = get_logger("search_session")

# Rows skipped by page-up/page-down
PAGE_SIZE = 5


class SearchSession:
    """Implements the SearchController protocol on top of a SuggestionList."""

    def __init__(
        self,
        field: TextField,
        suggestions: SuggestionList,
        history: Sequence[Suggestion],
        on_commit: Callable[[str], None],
        delay_ms: float = 40.0,
        max_results: int = 8,
    ):
        """
        Args:
            field: The address field
            suggestions: The list results are appended to
            history: Entries matched against the typed text
            on_commit: Called with the value the user committed
            delay_ms: Delay before the first and between later appended results
            max_results: Maximum number of history matches per search
        """
        self.field = field
        self.suggestions = suggestions
        self.history = list(history)
        self.on_commit = on_commit
        self.delay_ms = delay_ms
        self.max_results = max_results
        self.query = ""
        self._status = SearchStatus.NONE
        self._task: asyncio.Task | None = None

    @property
    def match_count(self) -> int:
        return self.suggestions.count

    @property
    def status(self) -> SearchStatus:
        return self._status

    def start(self, text: str) -> None:
        """Restart the search for ``text``."""
        self.cancel()
        self.suggestions.clear_entries()
        self.query = text

        if not text.strip():
            self._status = SearchStatus.NONE
            self.suggestions.close()
            return

        self._status = SearchStatus.SEARCHING
        self.suggestions.open()
        self._task = asyncio.create_task(self._run(text.strip()))

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    def matches(self, text: str) -> list[Suggestion]:
        needle = text.lower()
        found = [
            entry
            for entry in self.history
            if needle in entry.value.lower() or needle in entry.label.lower()
        ]
        return found[: self.max_results]

    async def _run(self, text: str) -> None:
        try:
            await asyncio.sleep(self.delay_ms / 1000.0)
            default = Suggestion(value=text, label=f"Search for “{text}”", kind=SuggestionKind.DEFAULT)
            self.suggestions.append_entry(default)

            for i, entry in enumerate(self.matches(text)):
                if i:
                    await asyncio.sleep(self.delay_ms / 1000.0)
                self.suggestions.append_entry(entry)

            self._status = (
                SearchStatus.COMPLETE_MATCH if self.suggestions.count else SearchStatus.COMPLETE_NO_MATCH
            )
            logger.debug(f"Search for {text!r} complete with {self.suggestions.count} entries")
        except asyncio.CancelledError:
            logger.debug(f"Search for {text!r} cancelled")
            raise

    def navigate(self, direction: Key) -> None:
        count = self.suggestions.count
        if count == 0:
            return

        index = self.suggestions.selected_index
        if direction in (Key.DOWN, Key.TAB):
            index = index + 1 if index + 1 < count else NO_SELECTION
        elif direction is Key.UP:
            index = count - 1 if index == NO_SELECTION else index - 1
        elif direction is Key.PAGE_DOWN:
            index = min(max(index, 0) + PAGE_SIZE, count - 1)
        elif direction is Key.PAGE_UP:
            index = NO_SELECTION if index <= 0 else max(index - PAGE_SIZE, 0)
        else:
            return

        self.suggestions.selected_index = index
        entry = self.suggestions.selected_entry()
        self.field.value = entry.value if entry is not None else self.query

    def commit_selection(self) -> None:
        entry = self.suggestions.selected_entry()
        self.commit(entry.value if entry is not None else self.field.value)

    def commit(self, value: str) -> None:
        """Finish the search and hand ``value`` to the host."""
        self.cancel()
        self.suggestions.close()
        self._status = SearchStatus.NONE
        self.field.value = value
        logger.info(f"Committed {value!r}")
        self.on_commit(value)
