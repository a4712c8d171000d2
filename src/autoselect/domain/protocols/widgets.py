"""Protocols for the host widgets a SelectionController drives.

Events (entry appended, key pressed) are not part of these protocols: the
host publishes them on the field's EventBus.
"""

from typing import Protocol

from autoselect.domain.types import Key, SearchStatus

__all__ = ["TextField", "SuggestionList", "SearchController"]


class TextField(Protocol):
    """The single-line text field the user types into."""

    value: str
    selection_start: int
    selection_end: int

    def commit_current_text(self) -> None:
        """Commit the raw field value, bypassing the suggestion list."""
        ...


class SuggestionList(Protocol):
    """The asynchronously populated list shown beneath the field."""

    selected_index: int

    @property
    def count(self) -> int: ...

    @property
    def is_open(self) -> bool: ...


class SearchController(Protocol):
    """The host's search driver for the field."""

    @property
    def match_count(self) -> int: ...

    @property
    def status(self) -> SearchStatus: ...

    def navigate(self, direction: Key) -> None:
        """Move the list selection as if the user pressed ``direction``."""
        ...

    def commit_selection(self) -> None:
        """Commit whatever the list currently has selected (the host's Enter)."""
        ...
