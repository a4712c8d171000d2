"""Search-related domain types."""

from dataclasses import dataclass
from enum import Enum, IntEnum

__all__ = ["SearchStatus", "Suggestion", "SuggestionKind"]


class SearchStatus(IntEnum):
    """Progress of the asynchronous search feeding the suggestion list.

    Values are ordered: anything ``<= SEARCHING`` means results may still
    arrive.
    """

    NONE = 1
    SEARCHING = 2
    COMPLETE_NO_MATCH = 3
    COMPLETE_MATCH = 4

    @property
    def in_progress(self) -> bool:
        return self <= SearchStatus.SEARCHING


class SuggestionKind(Enum):
    """Origin of a suggestion entry."""

    DEFAULT = "default"
    HISTORY = "history"


@dataclass(frozen=True)
class Suggestion:
    """A single entry of the suggestion list.

    ``value`` is what ends up in the field when the entry is selected,
    ``label`` is what the list displays.
    """

    value: str
    label: str
    kind: SuggestionKind = SuggestionKind.HISTORY
