"""Shared domain types."""

from autoselect.domain.types.keys import HORIZONTAL_KEYS, VERTICAL_KEYS, Key, Modifiers
from autoselect.domain.types.keywords import KeywordState, SearchEngine, ShortcutRecord
from autoselect.domain.types.search import SearchStatus, Suggestion, SuggestionKind
from autoselect.domain.types.selection import (
    NO_SELECTION,
    ControllerPhase,
    ControllerState,
    SelectionSnapshot,
)

__all__ = [
    "Key",
    "Modifiers",
    "HORIZONTAL_KEYS",
    "VERTICAL_KEYS",
    "KeywordState",
    "SearchEngine",
    "ShortcutRecord",
    "SearchStatus",
    "Suggestion",
    "SuggestionKind",
    "NO_SELECTION",
    "ControllerPhase",
    "ControllerState",
    "SelectionSnapshot",
]
