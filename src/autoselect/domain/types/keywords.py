"""Keyword classification types."""

from dataclasses import dataclass
from enum import Enum

__all__ = ["KeywordState", "ShortcutRecord", "SearchEngine"]


class KeywordState(Enum):
    """Classification of a token in the shared keyword cache."""

    KNOWN = "known"
    NOT_KNOWN = "not_known"
    PENDING = "pending"

    @property
    def resolved(self) -> bool:
        return self is not KeywordState.PENDING


@dataclass(frozen=True)
class SearchEngine:
    """A search engine reachable through an alias (e.g. ``g`` or ``wiki``)."""

    name: str
    alias: str
    url_template: str = ""


@dataclass(frozen=True)
class ShortcutRecord:
    """A stored bookmark keyword."""

    keyword: str
    url: str
