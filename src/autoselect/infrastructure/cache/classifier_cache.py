"""Process-wide keyword classification cache.

One instance is shared by every attached field. Entries only ever move
forward: absent -> PENDING -> KNOWN/NOT_KNOWN. A resolved entry never
changes again and nothing is ever evicted.
"""

from typing import Iterable

from autoselect.domain.types import KeywordState
from autoselect.logger import get_logger

logger = get_logger("classifier_cache")


class ClassifierCache:
    """In-memory token -> KeywordState mapping with write-once resolution.

    Example:
        >>> cache = ClassifierCache()
        >>> cache.mark_pending("wiki")
        True
        >>> cache.resolve("wiki", known=True)
        True
        >>> cache.resolve("wiki", known=False)
        False
        >>> cache.get("wiki")
        <KeywordState.KNOWN: 'known'>
    """

    def __init__(self) -> None:
        self._data: dict[str, KeywordState] = {}

    def get(self, token: str) -> KeywordState | None:
        """Return the state of ``token``, None if it was never seen."""
        return self._data.get(token)

    def mark_pending(self, token: str) -> bool:
        """Mark ``token`` as having a lookup in flight.

        Returns:
            True if the token was unknown to the cache, False if it is
            already pending or resolved (no new lookup must be issued)
        """
        if token in self._data:
            return False
        self._data[token] = KeywordState.PENDING
        return True

    def resolve(self, token: str, known: bool) -> bool:
        """Record the final classification of ``token``.

        Returns:
            True if the entry was written, False if it was already resolved
        """
        current = self._data.get(token)
        if current is not None and current.resolved:
            return False
        self._data[token] = KeywordState.KNOWN if known else KeywordState.NOT_KNOWN
        return True

    def warm(self, tokens: Iterable[str]) -> int:
        """Resolve every token in ``tokens`` as KNOWN.

        Returns:
            Number of entries written
        """
        written = sum(1 for token in tokens if self.resolve(token, known=True))
        logger.debug(f"Warmed {written} keyword(s) into the cache")
        return written

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, token: object) -> bool:
        return token in self._data
