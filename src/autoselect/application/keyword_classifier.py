"""
KeywordClassifier - answers "is this token a known shortcut?" without blocking.

Answers come from the shared ClassifierCache. A token the cache has never
seen is checked against the registry's synchronous search engine aliases;
failing that, a stored-keyword lookup is started in the background and the
call returns False right away (optimistic miss). The next call for the same
token gets the right answer once the lookup has resolved.
"""

from __future__ import annotations

import asyncio

from autoselect.domain.protocols import ShortcutRegistry
from autoselect.domain.types import KeywordState
from autoselect.infrastructure.cache import ClassifierCache
from autoselect.logger import get_logger

logger = get_logger("keyword_classifier")


class KeywordClassifier:
    """Best-effort synchronous shortcut classification."""

    def __init__(self, registry: ShortcutRegistry, cache: ClassifierCache):
        """
        Args:
            registry: Keyword/alias storage backend
            cache: Process-wide cache shared by every field
        """
        self.registry = registry
        self.cache = cache
        self._lookups: set[asyncio.Task] = set()

    def is_known_shortcut(self, token: str) -> bool:
        state = self.cache.get(token)
        if state is not None:
            # PENDING reads as "not known" until the lookup resolves
            return state is KeywordState.KNOWN

        if self.registry.lookup_alias_sync(token) is not None:
            self.cache.resolve(token, known=True)
            return True

        self._start_lookup(token)
        return False

    def _start_lookup(self, token: str) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning(f"No running event loop, cannot look up keyword {token!r}")
            return

        self.cache.mark_pending(token)
        task = loop.create_task(self._lookup(token))
        self._lookups.add(task)
        task.add_done_callback(self._lookups.discard)
        logger.debug(f"Started keyword lookup for {token!r}")

    async def _lookup(self, token: str) -> None:
        try:
            record = await self.registry.fetch_shortcut(token)
        except Exception as e:
            # Absence of evidence keeps the bias toward showing suggestions
            logger.warning(f"Keyword lookup for {token!r} failed, treating as unknown: {e}")
            record = None
        self.cache.resolve(token, known=record is not None)
        logger.debug(f"Keyword {token!r} resolved (known={record is not None})")

    async def warm(self) -> int:
        """Bulk-load every stored keyword into the cache as KNOWN.

        Returns:
            Number of cache entries written (0 if the backend failed)
        """
        try:
            tokens = await self.registry.bulk_list_all_shortcuts()
        except Exception as e:
            logger.error(f"Keyword cache warm-up failed: {e}")
            return 0
        written = self.cache.warm(tokens)
        logger.info(f"Keyword cache warmed with {written} keyword(s)")
        return written

    async def wait_pending(self) -> None:
        """Wait until every in-flight lookup has resolved."""
        while self._lookups:
            await asyncio.gather(*list(self._lookups), return_exceptions=True)

    @property
    def pending_lookups(self) -> int:
        return len(self._lookups)
