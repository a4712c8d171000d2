"""In-memory shortcut registry."""

import asyncio
from typing import Mapping, Sequence

from autoselect.domain.types import SearchEngine, ShortcutRecord
from autoselect.logger import get_logger

logger = get_logger("registry.memory")


class InMemoryShortcutRegistry:
    """Shortcut registry backed by plain dictionaries.

    Keyword lookups still go through the event loop (optionally with a
    simulated latency) so callers see the same asynchronous behaviour as
    with a real store.
    """

    def __init__(
        self,
        engines: Sequence[SearchEngine] = (),
        keywords: Mapping[str, str] | None = None,
        latency: float = 0.0,
    ):
        """
        Args:
            engines: Search engines, indexed by their alias
            keywords: Bookmark keyword -> URL
            latency: Seconds each asynchronous lookup takes
        """
        self._engines = {engine.alias: engine for engine in engines}
        self._keywords = dict(keywords or {})
        self.latency = latency
        self.fetch_calls: list[str] = []

    def lookup_alias_sync(self, token: str) -> SearchEngine | None:
        return self._engines.get(token)

    async def fetch_shortcut(self, token: str) -> ShortcutRecord | None:
        self.fetch_calls.append(token)
        await asyncio.sleep(self.latency)
        url = self._keywords.get(token)
        return ShortcutRecord(keyword=token, url=url) if url is not None else None

    async def bulk_list_all_shortcuts(self) -> Sequence[str]:
        await asyncio.sleep(self.latency)
        return list(self._keywords)

    def add_keyword(self, keyword: str, url: str) -> None:
        self._keywords[keyword] = url
        logger.debug(f"Added keyword {keyword!r}")
