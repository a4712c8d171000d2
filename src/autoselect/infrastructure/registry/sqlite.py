"""SQLite-backed shortcut registry.

Bookmark keywords live in a ``keywords`` table; search engine aliases are
configured in memory. Blocking sqlite3 calls run in a worker thread so the
event loop never waits on disk.
"""

from __future__ import annotations

import asyncio
import sqlite3
from contextlib import contextmanager
from typing import Iterator, Sequence

from autoselect.domain.errors import ShortcutLookupError
from autoselect.domain.types import SearchEngine, ShortcutRecord
from autoselect.logger import get_logger

logger = get_logger("registry.sqlite")

_SCHEMA = """
CREATE TABLE IF NOT EXISTS keywords (
  id INTEGER PRIMARY KEY,
  keyword TEXT NOT NULL UNIQUE,
  url TEXT NOT NULL
);
"""


class SqliteShortcutRegistry:
    """Shortcut registry reading bookmark keywords from an SQLite file."""

    def __init__(self, db_path: str, engines: Sequence[SearchEngine] = ()) -> None:
        self.db_path = db_path
        self._engines = {engine.alias: engine for engine in engines}
        with self._connect() as conn:
            conn.executescript(_SCHEMA)

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        conn = sqlite3.connect(self.db_path)
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    # ---- Write ----
    def add_keyword(self, keyword: str, url: str) -> None:
        with self._connect() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO keywords(keyword, url) VALUES (?, ?)",
                (keyword, url),
            )
        logger.debug(f"Stored keyword {keyword!r}")

    # ---- Read ----
    def lookup_alias_sync(self, token: str) -> SearchEngine | None:
        return self._engines.get(token)

    async def fetch_shortcut(self, token: str) -> ShortcutRecord | None:
        row = await asyncio.to_thread(self._fetch_row, token)
        if row is None:
            return None
        return ShortcutRecord(keyword=row[0], url=row[1])

    async def bulk_list_all_shortcuts(self) -> Sequence[str]:
        return await asyncio.to_thread(self._fetch_keywords)

    def _fetch_row(self, token: str) -> tuple[str, str] | None:
        try:
            with self._connect() as conn:
                return conn.execute(
                    "SELECT keyword, url FROM keywords WHERE keyword = ?", (token,)
                ).fetchone()
        except sqlite3.Error as e:
            raise ShortcutLookupError(f"Keyword lookup failed for {token!r}: {e}") from e

    def _fetch_keywords(self) -> list[str]:
        try:
            with self._connect() as conn:
                return [row[0] for row in conn.execute("SELECT keyword FROM keywords")]
        except sqlite3.Error as e:
            raise ShortcutLookupError(f"Listing keywords failed: {e}") from e
