"""Tests for SqliteShortcutRegistry."""

import sqlite3

import pytest

from autoselect.application import KeywordClassifier
from autoselect.domain.errors import ShortcutLookupError
from autoselect.domain.types import KeywordState, SearchEngine, ShortcutRecord
from autoselect.infrastructure.cache import ClassifierCache
from autoselect.infrastructure.registry import SqliteShortcutRegistry


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "shortcuts.db")


@pytest.fixture
def store(db_path):
    store = SqliteShortcutRegistry(db_path, engines=[SearchEngine(name="DuckDuckGo", alias="ddg")])
    store.add_keyword("gh", "https://github.com/search?q=%s")
    store.add_keyword("py", "https://docs.python.org/3/search.html?q=%s")
    return store


def test_alias_lookup_is_synchronous(store):
    assert store.lookup_alias_sync("ddg").name == "DuckDuckGo"
    assert store.lookup_alias_sync("gh") is None


@pytest.mark.asyncio
async def test_fetch_stored_keyword(store):
    record = await store.fetch_shortcut("gh")

    assert record == ShortcutRecord(keyword="gh", url="https://github.com/search?q=%s")


@pytest.mark.asyncio
async def test_fetch_missing_keyword(store):
    assert await store.fetch_shortcut("cats") is None


@pytest.mark.asyncio
async def test_bulk_list(store):
    assert sorted(await store.bulk_list_all_shortcuts()) == ["gh", "py"]


@pytest.mark.asyncio
async def test_keywords_persist_across_instances(store, db_path):
    reopened = SqliteShortcutRegistry(db_path)

    assert await reopened.fetch_shortcut("py") is not None


@pytest.mark.asyncio
async def test_replacing_a_keyword(store):
    store.add_keyword("gh", "https://github.com/%s")

    record = await store.fetch_shortcut("gh")

    assert record.url == "https://github.com/%s"
    assert len(await store.bulk_list_all_shortcuts()) == 2


@pytest.mark.asyncio
async def test_database_errors_are_wrapped(store, db_path):
    with sqlite3.connect(db_path) as conn:
        conn.execute("DROP TABLE keywords")
    conn.close()

    with pytest.raises(ShortcutLookupError):
        await store.fetch_shortcut("gh")
    with pytest.raises(ShortcutLookupError):
        await store.bulk_list_all_shortcuts()


@pytest.mark.asyncio
async def test_classifier_over_sqlite(store):
    keywords = KeywordClassifier(store, ClassifierCache())

    assert await keywords.warm() == 2
    assert keywords.is_known_shortcut("gh") is True
    assert keywords.is_known_shortcut("ddg") is True

    assert keywords.is_known_shortcut("cats") is False
    await keywords.wait_pending()
    assert keywords.cache.get("cats") is KeywordState.NOT_KNOWN
