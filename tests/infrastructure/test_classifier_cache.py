"""Tests for ClassifierCache."""

from autoselect.domain.types import KeywordState
from autoselect.infrastructure.cache import ClassifierCache


def test_unseen_token_has_no_state():
    cache = ClassifierCache()

    assert cache.get("weather") is None
    assert "weather" not in cache


def test_mark_pending_only_once():
    cache = ClassifierCache()

    assert cache.mark_pending("weather") is True
    assert cache.mark_pending("weather") is False
    assert cache.get("weather") is KeywordState.PENDING


def test_resolution_is_write_once():
    cache = ClassifierCache()
    cache.mark_pending("weather")

    assert cache.resolve("weather", known=False) is True
    assert cache.resolve("weather", known=True) is False
    assert cache.get("weather") is KeywordState.NOT_KNOWN
    assert cache.mark_pending("weather") is False


def test_warm_skips_resolved_entries():
    cache = ClassifierCache()
    cache.resolve("cats", known=False)
    cache.mark_pending("weather")

    written = cache.warm(["cats", "weather", "gh"])

    assert written == 2
    assert cache.get("cats") is KeywordState.NOT_KNOWN
    assert cache.get("weather") is KeywordState.KNOWN
    assert cache.get("gh") is KeywordState.KNOWN
    assert len(cache) == 3
