"""Tests for EventBus."""

import pytest

from autoselect.domain.events import EntryAppended, EventBus, KeyPressed
from autoselect.domain.types import Key, Modifiers


def test_handlers_run_in_subscription_order():
    bus = EventBus()
    calls: list[str] = []

    bus.subscribe(EntryAppended, lambda e: calls.append("host"))
    bus.subscribe(EntryAppended, lambda e: calls.append("controller"))
    bus.publish(EntryAppended(index=0, count=1))

    assert calls == ["host", "controller"]


def test_events_are_routed_by_type():
    bus = EventBus()
    appended: list[EntryAppended] = []

    bus.subscribe(EntryAppended, appended.append)
    bus.publish(KeyPressed(key=Key.DOWN))

    assert appended == []
    assert bus.has_subscribers(EntryAppended)
    assert not bus.has_subscribers(KeyPressed)


def test_async_handler_is_rejected():
    bus = EventBus()

    async def handler(event):
        pass

    with pytest.raises(TypeError, match="synchronous"):
        bus.subscribe(KeyPressed, handler)


def test_duplicate_subscription_is_ignored():
    bus = EventBus()
    calls: list[KeyPressed] = []

    bus.subscribe(KeyPressed, calls.append)
    bus.subscribe(KeyPressed, calls.append)
    bus.publish(KeyPressed(key=Key.ENTER))

    assert len(calls) == 1


def test_failing_handler_does_not_stop_others():
    bus = EventBus()
    calls: list[str] = []

    def explode(event):
        raise RuntimeError("boom")

    bus.subscribe(KeyPressed, explode)
    bus.subscribe(KeyPressed, lambda e: calls.append("ok"))
    bus.publish(KeyPressed(key=Key.ENTER))

    assert calls == ["ok"]


def test_unsubscribe_and_clear():
    bus = EventBus()
    calls: list[KeyPressed] = []

    bus.subscribe(KeyPressed, calls.append)
    bus.unsubscribe(KeyPressed, calls.append)
    # Unknown handlers are a no-op
    bus.unsubscribe(KeyPressed, calls.append)
    bus.unsubscribe(EntryAppended, calls.append)
    bus.publish(KeyPressed(key=Key.ENTER))
    assert calls == []

    bus.subscribe(KeyPressed, calls.append)
    bus.clear()
    assert not bus.has_subscribers(KeyPressed)


def test_prevent_default_is_visible_to_publisher():
    bus = EventBus()
    bus.subscribe(KeyPressed, lambda e: e.prevent_default())

    pressed = KeyPressed(key=Key.ENTER, modifiers=Modifiers())
    bus.publish(pressed)

    assert pressed.default_prevented is True
