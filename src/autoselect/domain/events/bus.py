"""Event bus implementation for decoupled event-driven communication.

Each text field owns one EventBus. The host widgets publish events on it
(an entry was appended to the suggestion list, a key was pressed in the
field) and the SelectionController subscribes to them. Subscribing after
the host means the controller's handler always observes the host's own
work already done.

Event Handler Contract:
    Event handlers MUST be synchronous (non-async) functions. This is enforced
    at subscription time. A handler runs to completion before the next event
    is processed; handlers that need to wait schedule a deferred callback
    instead of blocking.
"""

import inspect
from typing import Callable, Type, TypeVar

from autoselect.logger import get_logger

from .types import Event

logger = get_logger("events.bus")

T = TypeVar("T", bound=Event)

# Type alias for event handlers - must be synchronous
EventHandler = Callable[[Event], None]


class EventBus:
    """Event bus for publishing and subscribing to events.

    Example:
        ```python
        bus = EventBus()

        def on_key(event: KeyPressed):
            if event.key is Key.ENTER:
                event.prevent_default()

        bus.subscribe(KeyPressed, on_key)

        pressed = KeyPressed(key=Key.ENTER)
        bus.publish(pressed)
        assert pressed.default_prevented
        ```

    Thread safety:
        This implementation is NOT thread-safe. It assumes all operations
        happen within the same event loop.
    """

    def __init__(self):
        self._handlers: dict[Type[Event], list[Callable[[Event], None]]] = {}
        """Registry of event handlers by event type."""

    def subscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """
        Subscribe to events of a specific type.

        Args:
            event_type: The type of event to subscribe to (e.g., KeyPressed)
            handler: Callback invoked with the event instance. MUST be synchronous.

        Raises:
            TypeError: If handler is an async function (coroutine function)
        """
        if inspect.iscoroutinefunction(handler):
            raise TypeError(
                f"Event handlers must be synchronous functions. "
                f"Handler {handler.__name__} is an async function (coroutine function). "
                f"Schedule deferred work from a synchronous handler instead."
            )

        handlers = self._handlers.setdefault(event_type, [])

        # Avoid duplicate subscriptions of the same handler
        if handler not in handlers:
            handlers.append(handler)
            logger.debug(f"Subscribed handler for {event_type.__name__}")
        else:
            logger.debug(f"Handler already subscribed for {event_type.__name__}, skipping")

    def unsubscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """
        Unsubscribe a handler from events of a specific type.

        If the handler was not subscribed, this is a no-op.
        """
        if event_type in self._handlers:
            try:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Unsubscribed handler for {event_type.__name__}")
            except ValueError:
                logger.debug(f"Handler not found in subscriptions for {event_type.__name__}")

    def publish(self, event: Event) -> None:
        """
        Publish an event to all subscribed handlers.

        Execution Model:
            Handlers are called synchronously in the order they were subscribed.
            This method returns once all handlers have completed.

        Error Handling:
            If a handler raises an exception, it is logged and does not prevent
            other handlers from being called. Nothing propagates to the publisher.
        """
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            return

        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(f"Error in event handler for {event_type.__name__}")

    def clear(self) -> None:
        """Clear all event subscriptions."""
        self._handlers.clear()
        logger.debug("Event bus cleared")

    def has_subscribers(self, event_type: Type[Event]) -> bool:
        """Check if there are any subscribers for a specific event type."""
        return bool(self._handlers.get(event_type))
