"""Event system connecting host widgets to the selection controller.

Example:
    ```python
    from autoselect.domain.events import EventBus, EntryAppended

    bus = EventBus()
    bus.subscribe(EntryAppended, lambda event: print(event.count))
    bus.publish(EntryAppended(index=0, count=1))
    ```
"""

from .bus import EventBus
from .types import EntryAppended, Event, KeyPressed

__all__ = [
    "EventBus",
    "Event",
    "EntryAppended",
    "KeyPressed",
]
