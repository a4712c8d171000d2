"""
DeferredScheduler - cancellable one-shot callbacks on the running event loop.

This is the only concurrency primitive the selection controller uses:
"waiting" always means scheduling a callback and returning immediately.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Hashable

from autoselect.logger import get_logger

logger = get_logger("scheduler")


class DeferredTask:
    """Handle for a scheduled callback.

    A task fires at most once. Cancelling it before it fires guarantees the
    callback never runs.
    """

    def __init__(
        self,
        callback: Callable[[], None],
        delay_ms: float | None = None,
        key: Hashable | None = None,
    ):
        self.callback = callback
        self.delay_ms = delay_ms
        self.key = key
        self.cancelled = False
        self.fired = False
        self._handle: asyncio.Handle | None = None

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        if not self.pending:
            return
        self.cancelled = True
        if self._handle is not None:
            self._handle.cancel()

    def run(self) -> None:
        """Invoke the callback unless the task was cancelled or already fired.

        Exceptions raised by the callback are logged, never propagated.
        """
        if not self.pending:
            return
        self.fired = True
        try:
            self.callback()
        except Exception:
            name = getattr(self.callback, "__name__", repr(self.callback))
            logger.exception(f"Deferred callback {name} failed")


class DeferredScheduler:
    """
    Schedules deferred callbacks on the running asyncio loop.

    ``schedule(callback)`` runs the callback on the next loop turn, i.e.
    after the current event's handling has completed. ``schedule(callback,
    delay_ms)`` runs it after ``delay_ms`` milliseconds.

    Passing a ``key`` makes the task replace any still-pending task
    registered under the same key, which is cancelled first.
    """

    def __init__(self) -> None:
        self._keyed: dict[Hashable, DeferredTask] = {}
        self._tasks: set[DeferredTask] = set()

    def schedule(
        self,
        callback: Callable[[], None],
        delay_ms: float | None = None,
        *,
        key: Hashable | None = None,
    ) -> DeferredTask:
        """
        Schedule ``callback``.

        Args:
            callback: Zero-argument callable
            delay_ms: Delay in milliseconds; None means the next loop turn
            key: Optional logical purpose; a pending task with the same key
                 is cancelled first

        Returns:
            DeferredTask handle that can be cancelled
        """
        task = DeferredTask(callback, delay_ms, key)
        # Raises without a running loop; nothing is registered in that case
        self._arm(task)

        if key is not None:
            previous = self._keyed.pop(key, None)
            if previous is not None and previous.pending:
                previous.cancel()
                logger.debug(f"Cancelled pending deferred task for {key!r}")

        # Drop tasks cancelled through their handle
        self._tasks = {pending for pending in self._tasks if pending.pending}

        self._tasks.add(task)
        if key is not None:
            self._keyed[key] = task
        return task

    def _arm(self, task: DeferredTask) -> None:
        loop = asyncio.get_running_loop()
        if task.delay_ms is None:
            task._handle = loop.call_soon(self._fire, task)
        else:
            task._handle = loop.call_later(max(task.delay_ms, 0.0) / 1000.0, self._fire, task)

    def _fire(self, task: DeferredTask) -> None:
        self._forget(task)
        task.run()

    def _forget(self, task: DeferredTask) -> None:
        self._tasks.discard(task)
        if task.key is not None and self._keyed.get(task.key) is task:
            del self._keyed[task.key]

    @property
    def pending_count(self) -> int:
        return sum(1 for task in self._tasks if task.pending)

    def cancel_all(self) -> None:
        """Cancel every pending task."""
        for task in list(self._tasks):
            task.cancel()
        self._tasks.clear()
        self._keyed.clear()
