"""
Single-flight slot for asyncio.

Concurrent callers of the same operation share one task instead of
starting duplicate work. Two lifetimes are supported:

- clear_on_settle=True: the slot empties when the task finishes, so the
  next call after completion starts a fresh operation.
- clear_on_settle=False: the slot is a one-shot latch. The first task is
  kept forever and every later call gets its settled outcome.

Everything runs on one event loop, so no lock is needed: the slot is read
and written only between awaits.
"""

import asyncio
from typing import Awaitable, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class SingleFlight(Generic[T]):
    """Holds at most one in-flight task for an operation."""

    def __init__(self, name: str, clear_on_settle: bool = True):
        self._name = name
        self._clear_on_settle = clear_on_settle
        self._task: Optional[asyncio.Task[T]] = None

    @property
    def task(self) -> Optional[asyncio.Task[T]]:
        """The task currently held by the slot, if any."""
        return self._task

    @property
    def in_flight(self) -> bool:
        return self._task is not None and not self._task.done()

    def run(self, operation: Callable[[], Awaitable[T]]) -> asyncio.Task[T]:
        """
        Return the held task, or start `operation` and hold its task.

        Must be called from a running event loop.
        """
        if self._task is not None and not (self._clear_on_settle and self._task.done()):
            return self._task

        task = asyncio.get_running_loop().create_task(operation(), name=self._name)
        self._task = task
        if self._clear_on_settle:
            # Runs for every outcome, including a task cancelled before it started
            task.add_done_callback(self._release)
        return task

    def _release(self, task: asyncio.Task[T]) -> None:
        if self._task is task:
            self._task = None

    async def cancel(self) -> None:
        """Cancel the held task if it is still running and wait for it to settle."""
        task = self._task
        if task is None or task.done():
            return
        task.cancel()
        await asyncio.wait({task})
