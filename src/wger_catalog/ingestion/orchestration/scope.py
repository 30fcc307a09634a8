"""
Lifetime scope for fetches issued by one owner (a view model, a CLI command).

Cancelling the scope stops dispatch of further requests, cancels the tasks it
launched (which aborts their in-flight aiohttp requests) and stops delivery of
results to the owner.
"""

import asyncio
from typing import Any, Awaitable, Callable, TypeVar

T = TypeVar("T")


class FetchScope:
    """Tracks tasks and delivery for a single owner."""

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task] = set()
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def pending(self) -> int:
        """Number of launched tasks not yet finished."""
        return len(self._tasks)

    def launch(self, coro: Awaitable[T]) -> "asyncio.Task[T]":
        """Schedule a coroutine as a task owned by this scope.

        Raises:
            RuntimeError: If the scope was already cancelled
        """
        if self._cancelled:
            if asyncio.iscoroutine(coro):
                coro.close()
            raise RuntimeError("Cannot launch work in a cancelled FetchScope")
        task = asyncio.ensure_future(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def cancel(self) -> None:
        """Cancel the scope and every task it launched. Idempotent."""
        self._cancelled = True
        for task in list(self._tasks):
            task.cancel()

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise asyncio.CancelledError("FetchScope cancelled")

    def deliver(self, callback: Callable[..., Any], *args: Any) -> bool:
        """Invoke callback unless the scope is cancelled.

        Returns:
            True if the callback ran
        """
        if self._cancelled:
            return False
        callback(*args)
        return True

    async def __aenter__(self) -> "FetchScope":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.cancel()
