"""Success-or-failure outcome passed to operation callbacks."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Completed operation and its value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    def unpack(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """Failed operation and the error that ended it."""

    error: BaseException

    @property
    def is_success(self) -> bool:
        return False

    def unpack(self) -> Any:
        """Raise the stored error."""
        raise self.error


Result = Success[T] | Failure


def task_result(task: asyncio.Task[T]) -> Result[T]:
    """Convert a finished task into a Result."""
    if task.cancelled():
        return Failure(asyncio.CancelledError())
    error = task.exception()
    if error is not None:
        return Failure(error)
    return Success(task.result())


def dispatch(
    awaitable: Awaitable[T],
    callback: Callable[[Result[T]], None],
) -> asyncio.Task[T]:
    """Run an operation on the running loop and report it once.

    The callback receives exactly one Result when the task finishes, is
    cancelled, or fails. Must be called from within a running event loop.

    Returns:
        The scheduled task.

    """
    task = asyncio.ensure_future(awaitable)

    def _on_done(done: asyncio.Task[T]) -> None:
        result = task_result(done)
        if isinstance(result, Failure):
            _LOGGER.debug("Operation failed: %r", result.error)
        callback(result)

    task.add_done_callback(_on_done)
    return task
