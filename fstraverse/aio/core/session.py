"""Traversal sessions.

A TraversalSession is a wait-group over a set of storage operations that
keeps growing while the walk runs: nobody knows how many operations a
tree needs until the last directory has been listed. The session counts
every operation from the moment it is dispatched until its result has
been handed to its callback, and completes the moment that count drops
back to zero.

Filter and read sessions sit on top of one TraversalSession. They keep
their own accumulated results but share its counter and its first error.
"""

import asyncio
import functools
import logging
from typing import Any, Awaitable, Callable, List, Optional, Set

from ..._common.entry import EntryMetadata, ReadEntry

logger = logging.getLogger(__name__)

ResultCallback = Callable[[Optional[BaseException], Any], Any]


class BaseSession:
    """Accumulated entries plus a terminal state that can be awaited.

    ``await session`` (or ``await session.wait()``) returns a copy of the
    accumulated entries once the session has completed, or raises the
    error it completed with.
    """

    def __init__(self):
        self.entries: List[Any] = []
        self.error: Optional[BaseException] = None
        self._finished = asyncio.Event()

    @property
    def completed(self) -> bool:
        """True once the completion handler has been invoked."""
        return self._finished.is_set()

    @property
    def paths(self) -> List[str]:
        return [entry.path for entry in self.entries]

    @property
    def metadata(self) -> List[EntryMetadata]:
        return [entry.metadata for entry in self.entries]

    def record(self, entry: Any):
        """Append an entry to the accumulated results."""
        self.entries.append(entry)

    def fail(self, error: BaseException):
        """Remember ``error`` unless an earlier one was already recorded."""
        if self.error is None:
            self.error = error

    def settle(self, error: Optional[BaseException] = None):
        """Mark the session complete, optionally with an error."""
        if error is not None:
            self.fail(error)
        self._finished.set()

    async def wait(self) -> List[Any]:
        """Wait for completion.

        Returns:
            Accumulated entries

        Raises:
            The first error observed by the session
        """
        await self._finished.wait()
        if self.error is not None:
            raise self.error
        return list(self.entries)

    def __await__(self):
        return self.wait().__await__()


class TraversalSession(BaseSession):
    """Outstanding-work counter, visited entries and completion state.

    Must be created while an event loop is running. All mutation happens
    in task done-callbacks, which asyncio runs one at a time on the loop
    thread, so the counter needs no lock.

    Attributes:
        pending: Operations dispatched whose result callbacks have not run yet
        entries: Entry objects in the order their probes completed
    """

    def __init__(self):
        self._loop = asyncio.get_running_loop()
        super().__init__()
        self.pending = 0
        self._tasks: Set[asyncio.Task] = set()
        self._on_complete: Optional[Callable[[Optional[BaseException]], Any]] = None

    def begin(self, on_complete: Callable[[Optional[BaseException]], Any]):
        """Bind the completion callback of the traversal driving this session.

        Raises:
            RuntimeError: If a traversal was already bound
        """
        if self._on_complete is not None:
            raise RuntimeError("session is already bound to a traversal")
        self._on_complete = on_complete

    def dispatch(self, operation: Awaitable, on_result: ResultCallback) -> asyncio.Task:
        """Run ``operation`` as a task and count it until its result is handled.

        The counter is incremented here, before the task exists, and
        decremented when the task finishes, before ``on_result`` runs.
        ``on_result(error, result)`` may dispatch follow-up work; the
        session only checks for completion after it returns. An exception
        raised by ``on_result`` is recorded as a session failure, so the
        traversal completes with an error rather than a partial result.

        Args:
            operation: Coroutine to run
            on_result: Callback receiving ``(error, None)`` or ``(None, result)``

        Returns:
            The scheduled task

        Raises:
            RuntimeError: If the session has already completed
        """
        if self.completed:
            if asyncio.iscoroutine(operation):
                operation.close()
            raise RuntimeError("cannot dispatch work on a completed session")

        self.pending += 1
        task = self._loop.create_task(operation)
        # Keep a strong reference; the loop only holds weak ones.
        self._tasks.add(task)
        task.add_done_callback(functools.partial(self._on_done, on_result))
        return task

    def _on_done(self, on_result: ResultCallback, task: asyncio.Task):
        self._tasks.discard(task)
        self.pending -= 1

        if task.cancelled():
            error, result = asyncio.CancelledError(), None
        else:
            error = task.exception()
            result = None if error is not None else task.result()

        try:
            on_result(error, result)
        except Exception as e:
            # A failing handler ends its branch like a failed storage call
            logger.debug("result handler failed: %r", e)
            self.fail(e)
        finally:
            self._check_complete()

    def _check_complete(self):
        if self.pending != 0 or self.completed:
            return

        self._finished.set()
        logger.debug(
            "traversal complete: %d entries, error=%r", len(self.entries), self.error
        )
        if self._on_complete is not None:
            self._on_complete(self.error)


class FilterSession(BaseSession):
    """Entries accepted by a filter layer on top of a TraversalSession."""

    def __init__(self, traversal: TraversalSession):
        super().__init__()
        self.traversal = traversal

    @property
    def pending(self) -> int:
        return self.traversal.pending


class ReadSession(FilterSession):
    """Matched entries plus their contents, on top of a TraversalSession."""

    entries: List[ReadEntry]

    @property
    def contents(self) -> List[bytes]:
        return [entry.content for entry in self.entries]
