"""
Counted completion barrier for file workers.
"""

import threading
from typing import Callable, Optional

from .exceptions import BarrierError
from .records import ProgressState

ProgressCallback = Callable[[ProgressState, Optional[str]], None]


class CompletionBarrier:
    """Releases waiters once exactly `total` files have been signalled.

    Each processed file must call signal() exactly once. A signal beyond
    `total` raises BarrierError instead of being counted. abort() releases
    waiters early with an error, for the fail-fast policy.

    Attributes:
        total: Number of files the barrier waits for.
    """

    def __init__(self, total: int, on_progress: Optional[ProgressCallback] = None) -> None:
        if total < 0:
            raise ValueError(f"Barrier total must be non-negative, got {total}")
        self.total = total
        self._completed = 0
        self._error: Optional[BaseException] = None
        self._on_progress = on_progress
        self._cond = threading.Condition()

    def signal(self, path: Optional[str] = None) -> ProgressState:
        """Record one finished file and return the progress after it."""
        with self._cond:
            if self._completed >= self.total:
                raise BarrierError(
                    "Completion barrier signalled more times than files",
                    expected=self.total,
                    received=self._completed + 1,
                )
            self._completed += 1
            progress = ProgressState(self._completed, self.total)
            if progress.done:
                self._cond.notify_all()

        # Outside the lock, the callback may log or print
        if self._on_progress is not None:
            self._on_progress(progress, path)
        return progress

    def abort(self, error: BaseException) -> None:
        """Release all waiters; wait() re-raises `error`. First abort wins."""
        with self._cond:
            if self._error is None:
                self._error = error
            self._cond.notify_all()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until every file has been signalled.

        Returns:
            True once resolved, False if the timeout elapsed first.

        Raises:
            The error passed to abort(), if the barrier was aborted.
        """
        with self._cond:
            resolved = self._cond.wait_for(
                lambda: self._error is not None or self._completed >= self.total,
                timeout=timeout,
            )
            if self._error is not None:
                raise self._error
            return resolved

    @property
    def aborted(self) -> bool:
        with self._cond:
            return self._error is not None

    @property
    def progress(self) -> ProgressState:
        with self._cond:
            return ProgressState(self._completed, self.total)

    @property
    def resolved(self) -> bool:
        with self._cond:
            return self._completed >= self.total
