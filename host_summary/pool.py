"""
Fixed-size worker pool that drains a queue of log files into an Aggregator.
"""

import os
import queue
import threading
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from .aggregator import Aggregator
from .barrier import CompletionBarrier
from .exceptions import ConfigurationError, LogReadError
from .logging_config import get_logger
from .matcher import LineMatcher
from .records import FileFailure
from .sources import FileSource

logger = get_logger(__name__)


class WorkerPool:
    """Runs `workers` threads that each pull file paths until the queue is empty.

    Every file is taken from the queue by exactly one worker. A file's
    matches are tallied locally and merged into the aggregator only after
    the whole file was read, so a file that fails halfway contributes
    nothing.

    Attributes:
        workers: Number of worker threads.
        fail_fast: Abort the run on the first unreadable file instead of
            recording it as a failure.
    """

    def __init__(
        self,
        aggregator: Aggregator,
        workers: int = 5,
        matcher: Optional[LineMatcher] = None,
        fail_fast: bool = False,
    ) -> None:
        if workers < 1:
            raise ConfigurationError(f"Worker count must be at least 1, got {workers}")
        self.aggregator = aggregator
        self.workers = workers
        self.matcher = matcher or LineMatcher()
        self.fail_fast = fail_fast

        self._failures: List[FileFailure] = []
        self._lock = threading.Lock()

    def process_file(self, path: str) -> int:
        """Count matching lines of one file and merge them.

        Returns:
            Number of matching lines found in the file.

        Raises:
            LogReadError: If the file cannot be opened, decompressed or read.
        """
        tally = defaultdict(int)
        with FileSource(path) as source:
            for line in source:
                hostname = self.matcher.match(line)
                if hostname is not None:
                    tally[hostname] += 1

        # merge is the batched form of Aggregator.increment; a failed file adds nothing
        self.aggregator.merge(tally)
        matched = sum(tally.values())
        logger.debug("  %s: %d matching lines, %d hosts", os.path.basename(path), matched, len(tally))
        return matched

    def _drain(self, work: "queue.Queue[str]", barrier: CompletionBarrier) -> None:
        while not barrier.aborted:
            try:
                path = work.get_nowait()
            except queue.Empty:
                return

            try:
                self.process_file(path)
            except LogReadError as e:
                if self.fail_fast:
                    logger.error("Error processing %s: %s", path, e)
                    barrier.abort(e)
                    return
                logger.warning("  Skipping %s: %s", os.path.basename(path), e)
                with self._lock:
                    self._failures.append(FileFailure(path, str(e), type(e.__cause__ or e).__name__))
            except Exception as e:
                # Release the waiter, then let the future carry the error
                barrier.abort(e)
                raise

            barrier.signal(path)

    def run(self, paths: Sequence[str], barrier: CompletionBarrier) -> List[FileFailure]:
        """Process every path and block until the barrier resolves.

        Args:
            paths: File paths; each is processed exactly once.
            barrier: Barrier created for len(paths) files.

        Returns:
            Files that failed, sorted by path (empty under fail_fast).

        Raises:
            LogReadError: Under fail_fast, for the first unreadable file.
        """
        if barrier.total != len(paths):
            raise ValueError(f"Barrier expects {barrier.total} files, got {len(paths)} paths")

        work: "queue.Queue[str]" = queue.Queue()
        for path in paths:
            work.put(path)

        with self._lock:
            self._failures = []

        with ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="host-summary") as executor:
            futures = [executor.submit(self._drain, work, barrier) for _ in range(self.workers)]
            barrier.wait()

        for future in futures:
            future.result()

        with self._lock:
            return sorted(self._failures, key=lambda f: f.path)
