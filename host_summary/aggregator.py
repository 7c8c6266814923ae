"""
Thread-safe hostname counters shared by the file workers.
"""

import threading
from collections import defaultdict
from typing import Mapping

from .records import AggregationSnapshot


class Aggregator:
    """Hostname match counts plus a running total.

    All mutation goes through increment() or merge(), which update the
    per-host count and the total under the same lock, so the total always
    equals the sum of the per-host counts.
    """

    def __init__(self) -> None:
        self._counts = defaultdict(int)
        self._total = 0
        self._lock = threading.Lock()

    def increment(self, hostname: str) -> None:
        """Count one matching line for hostname."""
        with self._lock:
            self._counts[hostname] += 1
            self._total += 1

    def merge(self, counts: Mapping[str, int]) -> None:
        """Add a whole file's tally in one step.

        Args:
            counts: Hostname to number of matching lines; values must be
                non-negative.
        """
        if not counts:
            return
        added = 0
        for hostname, count in counts.items():
            if count < 0:
                raise ValueError(f"Negative count for {hostname!r}: {count}")
            added += count
        with self._lock:
            for hostname, count in counts.items():
                if count:
                    self._counts[hostname] += count
            self._total += added

    def snapshot(self) -> AggregationSnapshot:
        """Return a copy of the counts.

        Only meaningful once every worker has finished; the copy is taken
        under the lock but later updates are not reflected in it.
        """
        with self._lock:
            return AggregationSnapshot(counts=dict(self._counts), total=self._total)

    @property
    def total(self) -> int:
        with self._lock:
            return self._total

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)
