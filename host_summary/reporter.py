"""
Summary table generation: ordering, percentages and address lookups.
"""

import socket
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Callable, List, Optional, Protocol, Sequence

import numpy as np

from .logging_config import get_logger
from .patterns import DEFAULT_LOOKUP_TIMEOUT, PLACEHOLDER_ADDRESS
from .records import AggregationSnapshot, FileFailure, ReportRow

logger = get_logger(__name__)


class Resolver(Protocol):
    """Anything that maps a hostname to an address string."""

    def resolve(self, hostname: str) -> str: ...

    def close(self) -> None: ...


HEADER = ("Hostname", "Count", "Percentage", "IP Address")
# Separator extends this far past the hostname column
SEPARATOR_EXTRA = 38


class AddressResolver:
    """Best-effort forward lookup with a per-host timeout.

    Lookups run on a small thread pool so a stuck resolver call can be
    abandoned after `timeout` seconds. Any failure yields the placeholder.
    """

    def __init__(
        self,
        timeout: Optional[float] = DEFAULT_LOOKUP_TIMEOUT,
        lookup: Optional[Callable[[str], str]] = None,
        placeholder: str = PLACEHOLDER_ADDRESS,
    ) -> None:
        self.timeout = timeout
        self.placeholder = placeholder
        self._lookup = lookup or self.first_address
        self._executor: Optional[ThreadPoolExecutor] = None

    @staticmethod
    def first_address(hostname: str) -> str:
        """Return the first address the system resolver gives for hostname."""
        infos = socket.getaddrinfo(hostname, None)
        if not infos:
            raise socket.gaierror(f"No addresses for {hostname}")
        return infos[0][4][0]

    def resolve(self, hostname: str) -> str:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="host-lookup")
        future = self._executor.submit(self._lookup, hostname)
        try:
            address = future.result(timeout=self.timeout)
        except FutureTimeoutError:
            logger.debug("  Lookup timed out for %s", hostname)
            return self.placeholder
        except (OSError, ValueError) as e:
            logger.debug("  Lookup failed for %s: %s", hostname, e)
            return self.placeholder
        return address or self.placeholder

    def close(self) -> None:
        if self._executor is not None:
            # Do not wait on lookups that already timed out
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None

    def __enter__(self) -> "AddressResolver":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class NullResolver:
    """Resolver used when lookups are disabled."""

    placeholder = PLACEHOLDER_ADDRESS

    def resolve(self, hostname: str) -> str:
        return self.placeholder

    def close(self) -> None:
        pass


def sort_counts(snapshot: AggregationSnapshot) -> List[tuple]:
    """Order (hostname, count) pairs by count descending, then hostname."""
    return sorted(snapshot.counts.items(), key=lambda item: (-item[1], item[0]))


def percentages(counts: Sequence[int], total: int) -> np.ndarray:
    """Share of the total per count, in percent; all zero when total is 0."""
    values = np.asarray(counts, dtype=float)
    if total <= 0:
        return np.zeros(len(values))
    return values / total * 100


class Reporter:
    """Turns a settled aggregation snapshot into the summary table."""

    def __init__(self, resolver: Optional[Resolver] = None) -> None:
        self.resolver = resolver or NullResolver()

    def build_rows(self, snapshot: AggregationSnapshot) -> List[ReportRow]:
        """Sorted report rows with resolved addresses."""
        ordered = sort_counts(snapshot)
        shares = percentages([count for _, count in ordered], snapshot.total)

        rows = []
        for (hostname, count), share in zip(ordered, shares):
            rows.append(ReportRow(hostname, count, float(share), self.resolver.resolve(hostname)))
        return rows

    @staticmethod
    def column_width(rows: Sequence[ReportRow]) -> int:
        longest = max((len(row.hostname) for row in rows), default=0)
        return max(longest, len(HEADER[0]))

    def render(
        self,
        rows: Sequence[ReportRow],
        failures: Sequence[FileFailure] = (),
    ) -> str:
        """Format rows (and any failed files) as a plain-text table."""
        width = self.column_width(rows)
        lines = [
            "",
            "SUMMARY:",
            "%-*s  %10s  %12s  %s" % (width, *HEADER),
            "-" * (width + SEPARATOR_EXTRA),
        ]
        for row in rows:
            lines.append(
                "%-*s  %10d  %6.2f%%     %s"
                % (width, row.hostname, row.count, row.percentage, row.address)
            )

        if failures:
            lines.append("")
            lines.append(f"FAILED FILES ({len(failures)}):")
            for failure in failures:
                lines.append(f"  {failure.path}: {failure.error}")

        return "\n".join(lines) + "\n"

    def report(
        self,
        snapshot: AggregationSnapshot,
        failures: Sequence[FileFailure] = (),
    ) -> str:
        """Build and render the table for a snapshot."""
        return self.render(self.build_rows(snapshot), failures)
