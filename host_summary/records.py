"""
Data records exchanged between the summary components.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class AggregationSnapshot:
    """Settled view of the aggregated counts.

    Attributes:
        counts: Hostname to number of matching lines.
        total: Number of matching lines across all hostnames.
    """

    counts: Dict[str, int]
    total: int

    def __len__(self) -> int:
        return len(self.counts)


@dataclass(frozen=True)
class ProgressState:
    """Files completed out of the files discovered."""

    completed: int
    total: int

    @property
    def percent(self) -> float:
        if self.total == 0:
            return 100.0
        return self.completed / self.total * 100

    @property
    def done(self) -> bool:
        return self.completed >= self.total


@dataclass(frozen=True)
class ReportRow:
    """One line of the summary table."""

    hostname: str
    count: int
    percentage: float
    address: str


@dataclass(frozen=True)
class FileFailure:
    """A log file that could not be processed."""

    path: str
    error: str
    error_type: str


@dataclass
class SummaryResult:
    """Outcome of one run over a log directory."""

    snapshot: AggregationSnapshot
    files: List[str] = field(default_factory=list)
    failures: List[FileFailure] = field(default_factory=list)
    elapsed: Optional[float] = None

    @property
    def files_succeeded(self) -> int:
        return len(self.files) - len(self.failures)
