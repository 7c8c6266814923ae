"""
Host Summary

A Python package that counts syslog-style log lines per originating host
across a directory of plain or compressed log files, using a fixed pool of
worker threads, and reports each host's share with a resolved address.
"""

from .aggregator import Aggregator
from .barrier import CompletionBarrier
from .config import SummaryConfig
from .exceptions import (
    BarrierError,
    ConfigurationError,
    HostSummaryError,
    LogReadError,
)
from .matcher import LineMatcher, extract_hostname
from .patterns import (
    COMPRESSED_SUFFIXES,
    HOSTNAME_PATTERN,
    PLACEHOLDER_ADDRESS,
)
from .pool import WorkerPool
from .records import (
    AggregationSnapshot,
    FileFailure,
    ProgressState,
    ReportRow,
    SummaryResult,
)
from .reporter import AddressResolver, NullResolver, Reporter, Resolver
from .sources import FileSource
from .summary import HostSummary, discover_files

__all__ = [
    # Main entry
    "HostSummary",
    "SummaryConfig",
    "discover_files",
    # Engine
    "Aggregator",
    "CompletionBarrier",
    "FileSource",
    "LineMatcher",
    "WorkerPool",
    "extract_hostname",
    # Reporting
    "AddressResolver",
    "NullResolver",
    "Reporter",
    "Resolver",
    # Records
    "AggregationSnapshot",
    "FileFailure",
    "ProgressState",
    "ReportRow",
    "SummaryResult",
    # Exceptions
    "HostSummaryError",
    "ConfigurationError",
    "LogReadError",
    "BarrierError",
    # Patterns
    "HOSTNAME_PATTERN",
    "COMPRESSED_SUFFIXES",
    "PLACEHOLDER_ADDRESS",
]

__version__ = "1.0.0"
