"""
Main HostSummary class: enumerates a log directory and runs the worker pool.
"""

import os
import time
from typing import List, Optional

from .aggregator import Aggregator
from .barrier import CompletionBarrier
from .config import SummaryConfig
from .logging_config import get_logger
from .matcher import LineMatcher
from .pool import WorkerPool
from .records import ProgressState, SummaryResult
from .reporter import AddressResolver, NullResolver, Reporter
from .sources import is_compressed

# Module logger
logger = get_logger(__name__)


def discover_files(dir_path: str) -> List[str]:
    """List the regular files directly inside dir_path, sorted by name."""
    paths = []
    for entry in sorted(os.scandir(dir_path), key=lambda e: e.name):
        if entry.is_file():
            paths.append(os.path.join(dir_path, entry.name))
    return paths


def log_progress(progress: ProgressState, path: Optional[str]) -> None:
    name = os.path.basename(path) if path else "?"
    logger.info("Processed: %s (%.2f%% completed)", name, progress.percent)


class HostSummary:
    """Counts hostname occurrences across every file of a log directory."""

    def __init__(self, config: SummaryConfig, matcher: Optional[LineMatcher] = None):
        self.config = config
        self.matcher = matcher or LineMatcher()
        self.aggregator = Aggregator()
        self.result: Optional[SummaryResult] = None

    def run(self) -> SummaryResult:
        """Process the directory and return the settled counts.

        Raises:
            ConfigurationError: If the configuration is invalid.
            LogReadError: Under fail_fast, for the first unreadable file.
        """
        self.config.validate()
        dir_path = self.config.directory
        logger.info("Processing directory: %s", dir_path)

        files = discover_files(dir_path)
        compressed = sum(1 for f in files if is_compressed(f))
        logger.info("  Found %d files (%d compressed)", len(files), compressed)

        started = time.monotonic()
        barrier = CompletionBarrier(len(files), on_progress=log_progress)
        pool = WorkerPool(
            self.aggregator,
            workers=self.config.workers,
            matcher=self.matcher,
            fail_fast=self.config.fail_fast,
        )
        failures = pool.run(files, barrier)

        snapshot = self.aggregator.snapshot()
        self.result = SummaryResult(
            snapshot=snapshot,
            files=files,
            failures=failures,
            elapsed=time.monotonic() - started,
        )
        logger.info(
            "  Processed %d files, %s matching lines, %d hosts in %.2fs",
            self.result.files_succeeded,
            f"{snapshot.total:,}",
            len(snapshot),
            self.result.elapsed,
        )
        if failures:
            logger.warning("  %d files could not be read", len(failures))
        return self.result

    def make_resolver(self):
        if not self.config.resolve:
            return NullResolver()
        return AddressResolver(timeout=self.config.lookup_timeout)

    def generate_report(self, reporter: Optional[Reporter] = None) -> str:
        """Render the summary table for the last run (running it if needed)."""
        result = self.result or self.run()
        if reporter is not None:
            return reporter.report(result.snapshot, result.failures)

        resolver = self.make_resolver()
        try:
            return Reporter(resolver).report(result.snapshot, result.failures)
        finally:
            resolver.close()
