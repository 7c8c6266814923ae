"""
Run configuration for host summaries.
"""

import os
from dataclasses import dataclass

from .exceptions import ConfigurationError
from .patterns import DEFAULT_LOOKUP_TIMEOUT, DEFAULT_WORKERS


@dataclass
class SummaryConfig:
    """Settings for one run over a log directory.

    Attributes:
        directory: Directory containing the log files.
        workers: Number of files processed concurrently.
        fail_fast: Abort on the first unreadable file.
        resolve: Look up an address for every hostname in the report.
        lookup_timeout: Seconds to wait for each address lookup.
    """

    directory: str
    workers: int = DEFAULT_WORKERS
    fail_fast: bool = False
    resolve: bool = True
    lookup_timeout: float = DEFAULT_LOOKUP_TIMEOUT

    def validate(self) -> "SummaryConfig":
        """Check the settings, raising ConfigurationError on the first problem."""
        if not self.directory:
            raise ConfigurationError("Please provide a directory path")
        if not os.path.isdir(self.directory):
            raise ConfigurationError(f"Not a directory: {self.directory}")
        if self.workers < 1:
            raise ConfigurationError(f"Worker count must be at least 1, got {self.workers}")
        if self.lookup_timeout < 0:
            raise ConfigurationError(
                f"Lookup timeout must be non-negative, got {self.lookup_timeout}"
            )
        return self
