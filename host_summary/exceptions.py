"""
Custom exceptions for host summary runs.

This module defines a hierarchy of exceptions for handling errors
specific to configuration, log file reading, and worker synchronization.
"""

from typing import Optional


class HostSummaryError(Exception):
    """Base exception for all host summary errors."""

    pass


class ConfigurationError(HostSummaryError):
    """Raised for configuration-related errors."""

    pass


class LogReadError(HostSummaryError):
    """Raised when a log file cannot be opened, decompressed or read.

    Attributes:
        file_path: Path to the file that failed.
    """

    def __init__(self, message: str, file_path: Optional[str] = None) -> None:
        self.file_path = file_path
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.file_path:
            return f"{base} (file: {self.file_path})"
        return base


class BarrierError(HostSummaryError):
    """Raised when a completion barrier receives more signals than files.

    Attributes:
        expected: Number of signals the barrier was created for.
        received: Number of signals received, including the offending one.
    """

    def __init__(
        self,
        message: str,
        expected: Optional[int] = None,
        received: Optional[int] = None,
    ) -> None:
        self.expected = expected
        self.received = received
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.expected is not None and self.received is not None:
            return f"{base} (expected: {self.expected}, received: {self.received})"
        return base
