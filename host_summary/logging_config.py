"""
Logging configuration for host summary runs.

Every module logs through a child of the ``host_summary`` logger. By
default the handler uses a bare ``%(message)s`` format, so progress lines
read like plain console output; the CLI points it at stderr to keep the
report alone on stdout.

Usage:
    from host_summary.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("Processed: %s (%.2f%% completed)", name, pct)

Timestamps and levels for long runs:
    configure_logging(level=logging.DEBUG, stream=sys.stderr, simple_mode=False)
"""

import logging
import sys
from typing import Dict, Optional, TextIO

DEFAULT_FORMAT = "%(asctime)s - %(threadName)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT = "%(message)s"

PACKAGE_LOGGER = "host_summary"

_loggers: Dict[str, logging.Logger] = {}
_configured: bool = False


def configure_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
    simple_mode: bool = True,
) -> None:
    """
    Install a single stream handler on the package logger.

    Args:
        level: Logging level (default: INFO).
        format_string: Custom format string. If None, uses SIMPLE_FORMAT
            or DEFAULT_FORMAT based on simple_mode.
        stream: Output stream (default: sys.stdout).
        simple_mode: If True, log the bare message only.
    """
    global _configured

    if format_string is None:
        format_string = SIMPLE_FORMAT if simple_mode else DEFAULT_FORMAT

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(format_string))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a cached logger for a module name, configuring defaults on first use.

    Args:
        name: Module name (typically __name__).
    """
    if not _configured:
        configure_logging()

    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)

    return _loggers[name]


def level_for(quiet: bool = False, verbose: bool = False) -> int:
    """Map the CLI verbosity flags to a logging level. quiet wins."""
    if quiet:
        return logging.WARNING
    if verbose:
        return logging.DEBUG
    return logging.INFO


def set_level(level: int) -> None:
    """Set the logging level for all host_summary loggers."""
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def enable_debug() -> None:
    set_level(logging.DEBUG)


def enable_quiet() -> None:
    """Suppress progress messages; warnings and errors still show."""
    set_level(logging.WARNING)
