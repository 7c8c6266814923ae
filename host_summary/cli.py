#!/usr/bin/env python3
"""
Host Summary command line

Counts the hostname of every syslog-style line in a directory of log
files (plain or compressed) and prints a table of hosts with their share
of all matching lines and a resolved address.

Usage:
    host-summary --dir=<log directory path> --T=<number of threads>
    host-summary -dir=<log directory path> -T=<number of threads>
    python -m host_summary --dir /var/log/remote --no-resolve
"""

import argparse
import sys
from typing import List, Optional

from .config import SummaryConfig
from .exceptions import ConfigurationError, LogReadError
from .logging_config import configure_logging, level_for
from .patterns import DEFAULT_LOOKUP_TIMEOUT, DEFAULT_WORKERS
from .summary import HostSummary

USAGE = """\
host-summary --dir=<log directory path> --T=<number of threads>
   or: host-summary -dir=<log directory path> -T=<number of threads>"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="host-summary",
        description="Summarize log lines per originating host.",
        usage=USAGE,
        add_help=False,
    )
    parser.add_argument(
        "-H", "--help", action="help", help="Prints out how to use this utility"
    )
    parser.add_argument(
        "-dir", "--dir", dest="directory", required=True,
        help="Directory containing the log files to process",
    )
    parser.add_argument(
        "-T", "--T", "--threads", dest="workers", type=int, default=DEFAULT_WORKERS,
        help=f"Number of files to process concurrently (default: {DEFAULT_WORKERS})",
    )
    parser.add_argument(
        "--fail-fast", action="store_true",
        help="Abort on the first unreadable file instead of listing it after the report",
    )
    parser.add_argument(
        "--no-resolve", dest="resolve", action="store_false",
        help="Skip address lookups",
    )
    parser.add_argument(
        "--lookup-timeout", type=float, default=DEFAULT_LOOKUP_TIMEOUT,
        help=f"Seconds to wait for each address lookup (default: {DEFAULT_LOOKUP_TIMEOUT})",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only print the report")
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    # Progress goes to stderr so stdout carries only the table
    configure_logging(level=level_for(args.quiet, args.verbose), stream=sys.stderr)

    config = SummaryConfig(
        directory=args.directory,
        workers=args.workers,
        fail_fast=args.fail_fast,
        resolve=args.resolve,
        lookup_timeout=args.lookup_timeout,
    )

    summary = HostSummary(config)
    try:
        summary.run()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except LogReadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(summary.generate_report())
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
