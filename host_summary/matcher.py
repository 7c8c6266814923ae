"""
Hostname extraction from single log lines.
"""

from typing import Optional, Pattern

from .patterns import HOSTNAME_PATTERN


class LineMatcher:
    """Extracts the hostname token from a log line.

    The pattern is compiled once and shared, so a single matcher can be
    used from any number of worker threads.
    """

    __slots__ = ("pattern",)

    def __init__(self, pattern: Pattern[str] = HOSTNAME_PATTERN) -> None:
        self.pattern = pattern

    def match(self, line: str) -> Optional[str]:
        """Return the hostname of the first match on the line, or None."""
        found = self.pattern.search(line)
        if found is None:
            return None
        return found.group(2)


_DEFAULT_MATCHER = LineMatcher()


def extract_hostname(line: str) -> Optional[str]:
    """Module-level shortcut using the default pattern."""
    return _DEFAULT_MATCHER.match(line)
