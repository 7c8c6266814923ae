"""
Regex patterns and constants for host summary parsing and reporting.
"""

import re

# =============================================================================
# PATTERNS FOR LOG LINE PARSING
# =============================================================================

# Syslog-style prefix followed by the originating host:
#   Jan 12 06:25:01 web-01.example.com CRON[1234]: ...
# Group 1 is the timestamp, group 2 the hostname token. Classes are ASCII only.
HOSTNAME_PATTERN = re.compile(r'(\w+\s\d+\s\d+:\d+:\d+)\s([\w.-]+)', re.ASCII)

# =============================================================================
# FILE AND REPORT CONSTANTS
# =============================================================================

# Suffixes read through a decompressing reader
COMPRESSED_SUFFIXES = ('.gz', '.bz2', '.xz')

# Substituted when an address lookup fails or times out
PLACEHOLDER_ADDRESS = 'N/A'

DEFAULT_WORKERS = 5
DEFAULT_LOOKUP_TIMEOUT = 2.0
