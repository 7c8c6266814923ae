"""
Pytest configuration and shared fixtures for host summary tests.
"""

import gzip
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# =============================================================================
# SAMPLE LOG DATA FIXTURES
# =============================================================================

def syslog_line(hostname, message="sshd[2231]: Accepted publickey for deploy", ts="Jan 12 06:25:01"):
    """Build one syslog-style line for hostname."""
    return f"{ts} {hostname} {message}"


def write_log(path, lines, compress=False):
    """Write lines to path, gzip-compressed when compress is set."""
    text = "\n".join(lines) + "\n"
    if compress:
        with gzip.open(path, "wt", encoding="utf-8") as f:
            f.write(text)
    else:
        path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def sample_log_lines():
    """Sample log lines, matching and not matching the hostname pattern."""
    return [
        "Jan 12 06:25:01 web-01.example.com CRON[1234]: (root) CMD (run-parts /etc/cron.hourly)",
        "Jan 12 06:25:02 db01 postgres[881]: checkpoint starting: time",
        "Feb 3 17:00:59 web-01.example.com nginx: reload",
        "Mar 21 00:00:00 edge_gw kernel: link up",
        "Invalid line without timestamp",
        "2024-01-04T21:06:38.339-08:00 iso timestamps do not match",
        "",
    ]


@pytest.fixture
def sample_hostnames():
    """Expected hostname per line of sample_log_lines (None for no match)."""
    return [
        "web-01.example.com",
        "db01",
        "web-01.example.com",
        "edge_gw",
        None,
        None,
        None,
    ]


# =============================================================================
# TEMPORARY FILE FIXTURES
# =============================================================================

@pytest.fixture
def temp_log_file(tmp_path, sample_log_lines):
    """Create a temporary plain log file."""
    return write_log(tmp_path / "messages.log", sample_log_lines)


@pytest.fixture
def temp_gz_log_file(tmp_path, sample_log_lines):
    """Create a temporary gzip-compressed log file."""
    return write_log(tmp_path / "messages.log.gz", sample_log_lines, compress=True)


@pytest.fixture
def alpha_beta_directory(tmp_path):
    """File A: 3 alpha lines. File B: 2 beta lines and 1 alpha line."""
    log_dir = tmp_path / "logs"
    log_dir.mkdir()
    write_log(log_dir / "a.log", [syslog_line("alpha")] * 3)
    write_log(
        log_dir / "b.log",
        [syslog_line("beta"), "noise without a host", syslog_line("alpha"), syslog_line("beta")],
    )
    return log_dir


@pytest.fixture
def many_files_directory(tmp_path):
    """Sixty files across plain and compressed formats with known totals."""
    log_dir = tmp_path / "many"
    log_dir.mkdir()
    hosts = ["alpha", "beta", "gamma", "delta.example.org"]
    for i in range(60):
        lines = []
        for j, host in enumerate(hosts):
            lines.extend([syslog_line(host)] * ((i + j) % 5))
        lines.append("-- MARK --")
        write_log(log_dir / f"node{i:02d}.log{'.gz' if i % 3 == 0 else ''}", lines, compress=i % 3 == 0)
    return log_dir


@pytest.fixture
def fake_lookup():
    """Address lookup that knows a fixed set of hosts."""
    table = {
        "alpha": "10.0.0.1",
        "beta": "10.0.0.2",
        "gamma": "2001:db8::3",
    }

    def lookup(hostname):
        if hostname not in table:
            raise OSError(f"unknown host {hostname}")
        return table[hostname]

    return lookup


@pytest.fixture
def log_line():
    """Factory for syslog-style lines."""
    return syslog_line


@pytest.fixture
def make_log():
    """Factory writing a (optionally compressed) log file."""
    return write_log


@pytest.fixture(autouse=True)
def reset_logging():
    """Point the package handler back at the session stderr after each test."""
    yield
    from host_summary.logging_config import configure_logging

    configure_logging(stream=sys.stderr)
