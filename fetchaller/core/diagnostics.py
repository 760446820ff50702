"""
Diagnostic output for the server process.

stdout carries the MCP stream, so everything human-readable goes to stderr.
"""
import sys

from fetchaller.core.config import settings


def log(message: str) -> None:
    """Write one diagnostic line to stderr."""
    print(message, file=sys.stderr, flush=True)


def debug(message: str) -> None:
    """Per-request detail, only emitted when FETCH_DEBUG is on"""
    if settings.DEBUG:
        log(message)
