"""Pure time formatting helpers used by the CLI."""
from __future__ import annotations


def format_seconds(seconds: float) -> str:
    """Format a duration in seconds as ``HH:MM:SS.mmm``.

    Keeps the sign for negative values, rounds to whole milliseconds.
    """
    sign = '-' if seconds < 0 else ''
    total_ms = int(round(abs(seconds) * 1000))
    hours, rest = divmod(total_ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    secs, millis = divmod(rest, 1000)
    return f"{sign}{hours:02d}:{minutes:02d}:{secs:02d}.{millis:03d}"


def format_span(start: float, end: float) -> str:
    """Format a ``start -> end`` span, e.g. for dry-run window listings."""
    return f"{format_seconds(start)} -> {format_seconds(end)}"
