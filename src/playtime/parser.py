"""Session open/close timestamp extraction."""

import re
from pathlib import Path
from typing import Optional
from datetime import datetime, timedelta, timezone


# The first bracketed ISO 8601 date-time in a log marks when the game was opened,
# e.g. [2025-05-21T19:31:22.421-05:00]
TIMESTAMP_PATTERN = re.compile(r'\[(\d{4}-\d{2}-\d{2}T[^\]]+)\]')


def find_open_timestamp(text: str) -> Optional[str]:
    """
    Return the text inside the first bracketed timestamp, or None.

    Only the first match counts; logs carry many later timestamps.
    """
    match = TIMESTAMP_PATTERN.search(text)
    if match is None:
        return None
    return match.group(1)


def parse_timestamp(raw: str) -> Optional[datetime]:
    """
    Parse an ISO 8601 date-time into a timezone-aware datetime.

    A trailing Z means UTC. Values without an offset are taken as local time.
    Returns None if the text is not a valid date-time.
    """
    ts_str = raw.strip()
    if ts_str.endswith('Z'):
        ts_str = ts_str[:-1] + '+00:00'
    try:
        parsed = datetime.fromisoformat(ts_str)
        if parsed.tzinfo is None:
            parsed = parsed.astimezone()
    except (ValueError, OverflowError):
        # Local-time conversion fails near the ends of the datetime range
        return None
    return parsed


def get_close_time(path: Path) -> datetime:
    """
    Get the last-modified time of a file as a UTC datetime.

    Built from st_mtime_ns so no precision is lost to float rounding.
    """
    mtime_ns = path.stat().st_mtime_ns
    seconds, remainder_ns = divmod(mtime_ns, 1_000_000_000)
    return datetime.fromtimestamp(seconds, tz=timezone.utc) + timedelta(microseconds=remainder_ns // 1000)


def read_log_text(path: Path) -> str:
    """Read a log file as text, replacing undecodable bytes."""
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        return f.read()
