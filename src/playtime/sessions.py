"""Session extraction from a directory of log files."""

from pathlib import Path
from typing import Callable, Optional, Union
from datetime import timedelta

from .collector import find_log_files
from .models import Diagnostic, Session
from .parser import find_open_timestamp, get_close_time, parse_timestamp, read_log_text
from .report import format_duration


# Longer sessions are almost always a log touched by something else long after the game closed
MAX_SESSION_DURATION = timedelta(hours=24)


def extract_session(
    path: Path,
    max_duration: timedelta = MAX_SESSION_DURATION,
) -> Union[Session, Diagnostic]:
    """
    Infer a play session from a single log file.

    The session opens at the first bracketed timestamp in the file and closes
    at the file's last-modified time. Sessions are accepted only when
    0 < duration < max_duration.

    Returns:
        A Session, or a Diagnostic explaining why the file was skipped.
        Never raises for problems confined to this file.
    """
    name = path.name

    try:
        end = get_close_time(path)
        text = read_log_text(path)
    except OSError as e:
        return Diagnostic(name, 'unreadable_file', f"Could not read file ({e})")

    raw = find_open_timestamp(text)
    if raw is None:
        return Diagnostic(name, 'no_timestamp_found', "No timestamp found")

    start = parse_timestamp(raw)
    if start is None:
        return Diagnostic(name, 'unparsable_timestamp', f'Could not parse timestamp "{raw}"')

    duration = end - start
    if not timedelta(0) < duration < max_duration:
        return Diagnostic(name, 'invalid_duration', f"Invalid duration ({format_duration(abs(duration))})")

    return Session(source_name=name, start=start, end=end)


def scan_sessions(
    log_dir: Path,
    max_duration: timedelta = MAX_SESSION_DURATION,
    on_diagnostic: Optional[Callable[[Diagnostic], None]] = None,
) -> tuple[list[Session], list[Diagnostic]]:
    """
    Extract sessions from every candidate log file in a directory.

    Args:
        log_dir: Directory holding the game's log files
        max_duration: Exclusive upper bound on a session's length
        on_diagnostic: Called with each Diagnostic as soon as its file is processed

    Returns:
        (sessions, diagnostics) in processing order. Sessions are not sorted.

    Raises:
        OSError: if the directory cannot be listed
    """
    sessions: list[Session] = []
    diagnostics: list[Diagnostic] = []

    for log_file in find_log_files(log_dir):
        result = extract_session(log_file, max_duration=max_duration)
        if isinstance(result, Diagnostic):
            diagnostics.append(result)
            if on_diagnostic is not None:
                on_diagnostic(result)
        else:
            sessions.append(result)

    return sessions, diagnostics
