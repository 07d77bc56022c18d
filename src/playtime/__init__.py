"""Clone Hero playtime calculator.

Infers play sessions from per-run log files and totals the time spent.
"""

from .models import Session, Diagnostic, RecentSession, Report
from .collector import find_log_files, LOG_SUFFIXES
from .parser import find_open_timestamp, parse_timestamp, get_close_time
from .sessions import extract_session, scan_sessions, MAX_SESSION_DURATION
from .report import (
    build_report,
    format_duration,
    format_report,
    report_to_dict,
    RECENT_SESSION_LIMIT,
    DEFAULT_TIME_FORMAT,
)

__version__ = "0.1.0"

__all__ = [
    "Session",
    "Diagnostic",
    "RecentSession",
    "Report",
    "find_log_files",
    "LOG_SUFFIXES",
    "find_open_timestamp",
    "parse_timestamp",
    "get_close_time",
    "extract_session",
    "scan_sessions",
    "MAX_SESSION_DURATION",
    "build_report",
    "format_duration",
    "format_report",
    "report_to_dict",
    "RECENT_SESSION_LIMIT",
    "DEFAULT_TIME_FORMAT",
]
