"""Playtime aggregation and report formatting."""

from datetime import datetime, timedelta, tzinfo
from typing import Iterable, Optional

from .models import RecentSession, Report, Session


RECENT_SESSION_LIMIT = 20
DEFAULT_TIME_FORMAT = '%Y-%m-%d %H:%M:%S'


def format_duration(duration: timedelta) -> str:
    """
    Format a non-negative duration compactly, e.g. "1d 1h 1m 1s" or "42s".

    Uses the largest non-zero unit as the leading field. Truncates to whole seconds.
    """
    total_seconds = duration // timedelta(seconds=1)
    minutes, s = divmod(total_seconds, 60)
    hours, m = divmod(minutes, 60)
    days, h = divmod(hours, 24)

    if days > 0:
        return f"{days}d {h}h {m}m {s}s"
    if hours > 0:
        return f"{hours}h {m}m {s}s"
    if minutes > 0:
        return f"{minutes}m {s}s"
    return f"{total_seconds}s"


def _format_instant(moment: datetime, time_format: str, tz: Optional[tzinfo]) -> str:
    # tz=None converts to the machine's local timezone
    return moment.astimezone(tz).strftime(time_format)


def build_report(
    sessions: Iterable[Session],
    recent_limit: int = RECENT_SESSION_LIMIT,
    time_format: str = DEFAULT_TIME_FORMAT,
    tz: Optional[tzinfo] = None,
) -> Report:
    """
    Aggregate sessions into a Report.

    Sessions are sorted by start (stable for equal starts). The recent view
    holds the last `recent_limit` sessions, numbered by their position in the
    full sorted list.
    """
    ordered = sorted(sessions, key=lambda s: s.start)
    total = sum((s.duration for s in ordered), timedelta(0))

    recent_start = max(len(ordered) - recent_limit, 0)
    recent = [
        RecentSession(
            position=index + 1,
            opened=_format_instant(session.start, time_format, tz),
            closed=_format_instant(session.end, time_format, tz),
            duration=format_duration(session.duration),
            session=session,
        )
        for index, session in enumerate(ordered[recent_start:], start=recent_start)
    ]

    return Report(
        sessions=ordered,
        total_duration=total,
        recent=recent,
        omitted_count=recent_start,
    )


def format_report(report: Report) -> str:
    """
    Format a report as human-readable console text.
    """
    lines = []

    lines.append("=== Clone Hero Playtime Calculator ===")
    lines.append("")
    lines.append(f"Total sessions: {report.session_count}")
    lines.append(f"Total playtime: {format_duration(report.total_duration)}")
    lines.append("")

    if report.recent:
        lines.append(f"Recent Session Details (last {len(report.recent)}):")
        for row in report.recent:
            lines.append(f"{row.position}. {row.duration} ({row.opened} - {row.closed})")
        lines.append("")

    if report.omitted_count:
        lines.append(f"... and {report.omitted_count} more sessions")
        lines.append("")

    lines.append("=== Summary ===")
    lines.append(f"Total hours: {report.total_hours:.2f}")
    lines.append(f"Total days: {report.total_days:.2f}")

    average = report.average_duration
    if average is not None:
        lines.append(f"Average session: {format_duration(average)}")

    return '\n'.join(lines)


def report_to_dict(report: Report) -> dict:
    """
    Convert a report to a JSON-serialisable dict.

    Instants are ISO 8601, durations are whole milliseconds.
    """
    average = report.average_duration

    return {
        'session_count': report.session_count,
        'total_ms': report.total_duration // timedelta(milliseconds=1),
        'total_hours': round(report.total_hours, 2),
        'total_days': round(report.total_days, 2),
        'average_ms': average // timedelta(milliseconds=1) if average is not None else None,
        'omitted_count': report.omitted_count,
        'sessions': [
            {
                'source': s.source_name,
                'start': s.start.isoformat(),
                'end': s.end.isoformat(),
                'duration_ms': s.duration // timedelta(milliseconds=1),
            }
            for s in report.sessions
        ],
        'recent': [
            {
                'position': row.position,
                'source': row.session.source_name,
                'opened': row.opened,
                'closed': row.closed,
                'duration': row.duration,
            }
            for row in report.recent
        ],
    }
