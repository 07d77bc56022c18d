"""Data models for playtime."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Literal, Optional


@dataclass(frozen=True)
class Session:
    """A validated play session inferred from one log file."""
    source_name: str
    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


@dataclass(frozen=True)
class Diagnostic:
    """Explains why a candidate log file produced no session."""
    source_name: str
    reason: Literal["no_timestamp_found", "unparsable_timestamp", "invalid_duration", "unreadable_file"]
    detail: str

    def __str__(self) -> str:
        return f"Skipping {self.source_name}: {self.detail}"


@dataclass(frozen=True)
class RecentSession:
    """One row of the recent-sessions view, ready for display."""
    position: int
    opened: str
    closed: str
    duration: str
    session: Session


@dataclass
class Report:
    """Aggregate playtime over all valid sessions, sorted by start."""
    sessions: list[Session] = field(default_factory=list)
    total_duration: timedelta = timedelta(0)
    recent: list[RecentSession] = field(default_factory=list)
    omitted_count: int = 0

    @property
    def session_count(self) -> int:
        return len(self.sessions)

    @property
    def average_duration(self) -> Optional[timedelta]:
        if not self.sessions:
            return None
        return self.total_duration / len(self.sessions)

    @property
    def total_hours(self) -> float:
        return self.total_duration / timedelta(hours=1)

    @property
    def total_days(self) -> float:
        return self.total_duration / timedelta(days=1)
