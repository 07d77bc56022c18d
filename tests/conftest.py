"""Pytest fixtures for playtime tests."""

import os
import pytest
from pathlib import Path
import tempfile
import shutil
from datetime import datetime, timedelta, timezone


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Open timestamps written in the fixture logs
SESSION1_START = datetime.fromisoformat('2025-05-21T19:31:22.421-05:00')
SESSION2_START = datetime.fromisoformat('2025-05-22T20:00:00.000-05:00')


def _set_mtime(path: Path, moment: datetime) -> None:
    ns = (moment - EPOCH) // timedelta(microseconds=1) * 1000
    os.utime(path, ns=(ns, ns))


@pytest.fixture
def set_mtime():
    """Set a file's modification time to an aware datetime, exactly."""
    return _set_mtime


@pytest.fixture
def write_log():
    """Factory writing a minimal log opened at `start` and modified `duration` later."""
    def _write_log(log_dir: Path, name: str, start: datetime, duration: timedelta) -> Path:
        path = log_dir / name
        path.write_text(f"[{start.isoformat(timespec='milliseconds')}] Clone Hero starting\n")
        _set_mtime(path, start + duration)
        return path
    return _write_log


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to the test fixtures directory."""
    return Path(__file__).parent / 'fixtures'


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir)


@pytest.fixture
def empty_logs_dir(temp_dir):
    """Create an empty logs directory."""
    logs_dir = temp_dir / 'logs'
    logs_dir.mkdir()
    return logs_dir


@pytest.fixture
def temp_logs_dir(empty_logs_dir, fixtures_dir):
    """
    Create a logs directory with the fixture files and controlled mtimes.

    session1.log closes 10 minutes after opening, session2.txt 1h 30m after.
    """
    for f in fixtures_dir.iterdir():
        shutil.copy(f, empty_logs_dir / f.name)

    _set_mtime(empty_logs_dir / 'session1.log', SESSION1_START + timedelta(minutes=10))
    _set_mtime(empty_logs_dir / 'session2.txt', SESSION2_START + timedelta(hours=1, minutes=30))
    _set_mtime(empty_logs_dir / 'no_timestamp.log', SESSION2_START)
    _set_mtime(empty_logs_dir / 'bad_timestamp.log', SESSION2_START)

    return empty_logs_dir
