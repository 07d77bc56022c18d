"""CLI entry point for playtime."""

import sys
from pathlib import Path
from datetime import timedelta
import json

import click

from .report import DEFAULT_TIME_FORMAT, RECENT_SESSION_LIMIT


def get_default_log_dir() -> Path:
    return Path('./logs')


@click.command()
@click.version_option(package_name="clonehero-playtime")
@click.argument("log_dir", required=False, default=None)
@click.option("--max-hours", default=24.0, type=click.FloatRange(min=0, min_open=True), help="Reject sessions this long or longer")
@click.option("--recent", default=RECENT_SESSION_LIMIT, type=click.IntRange(min=0), help="Number of recent sessions to list")
@click.option("--time-format", default=DEFAULT_TIME_FORMAT, help="strftime format for session open/close times")
@click.option("--format", "output_format", default="text", type=click.Choice(['text', 'json']), help="Output format")
def main(log_dir, max_hours, recent, time_format, output_format):
    """Total Clone Hero playtime from the log files in LOG_DIR (default ./logs).

    Each log file is one session: it opens at the first bracketed timestamp
    in the file and closes at the file's last-modified time.
    """
    from .sessions import scan_sessions
    from .report import build_report, format_report, report_to_dict

    log_path = Path(log_dir) if log_dir else get_default_log_dir()

    def warn(diagnostic):
        click.echo(f"Warning: {diagnostic}", err=True)

    try:
        sessions, _ = scan_sessions(
            log_path,
            max_duration=timedelta(hours=max_hours),
            on_diagnostic=warn,
        )
    except OSError as e:
        click.echo(f"Error: Could not read log directory {log_path}: {e.strerror or e}", err=True)
        sys.exit(1)

    report = build_report(sessions, recent_limit=recent, time_format=time_format)

    if output_format == 'json':
        click.echo(json.dumps(report_to_dict(report), indent=2))
    else:
        click.echo("")
        click.echo(format_report(report))


if __name__ == "__main__":
    main()
