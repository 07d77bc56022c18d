"""Log file discovery."""

from pathlib import Path


# Matched case-sensitively against the end of the file name
LOG_SUFFIXES = ('.log', '.txt')


def find_log_files(log_dir: Path, suffixes: tuple[str, ...] = LOG_SUFFIXES) -> list[Path]:
    """
    Find candidate log files directly inside a directory.

    Does not recurse. Entries that are not regular files are skipped.
    Returns paths sorted by name; later stages must not depend on this order.

    Raises:
        OSError: if the directory does not exist or cannot be listed
    """
    files = []
    for entry in Path(log_dir).iterdir():
        if not entry.name.endswith(suffixes):
            continue
        if not entry.is_file():
            continue
        files.append(entry)

    return sorted(files, key=lambda p: p.name)
