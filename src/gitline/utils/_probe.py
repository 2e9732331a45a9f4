"""Filesystem probes for repository metadata.

All classification helpers use ``lstat`` so a symbolic link is reported as a
link rather than as its target. None of these functions raise: a missing or
unreadable path is a normal answer.
"""

import os
import stat
from pathlib import Path

from ._exec import strip_line_terminator

# Default read size in bytes, including room for a terminator
DEFAULT_READ_BYTES: int = 256


def _mode(path: str | Path) -> int | None:
    try:
        return os.lstat(path).st_mode
    except OSError:
        return None


def is_dir(path: str | Path) -> bool:
    """Check whether path is a directory (not a link to one)."""
    mode = _mode(path)
    return mode is not None and stat.S_ISDIR(mode)


def is_file(path: str | Path) -> bool:
    """Check whether path is a regular file (not a link to one)."""
    mode = _mode(path)
    return mode is not None and stat.S_ISREG(mode)


def is_symlink(path: str | Path) -> bool:
    """Check whether path is a symbolic link."""
    mode = _mode(path)
    return mode is not None and stat.S_ISLNK(mode)


def read_file(path: str | Path, size: int = DEFAULT_READ_BYTES) -> str:
    """Read up to ``size - 1`` bytes from a file.

    One trailing newline is stripped from the content.

    Args:
        path: File to read.
        size: Read buffer size in bytes.

    Returns:
        The decoded content, or an empty string if the file cannot be opened.
    """
    try:
        with open(path, "rb") as f:  # noqa: PTH123
            data = f.read(max(size - 1, 0))
    except OSError:
        return ""
    return strip_line_terminator(data.decode("utf-8", errors="surrogateescape"))
