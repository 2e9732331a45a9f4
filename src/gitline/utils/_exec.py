"""Execution utilities for read-only external queries.

This module runs a single external command per call, captures a bounded
amount of its standard output, discards standard error, and reports the
exit status. Spawn failures are folded into a sentinel status so callers
can treat "could not run" exactly like "answered no".
"""

import subprocess
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

# Exit status reported when the process could not be started or was killed
FAILURE_STATUS: int = -1

# Default capture size in bytes, including room for a terminator
DEFAULT_OUTPUT_BYTES: int = 256


@dataclass(frozen=True, slots=True)
class QueryResult:
    """Result from an external query.

    Attributes:
        exit_code: Process exit status, or FAILURE_STATUS.
        stdout: Captured standard output, possibly truncated.
    """

    exit_code: int
    stdout: str = ""

    @property
    def ok(self) -> bool:
        """Whether the query exited with status zero."""
        return self.exit_code == 0


def strip_line_terminator(text: str) -> str:
    """Strip exactly one trailing newline, if present."""
    if text.endswith("\n"):
        return text[:-1]
    return text


def run_query(
    argv: Sequence[str],
    *,
    single_line: bool = False,
    max_bytes: int = DEFAULT_OUTPUT_BYTES,
    cwd: str | Path | None = None,
) -> QueryResult:
    """Run a command and capture at most ``max_bytes - 1`` bytes of output.

    Standard input is inherited and standard error is discarded. The child
    is always waited for, so exactly one process is spawned and reaped per
    call.

    Args:
        argv: Argument vector; the first element is looked up on PATH.
        single_line: Strip one trailing newline from the captured output.
        max_bytes: Capture buffer size in bytes.
        cwd: Working directory for the child process.

    Returns:
        QueryResult with the exit status and decoded output. Output is empty
        and the status is FAILURE_STATUS when the process cannot be started.
    """
    try:
        proc = subprocess.Popen(  # noqa: S603
            list(argv),
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            cwd=str(cwd) if cwd is not None else None,
        )
    except OSError:
        return QueryResult(exit_code=FAILURE_STATUS)

    with proc:
        assert proc.stdout is not None  # noqa: S101
        data = proc.stdout.read(max(max_bytes - 1, 0))
        proc.stdout.close()
        returncode = proc.wait()

    stdout = data.decode("utf-8", errors="surrogateescape")
    if single_line:
        stdout = strip_line_terminator(stdout)

    # A negative return code means the child was terminated by a signal
    if returncode < 0:
        return QueryResult(exit_code=FAILURE_STATUS, stdout=stdout)
    return QueryResult(exit_code=returncode, stdout=stdout)


class GitQueryRunner:
    """Runs version-control queries with the real executable.

    Attributes:
        cwd: Directory the queries run in, or None for the process cwd.
        executable: Name or path of the git executable.
    """

    def __init__(
        self,
        *,
        cwd: Path | None = None,
        executable: str = "git",
        max_bytes: int = DEFAULT_OUTPUT_BYTES,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        self.cwd: Path | None = cwd
        self.executable: str = executable
        self._max_bytes: int = max_bytes
        self._logger: FilteringBoundLogger | None = logger

    def run(self, argv: Sequence[str], *, single_line: bool = False) -> QueryResult:
        """Run ``git`` with the given arguments (``argv`` excludes the executable)."""
        started = time.perf_counter()
        result = run_query(
            [self.executable, *argv],
            single_line=single_line,
            max_bytes=self._max_bytes,
            cwd=self.cwd,
        )
        if self._logger is not None:
            self._logger.debug(
                "query_finished",
                argv=list(argv),
                exit_code=result.exit_code,
                elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
            )
        return result
