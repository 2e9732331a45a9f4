"""Fake query runner for testing.

This module provides a FakeQueryRunner that implements QueryRunner with
canned results, so resolver behavior can be tested without a git binary.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from gitline.utils import FAILURE_STATUS, QueryResult, strip_line_terminator


@dataclass(slots=True)
class FakeQueryRunner:
    """Query runner returning canned results keyed by argument vector.

    Unknown queries answer with FAILURE_STATUS and no output, the same way a
    missing git binary would. Every call is recorded in ``calls``.

    Example:
        >>> runner = FakeQueryRunner()
        >>> runner.set(("symbolic-ref", "HEAD"), stdout="refs/heads/main\\n")
        >>> runner.run(("symbolic-ref", "HEAD"), single_line=True).stdout
        'refs/heads/main'
    """

    cwd: Path | None = None
    results: dict[tuple[str, ...], QueryResult] = field(default_factory=dict)
    calls: list[tuple[str, ...]] = field(default_factory=list)

    def set(
        self, argv: Sequence[str], *, exit_code: int = 0, stdout: str = ""
    ) -> None:
        """Register the result for a query."""
        self.results[tuple(argv)] = QueryResult(exit_code=exit_code, stdout=stdout)

    def run(self, argv: Sequence[str], *, single_line: bool = False) -> QueryResult:
        key = tuple(argv)
        self.calls.append(key)
        result = self.results.get(key, QueryResult(exit_code=FAILURE_STATUS))
        if single_line:
            return QueryResult(
                exit_code=result.exit_code,
                stdout=strip_line_terminator(result.stdout),
            )
        return result
