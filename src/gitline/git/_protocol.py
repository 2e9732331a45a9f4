# ruff: noqa: TC003  # Path needed at runtime for Protocol attribute
"""Query runner protocol for type-safe dependency injection.

The resolver only needs "run this git query and tell me what it printed".
Both the real GitQueryRunner and the FakeQueryRunner used in tests satisfy
this protocol.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from gitline.utils import QueryResult


@runtime_checkable
class QueryRunner(Protocol):
    """Protocol for running read-only git queries.

    Attributes:
        cwd: Directory the queries run in; relative git directories reported
            by the queries are anchored here. None means the process cwd.
    """

    cwd: Path | None

    def run(self, argv: Sequence[str], *, single_line: bool = False) -> QueryResult:
        """Run one git query.

        Args:
            argv: Git arguments, without the executable name.
            single_line: Strip one trailing newline from the output.

        Returns:
            The query result. Failures are reported through the exit code,
            never raised.
        """
        ...
