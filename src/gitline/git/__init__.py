"""Git repository state resolution for the prompt.

This package classifies the repository containing the current directory
into an immutable RepositoryStatus using a handful of read-only git queries
and marker-file probes.
"""

from ._fake import FakeQueryRunner
from ._models import (
    INDEX_MARK,
    INDEX_UNKNOWN_MARK,
    NOT_A_REPOSITORY,
    STASH_MARK,
    WORKING_TREE_MARK,
    DirtyState,
    Divergence,
    Operation,
    RepositoryStatus,
)
from ._protocol import QueryRunner
from ._queries import (
    CHECK_STASH,
    DESCRIBE,
    DIFF,
    DIFF_CACHED,
    READ_HEAD,
    REV_PARSE,
    UPSTREAM,
)
from ._resolver import (
    GIT_DIR_LABEL,
    RepositoryStatusResolver,
    parse_divergence,
    resolve_repository_status,
    strip_refs_heads,
)

__all__ = [
    "CHECK_STASH",
    "DESCRIBE",
    "DIFF",
    "DIFF_CACHED",
    "GIT_DIR_LABEL",
    "INDEX_MARK",
    "INDEX_UNKNOWN_MARK",
    "NOT_A_REPOSITORY",
    "READ_HEAD",
    "REV_PARSE",
    "STASH_MARK",
    "UPSTREAM",
    "WORKING_TREE_MARK",
    "DirtyState",
    "Divergence",
    "FakeQueryRunner",
    "Operation",
    "QueryRunner",
    "RepositoryStatus",
    "RepositoryStatusResolver",
    "parse_divergence",
    "resolve_repository_status",
    "strip_refs_heads",
]
