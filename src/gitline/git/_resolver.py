"""Repository state resolution.

This module classifies the repository containing the current directory into
a RepositoryStatus. It combines one rev-parse query, a fixed set of marker
path probes under the git directory, and at most five further queries:

1. ``rev-parse --git-dir ... --short HEAD`` locates the git directory.
2. Marker paths select the in-progress operation, first match wins:
   ``rebase-merge/``, ``rebase-apply/``, ``MERGE_HEAD``,
   ``CHERRY_PICK_HEAD``, ``REVERT_HEAD``, ``BISECT_LOG``.
3. The branch label comes from the rebase ``head-name`` file, the
   ``symbolic-ref`` query (symlinked HEAD), the ``ref:`` line in HEAD, or a
   parenthesized ``describe`` / short-hash fallback for a detached HEAD.
4. Inside a work tree, diff, cached diff, stash and upstream queries fill in
   the dirty flags and divergence.

Every query is issued at most once and a failing query only degrades the
field it feeds.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from gitline.utils import (
    GitQueryRunner,
    is_dir,
    is_file,
    is_symlink,
    read_file,
    split_fields,
)

from . import _queries as queries
from ._models import (
    NOT_A_REPOSITORY,
    DirtyState,
    Divergence,
    Operation,
    RepositoryStatus,
)
from ._protocol import QueryRunner

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

REFS_HEADS_PREFIX = "refs/heads/"
SYMBOLIC_REF_PREFIX = "ref: "
GIT_DIR_LABEL = "GIT_DIR!"


def strip_refs_heads(ref: str) -> str:
    """Strip the ``refs/heads/`` prefix from a branch reference.

    Args:
        ref: Reference name, possibly with the prefix.

    Returns:
        The branch name; other references are returned unchanged.
    """
    return ref.removeprefix(REFS_HEADS_PREFIX)


def parse_divergence(counts: str) -> Divergence:
    """Map ``rev-list --count --left-right`` output to a Divergence.

    Args:
        counts: Two tab-separated counts, upstream side first.

    Returns:
        NONE for ``0\\t0``, BEHIND when the left count is zero, AHEAD when
        the right count is zero, DIVERGED otherwise.
    """
    if counts == "0\t0":
        return Divergence.NONE
    left, right = split_fields(counts, "\t", 2)
    if left == "0":
        return Divergence.BEHIND
    if right == "0":
        return Divergence.AHEAD
    return Divergence.DIVERGED


class RepositoryStatusResolver:
    """Resolves the RepositoryStatus for the runner's working directory."""

    def __init__(
        self,
        runner: QueryRunner,
        *,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        self._runner: QueryRunner = runner
        self._logger: FilteringBoundLogger | None = logger

    def resolve(self) -> RepositoryStatus:
        """Classify the repository.

        Returns:
            The resolved status, or NOT_A_REPOSITORY when the directory is not
            inside a git-managed tree.
        """
        result = self._runner.run(queries.REV_PARSE)
        git_dir_field, git_dir_flag, bare_flag, work_tree_flag, head_field = (
            split_fields(result.stdout, "\n", 5)
        )
        if not git_dir_field:
            return NOT_A_REPOSITORY

        inside_git_dir = git_dir_flag == "true"
        is_bare = bare_flag == "true"
        inside_work_tree = work_tree_flag == "true"
        # An unborn HEAD fails the query but still prints the first four fields
        short_head = (head_field or None) if result.ok else None

        git_dir = (self._runner.cwd or Path()) / git_dir_field

        operation, progress, label = self._detect_operation(git_dir)
        detached = False
        if label is None:
            label, detached = self._resolve_head_label(git_dir, short_head)
        label = strip_refs_heads(label) if label is not None else ""

        bare_prefix = False
        dirty = DirtyState()
        divergence = Divergence.NONE
        if inside_git_dir:
            if is_bare:
                bare_prefix = True
            else:
                label = GIT_DIR_LABEL
        elif inside_work_tree:
            dirty = self._check_dirty(short_head)
            divergence = self._check_upstream()

        status = RepositoryStatus(
            git_dir=git_dir,
            inside_git_dir=inside_git_dir,
            is_bare=is_bare,
            inside_work_tree=inside_work_tree,
            short_head=short_head,
            branch_label=label,
            detached=detached,
            bare_prefix=bare_prefix,
            operation=operation,
            progress=progress,
            dirty=dirty,
            divergence=divergence,
        )
        if self._logger is not None:
            self._logger.debug(
                "repository_resolved",
                git_dir=str(git_dir),
                branch=label,
                detached=detached,
                operation=operation.value or None,
                markers="".join(dirty.markers),
                divergence=divergence.value,
            )
        return status

    def _detect_operation(
        self, git_dir: Path
    ) -> tuple[Operation, tuple[str, str] | None, str | None]:
        """Probe marker paths in priority order.

        Returns:
            Tuple of (operation, progress counters, branch label from the
            rebase state or None).
        """
        label: str | None = None
        step = total = ""

        rebase_merge = git_dir / "rebase-merge"
        rebase_apply = git_dir / "rebase-apply"
        if is_dir(rebase_merge):
            operation = Operation.REBASE
            label = read_file(rebase_merge / "head-name") or None
            step = read_file(rebase_merge / "msgnum")
            total = read_file(rebase_merge / "end")
        elif is_dir(rebase_apply):
            step = read_file(rebase_apply / "next")
            total = read_file(rebase_apply / "last")
            if is_file(rebase_apply / "rebasing"):
                operation = Operation.REBASE
                label = read_file(rebase_apply / "head-name") or None
            elif is_file(rebase_apply / "applying"):
                operation = Operation.AM
            else:
                operation = Operation.AM_OR_REBASE
        elif is_file(git_dir / "MERGE_HEAD"):
            operation = Operation.MERGING
        elif is_file(git_dir / "CHERRY_PICK_HEAD"):
            operation = Operation.CHERRY_PICKING
        elif is_file(git_dir / "REVERT_HEAD"):
            operation = Operation.REVERTING
        elif is_file(git_dir / "BISECT_LOG"):
            operation = Operation.BISECTING
        else:
            operation = Operation.NONE

        progress = (step, total) if step and total else None
        return operation, progress, label

    def _resolve_head_label(
        self, git_dir: Path, short_head: str | None
    ) -> tuple[str | None, bool]:
        """Resolve the label from HEAD.

        Returns:
            Tuple of (label or None, whether HEAD is detached).
        """
        head = git_dir / "HEAD"
        if is_symlink(head):
            result = self._runner.run(queries.READ_HEAD, single_line=True)
            return (result.stdout if result.ok else None), False

        content = read_file(head)
        if content.startswith(SYMBOLIC_REF_PREFIX):
            return content[len(SYMBOLIC_REF_PREFIX) :], False

        result = self._runner.run(queries.DESCRIBE, single_line=True)
        description = result.stdout if result.ok else f"{short_head or ''}..."
        return f"({description})", True

    def _check_dirty(self, short_head: str | None) -> DirtyState:
        working_tree_dirty = not self._runner.run(queries.DIFF).ok
        index_dirty = not self._runner.run(queries.DIFF_CACHED).ok
        return DirtyState(
            working_tree_dirty=working_tree_dirty,
            index_dirty=index_dirty,
            index_unknown=not index_dirty and short_head is None,
            has_stash=self._runner.run(queries.CHECK_STASH).ok,
        )

    def _check_upstream(self) -> Divergence:
        result = self._runner.run(queries.UPSTREAM, single_line=True)
        if not result.ok:
            return Divergence.NO_UPSTREAM
        return parse_divergence(result.stdout)


def resolve_repository_status(
    runner: QueryRunner | None = None,
    *,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> RepositoryStatus:
    """Resolve the RepositoryStatus for the current directory.

    Args:
        runner: Query runner; defaults to a GitQueryRunner in the process cwd.
        logger: Optional structured logger for debug output.

    Returns:
        The resolved RepositoryStatus.
    """
    if runner is None:
        runner = GitQueryRunner(logger=logger)
    return RepositoryStatusResolver(runner, logger=logger).resolve()
