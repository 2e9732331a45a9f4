# ruff: noqa: TC003  # Path needed at runtime for dataclass field
"""Repository status models.

This module provides the immutable RepositoryStatus produced once per
prompt, together with the enums and display helpers the git segment uses.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path


class Operation(StrEnum):
    """In-progress operation detected from marker paths in the git directory.

    Values are the display text shown after the pipe in the git segment.
    """

    NONE = ""
    REBASE = "REBASE"
    AM = "AM"
    AM_OR_REBASE = "AM/REBASE"
    MERGING = "MERGING"
    CHERRY_PICKING = "CHERRY-PICKING"
    REVERTING = "REVERTING"
    BISECTING = "BISECTING"


class Divergence(StrEnum):
    """Relationship between HEAD and its configured upstream."""

    NONE = "none"
    AHEAD = "ahead"
    BEHIND = "behind"
    DIVERGED = "diverged"
    NO_UPSTREAM = "no-upstream"

    @property
    def glyph(self) -> str:
        """Arrow shown at the end of the git segment, empty when in sync."""
        return _DIVERGENCE_GLYPHS.get(self, "")


_DIVERGENCE_GLYPHS: dict[Divergence, str] = {
    Divergence.AHEAD: "↑",
    Divergence.BEHIND: "↓",
    Divergence.DIVERGED: "↕",
}

WORKING_TREE_MARK = "*"
INDEX_MARK = "+"
INDEX_UNKNOWN_MARK = "#"
STASH_MARK = "$"


@dataclass(frozen=True, slots=True)
class DirtyState:
    """Uncommitted-change flags for a work tree.

    Attributes:
        working_tree_dirty: Unstaged changes exist.
        index_dirty: Staged changes exist.
        index_unknown: The index could not be compared because the repository
            has no commits yet. Never set together with index_dirty.
        has_stash: At least one stash entry exists.
    """

    working_tree_dirty: bool = False
    index_dirty: bool = False
    index_unknown: bool = False
    has_stash: bool = False

    @property
    def markers(self) -> list[str]:
        """Present markers in fixed order: working tree, index, stash."""
        marks: list[str] = []
        if self.working_tree_dirty:
            marks.append(WORKING_TREE_MARK)
        if self.index_dirty:
            marks.append(INDEX_MARK)
        elif self.index_unknown:
            marks.append(INDEX_UNKNOWN_MARK)
        if self.has_stash:
            marks.append(STASH_MARK)
        return marks


@dataclass(frozen=True, slots=True)
class RepositoryStatus:
    """Structured status of the repository containing the current directory.

    A status without ``git_dir`` means "not a repository"; every other field
    then keeps its default.

    Attributes:
        git_dir: Resolved metadata directory.
        inside_git_dir: The current directory is inside the git directory.
        is_bare: The repository has no work tree.
        inside_work_tree: The current directory is inside the work tree.
        short_head: Abbreviated HEAD hash, or None for an unborn branch.
        branch_label: Display label (branch, detached description, or
            ``GIT_DIR!``).
        detached: HEAD points directly at a commit.
        bare_prefix: Show the ``BARE:`` marker before the label.
        operation: In-progress operation, if any.
        progress: ``(step, total)`` counters for the operation, if known.
        dirty: Uncommitted-change flags; only computed inside a work tree.
        divergence: Relationship to the upstream branch.
    """

    git_dir: Path | None = None
    inside_git_dir: bool = False
    is_bare: bool = False
    inside_work_tree: bool = False
    short_head: str | None = None
    branch_label: str = ""
    detached: bool = False
    bare_prefix: bool = False
    operation: Operation = Operation.NONE
    progress: tuple[str, str] | None = None
    dirty: DirtyState = field(default_factory=DirtyState)
    divergence: Divergence = Divergence.NONE

    @property
    def is_repository(self) -> bool:
        """Whether a git directory was found."""
        return self.git_dir is not None

    @property
    def operation_suffix(self) -> str:
        """Operation text such as ``|REBASE 2/5``, empty when idle."""
        if self.operation is Operation.NONE:
            return ""
        suffix = f"|{self.operation}"
        if self.progress is not None:
            step, total = self.progress
            suffix += f" {step}/{total}"
        return suffix

    @property
    def is_dirty(self) -> bool:
        """Whether the segment uses the dirty color pair."""
        return self.detached or bool(self.dirty.markers)


NOT_A_REPOSITORY = RepositoryStatus()
