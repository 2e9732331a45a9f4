"""Segment producers.

Each function appends one segment to a PromptBuffer. Conditional segments
write nothing when their condition does not hold.
"""

import os
from pathlib import Path

from gitline.git import RepositoryStatus

from . import _styles as styles
from ._buffer import PromptBuffer
from ._context import PromptData


def short_directory(cwd: str) -> str:
    """Return the last path component of a display directory.

    Paths shorter than two characters (``/``, ``~``) are returned verbatim.
    A trailing slash stays attached to the last component.
    """
    if len(cwd) < 2:
        return cwd
    return cwd[cwd.rfind("/", 0, len(cwd) - 1) + 1 :]


def title_segment(buf: PromptBuffer, data: PromptData) -> None:
    """Set the terminal title to ``user@host:cwd``."""
    buf.append_raw("\\[\x1b]0;")
    buf.append_escaped(data.user, "@", data.host, ":", data.cwd)
    buf.append_raw("\a\\]")


def user_host_segment(buf: PromptBuffer, data: PromptData) -> None:
    buf.begin_segment(styles.USER_HOST.fg, styles.USER_HOST.bg)
    buf.append_escaped(data.user, "@", data.host)


def ssh_segment(buf: PromptBuffer, data: PromptData) -> None:
    if data.ssh:
        buf.begin_segment(styles.SSH.fg, styles.SSH.bg)
        buf.append_escaped(styles.SSH_GLYPH)


def cwd_segment(buf: PromptBuffer, data: PromptData) -> None:
    buf.begin_segment(styles.CWD.fg, styles.CWD.bg)
    buf.append_escaped(short_directory(data.cwd))


def access_segment(buf: PromptBuffer, data: PromptData) -> None:
    """Show a lock when the working directory is not writable."""
    if not os.access(data.pwd, os.W_OK):
        buf.begin_segment(styles.READ_ONLY.fg, styles.READ_ONLY.bg)
        buf.append_escaped(styles.READ_ONLY_GLYPH)


def venv_segment(buf: PromptBuffer, data: PromptData) -> None:
    if data.virtual_env:
        buf.begin_segment(styles.VIRTUAL_ENV.fg, styles.VIRTUAL_ENV.bg)
        buf.append_escaped(styles.VIRTUAL_ENV_GLYPH, Path(data.virtual_env).name)


def git_segment_text(status: RepositoryStatus) -> str:
    """Build the git segment text for a resolved repository.

    The order is: ``BARE:`` prefix, branch label, marker group, operation
    suffix, divergence glyph. Markers are joined by single spaces and the
    group is separated from the label (and from a following operation) by
    one space.
    """
    text = "BARE:" if status.bare_prefix else ""
    text += status.branch_label
    markers = status.dirty.markers
    if markers:
        text += " " + " ".join(markers)
    suffix = status.operation_suffix
    if suffix:
        text += (" " if markers else "") + suffix
    return text + status.divergence.glyph


def git_segment(buf: PromptBuffer, status: RepositoryStatus) -> None:
    """Show the repository status; nothing outside a repository."""
    if not status.is_repository:
        return
    style = styles.GIT_DIRTY if status.is_dirty else styles.GIT_CLEAN
    buf.begin_segment(style.fg, style.bg)
    buf.append_escaped(git_segment_text(status))


def status_segment(buf: PromptBuffer, data: PromptData) -> None:
    style = styles.STATUS_ERROR if data.error else styles.STATUS_OK
    buf.begin_segment(style.fg, style.bg)
    buf.append_escaped(styles.PROMPT_CHAR)


def final_segment(buf: PromptBuffer) -> None:
    buf.finalize()
