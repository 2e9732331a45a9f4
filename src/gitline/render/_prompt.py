"""Prompt assembly.

Segments are emitted in a fixed order: title, user/host, SSH indicator,
directory, write-access indicator, virtual environment, git, status, and
the final reset.
"""

from typing import TYPE_CHECKING

from gitline.git import RepositoryStatus, resolve_repository_status

from ._buffer import DEFAULT_CAPACITY, PromptBuffer
from ._context import PromptData
from ._segments import (
    access_segment,
    cwd_segment,
    final_segment,
    git_segment,
    ssh_segment,
    status_segment,
    title_segment,
    user_host_segment,
    venv_segment,
)

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from gitline.git import QueryRunner


def build_prompt(
    data: PromptData,
    status: RepositoryStatus,
    *,
    capacity: int = DEFAULT_CAPACITY,
) -> bytes:
    """Assemble the prompt from already-collected facts.

    Args:
        data: Identity and location facts.
        status: Resolved repository status.
        capacity: Output buffer capacity in bytes.

    Returns:
        The prompt bytes, at most ``capacity`` long.
    """
    buf = PromptBuffer(capacity)
    title_segment(buf, data)
    user_host_segment(buf, data)
    ssh_segment(buf, data)
    cwd_segment(buf, data)
    access_segment(buf, data)
    venv_segment(buf, data)
    git_segment(buf, status)
    status_segment(buf, data)
    final_segment(buf)
    return buf.getvalue()


def render_prompt(
    data: PromptData,
    *,
    runner: "QueryRunner | None" = None,  # noqa: UP037
    capacity: int = DEFAULT_CAPACITY,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> bytes:
    """Resolve the repository status and assemble the prompt.

    Args:
        data: Identity and location facts.
        runner: Query runner; defaults to git in the process cwd.
        capacity: Output buffer capacity in bytes.
        logger: Optional structured logger.

    Returns:
        The prompt bytes.
    """
    status = resolve_repository_status(runner, logger=logger)
    prompt = build_prompt(data, status, capacity=capacity)
    if logger is not None:
        logger.debug("prompt_rendered", size=len(prompt), capacity=capacity)
    return prompt
