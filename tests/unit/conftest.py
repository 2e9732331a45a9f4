from pathlib import Path

import pytest

from gitline.git import (
    CHECK_STASH,
    DIFF,
    DIFF_CACHED,
    REV_PARSE,
    UPSTREAM,
    FakeQueryRunner,
)

SHORT_HEAD = "a1b2c3d"


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.unit)


def rev_parse_output(
    git_dir: Path | str,
    *,
    inside_git_dir: bool = False,
    bare: bool = False,
    work_tree: bool = True,
    short_head: str | None = SHORT_HEAD,
) -> str:
    """Build the combined rev-parse output the resolver expects."""

    def flag(value: bool) -> str:  # noqa: FBT001
        return "true" if value else "false"

    lines = [str(git_dir), flag(inside_git_dir), flag(bare), flag(work_tree)]
    # An unborn HEAD echoes the literal argument back
    lines.append(short_head if short_head is not None else "HEAD")
    return "\n".join(lines) + "\n"


@pytest.fixture
def git_dir(tmp_path: Path) -> Path:
    """Create a minimal git directory with HEAD on main."""
    path = tmp_path / ".git"
    path.mkdir()
    _ = (path / "HEAD").write_text("ref: refs/heads/main\n")
    return path


@pytest.fixture
def runner(git_dir: Path) -> FakeQueryRunner:
    """Fake runner describing a clean work tree on main without upstream."""
    fake = FakeQueryRunner()
    fake.set(REV_PARSE, stdout=rev_parse_output(git_dir))
    fake.set(DIFF)
    fake.set(DIFF_CACHED)
    fake.set(CHECK_STASH, exit_code=1)
    fake.set(UPSTREAM, exit_code=128)
    return fake
