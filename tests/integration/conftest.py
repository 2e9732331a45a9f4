import shutil
import subprocess
from pathlib import Path

import pytest

requires_git = pytest.mark.skipif(
    shutil.which("git") is None, reason="git executable not available"
)


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.integration)
            item.add_marker(requires_git)


def git(
    path: Path, *args: str, check: bool = True
) -> subprocess.CompletedProcess[str]:
    """Run a git command in ``path`` and return the completed process."""
    return subprocess.run(
        ["git", *args],
        cwd=str(path),
        capture_output=True,
        text=True,
        check=check,
    )


def init_git_repo(path: Path, *, bare: bool = False) -> None:
    """Initialize a repository in the given path with HEAD on main."""
    path.mkdir(parents=True, exist_ok=True)
    _ = git(path, "init", *(["--bare"] if bare else []))
    _ = git(path, "symbolic-ref", "HEAD", "refs/heads/main")
    if not bare:
        _ = git(path, "config", "user.email", "test@example.com")
        _ = git(path, "config", "user.name", "Test User")


def commit_file(path: Path, name: str, content: str, message: str = "update") -> None:
    """Write a file and commit it."""
    _ = (path / name).write_text(content)
    _ = git(path, "add", name)
    _ = git(path, "commit", "-q", "-m", message)


@pytest.fixture(autouse=True)
def isolated_git(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep git from reading user config or discovering enclosing repos."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    for var in ("GIT_DIR", "GIT_WORK_TREE", "GIT_INDEX_FILE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """A work tree on main with one commit."""
    path = tmp_path / "repo"
    init_git_repo(path)
    commit_file(path, "README.md", "hello\n", "initial")
    return path
