"""Tests for segment producers and prompt assembly."""

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from gitline.git import (
    NOT_A_REPOSITORY,
    REV_PARSE,
    DirtyState,
    Divergence,
    FakeQueryRunner,
    Operation,
    RepositoryStatus,
)
from gitline.render import (
    RESET,
    SEPARATOR_GLYPH,
    PromptData,
    build_prompt,
    color_pair,
    foreground,
    git_segment_text,
    render_prompt,
    short_directory,
)

GIT_DIR = Path("/home/alice/src/proj/.git")


def transition(prev_bg: str, fg: str, bg: str) -> str:
    return " " + color_pair(prev_bg, bg) + f"{SEPARATOR_GLYPH} " + foreground(fg)


@pytest.fixture
def data() -> PromptData:
    return PromptData(
        user="alice",
        host="box",
        pwd="/home/alice/src/proj",
        cwd="~/src/proj",
    )


@pytest.fixture(autouse=True)
def writable(mocker: MockerFixture) -> None:
    _ = mocker.patch("gitline.render._segments.os.access", return_value=True)


class TestShortDirectory:
    @pytest.mark.parametrize(
        ("cwd", "expected"),
        [
            ("~/src/proj", "proj"),
            ("/usr/local/bin", "bin"),
            ("~", "~"),
            ("/", "/"),
            ("/usr", "usr"),
            ("/usr/local/", "local/"),
            ("relative", "relative"),
        ],
    )
    def test_last_component(self, cwd: str, expected: str) -> None:
        assert short_directory(cwd) == expected


class TestGitSegmentText:
    def test_branch_only(self) -> None:
        status = RepositoryStatus(git_dir=GIT_DIR, branch_label="main")
        assert git_segment_text(status) == "main"

    def test_markers_space_separated(self) -> None:
        status = RepositoryStatus(
            git_dir=GIT_DIR,
            branch_label="main",
            dirty=DirtyState(working_tree_dirty=True, has_stash=True),
        )
        assert git_segment_text(status) == "main * $"

    def test_markers_and_operation(self) -> None:
        status = RepositoryStatus(
            git_dir=GIT_DIR,
            branch_label="feature",
            operation=Operation.REBASE,
            progress=("2", "5"),
            dirty=DirtyState(working_tree_dirty=True),
        )
        assert git_segment_text(status) == "feature * |REBASE 2/5"

    def test_operation_without_markers(self) -> None:
        status = RepositoryStatus(
            git_dir=GIT_DIR, branch_label="main", operation=Operation.MERGING
        )
        assert git_segment_text(status) == "main|MERGING"

    def test_divergence_glyph_last(self) -> None:
        status = RepositoryStatus(
            git_dir=GIT_DIR,
            branch_label="main",
            dirty=DirtyState(index_dirty=True),
            divergence=Divergence.DIVERGED,
        )
        assert git_segment_text(status) == "main +↕"

    def test_bare_prefix(self) -> None:
        status = RepositoryStatus(
            git_dir=GIT_DIR, branch_label="main", bare_prefix=True
        )
        assert git_segment_text(status) == "BARE:main"


class TestBuildPrompt:
    def test_clean_repository_on_main(self, data: PromptData) -> None:
        status = RepositoryStatus(
            git_dir=GIT_DIR,
            inside_work_tree=True,
            branch_label="main",
            divergence=Divergence.NO_UPSTREAM,
        )

        expected = (
            "\\[\x1b]0;alice@box:~/src/proj\a\\]"
            + color_pair("253", "242")
            + "alice@box"
            + transition("242", "15", "32")
            + "proj"
            + transition("32", "0", "148")
            + "main"
            + transition("148", "40", "0")
            + "\\$"
            + RESET
        )
        assert build_prompt(data, status) == expected.encode()

    def test_outside_repository_has_no_git_bytes(self, data: PromptData) -> None:
        expected = (
            "\\[\x1b]0;alice@box:~/src/proj\a\\]"
            + color_pair("253", "242")
            + "alice@box"
            + transition("242", "15", "32")
            + "proj"
            + transition("32", "40", "0")
            + "\\$"
            + RESET
        )
        assert build_prompt(data, NOT_A_REPOSITORY) == expected.encode()

    def test_dirty_colors(self, data: PromptData) -> None:
        status = RepositoryStatus(
            git_dir=GIT_DIR,
            branch_label="feature",
            operation=Operation.REBASE,
            progress=("2", "5"),
            dirty=DirtyState(working_tree_dirty=True),
        )

        prompt = build_prompt(data, status)

        segment = transition("32", "15", "125") + "feature * |REBASE 2/5"
        assert segment.encode() in prompt

    def test_detached_head_uses_dirty_colors(self, data: PromptData) -> None:
        status = RepositoryStatus(
            git_dir=GIT_DIR, branch_label="(a1b2c3d...)", detached=True
        )
        prompt = build_prompt(data, status)
        assert color_pair("32", "125").encode() in prompt

    def test_error_status(self, data: PromptData) -> None:
        failed = PromptData(
            user=data.user, host=data.host, pwd=data.pwd, cwd=data.cwd, error=True
        )

        prompt = build_prompt(failed, NOT_A_REPOSITORY)

        assert prompt.endswith(
            (transition("32", "160", "0") + "\\$" + RESET).encode()
        )

    def test_ssh_segment(self, data: PromptData) -> None:
        remote = PromptData(
            user=data.user, host=data.host, pwd=data.pwd, cwd=data.cwd, ssh=True
        )

        prompt = build_prompt(remote, NOT_A_REPOSITORY)

        assert (transition("242", "254", "172") + "\u26a1").encode() in prompt
        assert (transition("172", "15", "32") + "proj").encode() in prompt

    def test_read_only_segment(self, data: PromptData, mocker: MockerFixture) -> None:
        access = mocker.patch(
            "gitline.render._segments.os.access", return_value=False
        )

        prompt = build_prompt(data, NOT_A_REPOSITORY)

        access.assert_called_once()
        assert (transition("32", "254", "127") + "\ue0a2").encode() in prompt

    def test_virtual_env_segment(self, data: PromptData) -> None:
        venv = PromptData(
            user=data.user,
            host=data.host,
            pwd=data.pwd,
            cwd=data.cwd,
            virtual_env="/home/alice/.venvs/tools",
        )

        prompt = build_prompt(venv, NOT_A_REPOSITORY)

        assert (transition("32", "0", "2") + "\U0001f40dtools").encode() in prompt

    def test_escapes_variable_text(self, data: PromptData) -> None:
        status = RepositoryStatus(git_dir=GIT_DIR, branch_label="pay$day")
        odd = PromptData(
            user=data.user, host=data.host, pwd="/tmp/a\\b", cwd="/tmp/a\\b"
        )

        prompt = build_prompt(odd, status)

        assert b"pay\\$day" in prompt
        assert b"a\\\\b" in prompt

    def test_capacity_bounds_output(self, data: PromptData) -> None:
        status = RepositoryStatus(git_dir=GIT_DIR, branch_label="main")
        full = build_prompt(data, status)

        truncated = build_prompt(data, status, capacity=64)

        assert truncated == full[:64]


class TestRenderPrompt:
    def test_outside_repository(self, data: PromptData) -> None:
        runner = FakeQueryRunner()

        prompt = render_prompt(data, runner=runner)

        assert prompt == build_prompt(data, NOT_A_REPOSITORY)
        assert runner.calls == [REV_PARSE]

    def test_logs_rendered_size(self, data: PromptData, mocker: MockerFixture) -> None:
        logger = mocker.MagicMock()

        prompt = render_prompt(data, runner=FakeQueryRunner(), logger=logger)

        logger.debug.assert_any_call(
            "prompt_rendered", size=len(prompt), capacity=4096
        )
