from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from gitline.render import PromptData, abbreviate_home


class TestAbbreviateHome:
    @pytest.mark.parametrize(
        ("path", "home", "expected"),
        [
            ("/home/alice", "/home/alice", "~"),
            ("/home/alice/src", "/home/alice", "~/src"),
            ("/home/alice/src", "/home/alice/", "~/src"),
            ("/home/alicia", "/home/alice", "/home/alicia"),
            ("/srv/data", "/home/alice", "/srv/data"),
            ("/srv/data", None, "/srv/data"),
            ("/srv/data", "", "/srv/data"),
            ("/", "/", "~"),
            ("/srv", "/", "/srv"),
        ],
    )
    def test_abbreviate(self, path: str, home: str | None, expected: str) -> None:
        assert abbreviate_home(path, home) == expected


class TestPromptDataFromEnviron:
    @pytest.fixture
    def environ(self) -> dict[str, str]:
        return {
            "USER": "alice",
            "PWD": "/home/alice/src/proj",
            "HOME": "/home/alice",
        }

    def test_basic_fields(self, environ: dict[str, str]) -> None:
        data = PromptData.from_environ(environ, host="box")

        assert data.user == "alice"
        assert data.host == "box"
        assert data.pwd == "/home/alice/src/proj"
        assert data.cwd == "~/src/proj"
        assert data.error is False
        assert data.ssh is False
        assert data.virtual_env is None

    @pytest.mark.parametrize(
        ("exit_status", "error"),
        [(None, False), ("0", False), ("1", True), ("130", True), ("", True)],
    )
    def test_error_flag(
        self, environ: dict[str, str], exit_status: str | None, error: bool
    ) -> None:
        data = PromptData.from_environ(environ, exit_status, host="box")
        assert data.error is error

    def test_ssh_session(self, environ: dict[str, str]) -> None:
        environ["SSH_CLIENT"] = "10.0.0.1 50000 22"
        assert PromptData.from_environ(environ, host="box").ssh is True

    def test_virtual_env(self, environ: dict[str, str]) -> None:
        environ["VIRTUAL_ENV"] = "/home/alice/.venvs/tools"
        data = PromptData.from_environ(environ, host="box")
        assert data.virtual_env == "/home/alice/.venvs/tools"

    def test_empty_virtual_env_ignored(self, environ: dict[str, str]) -> None:
        environ["VIRTUAL_ENV"] = ""
        assert PromptData.from_environ(environ, host="box").virtual_env is None

    def test_missing_pwd_uses_process_cwd(
        self,
        environ: dict[str, str],
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        del environ["PWD"]
        monkeypatch.chdir(tmp_path)

        data = PromptData.from_environ(environ, host="box")

        assert Path(data.pwd) == tmp_path.resolve()

    def test_missing_user(self, environ: dict[str, str]) -> None:
        del environ["USER"]
        assert PromptData.from_environ(environ, host="box").user == ""

    def test_default_host(
        self, environ: dict[str, str], mocker: MockerFixture
    ) -> None:
        _ = mocker.patch(
            "gitline.render._context.socket.gethostname", return_value="fromsock"
        )
        assert PromptData.from_environ(environ).host == "fromsock"
