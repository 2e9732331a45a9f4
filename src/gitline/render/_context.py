"""Identity and location facts for the non-git segments."""

import os
import socket
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Self

SUCCESS_STATUS = "0"


def abbreviate_home(path: str, home: str | None) -> str:
    """Replace a leading home directory with ``~``.

    Args:
        path: Absolute directory path.
        home: Home directory, or None when HOME is unset.

    Returns:
        The path with ``~`` substituted when it is the home directory or lies
        beneath it.
    """
    if not home:
        return path
    home = home.rstrip("/") or "/"
    if path == home:
        return "~"
    if home != "/" and path.startswith(home + "/"):
        return "~" + path[len(home) :]
    return path


@dataclass(frozen=True, slots=True)
class PromptData:
    """Facts shown by the identity, location and status segments.

    Attributes:
        user: Login name.
        host: Host name.
        pwd: Absolute working directory, used for the write-access check.
        cwd: Display form of the working directory (home shown as ``~``).
        error: The previous command reported a nonzero exit status.
        ssh: The shell runs inside an SSH session.
        virtual_env: Active virtual environment directory, if any.
    """

    user: str
    host: str
    pwd: str
    cwd: str
    error: bool = False
    ssh: bool = False
    virtual_env: str | None = None

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str] | None = None,
        exit_status: str | None = None,
        *,
        host: str | None = None,
    ) -> Self:
        """Collect prompt facts from environment variables.

        Args:
            environ: Environment mapping; defaults to ``os.environ``.
            exit_status: Previous command's exit status as text. Anything
                other than ``"0"`` marks an error; None means not reported.
            host: Host name override; defaults to ``socket.gethostname()``.

        Returns:
            The collected PromptData.
        """
        env = os.environ if environ is None else environ
        pwd = env.get("PWD") or os.getcwd()
        return cls(
            user=env.get("USER", ""),
            host=host if host is not None else socket.gethostname(),
            pwd=pwd,
            cwd=abbreviate_home(pwd, env.get("HOME")),
            error=exit_status is not None and exit_status != SUCCESS_STATUS,
            ssh="SSH_CLIENT" in env,
            virtual_env=env.get("VIRTUAL_ENV") or None,
        )
