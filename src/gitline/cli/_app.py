"""The command-line interface for gitline."""

import os
import sys
from typing import TYPE_CHECKING, Annotated, BinaryIO

from cyclopts import App, Parameter
from rich.console import Console

from gitline import __version__
from gitline.config import safe_load_config
from gitline.render import PromptData, render_prompt
from gitline.utils import (
    GitQueryRunner,
    create_prompt_logger,
    prompt_logging_enabled,
)

from ._exit_codes import EXIT_SUCCESS, EXIT_WRITE_ERROR

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

HELP = "Print a powerline-style bash prompt with git repository status."


def write_prompt(prompt: bytes, stream: BinaryIO | None = None) -> int:
    """Write the prompt bytes in one go.

    Args:
        prompt: Assembled prompt.
        stream: Binary output stream; defaults to standard output.

    Returns:
        EXIT_SUCCESS, or EXIT_WRITE_ERROR if the write failed.
    """
    out = stream if stream is not None else sys.stdout.buffer
    try:
        _ = out.write(prompt)
        out.flush()
    except OSError:
        return EXIT_WRITE_ERROR
    return EXIT_SUCCESS


def _open_logger(
    level: str, log_format: str, log_file: str, error_console: Console
) -> "FilteringBoundLogger | None":  # noqa: UP037
    if not prompt_logging_enabled(level):
        return None
    try:
        return create_prompt_logger(
            level=level,
            log_format=log_format,  # type: ignore[arg-type]
            log_file=log_file,
        )
    except OSError as e:
        error_console.print(f"[yellow]Warning:[/yellow] logging disabled: {e}")
        return None


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="gitline",
        help=HELP,
        help_on_error=True,
        version=__version__,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.default
    def _prompt(  # pyright: ignore[reportUnusedFunction]
        exit_status: Annotated[
            str | None,
            Parameter(
                help="Exit status of the previous command; anything but 0 "
                "colors the prompt character red.",
                allow_leading_hyphen=True,
            ),
        ] = None,
    ) -> None:
        """Print the prompt for the current directory.

        Args:
            exit_status: Exit status of the previous command, usually ``$?``.
        """
        config, _ = safe_load_config()
        logger = _open_logger(
            config.logging.level.value,
            config.logging.format.value,
            config.logging.file,
            error_console,
        )

        data = PromptData.from_environ(os.environ, exit_status)
        runner = GitQueryRunner(
            executable=config.prompt.git_executable,
            logger=logger,
        )
        prompt = render_prompt(
            data,
            runner=runner,
            capacity=config.prompt.capacity,
            logger=logger,
        )
        raise SystemExit(write_prompt(prompt))

    return app


app = create_app()


def main() -> None:
    """Default entrypoint for the `gitline` CLI."""
    app = create_app()
    app()


if __name__ == "__main__":
    main()
