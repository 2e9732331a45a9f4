"""Command-line entrypoint for gitline."""

from ._app import app, create_app, main, write_prompt
from ._exit_codes import EXIT_SUCCESS, EXIT_WRITE_ERROR

__all__ = [
    "EXIT_SUCCESS",
    "EXIT_WRITE_ERROR",
    "app",
    "create_app",
    "main",
    "write_prompt",
]
