"""Logging utilities for gitline.

This module provides a standalone structlog logger factory that writes
JSON-formatted or text-formatted logs to a file. The logger is
self-contained and does not modify global structlog configuration, and it
never writes to standard output, which carries the prompt itself.
"""

import logging
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Literal, cast

import structlog

from ._paths import get_default_log_file

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

LogFormatType = Literal["json", "text"]

# Every record gitline writes is at debug or info level
HIGHEST_EMITTED_LEVEL = logging.INFO


def _log_level_from_string(level: str, *, respect_env: bool = False) -> int:
    """Convert a log level string to a logging level integer.

    Args:
        level: Log level string (debug, info, warning, error).
        respect_env: If True, GITLINE_DEBUG overrides to DEBUG level.

    Returns:
        The logging level as an integer, INFO for unknown names.
    """
    if respect_env and getenv("GITLINE_DEBUG", None):
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(level.upper(), logging.INFO)


def prompt_logging_enabled(level: str) -> bool:
    """Check whether a prompt logger at this level would ever write a record.

    The log file is only opened when this is true, so a prompt at the default
    warning level never touches the log directory.
    """
    return _log_level_from_string(level, respect_env=True) <= HIGHEST_EMITTED_LEVEL

def _create_logger(
    log_file_path: str,
    *,
    log_level: int,
    log_format: LogFormatType = "json",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a standalone structlog logger appending to the specified file.

    Args:
        log_file_path: Path to the log file (opened in append mode).
        log_level: Minimum level that is written.
        log_format: Output format, either "json" or "text".

    Returns:
        A configured FilteringBoundLogger instance.
    """
    log_path = Path(log_file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger_factory = structlog.WriteLoggerFactory(file=log_path.open("a"))

    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Text format: "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            logger_factory(),
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(log_level),
            context_class=dict,
        ),
    )


def create_prompt_logger(
    *,
    level: str = "warning",
    log_format: LogFormatType = "json",
    log_file: str = "",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create the logger used while rendering a prompt.

    The level can be forced to DEBUG with the GITLINE_DEBUG environment
    variable, which is the quickest way to see every git query a prompt
    issues and how long each one took.

    Args:
        level: Log level threshold (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        log_file: Path to log file (uses the user log directory if empty).

    Returns:
        A FilteringBoundLogger instance.
    """
    effective_file = log_file if log_file else str(get_default_log_file())
    effective_level = _log_level_from_string(level, respect_env=True)
    return _create_logger(
        effective_file,
        log_level=effective_level,
        log_format=log_format,
    )
