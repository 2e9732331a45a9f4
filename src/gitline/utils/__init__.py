"""Low-level helpers: query execution, file probes, field splitting, logging."""

from ._exec import (
    DEFAULT_OUTPUT_BYTES,
    FAILURE_STATUS,
    GitQueryRunner,
    QueryResult,
    run_query,
    strip_line_terminator,
)
from ._logging import create_prompt_logger, prompt_logging_enabled
from ._paths import get_default_log_file, get_user_config_file
from ._probe import DEFAULT_READ_BYTES, is_dir, is_file, is_symlink, read_file
from ._split import FieldReader, split_fields

__all__ = [
    "DEFAULT_OUTPUT_BYTES",
    "DEFAULT_READ_BYTES",
    "FAILURE_STATUS",
    "FieldReader",
    "GitQueryRunner",
    "QueryResult",
    "create_prompt_logger",
    "get_default_log_file",
    "get_user_config_file",
    "is_dir",
    "is_file",
    "is_symlink",
    "prompt_logging_enabled",
    "read_file",
    "run_query",
    "split_fields",
    "strip_line_terminator",
]
