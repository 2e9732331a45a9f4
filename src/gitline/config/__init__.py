"""gitline configuration.

Example:
    >>> from gitline.config import Config
    >>> config = Config.load()
    >>> config.prompt.capacity
    4096
"""

from gitline.exceptions import ConfigError, ConfigLoadError, ConfigValidationError

from ._load import safe_load_config
from ._loader import deep_merge, parse_env_vars, read_toml_file, set_nested_key
from ._models import (
    ENV_PREFIX,
    Config,
    LogFormat,
    LoggingConfig,
    LogLevel,
    PromptConfig,
)

__all__ = [
    "ENV_PREFIX",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "PromptConfig",
    "deep_merge",
    "parse_env_vars",
    "read_toml_file",
    "safe_load_config",
    "set_nested_key",
]
