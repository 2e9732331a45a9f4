# pyright: reportExplicitAny=false, reportAny=false
"""Configuration models.

This module provides frozen Pydantic models for the gitline configuration
file and the Config container that merges defaults, the user file and
environment variables.
"""

from enum import StrEnum
from pathlib import Path
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gitline.exceptions import ConfigValidationError
from gitline.utils import get_user_config_file

from ._loader import deep_merge, parse_env_vars, read_toml_file

ENV_PREFIX = "GITLINE_"


class LogLevel(StrEnum):
    """Log level threshold values.

    Values are ordered from most verbose (debug) to least verbose (error).
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty uses the user log directory).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.WARNING
    format: LogFormat = LogFormat.JSON
    file: str = ""


class PromptConfig(BaseModel):
    """Prompt rendering section.

    Attributes:
        capacity: Output buffer size in bytes; longer prompts are truncated.
        git_executable: Name or path of the git executable.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    capacity: int = Field(default=4096, ge=64)
    git_executable: str = "git"


class Config(BaseModel):
    """Complete gitline configuration."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    prompt: PromptConfig = Field(default_factory=PromptConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, source: str | None = None) -> Self:
        """Create configuration from a dictionary.

        Args:
            data: Dictionary of configuration values; missing keys keep their
                defaults.
            source: Name of the source, for error messages.

        Returns:
            The validated configuration.

        Raises:
            ConfigValidationError: If a value has the wrong type or range.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            error = e.errors()[0]
            key = ".".join(str(part) for part in error["loc"])
            msg = f"Invalid value for {key}: {error['msg']}"
            raise ConfigValidationError(
                msg,
                key=key,
                value=error.get("input"),
                expected=error["type"],
                source=source,
            ) from e

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Create configuration from a TOML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file cannot be parsed.
            ConfigValidationError: If a value is invalid.
        """
        return cls.from_dict(read_toml_file(path), source=str(path))

    @classmethod
    def load(
        cls,
        *,
        user_config: Path | None = None,
        include_env: bool = True,
    ) -> Self:
        """Load configuration from all sources.

        Precedence, lowest to highest: built-in defaults, the user config
        file (when it exists), ``GITLINE_*`` environment variables.

        Args:
            user_config: User config file; defaults to the platform location.
            include_env: Whether to read environment variables.

        Returns:
            The merged configuration.
        """
        if user_config is None:
            user_config = get_user_config_file()

        data: dict[str, Any] = {}
        if user_config.is_file():
            data = read_toml_file(user_config)
        if include_env:
            data = deep_merge(data, parse_env_vars(ENV_PREFIX))
        return cls.from_dict(data, source=str(user_config))
