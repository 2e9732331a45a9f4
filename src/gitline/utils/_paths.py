"""Platform-specific paths used by gitline."""

from pathlib import Path

import platformdirs

APP_NAME = "gitline"


def get_user_config_file() -> Path:
    r"""Get the platform-specific user config file path.

    - Linux: ``~/.config/gitline/config.toml``
    - macOS: ``~/Library/Application Support/gitline/config.toml``
    - Windows: ``%APPDATA%\gitline\config.toml``

    The path is returned whether or not it exists.
    """
    return platformdirs.user_config_path(APP_NAME) / "config.toml"


def get_default_log_file() -> Path:
    """Get the default log file path inside the user log directory."""
    return platformdirs.user_log_path(APP_NAME) / "gitline.log"
