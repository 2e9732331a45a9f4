# ruff: noqa: TC003  # Path needed at runtime for signature annotations
"""Error-tolerant configuration loading for the prompt command."""

import os
import sys
from pathlib import Path

from gitline.exceptions import ConfigError

from ._models import Config


def safe_load_config(*, user_config: Path | None = None) -> tuple[Config, str | None]:
    """Load configuration without ever preventing the prompt from rendering.

    Handles errors based on the GITLINE_STRICT_CONFIG environment variable:
    - If unset or "0": warn to stderr and return the default config
    - If "1": fail fast with sys.exit(1)

    Args:
        user_config: User config file override.

    Returns:
        Tuple of (Config, error_message). On success, error_message is None.
    """
    strict_mode = os.environ.get("GITLINE_STRICT_CONFIG", "0") == "1"

    try:
        return Config.load(user_config=user_config), None
    except (ConfigError, OSError) as e:
        error_msg = f"Failed to load config: {e}"
        if strict_mode:
            print(f"Error: {error_msg}", file=sys.stderr)  # noqa: T201
            sys.exit(1)
        print(f"Warning: {error_msg}", file=sys.stderr)  # noqa: T201
        return Config(), error_msg
