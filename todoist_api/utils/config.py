"""
Configuration utilities for the Todoist client and ``tdcli``.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_FILE = ".todoist.env"
API_KEY_VAR = "TODOIST_API_KEY"


def load_env_vars() -> None:
    """
    Load environment variables from .env files in the following order:
    1. .todoist.env in the current directory
    2. .todoist.env in the user's home directory

    Variables already set in the environment are never overridden.
    """
    if os.path.exists(ENV_FILE):
        load_dotenv(ENV_FILE)

    home_env = Path.home() / ENV_FILE
    if home_env.exists():
        load_dotenv(home_env)


def get_config(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get configuration value from environment variables."""
    return os.getenv(key, default)


def get_api_key() -> Optional[str]:
    """Return the Todoist API token, or None when it is not configured."""
    return get_config(API_KEY_VAR) or None
