"""
Home directory resolution.

Looks the current user up in the platform user database first and falls
back to the conventional environment variable.
"""

import os
import sys
from pathlib import Path
from typing import Optional

from cricut_finder.domain.errors import HomeDirUnresolved
from cricut_finder.infrastructure.logging.logging_config import get_logger

logger = get_logger(__name__)


def _lookup_user_home() -> Optional[str]:
    """Home directory from the user database, or None if the lookup fails."""
    if sys.platform.startswith("win"):
        # No password database on Windows; expanduser reads the profile location
        home = os.path.expanduser("~")
        return None if home == "~" else home

    import pwd

    try:
        return pwd.getpwuid(os.getuid()).pw_dir or None
    except KeyError:
        return None


def _home_env_var() -> str:
    return "USERPROFILE" if sys.platform.startswith("win") else "HOME"


def resolve_home_dir() -> Path:
    """
    Resolve the current user's home directory.

    Returns:
        Path of the home directory

    Raises:
        HomeDirUnresolved: If neither the user lookup nor the environment
            variable yields a value
    """
    home = _lookup_user_home()
    if home:
        return Path(home)

    env_var = _home_env_var()
    home = os.environ.get(env_var, "")
    if home:
        logger.debug("Home directory taken from environment", env_var=env_var, path=home)
        return Path(home)

    raise HomeDirUnresolved(detail=f"user lookup failed and {env_var} is not set")
