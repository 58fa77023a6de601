"""
Native file manager launchers.

One adapter per supported platform. Each starts the platform's file
manager on a directory and returns immediately without waiting for it.
"""

import shutil
import subprocess
from pathlib import Path
from typing import List, Union

from cricut_finder.domain.errors import FolderOpenFailed, UnsupportedPlatformError
from cricut_finder.domain.ports import IFolderOpenerPort
from cricut_finder.infrastructure.logging.logging_config import get_logger

logger = get_logger(__name__)


class CommandFolderOpener(IFolderOpenerPort):
    """
    Opens a folder by starting ``executable <path>``.

    Subclasses only set ``executable``.
    """

    executable: str = ""

    def build_command(self, path: Union[str, Path]) -> List[str]:
        return [self.executable, str(path)]

    def open_folder(self, path: Union[str, Path]) -> None:
        """
        Start the file manager on ``path``.

        Args:
            path: Directory to show

        Raises:
            FolderOpenFailed: If the process could not be started
        """
        cmd = self.build_command(path)
        logger.info("Opening folder", command=cmd[0], path=str(path))

        try:
            # Fire and forget: the file manager outlives this call
            subprocess.Popen(cmd)
        except OSError as e:
            raise FolderOpenFailed(path, detail=str(e), command=cmd[0]) from e

    def is_available(self) -> bool:
        return shutil.which(self.executable) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(executable='{self.executable}')"


class ExplorerFolderOpener(CommandFolderOpener):
    """Windows Explorer."""

    executable = "explorer"


class MacFolderOpener(CommandFolderOpener):
    """macOS Finder through ``open``."""

    executable = "open"


class XdgFolderOpener(CommandFolderOpener):
    """Desktop-default file manager on Linux through ``xdg-open``."""

    executable = "xdg-open"


class UnsupportedFolderOpener(IFolderOpenerPort):
    """Placeholder for platforms without a known file manager command."""

    def __init__(self, platform_name: str):
        self.platform_name = platform_name

    def open_folder(self, path: Union[str, Path]) -> None:
        raise UnsupportedPlatformError(path, self.platform_name)

    def is_available(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"UnsupportedFolderOpener(platform_name='{self.platform_name}')"
