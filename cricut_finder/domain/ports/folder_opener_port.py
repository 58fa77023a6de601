"""
Folder Opener Port Interface

Defines the contract for showing a directory in the native file manager.
This is an output port - implemented by one adapter per platform.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union


class IFolderOpenerPort(ABC):
    """
    Port interface for folder opening operations.

    Implementations launch the platform file manager without waiting
    for it to exit.
    """

    @abstractmethod
    def open_folder(self, path: Union[str, Path]) -> None:
        """
        Open a directory in the native file manager.

        Args:
            path: Directory to show

        Raises:
            FolderOpenFailed: If the file manager could not be launched
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the launcher command is available.

        Returns:
            True if the command can be found, False otherwise
        """
        pass
