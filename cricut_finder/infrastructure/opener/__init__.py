"""
Folder Opener Infrastructure

Platform adapters for the native file manager.
"""

from .command import (
    CommandFolderOpener,
    ExplorerFolderOpener,
    MacFolderOpener,
    UnsupportedFolderOpener,
    XdgFolderOpener,
)
from .selector import select_folder_opener

__all__ = [
    "CommandFolderOpener",
    "ExplorerFolderOpener",
    "MacFolderOpener",
    "UnsupportedFolderOpener",
    "XdgFolderOpener",
    "select_folder_opener",
]
