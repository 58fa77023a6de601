"""
Folder opener selection by operating system.
"""

import platform
from typing import Dict, Optional, Type

from cricut_finder.domain.ports import IFolderOpenerPort
from cricut_finder.infrastructure.logging.logging_config import get_logger
from cricut_finder.infrastructure.opener.command import (
    CommandFolderOpener,
    ExplorerFolderOpener,
    MacFolderOpener,
    UnsupportedFolderOpener,
    XdgFolderOpener,
)

logger = get_logger(__name__)

# Keys are platform.system() values
OPENERS: Dict[str, Type[CommandFolderOpener]] = {
    "Windows": ExplorerFolderOpener,
    "Darwin": MacFolderOpener,
    "Linux": XdgFolderOpener,
}


def select_folder_opener(system: Optional[str] = None) -> IFolderOpenerPort:
    """
    Pick the folder opener for an operating system.

    Args:
        system: platform.system() style name; the running system when omitted

    Returns:
        The matching adapter, or an UnsupportedFolderOpener whose
        open_folder() always raises UnsupportedPlatformError
    """
    system = system or platform.system()
    opener_cls = OPENERS.get(system)

    if opener_cls is None:
        logger.warning("No folder opener for platform", platform=system)
        return UnsupportedFolderOpener(system or "unknown")

    return opener_cls()
