"""
Application Services

Orchestrates the discovery and folder-opening ports for the presentation layer.
"""

from pathlib import Path
from typing import List, Optional, Union

import structlog

from cricut_finder.domain.ports import IDiscoveryPort, IFolderOpenerPort
from cricut_finder.domain.services import sort_by_recency_descending
from cricut_finder.domain.value_objects import DiscoveredFile


logger = structlog.get_logger(__name__)


class DiscoveryService:
    """
    Main service behind the file listing.

    This service provides the use cases a presentation layer needs:
    1. Scan the application data for image files
    2. Order them most recent first
    3. Open the folder that holds a chosen file
    """

    def __init__(
        self,
        discovery_port: IDiscoveryPort,
        folder_opener: IFolderOpenerPort,
    ):
        """
        Initialize the discovery service.

        Args:
            discovery_port: Scanner for the application data tree
            folder_opener: Platform adapter for the native file manager
        """
        self._discovery_port = discovery_port
        self._folder_opener = folder_opener

    def discover(self) -> List[DiscoveredFile]:
        """Run one scan and return the files in discovery order."""
        return self._discovery_port.discover()

    def list_recent(self, limit: Optional[int] = None) -> List[DiscoveredFile]:
        """
        Run one scan and return the files, most recently modified first.

        Args:
            limit: Maximum number of files to return (all when None)

        Returns:
            Sorted list of DiscoveredFile
        """
        if limit is not None and limit < 0:
            raise ValueError("limit must not be negative")

        files = sort_by_recency_descending(self.discover())
        logger.debug("Listed recent files", total=len(files), limit=limit)

        if limit is not None:
            return files[:limit]
        return files

    def open_containing_folder(self, target: Union[DiscoveredFile, str, Path]) -> None:
        """
        Show a folder in the native file manager.

        Args:
            target: A DiscoveredFile (its containing directory is opened)
                or a directory path

        Raises:
            FolderOpenFailed: If the file manager could not be launched
        """
        if isinstance(target, DiscoveredFile):
            path = target.containing_directory
        else:
            path = Path(target)

        self._folder_opener.open_folder(path)
