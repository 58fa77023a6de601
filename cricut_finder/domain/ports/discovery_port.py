"""
Discovery Port Interface

Defines the contract for locating image artifacts on disk.
This is an output port - implemented by infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import List

from cricut_finder.domain.value_objects import DiscoveredFile


class IDiscoveryPort(ABC):
    """
    Port interface for discovery operations.

    Defines the contract for walking the application-data tree and
    returning every qualifying image file found under it.
    """

    @abstractmethod
    def discover(self) -> List[DiscoveredFile]:
        """
        Scan the application-data tree.

        Returns:
            List of DiscoveredFile value objects in discovery order

        Raises:
            CricutFinderError: For anchor, canvas check and listing failures
        """
        pass
