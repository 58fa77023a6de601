"""
Cricut Design Space File Finder

Locates the canvas images Cricut Design Space keeps under the user's home
directory and opens their folders in the native file manager.
"""

__version__ = "1.0.0"

from .domain.value_objects import DiscoveredFile, EntryKind
from .domain.services import is_numeric, sort_by_recency_descending
from .domain.errors import (
    CricutFinderError,
    HomeDirUnresolved,
    AnchorMissing,
    AnchorCheckFailed,
    CanvasCheckFailed,
    ListingFailed,
    FolderOpenFailed,
    UnsupportedPlatformError,
)

__all__ = [
    "DiscoveredFile",
    "EntryKind",
    "is_numeric",
    "sort_by_recency_descending",
    "CricutFinderError",
    "HomeDirUnresolved",
    "AnchorMissing",
    "AnchorCheckFailed",
    "CanvasCheckFailed",
    "ListingFailed",
    "FolderOpenFailed",
    "UnsupportedPlatformError",
]
