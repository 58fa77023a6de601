"""
Discovery Domain Layer

Value objects, error taxonomy, pure domain services and ports
for locating design artifacts on disk.
"""

from .value_objects import DiscoveredFile, EntryKind
from .services import is_numeric, matches_image_token, sort_by_recency_descending

__all__ = [
    "DiscoveredFile",
    "EntryKind",
    "is_numeric",
    "matches_image_token",
    "sort_by_recency_descending",
]
