"""
Filesystem Infrastructure

Home resolution, directory probing and typed listing.
"""

from .directory import ListedEntry, is_existing_directory, list_entries
from .home import resolve_home_dir

__all__ = ["ListedEntry", "is_existing_directory", "list_entries", "resolve_home_dir"]
