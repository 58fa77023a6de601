"""
Directory probing and typed listing.

Both helpers raise plain OSError; callers translate it into the matching
domain error with the path that failed.
"""

import os
import stat
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List

from cricut_finder.domain.value_objects import EntryKind


@dataclass(frozen=True)
class ListedEntry:
    """A directory entry with the metadata the scanner needs."""

    name: str
    path: Path
    modified_at: datetime


def is_existing_directory(path: Path) -> bool:
    """
    Check whether a path exists and is a directory.

    Args:
        path: Path to check (symlinks are followed)

    Returns:
        True for an existing directory, False if the path is missing or
        is not a directory

    Raises:
        OSError: For any failure other than the path not existing
    """
    try:
        st = os.stat(path)
    except FileNotFoundError:
        return False
    return stat.S_ISDIR(st.st_mode)


def list_entries(path: Path, kind: EntryKind) -> List[ListedEntry]:
    """
    List the immediate entries of a directory that match ``kind``.

    Entry types are taken from the directory listing without following
    symlinks, so a symlink is reported as a file.

    Args:
        path: Directory to read
        kind: EntryKind.DIRECTORY for subdirectories, EntryKind.FILE for
            everything else

    Returns:
        List of ListedEntry in the order the OS returns them

    Raises:
        OSError: If the directory or an entry's metadata cannot be read
    """
    want_dirs = kind == EntryKind.DIRECTORY
    entries = []

    with os.scandir(path) as it:
        for entry in it:
            if entry.is_dir(follow_symlinks=False) != want_dirs:
                continue
            st = entry.stat(follow_symlinks=False)
            entries.append(
                ListedEntry(
                    name=entry.name,
                    path=Path(entry.path),
                    modified_at=datetime.fromtimestamp(st.st_mtime),
                )
            )

    return entries
