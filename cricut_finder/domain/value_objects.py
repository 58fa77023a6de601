"""
Discovery Value Objects

Immutable value objects for the files located by a discovery scan.
"""

import os
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict


def display_text(value: Any) -> str:
    """
    Render a name or path as printable text.

    Bytes that were not valid UTF-8 in the file name are kept by the OS layer
    as surrogate escapes; they become U+FFFD here so the text can be encoded.
    """
    return str(value).encode("utf-8", "surrogateescape").decode("utf-8", "replace")


class EntryKind(str, Enum):
    """Kind of directory entry a listing should return."""

    FILE = "file"
    DIRECTORY = "dir"


@dataclass(frozen=True)
class DiscoveredFile:
    """
    Represents one image artifact located under a canvas directory.

    Attributes:
        name: Base name of the file
        containing_directory: Absolute path of the directory holding the file
        full_path: Absolute path of the file itself
        last_modified: Modification time reported by the filesystem at scan time
    """

    name: str
    containing_directory: Path
    full_path: Path
    last_modified: datetime

    def __post_init__(self):
        """Validate the name and the path invariant."""
        if not self.name:
            raise ValueError("name cannot be empty")
        if os.sep in self.name or (os.altsep and os.altsep in self.name):
            raise ValueError("name must be a base name, not a path")
        if Path(self.full_path) != Path(self.containing_directory) / self.name:
            raise ValueError("full_path must equal containing_directory joined with name")

    @classmethod
    def in_directory(cls, directory: Path, name: str, last_modified: datetime) -> "DiscoveredFile":
        """Build a record for ``name`` inside ``directory``."""
        directory = Path(directory)
        return cls(
            name=name,
            containing_directory=directory,
            full_path=directory / name,
            last_modified=last_modified,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": display_text(self.name),
            "containing_directory": display_text(self.containing_directory),
            "full_path": display_text(self.full_path),
            "last_modified": self.last_modified.isoformat(),
        }
