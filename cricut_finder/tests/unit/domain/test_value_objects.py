"""
Unit tests for Domain Value Objects.

Tests value objects that follow hexagonal architecture principles:
- Immutability (frozen dataclasses)
- Validation in __post_init__
"""

import pytest
from datetime import datetime
from dataclasses import FrozenInstanceError
from pathlib import Path

from cricut_finder.domain.value_objects import DiscoveredFile, EntryKind, display_text


class TestDiscoveredFile:
    """Tests for DiscoveredFile value object."""

    @pytest.mark.unit
    def test_in_directory_joins_full_path(self):
        """Test that in_directory() derives full_path from directory and name."""
        modified = datetime(2024, 5, 1, 12, 30)
        found = DiscoveredFile.in_directory(Path("/home/u/data/1/Canvas/7"), "cut.png", modified)

        assert found.name == "cut.png"
        assert found.containing_directory == Path("/home/u/data/1/Canvas/7")
        assert found.full_path == Path("/home/u/data/1/Canvas/7/cut.png")
        assert found.last_modified == modified

    @pytest.mark.unit
    def test_file_is_immutable(self):
        """Test that DiscoveredFile is immutable (frozen)."""
        found = DiscoveredFile.in_directory(Path("/d"), "a.png", datetime(2024, 1, 1))

        with pytest.raises(FrozenInstanceError):
            found.name = "b.png"

    @pytest.mark.unit
    def test_empty_name_rejected(self):
        """Test that an empty name is rejected."""
        with pytest.raises(ValueError, match="empty"):
            DiscoveredFile(
                name="",
                containing_directory=Path("/d"),
                full_path=Path("/d"),
                last_modified=datetime(2024, 1, 1),
            )

    @pytest.mark.unit
    def test_name_with_separator_rejected(self):
        """Test that a name containing a path separator is rejected."""
        with pytest.raises(ValueError, match="base name"):
            DiscoveredFile.in_directory(Path("/d"), "sub/a.png", datetime(2024, 1, 1))

    @pytest.mark.unit
    def test_mismatched_full_path_rejected(self):
        """Test that full_path must equal containing_directory / name."""
        with pytest.raises(ValueError, match="full_path"):
            DiscoveredFile(
                name="a.png",
                containing_directory=Path("/d"),
                full_path=Path("/elsewhere/a.png"),
                last_modified=datetime(2024, 1, 1),
            )

    @pytest.mark.unit
    def test_equality_by_value(self):
        """Test that two records for the same file compare equal."""
        modified = datetime(2024, 1, 1)
        first = DiscoveredFile.in_directory(Path("/d"), "a.png", modified)
        second = DiscoveredFile.in_directory(Path("/d"), "a.png", modified)

        assert first == second
        assert hash(first) == hash(second)

    @pytest.mark.unit
    def test_to_dict(self):
        """Test serialization to dictionary."""
        found = DiscoveredFile.in_directory(Path("/d/1"), "a.png", datetime(2024, 2, 3, 4, 5, 6))

        assert found.to_dict() == {
            "name": "a.png",
            "containing_directory": str(Path("/d/1")),
            "full_path": str(Path("/d/1/a.png")),
            "last_modified": "2024-02-03T04:05:06",
        }


    @pytest.mark.unit
    def test_to_dict_replaces_undecodable_bytes(self):
        """Test that names holding non-UTF-8 bytes serialize as encodable text."""
        found = DiscoveredFile.in_directory(Path("/d"), "bad\udcff.png", datetime(2024, 1, 1))

        data = found.to_dict()

        assert data["name"] == "bad\ufffd.png"
        assert data["full_path"].endswith("bad\ufffd.png")
        data["full_path"].encode("utf-8")


class TestDisplayText:
    """Tests for display_text()."""

    @pytest.mark.unit
    def test_plain_text_unchanged(self):
        assert display_text("caf\u00e9.png") == "caf\u00e9.png"
        assert display_text(Path("/d/1")) == str(Path("/d/1"))

    @pytest.mark.unit
    def test_surrogate_escape_replaced(self):
        assert display_text("bad\udcff.png") == "bad\ufffd.png"


class TestEntryKind:
    """Tests for EntryKind enum."""

    @pytest.mark.unit
    def test_values(self):
        assert EntryKind.FILE.value == "file"
        assert EntryKind.DIRECTORY.value == "dir"
