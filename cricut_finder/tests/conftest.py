"""
Test fixtures for cricut-finder tests.

Builds fake home directories laid out the way Design Space stores its data.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import pytest
import structlog

from cricut_finder.domain.errors import FolderOpenFailed
from cricut_finder.domain.ports import IFolderOpenerPort
from cricut_finder.domain.value_objects import DiscoveredFile


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external processes")
    config.addinivalue_line("markers", "integration: tests wiring several layers together")


class CricutTree:
    """Writes a fake <home>/.cricut-design-space/LocalData tree."""

    def __init__(self, home: Path):
        self.home = home
        self.anchor = home / ".cricut-design-space"
        self.data = self.anchor / "LocalData"

    def create_anchor(self) -> "CricutTree":
        self.data.mkdir(parents=True, exist_ok=True)
        return self

    def project(self, project_id: str, with_canvas: bool = True) -> Path:
        project_dir = self.data / project_id
        project_dir.mkdir(parents=True, exist_ok=True)
        if with_canvas:
            (project_dir / "Canvas").mkdir(exist_ok=True)
        return project_dir

    def canvas(self, project_id: str, canvas_id: str) -> Path:
        canvas_dir = self.project(project_id) / "Canvas" / canvas_id
        canvas_dir.mkdir(parents=True, exist_ok=True)
        return canvas_dir

    def add_file(
        self,
        project_id: str,
        canvas_id: str,
        name: str,
        mtime: Optional[float] = None,
    ) -> Path:
        path = self.canvas(project_id, canvas_id) / name
        path.write_bytes(b"\x89PNG\r\n\x1a\n")
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path


@pytest.fixture
def cricut_tree(tmp_path: Path) -> CricutTree:
    """Fake home with the anchor and LocalData directories present."""
    return CricutTree(tmp_path / "home").create_anchor()


@pytest.fixture
def empty_home(tmp_path: Path) -> Path:
    """Home directory without any Design Space data."""
    home = tmp_path / "empty_home"
    home.mkdir()
    return home


@pytest.fixture
def make_discovered():
    """Factory for DiscoveredFile records with a given timestamp."""

    def _make(name: str, modified: datetime, directory: str = "/data/1/Canvas/2") -> DiscoveredFile:
        return DiscoveredFile.in_directory(Path(directory), name, modified)

    return _make


class FakeFolderOpener(IFolderOpenerPort):
    """Records opened folders instead of starting a file manager."""

    def __init__(self, error: Optional[Exception] = None):
        self.opened: List[Path] = []
        self.error = error

    def open_folder(self, path) -> None:
        if self.error is not None:
            raise self.error
        self.opened.append(Path(path))

    def is_available(self) -> bool:
        return True


@pytest.fixture
def fake_opener() -> FakeFolderOpener:
    return FakeFolderOpener()


@pytest.fixture
def failing_opener() -> FakeFolderOpener:
    return FakeFolderOpener(error=FolderOpenFailed("/nowhere", detail="launcher missing"))


@pytest.fixture
def restore_logging():
    """Undo configure_logging() so later tests do not write to closed capture streams."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
