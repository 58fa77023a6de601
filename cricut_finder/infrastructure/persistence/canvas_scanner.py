"""
Canvas scanner for design artifact discovery.

Walks <home>/<anchor>/<data>/<project-id>/<canvas>/<canvas-id>/ and collects
the image files found in each canvas directory. Project and canvas
directories are only entered when their names are numeric identifiers;
anything else stored alongside them is skipped.
"""

from pathlib import Path
from typing import Callable, List, Optional

from cricut_finder.domain.errors import (
    AnchorCheckFailed,
    AnchorMissing,
    CanvasCheckFailed,
    ListingFailed,
)
from cricut_finder.domain.ports import IDiscoveryPort
from cricut_finder.domain.services import is_numeric, matches_image_token
from cricut_finder.domain.value_objects import DiscoveredFile, EntryKind
from cricut_finder.infrastructure.config.config import Settings, get_settings
from cricut_finder.infrastructure.filesystem.directory import (
    ListedEntry,
    is_existing_directory,
    list_entries,
)
from cricut_finder.infrastructure.filesystem.home import resolve_home_dir
from cricut_finder.infrastructure.logging.logging_config import get_logger

logger = get_logger(__name__)


def _require_anchor(path: Path) -> None:
    """Raise unless ``path`` is an existing directory."""
    try:
        exists = is_existing_directory(path)
    except OSError as e:
        raise AnchorCheckFailed(path, e) from e

    if not exists:
        raise AnchorMissing(path)

    logger.info("Anchor directory found", path=str(path))


def _list(path: Path, kind: EntryKind) -> List[ListedEntry]:
    try:
        return list_entries(path, kind)
    except OSError as e:
        raise ListingFailed(path, e) from e


def _walk_numeric_dirs(root: Path, level: str, visit: Callable[[Path], None]) -> None:
    """
    Call ``visit`` for every numerically named subdirectory of ``root``.

    Args:
        root: Directory whose subdirectories are walked
        level: Label used in log events ("project" or "canvas")
        visit: Continuation receiving each numeric subdirectory
    """
    for entry in _list(root, EntryKind.DIRECTORY):
        if not is_numeric(entry.name):
            logger.info(
                "Skipping non-numeric directory",
                level=level,
                path=str(root / entry.name),
            )
            continue
        visit(root / entry.name)


def discover_files(
    home_dir: Optional[Path] = None,
    config: Optional[Settings] = None,
) -> List[DiscoveredFile]:
    """
    Locate every image file under the application's canvas directories.

    Missing Canvas folders and non-numeric directory names are skipped.
    Any other failure aborts the scan and nothing is returned.

    Args:
        home_dir: Home directory to scan from (resolved when omitted)
        config: Directory layout settings (module settings when omitted)

    Returns:
        List of DiscoveredFile in discovery order, possibly empty

    Raises:
        HomeDirUnresolved: If no home directory can be determined
        AnchorMissing: If the anchor or data directory does not exist
        AnchorCheckFailed: If probing the anchor or data directory fails
        CanvasCheckFailed: If probing a project's Canvas directory fails
        ListingFailed: If a directory cannot be read

    Example:
        >>> for found in discover_files():
        ...     print(found.full_path, found.last_modified)
    """
    config = config or get_settings()
    home_dir = Path(home_dir) if home_dir is not None else resolve_home_dir()

    anchor_root = home_dir / config.anchor_dir_name
    _require_anchor(anchor_root)

    data_root = anchor_root / config.data_dir_name
    _require_anchor(data_root)

    found: List[DiscoveredFile] = []

    def visit_canvas(canvas_dir: Path) -> None:
        for entry in _list(canvas_dir, EntryKind.FILE):
            if matches_image_token(entry.name, config.image_token):
                found.append(
                    DiscoveredFile.in_directory(canvas_dir, entry.name, entry.modified_at)
                )

    def visit_project(project_dir: Path) -> None:
        canvas_root = project_dir / config.canvas_dir_name
        try:
            exists = is_existing_directory(canvas_root)
        except OSError as e:
            raise CanvasCheckFailed(canvas_root, e) from e

        if not exists:
            logger.info("Canvas directory does not exist, skipping", path=str(canvas_root))
            return

        _walk_numeric_dirs(canvas_root, "canvas", visit_canvas)

    _walk_numeric_dirs(data_root, "project", visit_project)

    logger.info("Discovery complete", data_root=str(data_root), file_count=len(found))

    return found


class CanvasScanner(IDiscoveryPort):
    """
    Canvas scanner that implements the IDiscoveryPort interface.

    Adapter between the functional scanner above and the port required
    by the application layer.
    """

    def __init__(self, home_dir: Optional[Path] = None, config: Optional[Settings] = None):
        """
        Initialize the scanner.

        Args:
            home_dir: Fixed home directory; resolved on every scan when omitted
            config: Directory layout settings
        """
        self.home_dir = Path(home_dir) if home_dir is not None else None
        self.config = config

    def discover(self) -> List[DiscoveredFile]:
        return discover_files(self.home_dir, self.config)
