"""
Domain Errors

Error taxonomy for discovery and folder-opening failures.

Fatal conditions are raised as subclasses of CricutFinderError. Expected
absences deeper in the tree (non-numeric names, missing Canvas folders) are
logged by the scanner and never raised.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union


class CricutFinderError(Exception):
    """Base error with message, optional detail and the path involved."""

    def __init__(
        self,
        message: str,
        detail: Optional[str] = None,
        path: Optional[Union[str, Path]] = None,
        **kwargs: Any
    ):
        self.message = message
        self.detail = detail
        self.path = str(path) if path is not None else None
        self.extra = kwargs
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary format."""
        error_dict = {
            "error": type(self).__name__,
            "message": self.message,
            "detail": self.detail,
            "path": self.path,
        }
        error_dict.update(self.extra)
        # Remove None values
        return {k: v for k, v in error_dict.items() if v is not None}

    def to_json(self) -> str:
        """Convert error to JSON string."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def __str__(self) -> str:
        parts = [self.message]
        if self.path and self.path not in self.message:
            parts.append(f"path: {self.path}")
        if self.detail:
            parts.append(f"cause: {self.detail}")
        return "; ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message='{self.message}', "
            f"detail='{self.detail}', path='{self.path}')"
        )


class HomeDirUnresolved(CricutFinderError):
    """Neither the user database nor the environment yields a home directory."""

    def __init__(self, detail: Optional[str] = None):
        super().__init__("Could not resolve the user's home directory", detail=detail)


class AnchorMissing(CricutFinderError):
    """A required top-level application-data directory does not exist."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(
            f"Application data not found: directory does not exist at {path}",
            path=path,
        )


class AnchorCheckFailed(CricutFinderError):
    """Probing an anchor directory failed with something other than not-found."""

    def __init__(self, path: Union[str, Path], cause: BaseException):
        super().__init__(
            "Error checking if application data directory exists",
            detail=str(cause),
            path=path,
        )


class CanvasCheckFailed(CricutFinderError):
    """Probing a project's Canvas directory failed with something other than not-found."""

    def __init__(self, path: Union[str, Path], cause: BaseException):
        super().__init__(
            "Error checking if canvas directory exists",
            detail=str(cause),
            path=path,
        )


class ListingFailed(CricutFinderError):
    """Reading a directory's entries failed."""

    def __init__(self, path: Union[str, Path], cause: BaseException):
        super().__init__(
            f"Error reading directory {path}",
            detail=str(cause),
            path=path,
        )


class FolderOpenFailed(CricutFinderError):
    """Launching the native file manager failed."""

    def __init__(
        self,
        path: Union[str, Path],
        detail: Optional[str] = None,
        message: str = "Error opening directory",
        **kwargs: Any
    ):
        super().__init__(message, detail=detail, path=path, **kwargs)


class UnsupportedPlatformError(FolderOpenFailed):
    """No file-manager launcher is known for the running platform."""

    def __init__(self, path: Union[str, Path], platform_name: str):
        super().__init__(
            path,
            message=f"Unsupported platform: {platform_name}",
            platform=platform_name,
        )
        self.platform_name = platform_name
