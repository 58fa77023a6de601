"""
Infrastructure Layer

Provides technical implementations for external concerns.
"""

from .persistence.canvas_scanner import CanvasScanner
from .opener.selector import select_folder_opener

__all__ = ["CanvasScanner", "select_folder_opener"]
