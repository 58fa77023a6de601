"""
Discovery Infrastructure

Filesystem scanner for design artifacts.
"""

from .canvas_scanner import CanvasScanner, discover_files

__all__ = ["CanvasScanner", "discover_files"]
