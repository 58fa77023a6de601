"""
Command-line interface.
"""

from .formatter import ListingFormatter
from .main import entry_point

__all__ = ["ListingFormatter", "entry_point"]
