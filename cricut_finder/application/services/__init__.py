"""
Application Services

Service classes for handling use cases.
"""

from .discovery_service import DiscoveryService

__all__ = ["DiscoveryService"]
