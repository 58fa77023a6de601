"""
Application Layer

Orchestrates domain objects and ports to serve the presentation layer.
"""

from .services.discovery_service import DiscoveryService

__all__ = ["DiscoveryService"]
