"""
Domain Ports

Port interfaces defining contracts between layers.
All dependencies on the filesystem and the desktop are abstracted through ports.
"""

from .discovery_port import IDiscoveryPort
from .folder_opener_port import IFolderOpenerPort

__all__ = [
    # Discovery
    "IDiscoveryPort",
    # Folder opening
    "IFolderOpenerPort",
]
