"""
Rackspace provider adapters.
"""

from .blockstorage import BlockStorageClient
from .identity import RackspaceIdentity

__all__ = ["BlockStorageClient", "RackspaceIdentity"]
