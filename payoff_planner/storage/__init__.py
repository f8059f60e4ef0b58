"""
Storage module for debt plan snapshots.

Provides a unified interface for saving and loading snapshots from the local
filesystem or from memory.
"""

from .base import (
    SnapshotNotFoundError,
    SnapshotStore,
    StorageError,
    StoragePermissionError,
    normalize_owner_key,
)
from .factory import create_snapshot_store
from .local import LocalSnapshotStore
from .memory import InMemorySnapshotStore

__all__ = [
    "SnapshotStore",
    "StorageError",
    "SnapshotNotFoundError",
    "StoragePermissionError",
    "LocalSnapshotStore",
    "InMemorySnapshotStore",
    "create_snapshot_store",
    "normalize_owner_key",
]
