"""
Base snapshot store interface and exceptions.

This module defines the abstract interface that every snapshot store must
follow, along with common exceptions and owner key normalization.
"""

import re
from abc import ABC, abstractmethod
from typing import List

from payoff_planner.models.snapshot import DebtSnapshot

_UNSAFE_KEY_CHARS = re.compile(r"[^a-z0-9@._-]")


class StorageError(Exception):
    """Base exception for storage-related errors."""


class SnapshotNotFoundError(StorageError):
    """Raised when no snapshot is stored for an owner."""


class StoragePermissionError(StorageError):
    """Raised when there are permission issues with storage operations."""


def normalize_owner_key(owner: str) -> str:
    """
    Normalize an owner identifier (usually an e-mail) into a storage key.

    Args:
        owner: Raw owner identifier

    Returns:
        Trimmed, lower-cased key containing only filename-safe characters

    Raises:
        StorageError: If nothing usable is left after normalization
    """
    key = _UNSAFE_KEY_CHARS.sub("_", (owner or "").strip().lower())
    if not key.strip("._"):
        raise StorageError(f"Invalid owner key: {owner!r}")
    return key


class SnapshotStore(ABC):
    """
    Abstract base class for snapshot stores.

    One snapshot is kept per owner; saving replaces the previous one.
    """

    @abstractmethod
    def save_snapshot(self, owner: str, snapshot: DebtSnapshot) -> DebtSnapshot:
        """
        Store the snapshot for an owner.

        Args:
            owner: Owner identifier
            snapshot: Snapshot to store

        Returns:
            DebtSnapshot: The stored snapshot with ``saved_at`` set

        Raises:
            StorageError: If the snapshot cannot be stored
        """

    @abstractmethod
    def load_snapshot(self, owner: str) -> DebtSnapshot:
        """
        Load the snapshot for an owner.

        Raises:
            SnapshotNotFoundError: If no snapshot is stored for the owner
            StorageError: If the snapshot cannot be read
        """

    @abstractmethod
    def delete_snapshot(self, owner: str) -> bool:
        """
        Delete the snapshot for an owner.

        Returns:
            bool: True if a snapshot was deleted, False if none existed
        """

    @abstractmethod
    def snapshot_exists(self, owner: str) -> bool:
        """Check whether a snapshot is stored for an owner."""

    @abstractmethod
    def list_owners(self) -> List[str]:
        """List the normalized keys of all owners with a stored snapshot."""

    def load_or_empty(self, owner: str) -> DebtSnapshot:
        """Load the owner's snapshot, or an empty one if none is stored."""
        try:
            return self.load_snapshot(owner)
        except SnapshotNotFoundError:
            return DebtSnapshot()
