"""
Snapshot store factory.

Creates the appropriate snapshot store based on the application configuration.
"""

from payoff_planner.config import Settings

from .base import SnapshotStore
from .local import LocalSnapshotStore
from .memory import InMemorySnapshotStore


def create_snapshot_store(settings: Settings) -> SnapshotStore:
    """
    Create a snapshot store instance based on configuration.

    Args:
        settings: Application settings containing storage configuration

    Returns:
        SnapshotStore: Configured snapshot store instance

    Raises:
        ValueError: If storage configuration is invalid
    """
    if settings.storage_type == "local":
        return LocalSnapshotStore(base_path=settings.storage_base_path, create_dirs=True)

    elif settings.storage_type == "memory":
        return InMemorySnapshotStore()

    else:
        raise ValueError(f"Unsupported storage type: {settings.storage_type}")
