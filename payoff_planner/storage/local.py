"""
Local filesystem snapshot store.

Keeps one JSON file per owner under a base directory. Suitable for development
and single-instance deployments.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List

from payoff_planner.models.snapshot import DebtSnapshot, load_snapshot

from .base import (
    SnapshotNotFoundError,
    SnapshotStore,
    StorageError,
    StoragePermissionError,
    normalize_owner_key,
)

logger = logging.getLogger(__name__)


class LocalSnapshotStore(SnapshotStore):
    """Snapshot store backed by JSON files on the local filesystem."""

    SUFFIX = ".json"

    def __init__(self, base_path: str = "storage", create_dirs: bool = True):
        """
        Initialize the local snapshot store.

        Args:
            base_path: Base directory for snapshot files
            create_dirs: Whether to create the directory if it doesn't exist
        """
        self.base_path = Path(base_path)
        self.create_dirs = create_dirs

        if self.create_dirs:
            self.base_path.mkdir(parents=True, exist_ok=True)

    def _get_snapshot_path(self, owner: str) -> Path:
        return self.base_path / f"{normalize_owner_key(owner)}{self.SUFFIX}"

    def save_snapshot(self, owner: str, snapshot: DebtSnapshot) -> DebtSnapshot:
        path = self._get_snapshot_path(owner)
        stored = snapshot.model_copy(update={"saved_at": datetime.utcnow()})

        try:
            if self.create_dirs:
                path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w") as f:
                f.write(stored.to_json())
        except PermissionError as e:
            raise StoragePermissionError(
                f"Permission denied storing snapshot for {owner}: {e}"
            )
        except OSError as e:
            raise StorageError(f"Failed to store snapshot for {owner}: {e}")

        logger.debug(f"Stored snapshot with {len(stored.accounts)} accounts at {path}")
        return stored

    def load_snapshot(self, owner: str) -> DebtSnapshot:
        path = self._get_snapshot_path(owner)
        if not path.exists():
            raise SnapshotNotFoundError(f"No snapshot stored for {owner}")

        try:
            with open(path, "r") as f:
                raw = f.read()
        except PermissionError as e:
            raise StoragePermissionError(
                f"Permission denied reading snapshot for {owner}: {e}"
            )
        except OSError as e:
            raise StorageError(f"Failed to read snapshot for {owner}: {e}")

        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning(f"Snapshot file {path} is not valid JSON, using empty plan")
            data = None
        return load_snapshot(data)

    def delete_snapshot(self, owner: str) -> bool:
        path = self._get_snapshot_path(owner)
        if not path.exists():
            return False

        try:
            path.unlink()
        except PermissionError as e:
            raise StoragePermissionError(
                f"Permission denied deleting snapshot for {owner}: {e}"
            )
        except OSError as e:
            raise StorageError(f"Failed to delete snapshot for {owner}: {e}")
        return True

    def snapshot_exists(self, owner: str) -> bool:
        return self._get_snapshot_path(owner).exists()

    def list_owners(self) -> List[str]:
        if not self.base_path.exists():
            return []
        return sorted(path.stem for path in self.base_path.glob(f"*{self.SUFFIX}"))
