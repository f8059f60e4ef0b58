"""In-memory snapshot store for guest sessions and tests. Nothing is persisted."""

from datetime import datetime
from typing import Dict, List

from payoff_planner.models.snapshot import DebtSnapshot

from .base import SnapshotNotFoundError, SnapshotStore, normalize_owner_key


class InMemorySnapshotStore(SnapshotStore):
    """Snapshot store that keeps snapshots in a dictionary."""

    def __init__(self) -> None:
        self._snapshots: Dict[str, DebtSnapshot] = {}

    def save_snapshot(self, owner: str, snapshot: DebtSnapshot) -> DebtSnapshot:
        stored = snapshot.model_copy(update={"saved_at": datetime.utcnow()})
        self._snapshots[normalize_owner_key(owner)] = stored
        return stored

    def load_snapshot(self, owner: str) -> DebtSnapshot:
        key = normalize_owner_key(owner)
        if key not in self._snapshots:
            raise SnapshotNotFoundError(f"No snapshot stored for {owner}")
        return self._snapshots[key]

    def delete_snapshot(self, owner: str) -> bool:
        return self._snapshots.pop(normalize_owner_key(owner), None) is not None

    def snapshot_exists(self, owner: str) -> bool:
        return normalize_owner_key(owner) in self._snapshots

    def list_owners(self) -> List[str]:
        return sorted(self._snapshots)
