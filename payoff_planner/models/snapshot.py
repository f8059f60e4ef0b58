"""
Debt plan snapshot.

A snapshot is the only persisted shape: the accounts plus the plan settings
(extra budget and strategy). Loading is lenient so that partially corrupted
stored data degrades to whatever is still usable instead of failing.
"""

import json
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .debt_account import DebtAccount, coerce_amount
from .payoff.ranking import PayoffStrategy


class PlanSettings(BaseModel):
    """User-selected payoff plan settings."""

    extra_budget: float = Field(
        default=0.0, ge=0, description="Monthly budget above all minimums"
    )
    strategy: PayoffStrategy = Field(default="avalanche", description="Payoff strategy")

    @field_validator("extra_budget", mode="before")
    @classmethod
    def clamp_extra_budget(cls, v: Any) -> float:
        return coerce_amount(v)

    @field_validator("strategy", mode="before")
    @classmethod
    def normalize_strategy(cls, v: Any) -> str:
        return "snowball" if v == "snowball" else "avalanche"


class DebtSnapshot(BaseModel):
    """Accounts and settings saved for one owner."""

    accounts: List[DebtAccount] = Field(default_factory=list)
    settings: PlanSettings = Field(default_factory=PlanSettings)
    saved_at: Optional[datetime] = Field(None, description="When it was last saved")

    def get_account(self, account_id: str) -> Optional[DebtAccount]:
        """Find an account by id."""
        for account in self.accounts:
            if account.id == account_id:
                return account
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the snapshot to a JSON-compatible dictionary."""
        return self.model_dump(mode="json")

    def to_json(self, indent: int = 2) -> str:
        """Convert the snapshot to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, raw: str) -> "DebtSnapshot":
        """Parse a snapshot from JSON, tolerating malformed content."""
        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            return cls()
        return load_snapshot(data)


def _load_accounts(records: Any) -> List[DebtAccount]:
    if not isinstance(records, list):
        return []
    accounts = []
    for record in records:
        if not isinstance(record, dict):
            continue
        if not isinstance(record.get("id"), str) or not isinstance(
            record.get("name"), str
        ):
            continue
        accounts.append(DebtAccount.model_validate(record))
    return accounts


def _load_settings(raw: Any) -> PlanSettings:
    if not isinstance(raw, dict):
        return PlanSettings()
    return PlanSettings(
        extra_budget=raw.get("extra_budget"), strategy=raw.get("strategy")
    )


def _load_saved_at(raw: Any) -> Optional[datetime]:
    if not isinstance(raw, str):
        return None
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        return None


def load_snapshot(data: Any) -> DebtSnapshot:
    """
    Build a snapshot from stored data.

    Accepts either a full snapshot dictionary or a bare list of account records.
    Records without a string ``id`` and ``name`` are skipped, numeric fields are
    normalized, and an unknown strategy falls back to avalanche.

    Args:
        data: Decoded JSON content

    Returns:
        DebtSnapshot built from whatever is usable in ``data``
    """
    if isinstance(data, list):
        return DebtSnapshot(accounts=_load_accounts(data))
    if not isinstance(data, dict):
        return DebtSnapshot()

    return DebtSnapshot(
        accounts=_load_accounts(data.get("accounts")),
        settings=_load_settings(data.get("settings")),
        saved_at=_load_saved_at(data.get("saved_at")),
    )
