"""
Payoff plan service.

Coordinates the payoff engine with configuration defaults and snapshot storage,
so callers (HTTP handlers, scripts) work with owners and raw payloads rather
than wiring the engine themselves.
"""

import logging
from typing import Optional, Sequence

from payoff_planner.config import Settings, get_global_settings
from payoff_planner.models.debt_account import DebtAccount
from payoff_planner.models.minimum_projection import (
    MinimumOnlyProjection,
    project_minimum_only,
)
from payoff_planner.models.payoff import (
    SimulationResult,
    StrategyComparison,
    compare_strategies,
    simulate,
)
from payoff_planner.models.portfolio_summary import (
    PortfolioSummary,
    summarize_accounts,
)
from payoff_planner.models.snapshot import DebtSnapshot
from payoff_planner.storage import SnapshotStore, create_snapshot_store


class PayoffPlanService:
    """Service for running payoff plans and managing saved snapshots."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[SnapshotStore] = None,
    ) -> None:
        """Initialize the payoff plan service.

        Args:
            settings: Application settings (defaults to the global settings)
            store: Snapshot store (defaults to one created from settings)
        """
        self.settings = settings or get_global_settings()
        self.store = store or create_snapshot_store(self.settings)
        self.logger = logging.getLogger(__name__)

    def run_plan(
        self,
        accounts: Sequence[DebtAccount],
        strategy: str,
        extra_budget: float = 0.0,
        months_cap: Optional[int] = None,
        months_to_record: Optional[int] = None,
    ) -> SimulationResult:
        """Simulate a payoff plan.

        Args:
            accounts: Debt accounts to pay off
            strategy: ``"avalanche"`` or ``"snowball"``
            extra_budget: Monthly budget above all minimums
            months_cap: Month cap (defaults to DEFAULT_MONTHS_CAP)
            months_to_record: Ledger window (defaults to DEFAULT_MONTHS_TO_RECORD)

        Returns:
            SimulationResult for the plan
        """
        cap = months_cap if months_cap is not None else self.settings.default_months_cap
        window = (
            months_to_record
            if months_to_record is not None
            else self.settings.default_months_to_record
        )

        self.logger.info(
            f"Running {strategy} plan for {len(accounts)} accounts "
            f"with extra budget {extra_budget}"
        )
        result = simulate(accounts, strategy, extra_budget, cap, window)

        if result.stalled:
            self.logger.warning(
                f"Plan stalled ({result.stall_reason}) after "
                f"{result.months_to_payoff} months"
            )
        else:
            self.logger.info(f"Plan pays off in {result.months_to_payoff} months")
        return result

    def compare_plans(
        self,
        accounts: Sequence[DebtAccount],
        extra_budget: float = 0.0,
        months_cap: Optional[int] = None,
        months_to_record: Optional[int] = None,
    ) -> StrategyComparison:
        """Run both strategies on the same accounts and compare them."""
        cap = months_cap if months_cap is not None else self.settings.default_months_cap
        window = (
            months_to_record
            if months_to_record is not None
            else self.settings.default_months_to_record
        )

        comparison = compare_strategies(accounts, extra_budget, cap, window)
        self.logger.info(
            f"Compared strategies for {len(accounts)} accounts, "
            f"recommended {comparison.recommended}"
        )
        return comparison

    def project_account(
        self, account: DebtAccount, months: Optional[int] = None
    ) -> MinimumOnlyProjection:
        """Project one account forward under minimum payments only."""
        horizon = months if months is not None else self.settings.projection_months
        return project_minimum_only(account, horizon)

    def summarize(
        self, accounts: Sequence[DebtAccount], extra_budget: float = 0.0
    ) -> PortfolioSummary:
        """Summarize totals and shares for a set of accounts."""
        return summarize_accounts(accounts, extra_budget)

    def get_snapshot(self, owner: str) -> DebtSnapshot:
        """Load an owner's snapshot.

        Raises:
            SnapshotNotFoundError: If nothing is stored for the owner
        """
        return self.store.load_snapshot(owner)

    def save_snapshot(self, owner: str, snapshot: DebtSnapshot) -> DebtSnapshot:
        """Store an owner's snapshot, replacing any previous one."""
        try:
            stored = self.store.save_snapshot(owner, snapshot)
        except Exception as e:
            self.logger.error(f"Saving snapshot for {owner} failed: {str(e)}")
            raise

        self.logger.info(
            f"Saved snapshot for {owner} with {len(stored.accounts)} accounts"
        )
        return stored

    def delete_snapshot(self, owner: str) -> bool:
        """Delete an owner's snapshot."""
        deleted = self.store.delete_snapshot(owner)
        if deleted:
            self.logger.info(f"Deleted snapshot for {owner}")
        return deleted

    def run_saved_plan(
        self, owner: str, months_to_record: Optional[int] = None
    ) -> SimulationResult:
        """Simulate the plan stored for an owner using its saved settings.

        Raises:
            SnapshotNotFoundError: If nothing is stored for the owner
        """
        snapshot = self.store.load_snapshot(owner)
        return self.run_plan(
            snapshot.accounts,
            snapshot.settings.strategy,
            snapshot.settings.extra_budget,
            months_to_record=months_to_record,
        )
