"""
Side-by-side comparison of the two payoff strategies.

Both runs use identical account data and budget, so the differences come only
from how the extra budget is prioritized.
"""

from typing import Any, Dict, Sequence

from pydantic import BaseModel, ConfigDict, Field

from ..debt_account import DebtAccount
from .driver import DEFAULT_MONTHS_CAP, DEFAULT_MONTHS_TO_RECORD, simulate
from .ranking import PayoffStrategy
from .result import SimulationResult


class StrategyComparison(BaseModel):
    """Avalanche and snowball results for the same plan."""

    avalanche: SimulationResult = Field(..., description="Highest-APR-first run")
    snowball: SimulationResult = Field(..., description="Smallest-balance-first run")
    interest_savings: float = Field(
        ..., description="Interest saved by avalanche over snowball"
    )
    months_difference: int = Field(
        ..., description="Snowball months to payoff minus avalanche months"
    )
    recommended: PayoffStrategy = Field(..., description="Cheaper strategy")

    model_config = ConfigDict(frozen=True)

    @property
    def priority_orders_differ(self) -> bool:
        """Whether the two strategies would attack a different account first."""
        return (
            self.avalanche.initial_priority_order
            != self.snowball.initial_priority_order
        )

    def create_summary(self) -> Dict[str, Any]:
        """Create a summary of both runs and their differences."""
        return {
            "avalanche": self.avalanche.create_summary(),
            "snowball": self.snowball.create_summary(),
            "interest_savings": self.interest_savings,
            "months_difference": self.months_difference,
            "recommended": self.recommended,
            "priority_orders_differ": self.priority_orders_differ,
        }


def _pick_recommended(
    avalanche: SimulationResult, snowball: SimulationResult
) -> PayoffStrategy:
    # A stalled run never beats one that finishes
    if avalanche.stalled != snowball.stalled:
        return "snowball" if avalanche.stalled else "avalanche"
    if snowball.total_interest_paid < avalanche.total_interest_paid:
        return "snowball"
    if snowball.total_interest_paid > avalanche.total_interest_paid:
        return "avalanche"
    if snowball.months_to_payoff < avalanche.months_to_payoff:
        return "snowball"
    return "avalanche"


def compare_strategies(
    accounts: Sequence[DebtAccount],
    extra_budget: float = 0.0,
    months_cap: int = DEFAULT_MONTHS_CAP,
    months_to_record: int = DEFAULT_MONTHS_TO_RECORD,
) -> StrategyComparison:
    """
    Run both strategies on the same plan and compare them.

    Args:
        accounts: Debt accounts as of the start of the plan
        extra_budget: Monthly amount available above all minimums
        months_cap: Hard upper bound on simulated months per run
        months_to_record: Maximum ledger rows kept per run

    Returns:
        StrategyComparison holding both results
    """
    avalanche = simulate(
        accounts, "avalanche", extra_budget, months_cap, months_to_record
    )
    snowball = simulate(accounts, "snowball", extra_budget, months_cap, months_to_record)

    return StrategyComparison(
        avalanche=avalanche,
        snowball=snowball,
        interest_savings=snowball.total_interest_paid - avalanche.total_interest_paid,
        months_difference=snowball.months_to_payoff - avalanche.months_to_payoff,
        recommended=_pick_recommended(avalanche, snowball),
    )
