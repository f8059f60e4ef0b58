"""
Payoff simulation result models.

This module provides the ledger row emitted for every simulated month and the
final result returned by the simulation driver.

The SimulationResult is plain data for the dashboard views:
1. Headline numbers (months to payoff, total interest, stall flag)
2. The frozen "pay first" order computed before month 1
3. A bounded window of monthly ledger rows
4. Helpers that expose the recorded window as numpy arrays for charting
"""

import json
from typing import Any, Dict, List, Literal, Optional

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field

StallReason = Literal["no_payment", "cap_reached"]


class AccountPayment(BaseModel):
    """Payments made to one account during one month."""

    account_id: str = Field(..., description="Account identifier")
    name: str = Field(default="", description="Account display label")
    interest_accrued: float = Field(
        default=0.0, ge=0, description="Interest added this month"
    )
    minimum_paid: float = Field(default=0.0, ge=0, description="Minimum payment made")
    extra_paid: float = Field(default=0.0, ge=0, description="Extra budget applied")
    total_paid: float = Field(default=0.0, ge=0, description="Minimum plus extra")

    model_config = ConfigDict(frozen=True)


class MonthLedgerRow(BaseModel):
    """Ledger row describing a single simulated billing cycle."""

    month: int = Field(..., ge=1, description="Month index (1-based)")
    payments: List[AccountPayment] = Field(
        default_factory=list,
        description="Per-account payments, largest total first, idle accounts omitted",
    )
    balances: Dict[str, float] = Field(
        default_factory=dict, description="Every account's balance after the month"
    )
    total_interest_accrued: float = Field(default=0.0, ge=0)
    total_minimum_paid: float = Field(default=0.0, ge=0)
    total_extra_paid: float = Field(default=0.0, ge=0)
    total_paid: float = Field(default=0.0, ge=0)
    remaining_debt_after_month: float = Field(default=0.0, ge=0)

    model_config = ConfigDict(frozen=True)

    def get_payment(self, account_id: str) -> Optional[AccountPayment]:
        """Get the payment entry for an account, if it had any activity."""
        for payment in self.payments:
            if payment.account_id == account_id:
                return payment
        return None


class SimulationResult(BaseModel):
    """
    Outcome of a full payoff simulation.

    Example:
        ```python
        result = simulate(accounts, "avalanche", extra_budget=200)

        if result.stalled:
            ...
        pay_first = result.initial_priority_order[0]
        trajectory = result.debt_trajectory()
        ```
    """

    strategy: str = Field(..., description="Strategy used for the run")
    extra_budget: float = Field(default=0.0, ge=0, description="Monthly extra budget")
    months_to_payoff: int = Field(
        ..., ge=0, description="Months until all debt is cleared (0 if none at start)"
    )
    total_interest_paid: float = Field(default=0.0, ge=0)
    total_minimum_paid: float = Field(default=0.0, ge=0)
    total_extra_paid: float = Field(default=0.0, ge=0)
    total_paid: float = Field(default=0.0, ge=0)
    starting_debt: float = Field(default=0.0, ge=0)
    initial_priority_order: List[str] = Field(
        default_factory=list, description="Payoff order ranked once before month 1"
    )
    account_ids: List[str] = Field(
        default_factory=list, description="Accounts included in the run, input order"
    )
    months: List[MonthLedgerRow] = Field(
        default_factory=list, description="Recorded monthly ledger rows"
    )
    final_balances: Dict[str, float] = Field(default_factory=dict)
    account_payoff_months: Dict[str, int] = Field(
        default_factory=dict,
        description="First month each account's balance reached zero",
    )
    stalled: bool = Field(default=False)
    stall_reason: Optional[StallReason] = Field(default=None)

    model_config = ConfigDict(frozen=True)

    @property
    def paid_off(self) -> bool:
        """Whether the run cleared all debt."""
        return not self.stalled

    @property
    def recorded_months(self) -> int:
        """Number of ledger rows kept in the result."""
        return len(self.months)

    def debt_trajectory(self) -> NDArray[np.float64]:
        """Remaining total debt after each recorded month."""
        return np.array(
            [row.remaining_debt_after_month for row in self.months], dtype=np.float64
        )

    def balance_matrix(self) -> NDArray[np.float64]:
        """
        Get per-account balances over the recorded window.

        Returns:
            NDArray of shape (recorded months, accounts) in ``account_ids`` order
        """
        matrix = np.zeros((len(self.months), len(self.account_ids)), dtype=np.float64)
        for i, row in enumerate(self.months):
            for j, account_id in enumerate(self.account_ids):
                matrix[i, j] = row.balances.get(account_id, 0.0)
        return matrix

    def interest_by_month(self) -> NDArray[np.float64]:
        """Interest accrued in each recorded month."""
        return np.array(
            [row.total_interest_accrued for row in self.months], dtype=np.float64
        )

    def create_summary(self) -> Dict[str, Any]:
        """Create the headline numbers shown in the plan view."""
        return {
            "strategy": self.strategy,
            "extra_budget": self.extra_budget,
            "months_to_payoff": self.months_to_payoff,
            "total_interest_paid": self.total_interest_paid,
            "total_paid": self.total_paid,
            "starting_debt": self.starting_debt,
            "pay_first": (
                self.initial_priority_order[0] if self.initial_priority_order else None
            ),
            "stalled": self.stalled,
            "stall_reason": self.stall_reason,
        }

    def to_dict(self, include_months: bool = True) -> Dict[str, Any]:
        """
        Convert result to a JSON-compatible dictionary.

        Args:
            include_months: Whether to include the ledger rows

        Returns:
            Dictionary representation of the result
        """
        exclude = None if include_months else {"months"}
        return self.model_dump(mode="json", exclude=exclude)

    def to_json(self, include_months: bool = True, indent: int = 2) -> str:
        """Convert result to a JSON string."""
        return json.dumps(self.to_dict(include_months=include_months), indent=indent)
