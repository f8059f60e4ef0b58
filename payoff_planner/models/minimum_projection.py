"""
Minimum-payment-only projection for a single account.

Shows how an account evolves if nothing but the minimum is paid: interest,
payment and ending balance per month, plus credit utilization for accounts with
a credit limit.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .debt_account import DebtAccount

DEFAULT_PROJECTION_MONTHS = 18

# Projection stops once the balance is below a hundredth of a cent.
PROJECTION_EPSILON = 0.0001


class ProjectionRow(BaseModel):
    """A single month of a minimum-only projection."""

    month: int = Field(..., ge=1, description="Month number (1-based)")
    start_balance: float = Field(..., ge=0, description="Balance before interest")
    interest: float = Field(..., ge=0, description="Interest accrued this month")
    minimum_paid: float = Field(..., ge=0, description="Minimum payment made")
    end_balance: float = Field(..., ge=0, description="Balance after payment")
    utilization: Optional[float] = Field(
        None, description="End balance as a percentage of the credit limit"
    )


class MinimumOnlyProjection(BaseModel):
    """Month-by-month projection of an account under minimum payments only."""

    account_id: str = Field(..., description="Projected account")
    rows: List[ProjectionRow] = Field(default_factory=list)
    total_interest: float = Field(default=0.0, ge=0)
    total_paid: float = Field(default=0.0, ge=0)
    final_balance: float = Field(default=0.0, ge=0)

    @property
    def paid_off(self) -> bool:
        """Whether the account is cleared within the projected window."""
        return self.final_balance <= PROJECTION_EPSILON

    @property
    def balance_grows(self) -> bool:
        """Whether the minimum fails to cover interest."""
        return bool(self.rows) and self.rows[-1].end_balance > self.rows[0].start_balance


def project_minimum_only(
    account: DebtAccount, months: int = DEFAULT_PROJECTION_MONTHS
) -> MinimumOnlyProjection:
    """
    Project an account forward paying only its minimum.

    Args:
        account: Account to project
        months: Number of months to project

    Returns:
        MinimumOnlyProjection with one row per month until payoff or the horizon
    """
    rows: List[ProjectionRow] = []
    balance = account.balance
    rate = account.periodic_rate
    total_interest = 0.0
    total_paid = 0.0

    for month in range(1, max(0, months) + 1):
        if balance <= PROJECTION_EPSILON:
            break

        start = balance
        interest = start * rate
        payment = min(account.minimum_payment, start + interest)
        end = max(0.0, start + interest - payment)

        rows.append(
            ProjectionRow(
                month=month,
                start_balance=start,
                interest=interest,
                minimum_paid=payment,
                end_balance=end,
                utilization=account.utilization(end),
            )
        )

        total_interest += interest
        total_paid += payment
        balance = end

    return MinimumOnlyProjection(
        account_id=account.id,
        rows=rows,
        total_interest=total_interest,
        total_paid=total_paid,
        final_balance=balance,
    )
