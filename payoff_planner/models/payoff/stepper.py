"""
Month stepper for the payoff simulation.

Advances every account by exactly one billing cycle. The phases run in a fixed
order because each one works on balances changed by the previous one:

1. Accrue interest on every balance above one cent
2. Pay each account's minimum, capped at its balance
3. Re-rank the reduced balances and spend the extra budget down that order
4. Assemble the ledger row
"""

from typing import Dict, List, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..debt_account import PAID_OFF_EPSILON, DebtAccount, coerce_amount
from .ranking import rank
from .result import AccountPayment, MonthLedgerRow

# Balances at or below one cent neither accrue interest nor take minimums.
BALANCE_EPSILON = 0.01


class SimulationState(BaseModel):
    """Working balances for one simulation run."""

    month: int = Field(default=0, ge=0, description="Months stepped so far")
    accounts: Tuple[DebtAccount, ...] = Field(
        default_factory=tuple, description="Accounts taking part in the run"
    )
    balances: Dict[str, float] = Field(
        default_factory=dict, description="Current balance by account id"
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_accounts(cls, accounts: Sequence[DebtAccount]) -> "SimulationState":
        """Create a state holding a copy of each account's starting balance."""
        return cls(
            accounts=tuple(accounts),
            balances={account.id: account.balance for account in accounts},
        )

    @property
    def total_debt(self) -> float:
        """Sum of all current balances."""
        return sum(self.balances.values())


def step(
    state: SimulationState, strategy: str, extra_budget: float
) -> Tuple[SimulationState, MonthLedgerRow]:
    """
    Advance all accounts by one billing cycle.

    Args:
        state: Balances at the start of the month
        strategy: Strategy used to order the extra budget
        extra_budget: Amount available above the minimums this month; any part
            left unspent is dropped

    Returns:
        Tuple of (state after the month, ledger row for the month)
    """
    balances = dict(state.balances)
    interest: Dict[str, float] = {}
    minimums: Dict[str, float] = {}
    extras: Dict[str, float] = {}

    # Accrual
    total_interest = 0.0
    for account in state.accounts:
        accrued = 0.0
        if balances[account.id] > BALANCE_EPSILON:
            accrued = balances[account.id] * account.periodic_rate
            balances[account.id] += accrued
        interest[account.id] = accrued
        total_interest += accrued

    # Minimums
    total_minimum = 0.0
    for account in state.accounts:
        paid = 0.0
        if balances[account.id] > BALANCE_EPSILON:
            paid = min(account.minimum_payment, balances[account.id])
            balances[account.id] -= paid
        minimums[account.id] = paid
        total_minimum += paid

    # Extra allocation
    remaining = coerce_amount(extra_budget)
    total_extra = 0.0
    for account_id in rank(state.accounts, strategy, balances):
        if remaining <= PAID_OFF_EPSILON:
            break
        paid = min(remaining, balances[account_id])
        balances[account_id] -= paid
        remaining -= paid
        extras[account_id] = paid
        total_extra += paid

    payments: List[AccountPayment] = []
    for account in state.accounts:
        extra_paid = extras.get(account.id, 0.0)
        total_paid = minimums[account.id] + extra_paid
        if total_paid <= 0 and interest[account.id] <= 0:
            continue
        payments.append(
            AccountPayment(
                account_id=account.id,
                name=account.name,
                interest_accrued=interest[account.id],
                minimum_paid=minimums[account.id],
                extra_paid=extra_paid,
                total_paid=total_paid,
            )
        )
    payments.sort(key=lambda p: p.total_paid, reverse=True)

    month = state.month + 1
    row = MonthLedgerRow(
        month=month,
        payments=payments,
        balances=balances,
        total_interest_accrued=total_interest,
        total_minimum_paid=total_minimum,
        total_extra_paid=total_extra,
        total_paid=total_minimum + total_extra,
        remaining_debt_after_month=sum(balances.values()),
    )
    next_state = state.model_copy(update={"month": month, "balances": balances})

    return next_state, row
