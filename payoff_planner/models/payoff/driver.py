"""
Simulation driver for debt payoff plans.

Repeatedly steps the month stepper until every balance is cleared or the month
cap is reached, aggregating totals and flagging runs that cannot make progress.
The driver is total over clamped input: it always terminates within
``months_cap`` iterations and always returns a well-formed result.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..debt_account import PAID_OFF_EPSILON, DebtAccount, coerce_amount
from .ranking import rank
from .result import MonthLedgerRow, SimulationResult, StallReason
from .stepper import BALANCE_EPSILON, SimulationState, step

logger = logging.getLogger(__name__)

DEFAULT_MONTHS_CAP = 600
DEFAULT_MONTHS_TO_RECORD = 24


def _clamp_count(value: Any) -> int:
    return int(coerce_amount(value))


def simulate(
    accounts: Sequence[DebtAccount],
    strategy: str,
    extra_budget: float = 0.0,
    months_cap: int = DEFAULT_MONTHS_CAP,
    months_to_record: int = DEFAULT_MONTHS_TO_RECORD,
) -> SimulationResult:
    """
    Simulate a debt payoff plan month by month.

    Args:
        accounts: Debt accounts as of the start of the plan (never mutated)
        strategy: ``"avalanche"`` or ``"snowball"``
        extra_budget: Monthly amount available above all minimums
        months_cap: Hard upper bound on simulated months
        months_to_record: Maximum number of ledger rows kept in the result;
            does not affect the numeric simulation

    Returns:
        SimulationResult for the run
    """
    extra_budget = coerce_amount(extra_budget)
    months_cap = _clamp_count(months_cap)
    months_to_record = _clamp_count(months_to_record)

    # Accounts with nothing owed and nothing due would only add idle rows
    participating = [
        account
        for account in accounts
        if not (account.balance <= PAID_OFF_EPSILON and account.minimum_payment <= 0)
    ]
    state = SimulationState.from_accounts(participating)
    starting_debt = state.total_debt
    had_debt_at_start = starting_debt > BALANCE_EPSILON
    open_accounts = [
        account.id for account in participating if account.balance > BALANCE_EPSILON
    ]
    initial_priority_order = rank(participating, strategy)

    logger.debug(
        f"Simulating {len(participating)} accounts with {strategy}, "
        f"extra budget {extra_budget:.2f}, cap {months_cap} months"
    )

    rows: List[MonthLedgerRow] = []
    payoff_months: Dict[str, int] = {}
    total_interest = 0.0
    total_minimum = 0.0
    total_extra = 0.0
    months_to_payoff: Optional[int] = None
    stalled = False
    stall_reason: Optional[StallReason] = None

    for month in range(1, months_cap + 1):
        if state.total_debt <= BALANCE_EPSILON:
            months_to_payoff = month - 1
            break

        state, row = step(state, strategy, extra_budget)
        total_interest += row.total_interest_accrued
        total_minimum += row.total_minimum_paid
        total_extra += row.total_extra_paid
        if len(rows) < months_to_record:
            rows.append(row)

        for account_id in open_accounts:
            if (
                account_id not in payoff_months
                and state.balances[account_id] <= BALANCE_EPSILON
            ):
                payoff_months[account_id] = month

        if month == 1 and had_debt_at_start:
            if row.total_minimum_paid + row.total_extra_paid <= PAID_OFF_EPSILON:
                stalled = True
                stall_reason = "no_payment"
                logger.debug("Plan makes no payment in the first month")

        if state.total_debt <= BALANCE_EPSILON:
            months_to_payoff = month
            break

    if months_to_payoff is None:
        if state.total_debt <= BALANCE_EPSILON:
            months_to_payoff = 0
        else:
            months_to_payoff = months_cap
            stalled = True
            if stall_reason is None:
                stall_reason = "cap_reached"

    logger.debug(
        f"Simulation finished after {months_to_payoff} months, "
        f"interest {total_interest:.2f}, stalled={stalled}"
    )

    return SimulationResult(
        strategy=strategy,
        extra_budget=extra_budget,
        months_to_payoff=months_to_payoff,
        total_interest_paid=total_interest,
        total_minimum_paid=total_minimum,
        total_extra_paid=total_extra,
        total_paid=total_minimum + total_extra,
        starting_debt=starting_debt,
        initial_priority_order=initial_priority_order,
        account_ids=[account.id for account in participating],
        months=rows,
        final_balances=dict(state.balances),
        account_payoff_months=payoff_months,
        stalled=stalled,
        stall_reason=stall_reason,
    )
