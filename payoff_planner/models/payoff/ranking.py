"""
Payoff priority ranking.

Orders the accounts that still carry a balance according to a payoff strategy:

- ``avalanche``: highest APR first, larger balance first on equal APR
- ``snowball``: smallest balance first, higher APR first on equal balance

The account id is the final tie-break so the order is total and repeated calls
on identical input always agree.
"""

from typing import Dict, List, Literal, Mapping, Optional, Sequence, Tuple

from ..debt_account import PAID_OFF_EPSILON, DebtAccount

PayoffStrategy = Literal["avalanche", "snowball"]

STRATEGIES: Tuple[str, ...] = ("avalanche", "snowball")


def rank(
    accounts: Sequence[DebtAccount],
    strategy: str,
    balances: Optional[Mapping[str, float]] = None,
) -> List[str]:
    """
    Rank active accounts by payoff priority.

    Args:
        accounts: Accounts to rank
        strategy: Either ``"avalanche"`` or ``"snowball"``
        balances: Current balances by account id (defaults to each account's
            starting balance)

    Returns:
        Account ids in payoff order, excluding paid-off accounts

    Raises:
        ValueError: If the strategy is not one of the known strategies
    """
    current: Dict[str, float] = {
        account.id: (
            balances.get(account.id, 0.0) if balances is not None else account.balance
        )
        for account in accounts
    }
    active = [a for a in accounts if current[a.id] > PAID_OFF_EPSILON]

    if strategy == "avalanche":
        ordered = sorted(
            active, key=lambda a: (-a.annual_rate, -current[a.id], a.id)
        )
    elif strategy == "snowball":
        ordered = sorted(
            active, key=lambda a: (current[a.id], -a.annual_rate, a.id)
        )
    else:
        raise ValueError(f"Unknown payoff strategy: {strategy}")

    return [account.id for account in ordered]
