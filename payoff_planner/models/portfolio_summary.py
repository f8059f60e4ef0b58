"""Totals and per-account shares for a set of debt accounts."""

from typing import List, Optional, Sequence

import numpy as np
from pydantic import BaseModel, Field

from .debt_account import DebtAccount, coerce_amount


class AccountShare(BaseModel):
    """An account's weight within the whole debt load."""

    account_id: str
    name: str = ""
    balance: float = Field(..., ge=0)
    share_of_total: int = Field(..., ge=0, le=100, description="Rounded percent")
    utilization: Optional[float] = Field(
        None, description="Balance as a percentage of the credit limit"
    )


class PortfolioSummary(BaseModel):
    """Aggregate view used by the stats screen."""

    total_balance: float = Field(..., ge=0)
    total_minimum: float = Field(..., ge=0)
    extra_budget: float = Field(..., ge=0)
    total_monthly_payment: float = Field(..., ge=0)
    weighted_average_rate: float = Field(
        ..., ge=0, description="Balance-weighted APR in percent"
    )
    overall_utilization: Optional[float] = Field(
        None, description="Combined utilization across accounts with a limit"
    )
    accounts: List[AccountShare] = Field(default_factory=list)


def summarize_accounts(
    accounts: Sequence[DebtAccount], extra_budget: float = 0.0
) -> PortfolioSummary:
    """
    Summarize balances, payments and utilization across accounts.

    Args:
        accounts: Accounts to summarize
        extra_budget: Monthly extra budget on top of the minimums

    Returns:
        PortfolioSummary for the accounts
    """
    extra_budget = coerce_amount(extra_budget)
    balances = np.array([a.balance for a in accounts], dtype=np.float64)
    rates = np.array([a.annual_rate for a in accounts], dtype=np.float64)
    total_balance = float(balances.sum())
    total_minimum = float(sum(a.minimum_payment for a in accounts))

    if total_balance > 0:
        weighted_rate = float(np.dot(balances, rates) / total_balance)
    else:
        weighted_rate = 0.0

    limited = [a for a in accounts if a.credit_limit is not None and a.credit_limit > 0]
    overall_utilization = None
    if limited:
        limit_total = sum(a.credit_limit for a in limited)
        overall_utilization = sum(a.balance for a in limited) / limit_total * 100

    shares = [
        AccountShare(
            account_id=account.id,
            name=account.name,
            balance=account.balance,
            share_of_total=(
                round(account.balance / total_balance * 100) if total_balance > 0 else 0
            ),
            utilization=account.utilization(),
        )
        for account in accounts
    ]

    return PortfolioSummary(
        total_balance=total_balance,
        total_minimum=total_minimum,
        extra_budget=extra_budget,
        total_monthly_payment=total_minimum + extra_budget,
        weighted_average_rate=weighted_rate,
        overall_utilization=overall_utilization,
        accounts=shares,
    )
