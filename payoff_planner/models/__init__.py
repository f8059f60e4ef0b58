"""Data models and calculators for debt payoff planning."""

from .debt_account import PAID_OFF_EPSILON, AccountType, DebtAccount, coerce_amount
from .minimum_projection import (
    MinimumOnlyProjection,
    ProjectionRow,
    project_minimum_only,
)
from .payoff import (
    AccountPayment,
    MonthLedgerRow,
    PayoffStrategy,
    SimulationResult,
    SimulationState,
    StrategyComparison,
    compare_strategies,
    rank,
    simulate,
    step,
)
from .portfolio_summary import AccountShare, PortfolioSummary, summarize_accounts
from .snapshot import DebtSnapshot, PlanSettings, load_snapshot

__all__ = [
    "DebtAccount",
    "AccountType",
    "PAID_OFF_EPSILON",
    "coerce_amount",
    "rank",
    "step",
    "simulate",
    "compare_strategies",
    "PayoffStrategy",
    "SimulationState",
    "AccountPayment",
    "MonthLedgerRow",
    "SimulationResult",
    "StrategyComparison",
    "MinimumOnlyProjection",
    "ProjectionRow",
    "project_minimum_only",
    "AccountShare",
    "PortfolioSummary",
    "summarize_accounts",
    "DebtSnapshot",
    "PlanSettings",
    "load_snapshot",
]
