"""
Debt payoff simulation engine.

Key Components:
- ranking: orders active accounts by payoff priority for a strategy
- stepper: advances all accounts by one billing cycle
- driver: runs the stepper until payoff or the month cap
- result: ledger row and result models
- comparison: runs both strategies on the same plan
"""

from .comparison import StrategyComparison, compare_strategies
from .driver import DEFAULT_MONTHS_CAP, DEFAULT_MONTHS_TO_RECORD, simulate
from .ranking import STRATEGIES, PayoffStrategy, rank
from .result import AccountPayment, MonthLedgerRow, SimulationResult
from .stepper import BALANCE_EPSILON, SimulationState, step

__all__ = [
    "rank",
    "step",
    "simulate",
    "compare_strategies",
    "PayoffStrategy",
    "STRATEGIES",
    "SimulationState",
    "AccountPayment",
    "MonthLedgerRow",
    "SimulationResult",
    "StrategyComparison",
    "BALANCE_EPSILON",
    "DEFAULT_MONTHS_CAP",
    "DEFAULT_MONTHS_TO_RECORD",
]
