"""
Debt account model for payoff planning.

This module defines the account record that the payoff engine consumes. Raw
values coming from the account editor or from a stored snapshot are normalized
rather than rejected: every monetary and rate field is clamped to be
non-negative and anything that is not a finite number becomes zero.
"""

import math
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Balances at or below this are treated as already paid off.
PAID_OFF_EPSILON = 0.00001

AccountType = Literal["credit_card", "loan"]


def coerce_amount(value: Any) -> float:
    """
    Coerce a raw value to a non-negative finite float.

    Args:
        value: Raw numeric input (number, numeric string, None, ...)

    Returns:
        ``max(0, value)`` as a float, or 0.0 when the value is not a finite number
    """
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return max(0.0, number)


class DebtAccount(BaseModel):
    """A single debt account as of the start of a simulation."""

    id: str = Field(..., description="Opaque identifier, unique within a run")
    name: str = Field(default="", description="Display label")
    account_type: AccountType = Field(
        default="credit_card", description="Kind of debt (credit card or loan)"
    )
    balance: float = Field(default=0.0, ge=0, description="Amount currently owed")
    annual_rate: float = Field(
        default=0.0, ge=0, description="Annual percentage rate, e.g. 24 for 24%"
    )
    minimum_payment: float = Field(
        default=0.0, ge=0, description="Required monthly payment"
    )
    credit_limit: Optional[float] = Field(
        default=None, ge=0, description="Credit limit, used for utilization only"
    )
    next_due_day: int = Field(
        default=1, ge=1, le=31, description="Day of month the next payment is due"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("id", "name", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v)

    @field_validator("account_type", mode="before")
    @classmethod
    def coerce_account_type(cls, v: Any) -> str:
        return "loan" if v == "loan" else "credit_card"

    @field_validator("balance", "annual_rate", "minimum_payment", mode="before")
    @classmethod
    def clamp_amounts(cls, v: Any) -> float:
        return coerce_amount(v)

    @field_validator("credit_limit", mode="before")
    @classmethod
    def clamp_credit_limit(cls, v: Any) -> Optional[float]:
        if v is None or v == "":
            return None
        return coerce_amount(v)

    @field_validator("next_due_day", mode="before")
    @classmethod
    def clamp_due_day(cls, v: Any) -> int:
        day = coerce_amount(v)
        if day < 1:
            return 1
        return min(31, int(day))

    @property
    def periodic_rate(self) -> float:
        """Monthly interest rate derived from the APR."""
        return self.annual_rate / 100 / 12

    @property
    def is_paid_off(self) -> bool:
        """Whether the starting balance is effectively zero."""
        return self.balance <= PAID_OFF_EPSILON

    def utilization(self, balance: Optional[float] = None) -> Optional[float]:
        """
        Calculate credit utilization as a percentage of the credit limit.

        Args:
            balance: Balance to measure (defaults to the account balance)

        Returns:
            Utilization percentage, or None when the account has no positive limit
        """
        if self.credit_limit is None or self.credit_limit <= 0:
            return None
        if balance is None:
            balance = self.balance
        return balance / self.credit_limit * 100
