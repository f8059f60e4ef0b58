"""Tests for comparing avalanche and snowball on the same plan."""

import pytest

from payoff_planner.models.debt_account import DebtAccount
from payoff_planner.models.payoff import compare_strategies


class TestCompareStrategies:
    """Test cases for compare_strategies."""

    def test_runs_both_strategies(self, household_accounts):
        """Test that both results are produced from identical input."""
        comparison = compare_strategies(household_accounts, 300)

        assert comparison.avalanche.strategy == "avalanche"
        assert comparison.snowball.strategy == "snowball"
        assert comparison.avalanche.starting_debt == comparison.snowball.starting_debt

    def test_avalanche_never_costs_more_interest(self, household_accounts):
        """Test that highest-APR-first pays no more interest than snowball."""
        comparison = compare_strategies(household_accounts, 300)

        assert comparison.interest_savings >= 0
        assert comparison.recommended == "avalanche"
        assert comparison.interest_savings == pytest.approx(
            comparison.snowball.total_interest_paid
            - comparison.avalanche.total_interest_paid
        )

    def test_priority_orders_differ(self, two_accounts):
        """Test detection of differing pay-first orders."""
        comparison = compare_strategies(two_accounts, 200)

        assert comparison.priority_orders_differ is True
        assert comparison.create_summary()["priority_orders_differ"] is True

    def test_identical_strategies_tie_to_avalanche(self):
        """Test the tie-break when both strategies behave the same."""
        accounts = [DebtAccount(id="only", balance=900, annual_rate=12, minimum_payment=100)]

        comparison = compare_strategies(accounts, 50)

        assert comparison.interest_savings == 0.0
        assert comparison.months_difference == 0
        assert comparison.recommended == "avalanche"
        assert comparison.priority_orders_differ is False

    def test_both_stalled_defaults_to_avalanche(self):
        """Test the recommendation when neither strategy can make progress."""
        accounts = [DebtAccount(id="a", balance=500, annual_rate=20)]

        comparison = compare_strategies(accounts, 0, months_cap=12)

        assert comparison.avalanche.stalled and comparison.snowball.stalled
        assert comparison.recommended == "avalanche"
