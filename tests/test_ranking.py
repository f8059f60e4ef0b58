"""
Tests for payoff priority ranking.

Covers both strategies, their tie-breaks, exclusion of paid-off accounts and
the totality of the resulting order.
"""

import pytest

from payoff_planner.models.debt_account import DebtAccount
from payoff_planner.models.payoff import rank


def _account(account_id, balance, rate):
    return DebtAccount(
        id=account_id, name=account_id, balance=balance, annual_rate=rate
    )


class TestAvalanche:
    """Test cases for the cost-optimal strategy."""

    def test_orders_by_rate_descending(self):
        """Test that higher APR accounts come first."""
        accounts = [_account("a", 100, 5), _account("b", 100, 25), _account("c", 100, 15)]

        assert rank(accounts, "avalanche") == ["b", "c", "a"]

    def test_equal_rate_prefers_larger_balance(self):
        """Test that the larger balance wins at equal APR."""
        accounts = [_account("small", 100, 20), _account("large", 900, 20)]

        assert rank(accounts, "avalanche") == ["large", "small"]

    def test_never_orders_lower_rate_first(self, household_accounts):
        """Test that no lower-rate account precedes a higher-rate one."""
        order = rank(household_accounts, "avalanche")
        rates = {a.id: a.annual_rate for a in household_accounts}

        for earlier, later in zip(order, order[1:]):
            assert rates[earlier] >= rates[later]


class TestSnowball:
    """Test cases for the fastest-closure strategy."""

    def test_orders_by_balance_ascending(self):
        """Test that smaller balances come first."""
        accounts = [_account("a", 3000, 5), _account("b", 200, 5), _account("c", 900, 5)]

        assert rank(accounts, "snowball") == ["b", "c", "a"]

    def test_equal_balance_prefers_higher_rate(self):
        """Test that the higher APR wins at equal balance."""
        accounts = [_account("cheap", 500, 4), _account("costly", 500, 19)]

        assert rank(accounts, "snowball") == ["costly", "cheap"]


class TestRanking:
    """Test cases shared by both strategies."""

    @pytest.mark.parametrize("strategy", ["avalanche", "snowball"])
    def test_paid_off_accounts_are_excluded(self, strategy):
        """Test that accounts at or below the epsilon are not ranked."""
        accounts = [
            _account("done", 0, 30),
            _account("dust", 0.000001, 30),
            _account("open", 50, 10),
        ]

        assert rank(accounts, strategy) == ["open"]

    @pytest.mark.parametrize("strategy", ["avalanche", "snowball"])
    def test_identical_keys_fall_back_to_id(self, strategy):
        """Test that the order is total even for identical rate and balance."""
        accounts = [_account("z", 100, 10), _account("m", 100, 10), _account("a", 100, 10)]

        assert rank(accounts, strategy) == ["a", "m", "z"]
        assert rank(list(reversed(accounts)), strategy) == ["a", "m", "z"]

    @pytest.mark.parametrize("strategy", ["avalanche", "snowball"])
    def test_repeated_calls_agree(self, household_accounts, strategy):
        """Test that ranking is deterministic."""
        assert rank(household_accounts, strategy) == rank(household_accounts, strategy)

    def test_current_balances_override_starting_balances(self):
        """Test ranking against balances reduced during a simulation."""
        accounts = [_account("a", 100, 10), _account("b", 200, 10)]

        order = rank(accounts, "snowball", balances={"a": 300.0, "b": 50.0})

        assert order == ["b", "a"]

    def test_zero_current_balance_is_excluded(self):
        """Test that an account paid off mid-run drops out of the order."""
        accounts = [_account("a", 100, 10), _account("b", 200, 10)]

        assert rank(accounts, "avalanche", balances={"a": 0.0, "b": 150.0}) == ["b"]

    def test_does_not_mutate_input(self):
        """Test that ranking leaves the input list untouched."""
        accounts = [_account("a", 100, 5), _account("b", 100, 25)]
        before = list(accounts)

        rank(accounts, "avalanche")

        assert accounts == before

    def test_unknown_strategy_raises(self):
        """Test that an unknown strategy tag is a caller error."""
        with pytest.raises(ValueError, match="Unknown payoff strategy"):
            rank([_account("a", 100, 5)], "highest_balance")

    def test_empty_input(self):
        """Test ranking with no accounts."""
        assert rank([], "avalanche") == []
