"""Tests for portfolio totals, shares and utilization."""

import pytest

from payoff_planner.models.debt_account import DebtAccount
from payoff_planner.models.portfolio_summary import summarize_accounts


class TestSummarizeAccounts:
    """Test cases for summarize_accounts."""

    def test_totals(self, household_accounts):
        """Test total balance, minimums and monthly payment."""
        summary = summarize_accounts(household_accounts, extra_budget=250)

        assert summary.total_balance == pytest.approx(33000.0)
        assert summary.total_minimum == pytest.approx(680.0)
        assert summary.total_monthly_payment == pytest.approx(930.0)

    def test_shares_are_rounded_percentages(self):
        """Test each account's share of the total."""
        accounts = [
            DebtAccount(id="a", balance=1000),
            DebtAccount(id="b", balance=2000),
        ]

        summary = summarize_accounts(accounts)

        assert [s.share_of_total for s in summary.accounts] == [33, 67]

    def test_weighted_average_rate(self):
        """Test the balance-weighted APR."""
        accounts = [
            DebtAccount(id="a", balance=1000, annual_rate=20),
            DebtAccount(id="b", balance=3000, annual_rate=4),
        ]

        summary = summarize_accounts(accounts)

        assert summary.weighted_average_rate == pytest.approx(8.0)

    def test_utilization(self, household_accounts):
        """Test per-account and overall utilization."""
        summary = summarize_accounts(household_accounts)
        by_id = {s.account_id: s for s in summary.accounts}

        assert by_id["visa"].utilization == pytest.approx(70.0)
        assert by_id["student"].utilization is None
        assert summary.overall_utilization == pytest.approx(5500 / 11000 * 100)

    def test_empty_and_zero_balances(self):
        """Test that zero totals do not divide by zero."""
        summary = summarize_accounts([DebtAccount(id="a", minimum_payment=10)], -5)

        assert summary.total_balance == 0.0
        assert summary.weighted_average_rate == 0.0
        assert summary.extra_budget == 0.0
        assert summary.accounts[0].share_of_total == 0
        assert summary.overall_utilization is None

        assert summarize_accounts([]).accounts == []
