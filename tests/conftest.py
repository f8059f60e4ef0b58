"""
Pytest configuration and shared fixtures for the debt payoff planner tests.
"""

import pytest

from payoff_planner import create_app
from payoff_planner.config import Settings, reset_global_settings
from payoff_planner.models.debt_account import DebtAccount


@pytest.fixture
def test_settings():
    """Settings for tests: in-memory storage, no .env file."""
    return Settings(
        _env_file=None,
        SECRET_KEY="test-secret-key-123",
        APP_ENV="testing",
        STORAGE_TYPE="memory",
    )


@pytest.fixture
def app(test_settings):
    """Create a Flask application configured for testing."""
    reset_global_settings()
    return create_app(test_settings)


@pytest.fixture
def client(app):
    """Create a test client for the application."""
    return app.test_client()


@pytest.fixture
def two_accounts():
    """A small card and a large loan with different APRs."""
    return [
        DebtAccount(
            id="card",
            name="Store Card",
            balance=100,
            annual_rate=5,
            minimum_payment=20,
            credit_limit=500,
        ),
        DebtAccount(
            id="loan",
            name="Car Loan",
            account_type="loan",
            balance=5000,
            annual_rate=25,
            minimum_payment=50,
        ),
    ]


@pytest.fixture
def household_accounts():
    """A realistic mix of cards and loans."""
    return [
        DebtAccount(
            id="visa",
            name="Visa",
            balance=4200,
            annual_rate=22.99,
            minimum_payment=120,
            credit_limit=6000,
        ),
        DebtAccount(
            id="amex",
            name="Amex",
            balance=1300,
            annual_rate=18.5,
            minimum_payment=40,
            credit_limit=5000,
        ),
        DebtAccount(
            id="student",
            name="Student Loan",
            account_type="loan",
            balance=18000,
            annual_rate=5.5,
            minimum_payment=210,
        ),
        DebtAccount(
            id="auto",
            name="Auto Loan",
            account_type="loan",
            balance=9500,
            annual_rate=7.25,
            minimum_payment=310,
        ),
    ]
