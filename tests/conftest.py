"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from finhealth.api.main import create_app
from finhealth.domain.models import Transaction


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """One month of salary and spending in March 2024, plus a February month"""
    return [
        Transaction(
            amount=100000,
            type="income",
            category="Salary",
            description="Salary Deposit",
            date=date(2024, 3, 1),
        ),
        Transaction(
            amount=40000,
            type="expense",
            category="Housing",
            description="Rent",
            date=date(2024, 3, 3),
        ),
        Transaction(
            amount=12000,
            type="expense",
            category="Food",
            description="Grocery store",
            date=date(2024, 3, 10),
        ),
        Transaction(
            amount=8000,
            type="expense",
            category="Food",
            description="Restaurant",
            date=date(2024, 3, 21),
        ),
        Transaction(
            amount=90000,
            type="income",
            category="Salary",
            description="Salary Deposit",
            date=date(2024, 2, 1),
        ),
        Transaction(
            amount=85000,
            type="expense",
            category="Travel",
            description="Flights",
            date=date(2024, 2, 14),
        ),
    ]
