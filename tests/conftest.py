"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from up_real_estate.calculations.strategies import FinancingParameters
from up_real_estate.db.catalog import build_demo_catalog, get_catalog
from up_real_estate.main import app


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture
def catalog():
    """Fresh demo catalog for each test."""
    return build_demo_catalog()


@pytest.fixture
def client(catalog):
    """Test client whose requests see the per-test catalog."""
    app.dependency_overrides[get_catalog] = lambda: catalog
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_catalog, None)


@pytest.fixture
def default_financing():
    """The frontend's default financing: $90k down, 6.5%, 30 years."""
    return FinancingParameters(down_payment=90000, interest_rate=6.5, loan_term=30)
