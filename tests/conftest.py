"""Pytest configuration and fixtures."""

import logging
from decimal import Decimal
from typing import Iterator

import pytest

from realty_ledger.store import PortfolioLedger


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def ledger() -> PortfolioLedger:
    """Create a fresh, empty ledger for each test."""
    return PortfolioLedger()


@pytest.fixture
def main_st_kwargs() -> dict:
    """Arguments for the reference 123 Main St property."""
    return {
        "address": "123 Main St",
        "city": "Anytown",
        "purchase": Decimal("200000.00"),
        "rehab": Decimal("15000.00"),
        "initial_value": Decimal("220000.00"),
        "rent_monthly": Decimal("1500.00"),
        "status": "Active",
    }


@pytest.fixture
def populated_ledger(ledger: PortfolioLedger, main_st_kwargs: dict) -> PortfolioLedger:
    """Ledger with two properties: 123 Main St (#1) and 9 Oak Ave (#2)."""
    ledger.add_property(**main_st_kwargs)
    ledger.add_property(
        "9 Oak Ave",
        "Springfield",
        Decimal("150000"),
        Decimal("0"),
        Decimal("140000"),
        Decimal("1100"),
        "Vacant",
    )
    return ledger


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    package = logging.getLogger("realty_ledger")
    handlers = root.handlers[:]
    levels = (root.level, package.level)
    yield
    root.handlers[:] = handlers
    root.setLevel(levels[0])
    package.setLevel(levels[1])
