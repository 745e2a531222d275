"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from atm_ledger.store import Atm


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def atm() -> Atm:
    """Fresh, empty ATM for each test."""
    return Atm()


@pytest.fixture
def sam_atm(atm: Atm) -> Atm:
    """ATM with Sam Sepiol's account registered at 300.30."""
    atm.register_account(12345678, 1234, "Sam Sepiol", Decimal("300.30"))
    return atm
