"""Account models."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Account:
    """Registered bank account.

    Mutated in place by deposits and withdrawals; never removed.
    """

    owner_name: str
    balance: Decimal


@dataclass
class AccountRegistration:
    """Arguments for a single ``Atm.register_account`` call."""

    account_number: int
    pin: int
    owner_name: str
    initial_balance: Decimal
