"""Domain models for the ATM ledger."""

from atm_ledger.models.account import Account, AccountRegistration
from atm_ledger.models.base import Credential
from atm_ledger.models.enums import TransactionType
from atm_ledger.models.transaction import CashOperation, CashTransaction

__all__ = [
    "Account",
    "AccountRegistration",
    "CashOperation",
    "CashTransaction",
    "Credential",
    "TransactionType",
]
