"""Enumeration types for ledger entities."""

from enum import Enum


class TransactionType(str, Enum):
    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"
