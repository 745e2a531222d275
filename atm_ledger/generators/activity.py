"""Deposit and withdrawal generator."""

import random
from decimal import Decimal
from typing import Iterator

from atm_ledger.generators.base import BaseGenerator
from atm_ledger.models import CashOperation, TransactionType


class CashActivityGenerator(BaseGenerator):
    """Generate ATM cash operations that never overdraw the account.

    Withdrawals are drawn in multiples of 20 like real ATM notes; deposits
    may carry cents.
    """

    WITHDRAWAL_PROBABILITY = 0.45
    MAX_DEPOSIT = 2000
    MAX_WITHDRAWAL = 800

    def generate(self, balance: Decimal) -> CashOperation:
        """Generate one operation valid against ``balance``."""
        max_withdrawal = min(self.MAX_WITHDRAWAL, int(balance // 20) * 20)
        if max_withdrawal >= 20 and random.random() < self.WITHDRAWAL_PROBABILITY:
            amount = Decimal(random.randrange(20, max_withdrawal + 1, 20))
            return CashOperation(TransactionType.WITHDRAWAL, amount)

        cents = random.randint(100, self.MAX_DEPOSIT * 100)
        return CashOperation(TransactionType.DEPOSIT, Decimal(cents) / 100)

    def generate_batch(self, balance: Decimal, count: int) -> Iterator[CashOperation]:
        """Generate ``count`` operations, tracking the running balance."""
        for _ in range(count):
            operation = self.generate(balance)
            if operation.transaction_type == TransactionType.DEPOSIT:
                balance += operation.amount
            else:
                balance -= operation.amount
            yield operation
