"""Account registration generator."""

import random
from decimal import Decimal
from typing import Iterator

from atm_ledger.generators.base import BaseGenerator
from atm_ledger.models import AccountRegistration, Credential


class AccountGenerator(BaseGenerator):
    """Generate synthetic account registrations.

    Account numbers have 8 digits and PINs 4 digits, matching a
    standard debit card.
    """

    MAX_OPENING_BALANCE = 5000

    def generate(self) -> AccountRegistration:
        """Generate a single registration."""
        cents = random.randint(0, self.MAX_OPENING_BALANCE * 100)
        return AccountRegistration(
            account_number=random.randint(10_000_000, 99_999_999),
            pin=random.randint(0, 9999),
            owner_name=self.fake.name(),
            initial_balance=Decimal(cents) / 100,
        )

    def generate_batch(self, count: int) -> Iterator[AccountRegistration]:
        """Generate registrations with distinct credentials."""
        seen: set[Credential] = set()
        while len(seen) < count:
            registration = self.generate()
            credential = Credential(registration.account_number, registration.pin)
            if credential in seen:
                continue
            seen.add(credential)
            yield registration
