"""Account ledger manager keyed by account number and PIN."""

import logging
from decimal import Decimal
from pathlib import Path
from typing import Any

from atm_ledger.config import LedgerConfig
from atm_ledger.exceptions import (
    DuplicateAccountError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidArgumentError,
    InvalidCredentialError,
)
from atm_ledger.models import Account, CashTransaction, Credential, TransactionType
from atm_ledger.sinks.ledger_file import LedgerFileSink
from atm_ledger.sinks.serialization import add_amounts, subtract_amounts, to_amount

logger = logging.getLogger(__name__)


class Atm:
    """In-memory store of accounts and their transaction histories.

    Two dicts share the same ``Credential`` key space: ``accounts`` holds the
    owner and balance, ``transactions`` holds the rendered history lines.
    Every validated operation keeps them key-synchronized.

    Parameters
    ----------
    ledger_config : LedgerConfig | None
        Encoding used by ``print_ledger``.
    """

    def __init__(self, ledger_config: LedgerConfig | None = None) -> None:
        self.ledger_config = ledger_config or LedgerConfig()
        self.accounts: dict[Credential, Account] = {}
        self.transactions: dict[Credential, list[str]] = {}
        self._sink = LedgerFileSink(encoding=self.ledger_config.encoding)

    def register_account(
        self,
        account_number: int,
        pin: int,
        owner_name: str,
        initial_balance: Any,
    ) -> None:
        """Register a new account with an empty transaction history.

        The initial balance is taken as given; no sign check is applied.
        """
        credential = Credential(account_number, pin)
        if credential in self.accounts:
            raise DuplicateAccountError(f"Account {account_number} is already registered")

        self.accounts[credential] = Account(owner_name, to_amount(initial_balance))
        self.transactions[credential] = []
        logger.info(
            "Registered account %d for %s",
            account_number,
            owner_name,
            extra={"account_number": account_number},
        )

    def deposit(self, account_number: int, pin: int, amount: Any) -> None:
        """Add cash to an account and record the deposit."""
        credential, account = self._lookup(account_number, pin)
        amount = self._validate_amount(amount)

        new_balance = add_amounts(account.balance, amount)
        self._apply(credential, account, TransactionType.DEPOSIT, amount, new_balance)

    def withdraw(self, account_number: int, pin: int, amount: Any) -> None:
        """Remove cash from an account and record the withdrawal."""
        credential, account = self._lookup(account_number, pin)
        amount = self._validate_amount(amount)

        if amount > account.balance:
            raise InsufficientFundsError(
                f"Withdrawal of {amount} exceeds balance of account {account_number}"
            )

        new_balance = subtract_amounts(account.balance, amount)
        self._apply(credential, account, TransactionType.WITHDRAWAL, amount, new_balance)

    def check_balance(self, account_number: int, pin: int) -> Decimal:
        """Return the current balance."""
        _, account = self._lookup(account_number, pin)
        return account.balance

    def print_ledger(self, path: str | Path, account_number: int, pin: int) -> None:
        """Export the owner name and transaction history to a text file.

        Any existing file at ``path`` is overwritten. I/O errors propagate.
        """
        credential, account = self._lookup(account_number, pin)
        self._sink.write_ledger(path, account.owner_name, self.transactions[credential])
        logger.info(
            "Exported ledger for account %d to %s",
            account_number,
            path,
            extra={"account_number": account_number, "path": str(path)},
        )

    def get_accounts(self) -> dict[Credential, Account]:
        """Return the live account map.

        Unchecked: changes made through the returned dict bypass validation
        and must keep it key-synchronized with ``get_transactions()``.
        """
        return self.accounts

    def get_transactions(self) -> dict[Credential, list[str]]:
        """Return the live transaction-history map.

        Unchecked: lines appended here are exported as-is by ``print_ledger``.
        """
        return self.transactions

    def summary(self) -> dict[str, int]:
        """Return counts of accounts and recorded transactions."""
        return {
            "accounts": len(self.accounts),
            "transactions": sum(len(history) for history in self.transactions.values()),
        }

    def _lookup(self, account_number: int, pin: int) -> tuple[Credential, Account]:
        try:
            credential = Credential(account_number, pin)
        except InvalidArgumentError as exc:
            raise InvalidCredentialError(str(exc)) from exc

        account = self.accounts.get(credential)
        if account is None:
            logger.warning(
                "Rejected credentials for account %s",
                account_number,
                extra={"account_number": account_number},
            )
            raise InvalidCredentialError("Invalid account number or PIN")
        return credential, account

    @staticmethod
    def _validate_amount(amount: Any) -> Decimal:
        amount = to_amount(amount)
        if amount < 0:
            raise InvalidAmountError(f"Amount must not be negative, got {amount}")
        return amount

    def _apply(
        self,
        credential: Credential,
        account: Account,
        transaction_type: TransactionType,
        amount: Decimal,
        new_balance: Decimal,
    ) -> None:
        # Balance and history change only after rendering succeeds
        description = CashTransaction(transaction_type, amount, new_balance).description

        account.balance = new_balance
        self.transactions[credential].append(description)
        logger.debug(
            "%s of %s on account %d",
            transaction_type.value,
            amount,
            credential.account_number,
            extra={
                "account_number": credential.account_number,
                "transaction_type": transaction_type.value,
                "amount": amount,
                "balance": new_balance,
            },
        )
