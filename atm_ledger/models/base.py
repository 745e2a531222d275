"""Credential key shared by the account and history maps."""

from dataclasses import dataclass

from atm_ledger.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Credential:
    """Account number and PIN pair identifying exactly one account.

    Frozen so it can key both the account map and the transaction-history
    map. Both components must be non-negative integers.
    """

    account_number: int
    pin: int

    def __post_init__(self) -> None:
        for name in ("account_number", "pin"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidArgumentError(
                    f"{name} must be a non-negative integer, got {value!r}"
                )

    def __repr__(self) -> str:
        # PIN stays out of reprs and log lines
        return f"Credential(account_number={self.account_number}, pin=****)"
