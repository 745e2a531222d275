"""Cash transaction models."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from atm_ledger.models.enums import TransactionType
from atm_ledger.sinks.serialization import format_amount


@dataclass(frozen=True)
class CashTransaction:
    """Completed deposit or withdrawal.

    ``description`` is the text stored in the account's transaction history
    and written verbatim to exported ledgers.
    """

    transaction_type: TransactionType
    amount: Decimal
    balance_after: Decimal
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def description(self) -> str:
        return (
            f"{self.transaction_type.value} - Amount: ${format_amount(self.amount)}, "
            f"Updated Balance: ${format_amount(self.balance_after)}"
        )


@dataclass
class CashOperation:
    """Requested deposit or withdrawal, not yet applied to an account."""

    transaction_type: TransactionType
    amount: Decimal
