"""In-memory account store."""

from atm_ledger.store.atm import Atm

__all__ = ["Atm"]
