"""In-memory ATM account ledger."""

from atm_ledger.store.atm import Atm

__version__ = "0.1.0"

__all__ = ["Atm", "__version__"]
