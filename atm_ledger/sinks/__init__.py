"""Output sinks for exporting account ledgers."""

from atm_ledger.sinks.console import ConsoleSink
from atm_ledger.sinks.ledger_file import LedgerFileSink

__all__ = ["ConsoleSink", "LedgerFileSink"]
