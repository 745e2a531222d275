"""Console sink for debugging and development."""

from typing import Sequence


class ConsoleSink:
    """Print account ledgers to stdout."""

    def __init__(self, max_records: int | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        max_records : int | None
            Maximum entries to print per ledger (None for all).
        """
        self.max_records = max_records
        self._counts: dict[int, int] = {}
        self._owners: dict[int, str] = {}

    def write_ledger(
        self, account_number: int, owner_name: str, entries: Sequence[str]
    ) -> None:
        """Print one ledger. Counts accumulate per account number."""
        print(f"\n{'='*60}")
        print(f"Ledger: {owner_name}, account {account_number} ({len(entries)} transactions)")
        print("=" * 60)

        display = entries[: self.max_records] if self.max_records else entries
        for entry in display:
            print(entry)

        if self.max_records and len(entries) > self.max_records:
            print(f"... and {len(entries) - self.max_records} more transactions")

        self._owners[account_number] = owner_name
        self._counts[account_number] = self._counts.get(account_number, 0) + len(entries)

    def close(self) -> None:
        """Print summary."""
        print(f"\n{'='*60}")
        print("Console Sink Summary")
        print("=" * 60)
        for account_number, count in self._counts.items():
            print(f"  {account_number} ({self._owners[account_number]}): {count} transactions")
