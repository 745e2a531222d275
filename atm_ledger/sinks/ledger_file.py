"""Plain-text ledger file sink."""

import logging
from pathlib import Path
from typing import Sequence

logger = logging.getLogger(__name__)


class LedgerFileSink:
    """Write account ledgers to text files.

    Layout is the owner name on the first line followed by one line per
    history entry, oldest first. Every line is newline-terminated.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def render(self, owner_name: str, entries: Sequence[str]) -> str:
        """Render a ledger to text."""
        return "".join(f"{line}\n" for line in [owner_name, *entries])

    def write_ledger(
        self, path: str | Path, owner_name: str, entries: Sequence[str]
    ) -> Path:
        """Write a ledger, replacing any existing file at ``path``.

        Parameters
        ----------
        path : str | Path
            Destination file. Missing parent directories are created.
        owner_name : str
            Account owner, written as the header line.
        entries : Sequence[str]
            Transaction descriptions in chronological order.

        Returns
        -------
        Path
            The written file.
        """
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w", encoding=self.encoding, newline="\n") as f:
            f.write(self.render(owner_name, entries))

        logger.debug("Wrote %d ledger entries to %s", len(entries), file_path)
        return file_path
