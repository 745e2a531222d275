"""Configuration management for atm-ledger."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from atm_ledger.exceptions import ConfigurationError


@dataclass
class LedgerConfig:
    """Ledger export configuration."""

    output_dir: Path = field(default_factory=lambda: Path("ledgers"))
    encoding: str = "utf-8"

    def path_for(self, account_number: int) -> Path:
        """Get the export path for an account's ledger."""
        return self.output_dir / f"ledger_{account_number}.txt"


@dataclass
class GeneratorConfig:
    """Synthetic account generation configuration."""

    locale: str = "en_US"
    num_accounts: int = 10
    operations_per_account: int = 5


@dataclass
class AtmConfig:
    """Main configuration for atm-ledger."""

    ledger: LedgerConfig = field(default_factory=LedgerConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "AtmConfig":
        """Create config from environment variables."""
        ledger = LedgerConfig(
            output_dir=Path(os.getenv("LEDGER_OUTPUT_DIR", "ledgers")),
            encoding=os.getenv("LEDGER_ENCODING", "utf-8"),
        )

        generator = GeneratorConfig(
            locale=os.getenv("FAKER_LOCALE", "en_US"),
            num_accounts=_int_from_env("NUM_ACCOUNTS", 10),
            operations_per_account=_int_from_env("OPERATIONS_PER_ACCOUNT", 5),
        )

        return cls(
            ledger=ledger,
            generator=generator,
            seed=_int_from_env("SEED", None),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _int_from_env(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
