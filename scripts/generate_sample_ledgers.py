#!/usr/bin/env python3
"""Generate sample ATM ledgers.

Registers synthetic accounts, applies random deposits and withdrawals,
then exports one ledger file per account. Useful for eyeballing the
ledger layout and for producing reference files.
"""

import argparse
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from atm_ledger.config import AtmConfig
from atm_ledger.generators import AccountGenerator, CashActivityGenerator
from atm_ledger.logging import get_logger, setup_logging
from atm_ledger.models import Credential, TransactionType
from atm_ledger.sinks import ConsoleSink
from atm_ledger.sinks.serialization import account_to_dict
from atm_ledger.store import Atm

logger = get_logger(__name__)


def populate(atm: Atm, config: AtmConfig) -> list[tuple[int, int]]:
    """Register generated accounts and replay generated activity.

    Returns
    -------
    list[tuple[int, int]]
        Account number and PIN of every registered account.
    """
    gen_config = config.generator
    account_gen = AccountGenerator(seed=config.seed, locale=gen_config.locale)
    activity_gen = CashActivityGenerator(seed=config.seed, locale=gen_config.locale)

    credentials = []
    for registration in account_gen.generate_batch(gen_config.num_accounts):
        atm.register_account(
            registration.account_number,
            registration.pin,
            registration.owner_name,
            registration.initial_balance,
        )
        credentials.append((registration.account_number, registration.pin))

        operations = activity_gen.generate_batch(
            registration.initial_balance, gen_config.operations_per_account
        )
        for operation in operations:
            if operation.transaction_type == TransactionType.DEPOSIT:
                atm.deposit(registration.account_number, registration.pin, operation.amount)
            else:
                atm.withdraw(registration.account_number, registration.pin, operation.amount)

    return credentials


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate sample ATM ledgers")
    parser.add_argument("--accounts", type=int, help="Number of accounts to generate")
    parser.add_argument("--operations", type=int, help="Cash operations per account")
    parser.add_argument("--seed", type=int, help="Random seed for reproducibility")
    parser.add_argument("--output-dir", type=Path, help="Directory for ledger files")
    parser.add_argument("--console", action="store_true", help="Also print ledgers to stdout")
    args = parser.parse_args()

    config = AtmConfig.from_env()
    if args.accounts is not None:
        config.generator.num_accounts = args.accounts
    if args.operations is not None:
        config.generator.operations_per_account = args.operations
    if args.seed is not None:
        config.seed = args.seed
    if args.output_dir is not None:
        config.ledger.output_dir = args.output_dir

    setup_logging(level=config.log_level, format_type=config.log_format)

    t0 = time.perf_counter()
    atm = Atm(ledger_config=config.ledger)
    credentials = populate(atm, config)

    console = ConsoleSink() if args.console else None
    for account_number, pin in credentials:
        atm.print_ledger(config.ledger.path_for(account_number), account_number, pin)

        credential = Credential(account_number, pin)
        account = atm.get_accounts()[credential]
        logger.debug("Exported %s", account_to_dict(credential, account))
        if console is not None:
            console.write_ledger(account_number, account.owner_name, atm.get_transactions()[credential])
    if console is not None:
        console.close()

    summary = atm.summary()
    logger.info(
        "Generated %d accounts and %d transactions in %.2fs -> %s",
        summary["accounts"],
        summary["transactions"],
        time.perf_counter() - t0,
        config.ledger.output_dir,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
