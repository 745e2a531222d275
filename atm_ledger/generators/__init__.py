"""Synthetic account and cash activity generators."""

from atm_ledger.generators.account import AccountGenerator
from atm_ledger.generators.activity import CashActivityGenerator
from atm_ledger.generators.base import BaseGenerator

__all__ = ["AccountGenerator", "BaseGenerator", "CashActivityGenerator"]
