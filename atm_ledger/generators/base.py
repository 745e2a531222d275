"""Seeded Faker base for the account and cash-activity generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Shared setup for ``AccountGenerator`` and ``CashActivityGenerator``.

    Owner names come from the Faker instance; account numbers, PINs and
    cash amounts come from the module-level ``random``, which is reseeded
    here so two generators built with the same seed replay the same accounts
    and operations.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    """

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)
