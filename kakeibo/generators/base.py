"""Base generator class for synthetic household data."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Base class for all data generators.

    Provides common initialization: Faker instance creation and
    seed-based reproducibility.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``ja_JP``).
    """

    def __init__(self, seed: int | None = None, locale: str = "ja_JP") -> None:
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)

    def new_id(self) -> str:
        """Return a fresh record id."""
        return self.fake.uuid4()

    def color(self) -> str:
        return self.fake.hex_color()
