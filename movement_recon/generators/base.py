"""Base generator class for synthetic movement data."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Base class for data generators.

    Provides a Faker instance and seed-based reproducibility. Generators
    draw from ``self.rng`` rather than the global ``random`` state.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``tr_TR``).
    """

    def __init__(self, seed: int | None = None, locale: str = "tr_TR") -> None:
        self.fake = Faker(locale)
        self.rng = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)
