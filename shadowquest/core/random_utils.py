"""Random roll helpers shared by the world, encounter and combat rules.

All rolls take an explicit ``numpy.random.Generator`` so a session owns a
single seedable source of randomness.
"""

from typing import Optional

import numpy as np


def create_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the session random generator, optionally seeded."""
    return np.random.default_rng(seed)


def random_int(rng: np.random.Generator, low: int, high: int) -> int:
    """Uniform integer in the inclusive range [low, high]."""
    return int(rng.integers(low, high + 1))


def percent_chance(rng: np.random.Generator, percent: int) -> bool:
    """Return True with ``percent`` percent probability."""
    return int(rng.integers(0, 100)) < percent
