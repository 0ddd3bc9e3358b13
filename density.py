# density.py
from __future__ import annotations

import time

import numpy as np

from config import DENSITY_LOW, DENSITY_HIGH, RANDOM_SEED


class DensityError(ValueError):
    pass


def validate_density(value) -> int:
    """
    Densities are relative vehicle counts, so only non-negative integers are
    accepted. Anything else is rejected instead of being silently coerced.
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise DensityError(f"Density must be an integer, got {value!r}")
    if value < 0:
        raise DensityError(f"Density must be non-negative, got {value}")
    return int(value)


class FixedDensity:
    """The same pair of densities every cycle (manual input mode)."""

    def __init__(self, first: int, second: int):
        self.first = validate_density(first)
        self.second = validate_density(second)

    def next_pair(self, cycle: int) -> tuple[int, int]:
        return self.first, self.second


class RandomDensity:
    """
    Fresh densities for every cycle, drawn uniformly from [low, high].
    Without a seed the generator is seeded from the wall clock.
    """

    def __init__(self, low: int = DENSITY_LOW, high: int = DENSITY_HIGH, seed: int | None = RANDOM_SEED):
        self.low = validate_density(low)
        self.high = validate_density(high)
        if self.low > self.high:
            raise DensityError(f"Density range is empty: [{low}, {high}]")
        if seed is None:
            seed = time.time_ns()
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def next_pair(self, cycle: int) -> tuple[int, int]:
        first, second = self.rng.integers(self.low, self.high, size=2, endpoint=True)
        return int(first), int(second)


class ScriptedDensity:
    """Pre-recorded densities, one pair per cycle (cycle numbers start at 1)."""

    def __init__(self, pairs):
        self.pairs = [(validate_density(a), validate_density(b)) for a, b in pairs]

    def next_pair(self, cycle: int) -> tuple[int, int]:
        if cycle < 1 or cycle > len(self.pairs):
            raise DensityError(f"No scripted densities for cycle {cycle} ({len(self.pairs)} available)")
        return self.pairs[cycle - 1]
