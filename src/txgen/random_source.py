"""Random source interface: the only external dependency of the generator."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod


class RandomSource(ABC):
    """Uniform integer source; swap in a seeded or scripted one for reproducible output."""

    @abstractmethod
    def next_uniform_int(self, low: int, high: int) -> int:
        """Return an integer uniformly drawn from [low, high], inclusive."""
        ...


class PythonRandomSource(RandomSource):
    """Backed by random.Random. seed=None draws from OS entropy."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def next_uniform_int(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError(f"Empty range [{low}, {high}]")
        return self._rng.randint(low, high)
