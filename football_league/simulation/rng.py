"""
Seeded goal sampling for the default match engine.
One generator per engine: same seed and same sequence of matches give the
same scorelines.
"""
from __future__ import annotations

import math
import random


class SeededRNG:
    """Poisson goal counts drawn from a private random.Random."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self._seed = seed

    @property
    def seed(self) -> int | None:
        return self._seed

    def poisson(self, lam: float) -> int:
        """Knuth's method; fine for the small means of football scores."""
        if lam <= 0:
            return 0
        limit = math.exp(-lam)
        goals = 0
        p = self._rng.random()
        while p > limit:
            goals += 1
            p *= self._rng.random()
        return goals
