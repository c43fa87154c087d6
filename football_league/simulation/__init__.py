"""
Default match simulation: seeded, strength-based scorelines.
The league engine treats any match engine as opaque; this one exists so a
season can be played without outside code.
"""
from .rng import SeededRNG
from .goal_model import ExpectedGoals, MAX_EXPECTED_GOALS, expected_goals, sample_score

__all__ = [
    "SeededRNG",
    "ExpectedGoals",
    "MAX_EXPECTED_GOALS",
    "expected_goals",
    "sample_score",
]
