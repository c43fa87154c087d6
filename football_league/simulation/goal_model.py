"""
Expected-goals model for the default match engine.

Each side's scoring rate is the league base rate scaled by its share of the
combined strength, plus a home bonus. Important matches are tighter: both
rates shrink by the configured factor. Goals are Poisson draws around the rates.
"""
from __future__ import annotations

from dataclasses import dataclass

from football_league.config import LeagueConfig
from .rng import SeededRNG

# Cap on expected goals for one side, so mismatches stay football-like
MAX_EXPECTED_GOALS = 4.5


@dataclass(frozen=True)
class ExpectedGoals:
    home: float
    away: float


def expected_goals(
    home_strength: int,
    away_strength: int,
    important: bool,
    config: LeagueConfig,
) -> ExpectedGoals:
    total = home_strength + away_strength
    home_share = home_strength / total
    away_share = away_strength / total
    # 2 * share == 1.0 for evenly matched sides
    home_xg = config.base_goal_rate * 2 * home_share + config.home_advantage
    away_xg = config.base_goal_rate * 2 * away_share
    if important:
        home_xg *= config.important_match_factor
        away_xg *= config.important_match_factor
    return ExpectedGoals(
        home=min(max(home_xg, 0.0), MAX_EXPECTED_GOALS),
        away=min(max(away_xg, 0.0), MAX_EXPECTED_GOALS),
    )


def sample_score(xg: ExpectedGoals, rng: SeededRNG) -> tuple[int, int]:
    return rng.poisson(xg.home), rng.poisson(xg.away)
