"""
Match result providers: the seam between the league engine and whatever plays
the matches. No league state is touched here; the league applies the result.
"""
from __future__ import annotations

import logging
from typing import NamedTuple, Protocol

from football_league.config import LeagueConfig
from football_league.models import Team
from football_league.simulation import SeededRNG, expected_goals, sample_score

logger = logging.getLogger(__name__)


class MatchSimulationError(RuntimeError):
    """The match result provider failed or returned an unusable result."""


class MatchResult(NamedTuple):
    home_goals: int
    away_goals: int


class MatchResultProvider(Protocol):
    """
    Anything that can play a match. Must always return a result and must not
    modify the teams it is given.
    """

    def simulate(self, home: Team, away: Team, important: bool) -> MatchResult:
        ...


class SeededMatchEngine:
    """
    Default provider: Poisson scorelines from relative strength and home advantage.
    Deterministic for a given seed and call order.
    """

    def __init__(self, seed: int | None = None, config: LeagueConfig | None = None) -> None:
        self.config = config or LeagueConfig()
        self.rng = SeededRNG(seed)

    def simulate(self, home: Team, away: Team, important: bool = False) -> MatchResult:
        xg = expected_goals(home.strength, away.strength, important, self.config)
        home_goals, away_goals = sample_score(xg, self.rng)
        return MatchResult(home_goals, away_goals)


def run_match_simulation(
    provider: MatchResultProvider,
    home: Team,
    away: Team,
    important: bool = False,
) -> MatchResult:
    """
    Ask the provider for a result and validate it.
    Any provider failure surfaces as MatchSimulationError chained to the cause.
    """
    try:
        raw = provider.simulate(home, away, important)
    except Exception as exc:
        raise MatchSimulationError(
            f"Match engine failed for {home.name} vs {away.name}: {exc}"
        ) from exc
    try:
        home_goals, away_goals = raw
        result = MatchResult(int(home_goals), int(away_goals))
    except (TypeError, ValueError) as exc:
        raise MatchSimulationError(
            f"Match engine returned an invalid result for {home.name} vs {away.name}: {raw!r}"
        ) from exc
    if result.home_goals < 0 or result.away_goals < 0:
        raise MatchSimulationError(
            f"Negative goal count for {home.name} vs {away.name}: {result.home_goals}-{result.away_goals}"
        )
    logger.debug("%s %d x %d %s", home.name, result.home_goals, result.away_goals, away.name)
    return result
