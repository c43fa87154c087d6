"""
League configuration: points scheme, odd-roster policy, slot counts and
match-engine tuning. Defaults match a standard national league; every value
can be overridden from the environment with LeagueConfig.from_env().
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum

ENV_PREFIX = "FOOTBALL_LEAGUE_"


class OddTeamPolicy(str, Enum):
    """What the scheduler does with an odd number of teams."""
    BYE = "bye"        # Pad with a bye slot; one team rests each round
    REJECT = "reject"  # Refuse to schedule


@dataclass(frozen=True)
class PointsScheme:
    """Points awarded per result. Standard scheme is 3-1-0."""
    win: int = 3
    draw: int = 1
    loss: int = 0

    def for_result(self, goals_for: int, goals_against: int) -> int:
        if goals_for > goals_against:
            return self.win
        if goals_for == goals_against:
            return self.draw
        return self.loss


@dataclass(frozen=True)
class LeagueConfig:
    points: PointsScheme = field(default_factory=PointsScheme)
    odd_team_policy: OddTeamPolicy = OddTeamPolicy.BYE
    relegation_slots: int = 4
    qualification_slots: int = 4
    # Default match engine tuning (expected goals per side)
    home_advantage: float = 0.25
    base_goal_rate: float = 1.35
    important_match_factor: float = 0.9

    def __post_init__(self) -> None:
        if self.relegation_slots < 0 or self.qualification_slots < 0:
            raise ValueError("Slot counts must be non-negative")
        if self.base_goal_rate <= 0:
            raise ValueError(f"base_goal_rate must be positive, got {self.base_goal_rate}")
        if self.important_match_factor <= 0:
            raise ValueError("important_match_factor must be positive")
        # Accept plain strings ("bye") for convenience
        object.__setattr__(self, "odd_team_policy", OddTeamPolicy(self.odd_team_policy))

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> LeagueConfig:
        """
        Build a config from FOOTBALL_LEAGUE_* environment variables.
        Missing variables fall back to the defaults.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def _get(name: str) -> str | None:
            return env.get(ENV_PREFIX + name)

        def _int(name: str, default: int) -> int:
            raw = _get(name)
            if raw is None:
                return default
            try:
                return int(raw)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None

        def _float(name: str, default: float) -> float:
            raw = _get(name)
            if raw is None:
                return default
            try:
                return float(raw)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from None

        points = PointsScheme(
            win=_int("POINTS_WIN", defaults.points.win),
            draw=_int("POINTS_DRAW", defaults.points.draw),
            loss=_int("POINTS_LOSS", defaults.points.loss),
        )
        policy_raw = _get("ODD_TEAMS")
        try:
            policy = OddTeamPolicy(policy_raw.lower()) if policy_raw else defaults.odd_team_policy
        except ValueError:
            allowed = [p.value for p in OddTeamPolicy]
            raise ValueError(f"{ENV_PREFIX}ODD_TEAMS must be one of {allowed}, got {policy_raw!r}") from None
        return cls(
            points=points,
            odd_team_policy=policy,
            relegation_slots=_int("RELEGATION_SLOTS", defaults.relegation_slots),
            qualification_slots=_int("QUALIFICATION_SLOTS", defaults.qualification_slots),
            home_advantage=_float("HOME_ADVANTAGE", defaults.home_advantage),
            base_goal_rate=_float("BASE_GOAL_RATE", defaults.base_goal_rate),
            important_match_factor=_float("IMPORTANT_MATCH_FACTOR", defaults.important_match_factor),
        )
