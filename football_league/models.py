"""
Data models for the league engine.
Domain objects only: no scheduling, simulation or persistence logic.

Fixtures reference teams by name; the TeamRegistry owns the Team objects and is
the only writer of their ledgers.
"""
from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from football_league.config import PointsScheme


class FixtureStateError(ValueError):
    """Fixture mutated in a way its lifecycle does not allow (e.g. finalized twice)."""


# ---------- Season status (state machine) ----------
class SeasonStatus(str, Enum):
    """Season lifecycle: open → scheduled → in_progress → finished."""
    OPEN = "open"              # Accepting teams, no schedule yet
    SCHEDULED = "scheduled"    # Fixtures generated, nothing simulated
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"      # Final round simulated


# ---------- Team ledger ----------
@dataclass
class TeamLedger:
    """
    Cumulative season statistics. Derived solely from finalized fixtures:
    only TeamRegistry.finalize() calls record().
    """
    points: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0

    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against

    @property
    def played(self) -> int:
        return self.wins + self.draws + self.losses

    def record(self, goals_for: int, goals_against: int, points: PointsScheme) -> None:
        self.goals_for += goals_for
        self.goals_against += goals_against
        if goals_for > goals_against:
            self.wins += 1
        elif goals_for == goals_against:
            self.draws += 1
        else:
            self.losses += 1
        self.points += points.for_result(goals_for, goals_against)

    def reset(self) -> None:
        self.points = 0
        self.wins = 0
        self.draws = 0
        self.losses = 0
        self.goals_for = 0
        self.goals_against = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "points": self.points,
            "wins": self.wins,
            "draws": self.draws,
            "losses": self.losses,
            "goals_for": self.goals_for,
            "goals_against": self.goals_against,
        }


# ---------- Team ----------
@dataclass(eq=False)
class Team:
    """
    A club. Identity is the name (unique within a league).
    division is stamped by the league the team joins.
    strength (1-100) is only read by the default match engine.
    """
    name: str
    short_name: str = ""
    country: str = "Brazil"
    division: int | None = None
    strength: int = 50
    ledger: TeamLedger = field(default_factory=TeamLedger, repr=False)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Team name must be non-empty")
        if not self.short_name:
            self.short_name = self.name.replace(" ", "")[:3].upper()
        if not 1 <= self.strength <= 100:
            raise ValueError(f"Team strength must be within 1-100, got {self.strength}")

    # Read accessors; the ledger itself is written only through the registry.
    @property
    def points(self) -> int:
        return self.ledger.points

    @property
    def wins(self) -> int:
        return self.ledger.wins

    @property
    def draws(self) -> int:
        return self.ledger.draws

    @property
    def losses(self) -> int:
        return self.ledger.losses

    @property
    def goals_for(self) -> int:
        return self.ledger.goals_for

    @property
    def goals_against(self) -> int:
        return self.ledger.goals_against

    @property
    def goal_difference(self) -> int:
        return self.ledger.goal_difference

    @property
    def played(self) -> int:
        return self.ledger.played

    def reset_ledger(self) -> None:
        """New season: zero every statistic."""
        self.ledger.reset()

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "name": self.name,
            "short_name": self.short_name,
            "country": self.country,
            "strength": self.strength,
            "ledger": self.ledger.to_dict(),
        }
        if self.division is not None:
            d["division"] = self.division
        return d

    def __str__(self) -> str:
        return self.name


# ---------- Goal event ----------
@dataclass(frozen=True)
class GoalEvent:
    """One goal. scorer/assist/minute are optional; the league engine never needs them."""
    team: str
    scorer: str | None = None
    assist: str | None = None
    minute: int | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"team": self.team}
        if self.scorer is not None:
            d["scorer"] = self.scorer
        if self.assist is not None:
            d["assist"] = self.assist
        if self.minute is not None:
            d["minute"] = self.minute
        return d


def fixture_id(competition: str, round_number: int, home: str, away: str) -> str:
    """Stable id: same competition, round and pairing always give the same id."""
    key = f"{competition}|R{round_number}|H{home}|A{away}"
    return hashlib.sha1(key.encode("utf-8")).hexdigest()[:12]


# ---------- Fixture ----------
@dataclass(eq=False)
class Fixture:
    """
    A scheduled match within a competition round.
    round_number is fixed at generation time. Goals may only be added
    before the fixture is finalized, and it is finalized at most once.
    """
    competition: str
    round_number: int
    home: str
    away: str
    goals: list[GoalEvent] = field(default_factory=list)
    finalized: bool = False
    id: str = ""

    def __post_init__(self) -> None:
        if self.home == self.away:
            raise ValueError(f"A team cannot play itself: {self.home}")
        if self.round_number < 1:
            raise ValueError(f"round_number must be >= 1, got {self.round_number}")
        if not self.id:
            self.id = fixture_id(self.competition, self.round_number, self.home, self.away)

    @property
    def home_goals(self) -> int:
        return sum(1 for g in self.goals if g.team == self.home)

    @property
    def away_goals(self) -> int:
        return sum(1 for g in self.goals if g.team == self.away)

    @property
    def winner(self) -> str | None:
        """Name of the winning team; None for a draw or an unfinished fixture."""
        if not self.finalized:
            return None
        home_goals, away_goals = self.home_goals, self.away_goals
        if home_goals > away_goals:
            return self.home
        if away_goals > home_goals:
            return self.away
        return None

    @property
    def is_draw(self) -> bool:
        return self.finalized and self.home_goals == self.away_goals

    def involves(self, team_name: str) -> bool:
        return team_name in (self.home, self.away)

    def record_goal(
        self,
        team: str,
        scorer: str | None = None,
        assist: str | None = None,
        minute: int | None = None,
    ) -> GoalEvent:
        if self.finalized:
            raise FixtureStateError(f"Fixture {self.id} is finalized; cannot add goals")
        if not self.involves(team):
            raise ValueError(f"{team} is not playing in {self.home} vs {self.away}")
        event = GoalEvent(team=team, scorer=scorer, assist=assist, minute=minute)
        self.goals.append(event)
        return event

    def mark_finalized(self) -> None:
        if self.finalized:
            raise FixtureStateError(f"Fixture {self.id} ({self.home} vs {self.away}) is already finalized")
        self.finalized = True

    def scoreline(self, short_names: dict[str, str] | None = None) -> str:
        """e.g. 'FLA 2 x 1 PAL'. Falls back to full names when short names are not given."""
        names = short_names or {}
        home = names.get(self.home, self.home)
        away = names.get(self.away, self.away)
        return f"{home} {self.home_goals} x {self.away_goals} {away}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "competition": self.competition,
            "round_number": self.round_number,
            "home": self.home,
            "away": self.away,
            "goals": [g.to_dict() for g in self.goals],
            "finalized": self.finalized,
        }
