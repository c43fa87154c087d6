"""
Standings: teams ordered by points, wins, goal difference, goals for (all desc).

Python's sort is stable, so teams level on all four keys keep the order they
were given in (the league roster order). No further tie-break is applied.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from football_league.models import Team


def standings_key(team: Team) -> tuple[int, int, int, int]:
    return (-team.points, -team.wins, -team.goal_difference, -team.goals_for)


def sort_standings(teams: Iterable[Team]) -> list[Team]:
    return sorted(teams, key=standings_key)


def _clamp(k: int, size: int) -> int:
    return max(0, min(int(k), size))


def top(ranked: list[Team], k: int) -> list[Team]:
    """First k teams of an already-sorted table; k is clamped to the table size."""
    return ranked[: _clamp(k, len(ranked))]


def bottom(ranked: list[Team], k: int) -> list[Team]:
    """Last k teams of an already-sorted table, in table order."""
    k = _clamp(k, len(ranked))
    return ranked[len(ranked) - k:]


@dataclass(frozen=True)
class StandingRow:
    """One line of the league table."""
    position: int
    team: str
    short_name: str
    played: int
    wins: int
    draws: int
    losses: int
    goals_for: int
    goals_against: int
    goal_difference: int
    points: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "position": self.position,
            "team": self.team,
            "short_name": self.short_name,
            "played": self.played,
            "wins": self.wins,
            "draws": self.draws,
            "losses": self.losses,
            "goals_for": self.goals_for,
            "goals_against": self.goals_against,
            "goal_difference": self.goal_difference,
            "points": self.points,
        }


def build_table(ranked: list[Team]) -> list[StandingRow]:
    return [
        StandingRow(
            position=pos,
            team=t.name,
            short_name=t.short_name,
            played=t.played,
            wins=t.wins,
            draws=t.draws,
            losses=t.losses,
            goals_for=t.goals_for,
            goals_against=t.goals_against,
            goal_difference=t.goal_difference,
            points=t.points,
        )
        for pos, t in enumerate(ranked, start=1)
    ]
