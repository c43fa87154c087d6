"""
Team registry: the single authoritative table of a league's teams, keyed by name.
Fixtures hold team names; every ledger write goes through finalize() here.
"""
from __future__ import annotations

from typing import Iterator

from football_league.config import PointsScheme
from football_league.models import Fixture, Team


class DuplicateTeamError(ValueError):
    """A team with the same name is already registered."""


class UnknownTeamError(KeyError):
    """No team registered under this name."""


class TeamRegistry:
    """
    Ordered collection of teams. Insertion order is preserved: it drives the
    round-robin pairing and is the final standings tie-break.
    """

    def __init__(self, teams: list[Team] | None = None) -> None:
        self._teams: dict[str, Team] = {}
        for team in teams or []:
            self.add(team)

    def add(self, team: Team) -> Team:
        if team.name in self._teams:
            raise DuplicateTeamError(f"Team already registered: {team.name}")
        self._teams[team.name] = team
        return team

    def get(self, name: str) -> Team:
        try:
            return self._teams[name]
        except KeyError:
            raise UnknownTeamError(name) from None

    def names(self) -> list[str]:
        return list(self._teams)

    def teams(self) -> list[Team]:
        return list(self._teams.values())

    def short_names(self) -> dict[str, str]:
        return {name: team.short_name for name, team in self._teams.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._teams

    def __iter__(self) -> Iterator[Team]:
        return iter(list(self._teams.values()))

    def __len__(self) -> int:
        return len(self._teams)

    def reset_ledgers(self) -> None:
        for team in self._teams.values():
            team.reset_ledger()

    def finalize(self, fixture: Fixture, points: PointsScheme) -> None:
        """
        Finalize a fixture and apply its result to both teams' ledgers.
        Raises FixtureStateError (ledgers untouched) if already finalized.
        """
        home = self.get(fixture.home)
        away = self.get(fixture.away)
        fixture.mark_finalized()
        home_goals, away_goals = fixture.home_goals, fixture.away_goals
        home.ledger.record(home_goals, away_goals, points)
        away.ledger.record(away_goals, home_goals, points)
