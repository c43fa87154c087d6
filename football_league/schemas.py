"""
Snapshot schemas: the validated serialized form of a league.
Enough to resume a season without replaying rounds. Turning a snapshot into
bytes (model_dump_json) or files is left to the caller.
"""
from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from football_league.models import Fixture, GoalEvent, SeasonStatus, Team, TeamLedger


class GoalEventSnapshot(BaseModel):
    team: str
    scorer: str | None = None
    assist: str | None = None
    minute: int | None = Field(default=None, ge=0)


class LedgerSnapshot(BaseModel):
    points: int = 0
    wins: int = Field(default=0, ge=0)
    draws: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)
    goals_for: int = Field(default=0, ge=0)
    goals_against: int = Field(default=0, ge=0)


class TeamSnapshot(BaseModel):
    name: str = Field(..., min_length=1)
    short_name: str = ""
    country: str = "Brazil"
    division: int | None = None
    strength: int = Field(default=50, ge=1, le=100)
    ledger: LedgerSnapshot = Field(default_factory=LedgerSnapshot)

    @classmethod
    def from_team(cls, team: Team) -> TeamSnapshot:
        return cls(
            name=team.name,
            short_name=team.short_name,
            country=team.country,
            division=team.division,
            strength=team.strength,
            ledger=LedgerSnapshot(**team.ledger.to_dict()),
        )

    def to_team(self) -> Team:
        return Team(
            name=self.name,
            short_name=self.short_name,
            country=self.country,
            division=self.division,
            strength=self.strength,
            ledger=TeamLedger(**self.ledger.model_dump()),
        )


class FixtureSnapshot(BaseModel):
    id: str = ""
    competition: str
    round_number: int = Field(..., ge=1)
    home: str
    away: str
    goals: list[GoalEventSnapshot] = Field(default_factory=list)
    finalized: bool = False

    @model_validator(mode="after")
    def _check_teams(self) -> FixtureSnapshot:
        if self.home == self.away:
            raise ValueError(f"A team cannot play itself: {self.home}")
        for goal in self.goals:
            if goal.team not in (self.home, self.away):
                raise ValueError(f"Goal for {goal.team} in {self.home} vs {self.away}")
        return self

    @classmethod
    def from_fixture(cls, fixture: Fixture) -> FixtureSnapshot:
        return cls.model_validate(fixture.to_dict())

    def to_fixture(self) -> Fixture:
        return Fixture(
            competition=self.competition,
            round_number=self.round_number,
            home=self.home,
            away=self.away,
            goals=[GoalEvent(**g.model_dump()) for g in self.goals],
            finalized=self.finalized,
            id=self.id,
        )


class LeagueSnapshot(BaseModel):
    name: str = Field(..., min_length=1)
    country: str = "Brazil"
    division: int = 1
    status: SeasonStatus = SeasonStatus.OPEN
    current_round: int = Field(default=0, ge=0)
    teams: list[TeamSnapshot] = Field(default_factory=list)
    fixtures: list[FixtureSnapshot] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_consistency(self) -> LeagueSnapshot:
        names = [t.name for t in self.teams]
        if len(set(names)) != len(names):
            raise ValueError("Team names must be unique")
        known = set(names)
        for f in self.fixtures:
            if f.home not in known or f.away not in known:
                raise ValueError(f"Fixture references unknown team: {f.home} vs {f.away}")
        if self.status == SeasonStatus.OPEN and self.fixtures:
            raise ValueError("An open league has no fixtures")
        last_round = max((f.round_number for f in self.fixtures), default=0)
        if self.current_round > last_round:
            raise ValueError(f"current_round {self.current_round} beyond last round {last_round}")
        if self.status == SeasonStatus.SCHEDULED and self.current_round != 0:
            raise ValueError(f"A scheduled league has current_round 0, got {self.current_round}")
        if self.status == SeasonStatus.IN_PROGRESS and self.current_round == 0:
            raise ValueError("An in-progress league needs current_round >= 1")
        if self.status == SeasonStatus.FINISHED:
            if not self.fixtures:
                raise ValueError("A finished league needs fixtures")
            unplayed = [f.id for f in self.fixtures if f.round_number == last_round and not f.finalized]
            if unplayed:
                raise ValueError(f"Finished league with unplayed last-round fixtures: {unplayed}")
        self._check_ledgers()
        return self

    def _check_ledgers(self) -> None:
        """Each stored ledger must match the finalized fixtures (points depend on the scheme)."""
        derived = {t.name: [0, 0, 0, 0, 0] for t in self.teams}  # W, D, L, GF, GA
        for f in self.fixtures:
            if not f.finalized:
                continue
            home_goals = sum(1 for g in f.goals if g.team == f.home)
            away_goals = len(f.goals) - home_goals
            for name, gf, ga in ((f.home, home_goals, away_goals), (f.away, away_goals, home_goals)):
                row = derived[name]
                row[0 if gf > ga else 1 if gf == ga else 2] += 1
                row[3] += gf
                row[4] += ga
        for t in self.teams:
            stored = [t.ledger.wins, t.ledger.draws, t.ledger.losses, t.ledger.goals_for, t.ledger.goals_against]
            if stored != derived[t.name]:
                raise ValueError(
                    f"Ledger of {t.name} (W/D/L/GF/GA {stored}) does not match its finalized fixtures {derived[t.name]}"
                )
