"""
League-centric service: roster, fixture list, season state machine, round
simulation and standings.
Generate schedule: double round-robin over the roster. Simulate round: play every
unfinished fixture of the round, finalize, advance the round pointer.
"""
from __future__ import annotations

import logging

from football_league.config import LeagueConfig
from football_league.models import Fixture, FixtureStateError, SeasonStatus, Team
from football_league.registry import TeamRegistry
from football_league.schemas import FixtureSnapshot, LeagueSnapshot, TeamSnapshot
from football_league.services.scheduling import generate_league_schedule, total_rounds
from football_league.services.simulation_service import (
    MatchResultProvider,
    SeededMatchEngine,
    run_match_simulation,
)
from football_league.services.standings import (
    StandingRow,
    bottom,
    build_table,
    sort_standings,
    top,
)

logger = logging.getLogger(__name__)

# ---------- Exceptions ----------


class LeagueTransitionError(ValueError):
    """Invalid season status transition (e.g. open -> finished)."""


class RoundOutOfRangeError(ValueError):
    """Round number outside 1..total_rounds."""


# ---------- Valid transitions ----------

_VALID_TRANSITIONS: dict[SeasonStatus, set[SeasonStatus]] = {
    SeasonStatus.OPEN: {SeasonStatus.SCHEDULED},
    # Regenerating the schedule goes back to SCHEDULED from anywhere
    SeasonStatus.SCHEDULED: {SeasonStatus.SCHEDULED, SeasonStatus.IN_PROGRESS, SeasonStatus.FINISHED},
    SeasonStatus.IN_PROGRESS: {SeasonStatus.SCHEDULED, SeasonStatus.IN_PROGRESS, SeasonStatus.FINISHED},
    SeasonStatus.FINISHED: {SeasonStatus.SCHEDULED, SeasonStatus.FINISHED},
}


# ---------- LeagueScheduler ----------


class LeagueScheduler:
    """
    A points-table league (every team plays every other home and away).
    Owns its teams through a TeamRegistry; fixtures refer to teams by name.
    """

    def __init__(
        self,
        name: str,
        country: str = "Brazil",
        division: int = 1,
        teams: list[Team] | None = None,
        provider: MatchResultProvider | None = None,
        config: LeagueConfig | None = None,
    ) -> None:
        self.name = name
        self.country = country
        self.division = division
        self.config = config or LeagueConfig()
        self.provider: MatchResultProvider = provider or SeededMatchEngine(config=self.config)
        self._registry = TeamRegistry()
        self._fixtures: list[Fixture] = []
        self._round_index: dict[int, list[int]] = {}
        self._total_rounds = 0
        self._current_round = 0
        self._status = SeasonStatus.OPEN
        for team in teams or []:
            self.add_team(team)

    def __str__(self) -> str:
        return f"{self.name} - {self.country}"

    # ---------- Read accessors ----------

    @property
    def status(self) -> SeasonStatus:
        return self._status

    @property
    def current_round(self) -> int:
        """Last round simulated; 0 before any round is played."""
        return self._current_round

    @property
    def total_rounds(self) -> int:
        return self._total_rounds

    @property
    def is_finished(self) -> bool:
        return self._status == SeasonStatus.FINISHED

    @property
    def teams(self) -> list[Team]:
        return self._registry.teams()

    @property
    def fixtures(self) -> list[Fixture]:
        return list(self._fixtures)

    def get_team(self, name: str) -> Team:
        return self._registry.get(name)

    # ---------- State machine ----------

    def _transition(self, new_status: SeasonStatus) -> None:
        allowed = _VALID_TRANSITIONS.get(self._status, set())
        if new_status not in allowed:
            raise LeagueTransitionError(
                f"Invalid transition: {self._status.value} -> {new_status.value}. "
                f"Allowed from {self._status.value}: {sorted(s.value for s in allowed)}"
            )
        self._status = new_status

    def assert_can_simulate(self) -> None:
        """Raise if there is no schedule to play."""
        if self._status == SeasonStatus.OPEN:
            raise LeagueTransitionError("Cannot simulate: no schedule generated (current: open)")

    # ---------- Roster ----------

    def add_team(self, team: Team) -> Team:
        """
        Register a team: stamps the league division and starts its ledger from zero.
        Takes effect on the schedule at the next generate_schedule().
        """
        if self._status == SeasonStatus.IN_PROGRESS:
            logger.warning("Adding %s to %s while the season is in progress", team.name, self.name)
        self._registry.add(team)
        team.division = self.division
        team.reset_ledger()
        return team

    # ---------- Start league & scheduling ----------

    def generate_schedule(self) -> list[Fixture]:
        """
        Build the double round-robin from the current roster, replacing any
        existing schedule. Ledgers are reset so they match the (unplayed) fixtures.
        """
        played = sum(1 for f in self._fixtures if f.finalized)
        if played:
            logger.warning("Regenerating %s schedule over %d finalized fixtures", self.name, played)
        names = self._registry.names()
        fixtures = generate_league_schedule(names, self.name, self.config.odd_team_policy)
        self._fixtures = fixtures
        self._round_index = {}
        for pos, fixture in enumerate(fixtures):
            self._round_index.setdefault(fixture.round_number, []).append(pos)
        self._total_rounds = total_rounds(len(names))
        self._current_round = 0
        self._registry.reset_ledgers()
        self._transition(SeasonStatus.SCHEDULED)
        logger.info(
            "Generated %s schedule: %d teams, %d fixtures, %d rounds",
            self.name, len(names), len(fixtures), self._total_rounds,
        )
        return self.fixtures

    def fixtures_for_round(self, round_number: int) -> list[Fixture]:
        """Fixtures of one round in generation order; empty when out of range."""
        return [self._fixtures[pos] for pos in self._round_index.get(round_number, [])]

    # ---------- Results & simulation ----------

    def record_result(self, fixture: Fixture, home_goals: int, away_goals: int) -> Fixture:
        """
        Apply a final score to a fixture and finalize it (both ledgers updated).
        Raises FixtureStateError if the fixture was already finalized or does not
        belong to the current schedule.
        """
        if home_goals < 0 or away_goals < 0:
            raise ValueError(f"Goal counts must be non-negative, got {home_goals}-{away_goals}")
        # Must be this schedule's own object, not a stale or hand-built copy
        if fixture not in self.fixtures_for_round(fixture.round_number):
            raise FixtureStateError(
                f"Fixture {fixture.id} ({fixture.home} vs {fixture.away}) is not part of the current {self.name} schedule"
            )
        if fixture.finalized:
            raise FixtureStateError(f"Fixture {fixture.id} ({fixture.home} vs {fixture.away}) is already finalized")
        # Unknown teams fail here, before any goal is appended
        self._registry.get(fixture.home)
        self._registry.get(fixture.away)
        for _ in range(home_goals):
            fixture.record_goal(fixture.home)
        for _ in range(away_goals):
            fixture.record_goal(fixture.away)
        self._registry.finalize(fixture, self.config.points)
        return fixture

    def simulate_round(self, round_number: int) -> list[Fixture]:
        """
        Play every unfinished fixture of the round through the provider, then move
        the round pointer. Simulating the final round finishes the season.
        A provider failure raises MatchSimulationError; fixtures finalized before
        it stay finalized and a second call resumes with the rest.
        """
        self.assert_can_simulate()
        if not 1 <= round_number <= self._total_rounds:
            raise RoundOutOfRangeError(
                f"Round {round_number} out of range: {self.name} has {self._total_rounds} rounds"
            )
        fixtures = self.fixtures_for_round(round_number)
        for fixture in fixtures:
            if fixture.finalized:
                continue
            home = self._registry.get(fixture.home)
            away = self._registry.get(fixture.away)
            result = run_match_simulation(self.provider, home, away, important=False)
            self.record_result(fixture, result.home_goals, result.away_goals)
        self._current_round = round_number
        logger.info("%s round %d/%d simulated", self.name, round_number, self._total_rounds)
        if self._status != SeasonStatus.FINISHED:
            if round_number == self._total_rounds:
                self._transition(SeasonStatus.FINISHED)
                champion = self.champion()
                logger.info("%s finished; champion: %s", self.name, champion.name if champion else "none")
            else:
                self._transition(SeasonStatus.IN_PROGRESS)
        return fixtures

    def round_report(self, round_number: int) -> list[str]:
        """Scorelines of the round's finalized fixtures, with short names."""
        names = self._registry.short_names()
        return [f.scoreline(names) for f in self.fixtures_for_round(round_number) if f.finalized]

    def simulate_next_round(self) -> list[Fixture]:
        return self.simulate_round(self._current_round + 1)

    def simulate_season(self) -> None:
        """
        Play every remaining round in order, including earlier rounds skipped by
        out-of-order calls. Fully played rounds are passed over; the last round is
        always simulated so the season ends FINISHED.
        """
        self.assert_can_simulate()
        for rnd in range(1, self._total_rounds + 1):
            pending = any(not f.finalized for f in self.fixtures_for_round(rnd))
            if pending or rnd == self._total_rounds:
                self.simulate_round(rnd)

    # ---------- Standings & derived queries ----------

    def standings(self) -> list[Team]:
        return sort_standings(self._registry.teams())

    def standings_table(self) -> list[StandingRow]:
        return build_table(self.standings())

    def champion(self) -> Team | None:
        """Top of the table once the season is finished; None before that."""
        if not self.is_finished:
            return None
        ranked = self.standings()
        return ranked[0] if ranked else None

    def relegated(self, k: int | None = None) -> list[Team]:
        """Bottom k of the current table (provisional while the season runs)."""
        return bottom(self.standings(), self.config.relegation_slots if k is None else k)

    def qualified(self, k: int | None = None) -> list[Team]:
        """Top k of the current table, e.g. continental qualification."""
        return top(self.standings(), self.config.qualification_slots if k is None else k)

    # ---------- Snapshot ----------

    def snapshot(self) -> LeagueSnapshot:
        return LeagueSnapshot(
            name=self.name,
            country=self.country,
            division=self.division,
            status=self._status,
            current_round=self._current_round,
            teams=[TeamSnapshot.from_team(t) for t in self._registry],
            fixtures=[FixtureSnapshot.from_fixture(f) for f in self._fixtures],
        )

    @classmethod
    def restore(
        cls,
        snapshot: LeagueSnapshot | dict,
        provider: MatchResultProvider | None = None,
        config: LeagueConfig | None = None,
    ) -> LeagueScheduler:
        """
        Rebuild a league from its snapshot. Ledgers are taken as stored, not
        recomputed, so simulation resumes exactly where it stopped.
        """
        snap = LeagueSnapshot.model_validate(snapshot)
        league = cls(snap.name, snap.country, snap.division, provider=provider, config=config)
        for team_snap in snap.teams:
            league._registry.add(team_snap.to_team())
        league._fixtures = [f.to_fixture() for f in snap.fixtures]
        for pos, fixture in enumerate(league._fixtures):
            league._round_index.setdefault(fixture.round_number, []).append(pos)
        league._total_rounds = max(league._round_index, default=0)
        league._current_round = snap.current_round
        league._status = snap.status
        return league
