"""
Tests for league snapshots: validation and resuming a season from a snapshot.
"""
from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from football_league.models import FixtureStateError, SeasonStatus, Team
from football_league.schemas import FixtureSnapshot, LeagueSnapshot, TeamSnapshot
from football_league.services.league_service import LeagueScheduler
from football_league.services.simulation_service import MatchResult, SeededMatchEngine


class AlternatingProvider:
    """Home win, draw, away win, repeat."""

    def __init__(self) -> None:
        self.n = 0

    def simulate(self, home, away, important):
        self.n += 1
        return [MatchResult(2, 0), MatchResult(1, 1), MatchResult(0, 3)][self.n % 3]


def _played_league(rounds: int) -> LeagueScheduler:
    teams = [Team(n, strength=s) for n, s in [("Flamengo", 80), ("Palmeiras", 78), ("Santos", 60), ("Bahia", 55)]]
    league = LeagueScheduler("Serie A", teams=teams, provider=SeededMatchEngine(seed=5))
    league.generate_schedule()
    for rnd in range(1, rounds + 1):
        league.simulate_round(rnd)
    return league


def test_snapshot_contents():
    league = _played_league(2)
    snap = league.snapshot()
    assert snap.name == "Serie A"
    assert snap.status == SeasonStatus.IN_PROGRESS
    assert snap.current_round == 2
    assert [t.name for t in snap.teams] == ["Flamengo", "Palmeiras", "Santos", "Bahia"]
    assert len(snap.fixtures) == 12
    assert sum(f.finalized for f in snap.fixtures) == 4
    assert all(t.division == 1 for t in snap.teams)


def test_restore_from_json_resumes_season():
    original = _played_league(3)
    payload = original.snapshot().model_dump_json()
    restored = LeagueScheduler.restore(LeagueSnapshot.model_validate_json(payload))

    assert restored.status == original.status
    assert restored.current_round == 3
    assert restored.total_rounds == 6
    assert [t.name for t in restored.standings()] == [t.name for t in original.standings()]
    for t in original.teams:
        assert restored.get_team(t.name).ledger.to_dict() == t.ledger.to_dict()
    assert [f.id for f in restored.fixtures] == [f.id for f in original.fixtures]

    original.provider = AlternatingProvider()
    restored.provider = AlternatingProvider()
    original.simulate_season()
    restored.simulate_season()
    assert restored.is_finished
    assert restored.champion().name == original.champion().name
    assert [t.ledger.to_dict() for t in restored.standings()] == [t.ledger.to_dict() for t in original.standings()]


def test_restore_accepts_dict_and_keeps_finalized_fixtures():
    original = _played_league(1)
    restored = LeagueScheduler.restore(original.snapshot().model_dump())
    done = restored.fixtures_for_round(1)
    assert all(f.finalized for f in done)
    with pytest.raises(FixtureStateError):
        restored.record_result(done[0], 1, 0)


def test_restored_finished_league_has_champion():
    original = _played_league(6)
    restored = LeagueScheduler.restore(original.snapshot())
    assert restored.is_finished
    assert restored.champion().name == original.champion().name


def test_open_league_round_trip():
    league = LeagueScheduler("Copa", teams=[Team("A"), Team("B")])
    restored = LeagueScheduler.restore(league.snapshot())
    assert restored.status == SeasonStatus.OPEN
    assert restored.fixtures == []
    assert [t.name for t in restored.teams] == ["A", "B"]


def test_fixture_snapshot_rejects_self_match():
    with pytest.raises(ValidationError):
        FixtureSnapshot(competition="Liga", round_number=1, home="A", away="A")


def test_fixture_snapshot_rejects_foreign_goal():
    with pytest.raises(ValidationError):
        FixtureSnapshot(
            competition="Liga", round_number=1, home="A", away="B",
            goals=[{"team": "C"}],
        )


def test_league_snapshot_rejects_unknown_team():
    with pytest.raises(ValidationError):
        LeagueSnapshot(
            name="Liga",
            status=SeasonStatus.SCHEDULED,
            teams=[{"name": "A"}, {"name": "B"}],
            fixtures=[{"competition": "Liga", "round_number": 1, "home": "A", "away": "Z"}],
        )


def test_league_snapshot_rejects_duplicate_team():
    with pytest.raises(ValidationError):
        LeagueSnapshot(name="Liga", teams=[{"name": "A"}, {"name": "A"}])


def test_league_snapshot_rejects_round_pointer_past_schedule():
    with pytest.raises(ValidationError):
        LeagueSnapshot(
            name="Liga",
            status=SeasonStatus.IN_PROGRESS,
            current_round=3,
            teams=[{"name": "A"}, {"name": "B"}],
            fixtures=[
                {"competition": "Liga", "round_number": 1, "home": "A", "away": "B"},
                {"competition": "Liga", "round_number": 2, "home": "B", "away": "A"},
            ],
        )


def test_team_snapshot_bounds():
    with pytest.raises(ValidationError):
        TeamSnapshot(name="A", strength=150)
    with pytest.raises(ValidationError):
        TeamSnapshot(name="A", ledger={"wins": -1})


def _two_team_payload(**overrides) -> dict:
    payload = {
        "name": "Liga",
        "status": SeasonStatus.IN_PROGRESS,
        "current_round": 1,
        "teams": [
            {"name": "A", "ledger": {"points": 3, "wins": 1, "goals_for": 1}},
            {"name": "B", "ledger": {"losses": 1, "goals_against": 1}},
        ],
        "fixtures": [
            {"competition": "Liga", "round_number": 1, "home": "A", "away": "B",
             "goals": [{"team": "A"}], "finalized": True},
            {"competition": "Liga", "round_number": 2, "home": "B", "away": "A"},
        ],
    }
    payload.update(overrides)
    return payload


def test_consistent_payload_restores():
    league = LeagueScheduler.restore(_two_team_payload())
    assert league.get_team("A").points == 3
    assert league.status == SeasonStatus.IN_PROGRESS


def test_finished_snapshot_with_unplayed_last_round_rejected():
    with pytest.raises(ValidationError):
        LeagueSnapshot(**_two_team_payload(status=SeasonStatus.FINISHED, current_round=2))


def test_status_must_match_round_pointer():
    with pytest.raises(ValidationError):
        LeagueSnapshot(**_two_team_payload(status=SeasonStatus.SCHEDULED))
    with pytest.raises(ValidationError):
        LeagueSnapshot(**_two_team_payload(current_round=0))


def test_ledger_not_matching_fixtures_rejected():
    teams = [
        {"name": "A", "ledger": {"points": 3, "wins": 1, "goals_for": 5}},
        {"name": "B", "ledger": {"losses": 1, "goals_against": 5}},
    ]
    with pytest.raises(ValidationError):
        LeagueSnapshot(**_two_team_payload(teams=teams))


def test_ledger_without_finalized_fixture_rejected():
    payload = _two_team_payload()
    payload["fixtures"][0]["finalized"] = False
    payload["fixtures"][0]["goals"] = []
    with pytest.raises(ValidationError):
        LeagueSnapshot(**payload)
