"""
Tests for LeagueConfig defaults and FOOTBALL_LEAGUE_* environment overrides.
"""
from __future__ import annotations

from pathlib import Path

import pytest

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from football_league.config import LeagueConfig, OddTeamPolicy, PointsScheme


def test_defaults():
    cfg = LeagueConfig()
    assert cfg.points == PointsScheme(3, 1, 0)
    assert cfg.odd_team_policy is OddTeamPolicy.BYE
    assert cfg.relegation_slots == 4
    assert cfg.qualification_slots == 4


def test_points_for_result():
    scheme = PointsScheme()
    assert scheme.for_result(2, 1) == 3
    assert scheme.for_result(1, 1) == 1
    assert scheme.for_result(0, 4) == 0


def test_string_policy_is_coerced():
    assert LeagueConfig(odd_team_policy="reject").odd_team_policy is OddTeamPolicy.REJECT


def test_invalid_values_rejected():
    with pytest.raises(ValueError):
        LeagueConfig(relegation_slots=-1)
    with pytest.raises(ValueError):
        LeagueConfig(base_goal_rate=0)
    with pytest.raises(ValueError):
        LeagueConfig(odd_team_policy="sometimes")


def test_from_env_empty_gives_defaults():
    assert LeagueConfig.from_env({}) == LeagueConfig()


def test_from_env_overrides():
    cfg = LeagueConfig.from_env({
        "FOOTBALL_LEAGUE_POINTS_WIN": "2",
        "FOOTBALL_LEAGUE_ODD_TEAMS": "REJECT",
        "FOOTBALL_LEAGUE_RELEGATION_SLOTS": "3",
        "FOOTBALL_LEAGUE_QUALIFICATION_SLOTS": "6",
        "FOOTBALL_LEAGUE_HOME_ADVANTAGE": "0.1",
        "FOOTBALL_LEAGUE_BASE_GOAL_RATE": "1.5",
        "FOOTBALL_LEAGUE_IMPORTANT_MATCH_FACTOR": "0.75",
        "UNRELATED": "x",
    })
    assert cfg.points == PointsScheme(win=2, draw=1, loss=0)
    assert cfg.odd_team_policy is OddTeamPolicy.REJECT
    assert cfg.relegation_slots == 3
    assert cfg.qualification_slots == 6
    assert cfg.home_advantage == pytest.approx(0.1)
    assert cfg.base_goal_rate == pytest.approx(1.5)
    assert cfg.important_match_factor == pytest.approx(0.75)


def test_from_env_reads_process_environment(monkeypatch):
    monkeypatch.setenv("FOOTBALL_LEAGUE_POINTS_DRAW", "0")
    assert LeagueConfig.from_env().points.draw == 0


@pytest.mark.parametrize("key,value", [
    ("FOOTBALL_LEAGUE_POINTS_WIN", "three"),
    ("FOOTBALL_LEAGUE_BASE_GOAL_RATE", "lots"),
    ("FOOTBALL_LEAGUE_ODD_TEAMS", "maybe"),
    ("FOOTBALL_LEAGUE_RELEGATION_SLOTS", "-2"),
    ("FOOTBALL_LEAGUE_IMPORTANT_MATCH_FACTOR", "0"),
])
def test_from_env_invalid_values(key, value):
    with pytest.raises(ValueError):
        LeagueConfig.from_env({key: value})
