"""
Deterministic double round-robin schedule generation for leagues.

Every team plays every other team twice, once at home and once away. With N teams
(N even) the first leg is N-1 rounds of N/2 fixtures; the second leg mirrors it
with home/away swapped, so the season is 2*(N-1) rounds.

BYE handling: when the number of teams is odd, we add a virtual BYE slot. The team
drawn against BYE rests that round and no fixture is produced, so each round has
(N-1)/2 fixtures and the season runs 2*N rounds. OddTeamPolicy.REJECT refuses
odd rosters instead.

Uses the circle method: the first team is the anchor, the others rotate one
position per round. Same team list ordering yields the same schedule.
"""
from __future__ import annotations

from football_league.config import OddTeamPolicy
from football_league.models import Fixture

# Sentinel for bye when number of teams is odd
BYE = object()


class ScheduleConfigurationError(ValueError):
    """Roster cannot be scheduled under the configured policy."""


def _padded(team_ids: list[str], odd_team_policy: OddTeamPolicy) -> list:
    ids: list = list(team_ids)
    if len(set(ids)) != len(ids):
        raise ScheduleConfigurationError("Team ids must be unique")
    if len(ids) % 2 == 1:
        if OddTeamPolicy(odd_team_policy) is OddTeamPolicy.REJECT:
            raise ScheduleConfigurationError(
                f"Cannot schedule an odd number of teams ({len(ids)}) without byes"
            )
        ids.append(BYE)
    return ids


def rounds_per_leg(n_teams: int) -> int:
    """Rounds in one leg; an odd roster is padded with a bye first."""
    if n_teams < 2:
        return 0
    slots = n_teams + (n_teams % 2)
    return slots - 1


def total_rounds(n_teams: int) -> int:
    return 2 * rounds_per_leg(n_teams)


def round_robin_pairings(
    team_ids: list[str],
    odd_team_policy: OddTeamPolicy = OddTeamPolicy.BYE,
) -> list[tuple[int, str, str]]:
    """
    Single round-robin (first leg): (round_number, home_team_id, away_team_id).
    Pairings against BYE are dropped. Deterministic: same team list => same schedule.
    """
    if len(team_ids) < 2:
        return []
    ids = _padded(team_ids, odd_team_policy)
    n = len(ids)
    anchor = ids[0]
    rotating = ids[1:]
    size = len(rotating)
    result: list[tuple[int, str, str]] = []
    for rnd in range(n - 1):
        week = rnd + 1
        # Anchor alternates home/away so it is not always at home
        if rnd % 2 == 0:
            pairs = [(anchor, rotating[0])]
        else:
            pairs = [(rotating[0], anchor)]
        for i in range(1, n // 2):
            a, b = rotating[i], rotating[size - i]
            pairs.append((a, b) if (rnd + i) % 2 == 0 else (b, a))
        for home, away in pairs:
            if home is BYE or away is BYE:
                continue
            result.append((week, home, away))
        # Rotate: last element moves to the front
        rotating.insert(0, rotating.pop())
    return result


def double_round_robin_pairings(
    team_ids: list[str],
    odd_team_policy: OddTeamPolicy = OddTeamPolicy.BYE,
) -> list[tuple[int, str, str]]:
    """
    Both legs. Second-leg fixtures mirror the first leg in the same order, with
    home/away swapped and round number offset by the leg length.
    """
    first_leg = round_robin_pairings(team_ids, odd_team_policy)
    offset = rounds_per_leg(len(team_ids))
    second_leg = [(week + offset, away, home) for week, home, away in first_leg]
    return first_leg + second_leg


def generate_league_schedule(
    team_ids: list[str],
    competition: str,
    odd_team_policy: OddTeamPolicy = OddTeamPolicy.BYE,
) -> list[Fixture]:
    """
    Return the full fixture list for a competition, first leg then second leg,
    every fixture tagged with the competition name. Empty for fewer than 2 teams.
    """
    return [
        Fixture(competition=competition, round_number=week, home=home, away=away)
        for week, home, away in double_round_robin_pairings(team_ids, odd_team_policy)
    ]
