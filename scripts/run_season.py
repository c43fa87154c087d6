#!/usr/bin/env python3
"""
Run a league season end to end: build league → generate schedule → simulate → print table.
Run from project root: python3 scripts/run_season.py --seed 7
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from football_league import LeagueConfig, LeagueScheduler, SeededMatchEngine, Team

# (name, short name, strength)
SERIE_A_CLUBS: list[tuple[str, str, int]] = [
    ("Flamengo", "FLA", 82),
    ("Palmeiras", "PAL", 81),
    ("Atletico Mineiro", "CAM", 76),
    ("Fluminense", "FLU", 72),
    ("Botafogo", "BOT", 74),
    ("Sao Paulo", "SAO", 71),
    ("Corinthians", "COR", 70),
    ("Internacional", "INT", 70),
    ("Gremio", "GRE", 69),
    ("Athletico Paranaense", "CAP", 67),
    ("Fortaleza", "FOR", 66),
    ("Cruzeiro", "CRU", 66),
    ("Bahia", "BAH", 64),
    ("Vasco da Gama", "VAS", 63),
    ("Red Bull Bragantino", "RBB", 63),
    ("Cuiaba", "CUI", 58),
    ("Juventude", "JUV", 56),
    ("Vitoria", "VIT", 55),
    ("Criciuma", "CRI", 54),
    ("Atletico Goianiense", "ACG", 52),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulate a double round-robin league season.")
    parser.add_argument("--name", default="Campeonato Brasileiro Serie A", help="Competition name")
    parser.add_argument(
        "--teams", nargs="+", metavar="NAME",
        help="Team names in pairing order (default: 20 Serie A clubs)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Match engine seed (reproducible runs)")
    parser.add_argument("--rounds", type=int, default=None, help="Stop after this many rounds")
    parser.add_argument("--relegation", type=int, default=None, help="Relegation slots")
    parser.add_argument("--qualification", type=int, default=None, help="Qualification slots")
    parser.add_argument("--results", action="store_true", help="Print every scoreline round by round")
    parser.add_argument("--json", action="store_true", help="Print the league snapshot as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each round")
    return parser


def _teams_from_args(names: list[str] | None) -> list[Team]:
    if not names:
        return [Team(name, short_name=short, strength=strength) for name, short, strength in SERIE_A_CLUBS]
    return [Team(name) for name in names]


def _print_table(league: LeagueScheduler) -> None:
    print(f"\n{league}  (round {league.current_round}/{league.total_rounds})")
    print(f"{'#':>3}  {'Team':<24}{'P':>4}{'W':>4}{'D':>4}{'L':>4}{'GF':>5}{'GA':>5}{'GD':>5}{'Pts':>5}")
    for row in league.standings_table():
        print(
            f"{row.position:>3}  {row.team:<24}{row.played:>4}{row.wins:>4}{row.draws:>4}"
            f"{row.losses:>4}{row.goals_for:>5}{row.goals_against:>5}{row.goal_difference:>+5}{row.points:>5}"
        )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = LeagueConfig.from_env()
    league = LeagueScheduler(
        args.name,
        teams=_teams_from_args(args.teams),
        provider=SeededMatchEngine(seed=args.seed, config=config),
        config=config,
    )
    league.generate_schedule()
    if league.total_rounds == 0:
        print("Need at least 2 teams to play a season", file=sys.stderr)
        return 1

    last_round = league.total_rounds if args.rounds is None else min(args.rounds, league.total_rounds)
    for rnd in range(1, last_round + 1):
        league.simulate_round(rnd)
        if args.results and not args.json:
            print(f"Round {rnd}: " + "; ".join(league.round_report(rnd)))

    if args.json:
        print(league.snapshot().model_dump_json(indent=2))
        return 0

    _print_table(league)
    champion = league.champion()
    print(f"\nChampion: {champion.name if champion else 'season not finished'}")
    print("Qualified: " + ", ".join(t.name for t in league.qualified(args.qualification)))
    print("Relegated: " + ", ".join(t.name for t in league.relegated(args.relegation)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
