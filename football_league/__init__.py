"""
League scheduling and standings engine for a football-management game.
Double round-robin fixtures, per-round simulation through a pluggable match
engine, and a deterministic league table.
"""
from .config import LeagueConfig, OddTeamPolicy, PointsScheme
from .models import Fixture, FixtureStateError, GoalEvent, SeasonStatus, Team, TeamLedger
from .registry import DuplicateTeamError, TeamRegistry, UnknownTeamError
from .services import (
    LeagueScheduler,
    LeagueTransitionError,
    MatchResult,
    MatchResultProvider,
    MatchSimulationError,
    RoundOutOfRangeError,
    ScheduleConfigurationError,
    SeededMatchEngine,
    StandingRow,
)

__all__ = [
    "LeagueConfig",
    "OddTeamPolicy",
    "PointsScheme",
    "Fixture",
    "FixtureStateError",
    "GoalEvent",
    "SeasonStatus",
    "Team",
    "TeamLedger",
    "DuplicateTeamError",
    "TeamRegistry",
    "UnknownTeamError",
    "LeagueScheduler",
    "LeagueTransitionError",
    "MatchResult",
    "MatchResultProvider",
    "MatchSimulationError",
    "RoundOutOfRangeError",
    "ScheduleConfigurationError",
    "SeededMatchEngine",
    "StandingRow",
]
