"""
Service layer: scheduling, standings, result providers and the league state machine.
No I/O anywhere in services; the league applies results, providers only compute them.
"""
from .league_service import (
    LeagueScheduler,
    LeagueTransitionError,
    RoundOutOfRangeError,
)
from .scheduling import ScheduleConfigurationError, generate_league_schedule
from .simulation_service import (
    MatchResult,
    MatchResultProvider,
    MatchSimulationError,
    SeededMatchEngine,
    run_match_simulation,
)
from .standings import StandingRow, sort_standings

__all__ = [
    "LeagueScheduler",
    "LeagueTransitionError",
    "RoundOutOfRangeError",
    "ScheduleConfigurationError",
    "generate_league_schedule",
    "MatchResult",
    "MatchResultProvider",
    "MatchSimulationError",
    "SeededMatchEngine",
    "run_match_simulation",
    "StandingRow",
    "sort_standings",
]
