"""
Scheduling Module

Regular-season schedule generation:
- Divisional, rotation, same-place and seventeenth-game matchups
- 8-year division rotation tables
- Week placement with one bye per team
"""

from .config import ScheduleConfig, ByeWeekConfig, PlacementStrategy, DEFAULT_CONFIG
from .schedule_models import Game, GameKind, Bye, Week, Schedule
from .schedule_generator import ScheduleGenerator, make_schedule
from .placement import place_games
from .scheduling_exceptions import SchedulingError, LeagueStructureError, GamePlacementError

__all__ = [
    'ScheduleConfig',
    'ByeWeekConfig',
    'PlacementStrategy',
    'DEFAULT_CONFIG',
    'Game',
    'GameKind',
    'Bye',
    'Week',
    'Schedule',
    'ScheduleGenerator',
    'make_schedule',
    'place_games',
    'SchedulingError',
    'LeagueStructureError',
    'GamePlacementError',
]
