"""
Season System

Regular-season week driver and the offseason transition.
"""

from .season_simulator import SeasonSimulator, WeekSummary, sim_game_stats
from .offseason_controller import OffseasonController, OffseasonSummary
from .season_exceptions import SeasonException, InvalidSeasonStateException

__all__ = [
    'SeasonSimulator',
    'WeekSummary',
    'sim_game_stats',
    'OffseasonController',
    'OffseasonSummary',
    'SeasonException',
    'InvalidSeasonStateException',
]
