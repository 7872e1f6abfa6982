"""
Standings System

Standings aggregation and the scope-parameterized tie-break comparator.
"""

from .standings_models import TeamStanding
from .standings_calculator import StandingsCalculator
from .tiebreakers import (
    TiebreakScope,
    compare,
    sort_teams,
    division_standings,
    division_ranks,
    resolve_scope,
)
from .standings_exceptions import StandingsError, InvalidScopeError, MissingStandingError

__all__ = [
    'TeamStanding',
    'StandingsCalculator',
    'TiebreakScope',
    'compare',
    'sort_teams',
    'division_standings',
    'division_ranks',
    'resolve_scope',
    'StandingsError',
    'InvalidScopeError',
    'MissingStandingError',
]
