"""
Constants package for the league simulation

Team identity tables and league tunables.
"""

from .team_ids import (
    TeamIDs, NFL_TEAMS, CONF_NAMES, DIV_NAMES, NUM_TEAMS,
    conference_of, division_of, division_label
)
from .league_constants import (
    POSITIONS, DEPTH_NEEDS, YEARS_OF_PICKS, DRAFT_ROUNDS,
    SalaryCap, FreeAgency, Draft, ContractRules, TradeValues, GameSimulation
)

__all__ = [
    'TeamIDs',
    'NFL_TEAMS',
    'CONF_NAMES',
    'DIV_NAMES',
    'NUM_TEAMS',
    'conference_of',
    'division_of',
    'division_label',
    'POSITIONS',
    'DEPTH_NEEDS',
    'YEARS_OF_PICKS',
    'DRAFT_ROUNDS',
    'SalaryCap',
    'FreeAgency',
    'Draft',
    'ContractRules',
    'TradeValues',
    'GameSimulation',
]
