"""
Playoff System

Seeding, bracket generation, the playoff game model and the round-by-round
playoff state machine.
"""

from .seeding_models import PlayoffSeed, ConferenceSeeding, PlayoffSeeding
from .bracket_models import PlayoffGame, PlayoffBracket
from .playoff_seeder import PlayoffSeeder
from .playoff_manager import PlayoffManager
from .playoff_state import PlayoffState, ROUND_ORDER
from .playoff_controller import PlayoffController, PlayoffRoundSummary, SUPER_BOWL_AWARD
from .playoff_exceptions import (
    PlayoffException,
    InvalidRoundException,
    InvalidSeedingException,
    InvalidBracketException,
    PlayoffStateException,
)

__all__ = [
    'PlayoffSeed',
    'ConferenceSeeding',
    'PlayoffSeeding',
    'PlayoffGame',
    'PlayoffBracket',
    'PlayoffSeeder',
    'PlayoffManager',
    'PlayoffState',
    'ROUND_ORDER',
    'PlayoffController',
    'PlayoffRoundSummary',
    'SUPER_BOWL_AWARD',
    'PlayoffException',
    'InvalidRoundException',
    'InvalidSeedingException',
    'InvalidBracketException',
    'PlayoffStateException',
]
