"""
League Tunables

Salary cap, free agency, contract and trade-value numbers consumed by the
cap ledger, the factories and the offseason. All money in $M.
"""

from typing import Dict, List, Tuple


POSITIONS: List[str] = ['QB', 'RB', 'WR', 'TE', 'OL', 'DL', 'LB', 'CB', 'S', 'K', 'P']

# Roster targets per position. Signing validation allows up to 1.5x.
DEPTH_NEEDS: Dict[str, int] = {
    'QB': 2,
    'RB': 3,
    'WR': 5,
    'TE': 3,
    'OL': 8,
    'DL': 6,
    'LB': 6,
    'CB': 5,
    'S': 4,
    'K': 1,
    'P': 1,
}
DEFAULT_DEPTH_NEED = 6
DEPTH_LIMIT_MULTIPLIER = 1.5

YEARS_OF_PICKS = 3
DRAFT_ROUNDS = 7


class SalaryCap:
    """Cap ledger constants"""
    BASE = 220.0
    MAX_ROLLOVER = 10.0
    GUARANTEED_PCT_DEFAULT = 0.5


class FreeAgency:
    """Terms for players entering the free-agent pool after a release or expiry"""
    CONTRACT_DISCOUNT = 0.9
    DEFAULT_YEARS = 2
    GUARANTEED_PCT = 0.5
    SIGNING_BONUS_PCT = 0.2


class Draft:
    """Rookie wage scale and draft-class generation"""
    # (min, max) base salary per year by round
    ROOKIE_SCALE: Dict[int, Tuple[float, float]] = {
        1: (4.0, 8.5),
        2: (2.5, 4.0),
        3: (1.8, 2.5),
        4: (1.2, 1.8),
        5: (0.9, 1.2),
        6: (0.7, 0.9),
        7: (0.5, 0.7),
    }
    ROOKIE_GUARANTEED_PCT = 1.0
    ROOKIE_AGE_MIN = 21
    ROOKIE_AGE_MAX = 23
    PROSPECT_OVR_MIN = 50
    PROSPECT_OVR_MAX = 80


class ContractRules:
    """Contract, tag and option rules"""
    FRANCHISE_TAG_MULTIPLIER = 1.2
    TRANSITION_TAG_MULTIPLIER = 1.1
    FRANCHISE_TAG_TOP_N = 5
    TRANSITION_TAG_TOP_N = 10
    TRANSITION_TAG_GUARANTEED_PCT = 0.8

    FIFTH_YEAR_OPTION_MULTIPLIER = 1.25
    FIFTH_YEAR_OPTION_MIN_SEASONS = 3
    ROOKIE_CONTRACT_LENGTH = 4

    EXTENSION_MIN_YEARS = 2
    EXTENSION_MAX_YEARS = 7
    MAX_GUARANTEED_PCT = 0.95

    RESTRUCTURE_MIN_YEARS = 2
    RESTRUCTURE_MAX_GUARANTEED_PCT = 0.8
    RESTRUCTURE_MAX_INJURY_WEEKS = 4
    RESTRUCTURE_MIN_BASE = 1.0
    RESTRUCTURE_BASE_FLOOR = 0.5
    RESTRUCTURE_GUARANTEE_BUMP = 0.1
    RESTRUCTURE_GUARANTEE_CAP = 0.9

    SIGNING_BONUS_MIN_PCT = 0.1
    SIGNING_BONUS_MAX_PCT = 0.3
    MIN_SALARY = 0.5

    # Used when fewer than TOP_N players exist at a position
    FALLBACK_FRANCHISE_TAG: Dict[str, float] = {
        'QB': 30.0, 'OL': 18.0, 'DL': 15.0, 'WR': 16.0, 'CB': 14.0, 'LB': 10.0,
        'RB': 8.0, 'S': 9.0, 'TE': 7.0, 'K': 4.0, 'P': 3.0,
    }
    FALLBACK_TRANSITION_TAG: Dict[str, float] = {
        'QB': 25.0, 'OL': 15.0, 'DL': 12.0, 'WR': 13.0, 'CB': 11.0, 'LB': 8.0,
        'RB': 6.0, 'S': 7.0, 'TE': 5.0, 'K': 3.0, 'P': 2.0,
    }
    FALLBACK_FRANCHISE_DEFAULT = 10.0
    FALLBACK_TRANSITION_DEFAULT = 8.0


# Salary scale applied on top of overall rating
POSITION_SALARY_MULTIPLIERS: Dict[str, float] = {
    'QB': 1.6, 'RB': 0.8, 'WR': 1.1, 'TE': 0.9, 'OL': 1.0,
    'DL': 1.1, 'LB': 0.9, 'CB': 1.0, 'S': 0.9, 'K': 0.4, 'P': 0.4,
}


class TradeValues:
    """Draft pick value table (per-round averages) with future-year discount"""
    PICK_VALUES: Dict[int, float] = {
        1: 1476.0,
        2: 418.0,
        3: 175.0,
        4: 57.0,
        5: 28.0,
        6: 11.0,
        7: 1.5,
    }
    FUTURE_DISCOUNT = 0.85


class GameSimulation:
    """Score model constants for regular-season and playoff games"""
    HOME_FIELD_EDGE = 2.0
    BASE_SCORE_MIN = 10
    BASE_SCORE_MAX = 31
    SCORE_VARIANCE = 7
    RATING_DIVISOR = 5

    PLAYOFF_LOGISTIC_SCALE = 10.0
    PLAYOFF_POINT_DIFF_WEIGHT = 0.1
    PLAYOFF_SCORE_BIAS = 14
    TIE_BREAK_POINTS = 3
