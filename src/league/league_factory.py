"""
League Factory

Builds a ready-to-play league: 32 teams with depth-chart rosters, generated
contracts, a rolling draft-pick window, computed cap ledgers and the first
season's schedule.
"""

import logging
import random
from typing import Any, Dict, Optional

from config.league_settings import LeagueSettings
from constants.league_constants import (
    DEPTH_NEEDS, POSITION_SALARY_MULTIPLIERS, ContractRules, SalaryCap, DRAFT_ROUNDS
)
from constants.team_ids import NFL_TEAMS, conference_of, division_of
from salary_cap.cap_ledger import CapLedger
from scheduling.schedule_generator import make_schedule
from shared.money import round_money
from .models import League, Player, Team
from .picks import seed_team_picks

logger = logging.getLogger(__name__)

FIRST_NAMES = [
    'James', 'Michael', 'Robert', 'John', 'David', 'William', 'Richard', 'Joseph',
    'Thomas', 'Chris', 'Daniel', 'Matthew', 'Anthony', 'Marcus', 'Tyler', 'Jalen',
    'Derrick', 'Andre', 'Trevon', 'Caleb', 'Isaiah', 'Devin', 'Brandon', 'Justin',
]
LAST_NAMES = [
    'Smith', 'Johnson', 'Williams', 'Brown', 'Jones', 'Miller', 'Davis', 'Wilson',
    'Moore', 'Taylor', 'Anderson', 'Thomas', 'Jackson', 'White', 'Harris', 'Martin',
    'Thompson', 'Robinson', 'Walker', 'Young', 'Allen', 'King', 'Wright', 'Hill',
]

# Salary per rating point above replacement level
SALARY_PER_OVR_POINT = 0.2
REPLACEMENT_OVR = 55


def generate_contract(rng: random.Random, ovr: int, pos: str) -> Dict[str, Any]:
    """
    Generate contract terms from rating and position.

    Returns:
        Dict with years, years_total, base_annual, signing_bonus, guaranteed_pct
    """
    multiplier = POSITION_SALARY_MULTIPLIERS.get(pos, 1.0)
    base_annual = round_money(max(
        ContractRules.MIN_SALARY,
        (ovr - REPLACEMENT_OVR) * SALARY_PER_OVR_POINT * multiplier
    ))
    years = rng.randint(1, 4)
    bonus_pct = rng.uniform(ContractRules.SIGNING_BONUS_MIN_PCT, ContractRules.SIGNING_BONUS_MAX_PCT)

    return {
        'years': years,
        'years_total': years,
        'base_annual': base_annual,
        'signing_bonus': round_money(base_annual * years * bonus_pct),
        'guaranteed_pct': SalaryCap.GUARANTEED_PCT_DEFAULT,
    }


def make_player(
    rng: random.Random,
    player_id: int,
    pos: str,
    current_year: int,
    age: Optional[int] = None,
    ovr: Optional[int] = None
) -> Player:
    """Create a player with a generated contract and draft history."""
    age = age if age is not None else rng.randint(21, 35)
    ovr = ovr if ovr is not None else rng.randint(60, 85)

    return Player(
        id=player_id,
        name=f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}",
        pos=pos,
        age=age,
        ovr=ovr,
        draft_round=rng.randint(1, DRAFT_ROUNDS),
        draft_year=current_year - max(0, age - 22),
        **generate_contract(rng, ovr, pos)
    )


def team_rating(team: Team) -> float:
    """Mean overall rating of the roster (0 for an empty roster)."""
    if not team.roster:
        return 0.0
    return sum(p.ovr for p in team.roster) / len(team.roster)


def make_league(settings: Optional[LeagueSettings] = None, seed: Optional[int] = None) -> League:
    """
    Build a new league.

    Args:
        settings: League settings (defaults to ``LeagueSettings.default()``)
        seed: RNG seed; falls back to ``settings.random_seed``

    Returns:
        League with rosters, picks, cap ledgers and a schedule

    Raises:
        ValueError: Settings fail validation
    """
    settings = settings or LeagueSettings.default()
    is_valid, errors = settings.validate()
    if not is_valid:
        raise ValueError(f"Invalid league settings: {errors}")

    if seed is None:
        seed = settings.random_seed
    rng = random.Random(seed)

    teams = [
        Team(
            id=team_id,
            abbr=abbr,
            name=name,
            conf=conference_of(team_id),
            div=division_of(team_id),
            last_division_rank=team_id % 4
        )
        for team_id, (abbr, name) in enumerate(NFL_TEAMS)
    ]

    league = League(
        teams=teams,
        settings=settings,
        year=settings.start_year,
        rng=rng,
        free_agents=[] if settings.free_agent_pool else None
    )

    for team in league.teams:
        for pos, count in DEPTH_NEEDS.items():
            for _ in range(count):
                team.roster.append(make_player(rng, league.next_player_id(), pos, league.year))
        seed_team_picks(team, league.year, settings.years_of_picks)

    CapLedger().recalc_all(league)

    league.schedule = make_schedule(league)
    league.results_by_week = [[] for _ in league.schedule.weeks]

    logger.info(f"Created league for {league.year} with {len(league.teams)} teams (seed {seed})")
    return league
