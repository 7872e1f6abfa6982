"""
Rookie Draft

Turns the picks each team owns for ``league.year`` into rookies on
round-scaled contracts. Picks are used round by round, worst record first
within a round; each selection takes the best prospect left at a position
the team has not filled to its depth target.
"""

import logging
import random
from typing import Any, Dict, List, Sequence, Tuple

from constants.league_constants import DEPTH_NEEDS, DEFAULT_DEPTH_NEED, DRAFT_ROUNDS, ContractRules, Draft
from .league_factory import make_player
from .models import League, Pick, Player, Team

logger = logging.getLogger(__name__)


def rookie_contract(rng: random.Random, round_number: int) -> Dict[str, Any]:
    """
    Rookie wage-scale terms for a pick in ``round_number``.

    Rookie deals run four years, carry no signing bonus and are fully
    guaranteed.

    Examples:
        Round 1 pays 4.0-8.5 per year; round 7 pays 0.5-0.7
    """
    low, high = Draft.ROOKIE_SCALE.get(round_number, Draft.ROOKIE_SCALE[DRAFT_ROUNDS])
    return {
        'years': ContractRules.ROOKIE_CONTRACT_LENGTH,
        'years_total': ContractRules.ROOKIE_CONTRACT_LENGTH,
        'base_annual': rng.randint(round(low * 10), round(high * 10)) / 10,
        'signing_bonus': 0.0,
        'guaranteed_pct': Draft.ROOKIE_GUARANTEED_PCT,
        'converted_base': 0.0,
    }


def generate_draft_class(league: League, size: int) -> List[Player]:
    """
    Create ``size`` prospects, best first.

    Positions are drawn in proportion to roster depth targets.
    """
    rng = league.rng
    positions = list(DEPTH_NEEDS)
    weights = [DEPTH_NEEDS[pos] for pos in positions]

    prospects = [
        make_player(
            rng,
            league.next_player_id(),
            rng.choices(positions, weights=weights)[0],
            league.year,
            age=rng.randint(Draft.ROOKIE_AGE_MIN, Draft.ROOKIE_AGE_MAX),
            ovr=rng.randint(Draft.PROSPECT_OVR_MIN, Draft.PROSPECT_OVR_MAX)
        )
        for _ in range(size)
    ]
    prospects.sort(key=lambda p: p.ovr, reverse=True)
    return prospects


def draft_order(league: League, team_order: Sequence[int]) -> List[Tuple[Team, Pick]]:
    """
    This year's picks in selection order.

    Args:
        league: League whose current-year picks are used
        team_order: Team ids, first selection first (worst record first)

    Returns:
        (owning team, pick) pairs sorted by round, then by the original
        owner's place in ``team_order``
    """
    position = {team_id: index for index, team_id in enumerate(team_order)}
    selections = [
        (team, pick)
        for team in league.teams
        for pick in team.picks
        if pick.year == league.year
    ]
    selections.sort(key=lambda sel: (
        sel[1].round,
        position.get(sel[1].original_owner, len(position)),
        sel[1].original_owner
    ))
    return selections


def run_draft(league: League, team_order: Sequence[int]) -> List[Player]:
    """
    Hold this year's draft.

    Every selection adds a rookie to the owning team's roster and removes
    the pick. Callers must recalculate caps afterwards.

    Returns:
        Drafted players in selection order
    """
    selections = draft_order(league, team_order)
    if not selections:
        return []

    prospects = generate_draft_class(league, len(selections))
    drafted = []
    for team, pick in selections:
        rookie = _best_available(team, prospects)
        prospects.remove(rookie)

        for key, value in rookie_contract(league.rng, pick.round).items():
            setattr(rookie, key, value)
        rookie.draft_round = pick.round
        rookie.draft_year = league.year

        team.roster.append(rookie)
        team.picks.remove(pick)
        drafted.append(rookie)

    logger.info(f"{league.year} draft: {len(drafted)} players selected")
    return drafted


def _best_available(team: Team, prospects: List[Player]) -> Player:
    for prospect in prospects:
        if len(team.players_at(prospect.pos)) < DEPTH_NEEDS.get(prospect.pos, DEFAULT_DEPTH_NEED):
            return prospect
    return prospects[0]
