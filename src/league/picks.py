"""
Draft Pick Window

Each team holds picks for a rolling window of future drafts (7 rounds per
year). The window is seeded at league creation and topped up every
offseason; traded picks stay with their current owner.
"""

import logging
from typing import List

from constants.league_constants import DRAFT_ROUNDS, TradeValues
from shared.money import round_money
from .models import League, Pick, Team

logger = logging.getLogger(__name__)


def make_pick_id(original_owner: int, year: int, round_number: int) -> str:
    return f"{year}-R{round_number}-T{original_owner:02d}"


def seed_team_picks(team: Team, start_year: int, years: int) -> List[Pick]:
    """
    Replace a team's picks with 7 rounds for each of ``years`` drafts.

    Returns:
        The new pick list
    """
    team.picks = [
        Pick(
            id=make_pick_id(team.id, start_year + offset, round_number),
            round=round_number,
            year=start_year + offset,
            original_owner=team.id,
            owner=team.id
        )
        for offset in range(years)
        for round_number in range(1, DRAFT_ROUNDS + 1)
    ]
    return team.picks


def regenerate_picks(league: League) -> int:
    """
    Roll every team's window forward to ``league.year``.

    Picks for drafts before ``league.year`` are dropped; missing years at the
    end of the window are created for their original owner.

    Returns:
        Number of picks created
    """
    years = league.settings.years_of_picks
    window = range(league.year, league.year + years)

    existing = set()
    for team in league.teams:
        team.picks = [p for p in team.picks if p.year >= league.year]
        existing.update(p.id for p in team.picks)

    created = 0
    for team in league.teams:
        for year in window:
            for round_number in range(1, DRAFT_ROUNDS + 1):
                pick_id = make_pick_id(team.id, year, round_number)
                if pick_id in existing:
                    continue
                team.picks.append(Pick(
                    id=pick_id,
                    round=round_number,
                    year=year,
                    original_owner=team.id,
                    owner=team.id
                ))
                created += 1

    logger.info(f"Regenerated draft picks for {league.year}-{league.year + years - 1}: {created} new")
    return created


def transfer_pick(pick_id: str, from_team: Team, to_team: Team) -> bool:
    """
    Move a pick between teams.

    Returns:
        False when ``from_team`` does not hold the pick
    """
    pick = next((p for p in from_team.picks if p.id == pick_id), None)
    if pick is None:
        logger.warning(f"Team {from_team.id} does not own pick {pick_id}")
        return False

    from_team.picks.remove(pick)
    pick.owner = to_team.id
    to_team.picks.append(pick)
    return True


def pick_value(pick: Pick, current_year: int) -> float:
    """
    Trade value of a pick, discounted per year until its draft.

    Examples:
        A 1st-rounder this year is worth 1476.0; next year 1476 * 0.85 = 1254.6
    """
    base = TradeValues.PICK_VALUES.get(pick.round, 1.0)
    years_out = max(0, pick.year - current_year)
    return round_money(base * TradeValues.FUTURE_DISCOUNT ** years_out)
