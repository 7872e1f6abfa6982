"""
Cap Ledger

Maintains each team's cap totals, used amounts, dead-money book and
rollover. All values are rounded to $0.1M after every mutation.

Callers must run ``recalc_cap`` after any roster or contract change; the
ledger does not observe rosters.
"""

from typing import Any, Dict, Optional
import logging

from constants.league_constants import SalaryCap
from shared.money import round_money
from .cap_calculator import CapCalculator


class CapLedger:
    """
    Per-team cap bookkeeping.

    Invariants after ``recalc_cap``:
    - cap_room == round(cap_total - cap_used, 1)
    - dead_cap_book entries are never negative
    """

    def __init__(self, calculator: Optional[CapCalculator] = None, cap_constants=SalaryCap):
        self.constants = cap_constants
        self.calculator = calculator or CapCalculator(cap_constants)
        self.logger = logging.getLogger(__name__)

    # ========================================================================
    # RECALCULATION
    # ========================================================================

    def recalc_cap(self, league, team):
        """
        Recompute cap_total, cap_used, dead_cap and cap_room for a team.

        Formula:
            cap_total = round(BASE + cap_rollover)
            cap_used  = round(sum(cap hits this season) + dead money this season)
            cap_room  = round(cap_total - cap_used)
        """
        active = sum(self.calculator.cap_hit_for(p, 0) for p in team.roster)
        dead = team.dead_cap_book.get(league.season, 0.0)

        team.cap_total = round_money(self.constants.BASE + team.cap_rollover)
        team.cap_used = round_money(active + dead)
        team.dead_cap = round_money(dead)
        team.cap_room = round_money(team.cap_total - team.cap_used)

    def recalc_all(self, league):
        for team in league.teams:
            self.recalc_cap(league, team)

    # ========================================================================
    # DEAD MONEY
    # ========================================================================

    def add_dead(self, team, season: int, amount: float):
        """
        Accumulate dead money into ``team.dead_cap_book[season]``.

        Non-positive amounts are ignored so book entries never go negative.
        """
        if amount <= 0:
            return
        team.dead_cap_book[season] = round_money(team.dead_cap_book.get(season, 0.0) + amount)
        self.logger.debug(f"Team {team.id}: +{amount} dead money in season {season}")

    # ========================================================================
    # ROLLOVER
    # ========================================================================

    def process_cap_rollover(self, league, team) -> float:
        """
        Carry unused cap space into next season.

        Returns:
            The new ``cap_rollover`` (0..MAX_ROLLOVER)
        """
        team.cap_rollover = self.calculator.rollover_amount(team)
        return team.cap_rollover

    # ========================================================================
    # REPORTING
    # ========================================================================

    def cap_summary(self, league, team) -> Dict[str, Any]:
        """Snapshot of a team's cap position, including next season's commitments."""
        next_season_hits = sum(self.calculator.cap_hit_for(p, 1) for p in team.roster)
        return {
            'team_id': team.id,
            'season': league.season,
            'cap_total': team.cap_total,
            'cap_used': team.cap_used,
            'cap_room': team.cap_room,
            'dead_cap': team.dead_cap,
            'cap_rollover': team.cap_rollover,
            'dead_cap_next_season': team.dead_cap_book.get(league.season + 1, 0.0),
            'committed_next_season': round_money(next_season_hits),
            'roster_size': len(team.roster),
        }
