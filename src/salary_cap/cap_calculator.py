"""
Salary Cap Calculator

Core mathematical operations for the cap ledger including:
- Signing bonus proration (even split over the original contract length)
- Per-season cap hits
- Dead money on release, with the June 1 split
- Rollover of unused cap space

All amounts are in $M and rounded to $0.1M after every step.
"""

from typing import Tuple
import logging

from constants.league_constants import SalaryCap
from shared.money import round_money


class CapCalculator:
    """
    Core salary cap calculation engine.

    Pure calculations on player/team objects; no mutation.

    Key Rules:
    - Cap hit = base salary + signing bonus / contract years it is spread over
    - A contract counts only while years remain
    - Post-June 1 releases defer all but one year of proration
    - Rollover is floored at 0 and capped at MAX_ROLLOVER
    """

    def __init__(self, cap_constants=SalaryCap):
        """
        Initialize Cap Calculator.

        Args:
            cap_constants: Class/object exposing BASE, MAX_ROLLOVER and
                GUARANTEED_PCT_DEFAULT
        """
        self.constants = cap_constants
        self.logger = logging.getLogger(__name__)

    # ========================================================================
    # CAP HITS
    # ========================================================================

    def proration_per_year(self, player) -> float:
        """
        Signing bonus charged per contract year.

        Returns:
            signing_bonus / years_total, or 0 when either is missing
        """
        if not player.signing_bonus or not player.years_total:
            return 0.0
        return player.signing_bonus / player.years_total

    def cap_hit_for(self, player, rel_season: int = 0) -> float:
        """
        Cap hit for a player ``rel_season`` seasons from now.

        Args:
            player: Player with contract fields
            rel_season: 0 = current season, 1 = next season, ...

        Returns:
            Cap hit in $M (0 once the contract has run out)

        Formula:
            cap_hit = round(base + signing_bonus / years_total, 1)
            where base is reduced by ``converted_base`` in the current season
        """
        if player.years <= 0 or rel_season >= player.years:
            return 0.0
        base = player.current_base if rel_season == 0 else player.base_annual
        return round_money(base + self.proration_per_year(player))

    # ========================================================================
    # DEAD MONEY CALCULATIONS
    # ========================================================================

    def guaranteed_salary(self, player) -> float:
        """Guaranteed base salary that accelerates on release."""
        return round_money(self._raw_guaranteed(player))

    def _raw_guaranteed(self, player) -> float:
        pct = player.guaranteed_pct
        if pct is None:
            pct = self.constants.GUARANTEED_PCT_DEFAULT
        return player.current_base * pct

    def release_dead_money(self, player, is_post_june_1: bool = False) -> Tuple[float, float]:
        """
        Calculate dead money from releasing a player.

        Dead money consists of:
        1. Remaining signing bonus proration (years left x proration)
        2. Guaranteed base salary (this season's base x guaranteed_pct)

        Args:
            player: Player being released
            is_post_june_1: Whether the release uses the June 1 split

        Returns:
            Tuple of (current_season_dead_money, next_season_dead_money)

        Notes:
            - Post-June 1 with more than one year left: current season takes
              one year of proration plus guarantees, next season the rest
            - Otherwise everything hits the current season

        Example:
            years_total=4, signing_bonus=8.0, base_annual=10.0,
            guaranteed_pct=0.5, years=2, post-June 1
            -> current = 2.0 + 5.0 = 7.0, next = 4.0 - 2.0 = 2.0

        Proration and guarantees stay unrounded until each total is formed,
        so a $10.0M bonus over 3 years accelerates as 10.0, not 3 x 3.3.
        """
        per_year = self.proration_per_year(player)
        remaining = per_year * max(0, player.years)
        guaranteed = self._raw_guaranteed(player)

        if is_post_june_1 and player.years > 1:
            current = round_money(per_year + guaranteed)
            deferred = round_money(remaining - per_year)
            return current, deferred

        return round_money(remaining + guaranteed), 0.0

    # ========================================================================
    # ROLLOVER
    # ========================================================================

    def rollover_amount(self, team) -> float:
        """
        Unused cap space carried into next season.

        Formula:
            rollover = min(max(0, cap_total - cap_used), MAX_ROLLOVER)
        """
        unused = max(0.0, team.cap_total - team.cap_used)
        return round_money(min(unused, self.constants.MAX_ROLLOVER))

