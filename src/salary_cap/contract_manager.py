"""
Contract Manager

Contract lifecycle operations that move money through the cap ledger:
- Free-agent signings and listings
- Releases with dead-money acceleration and the June 1 split
- Restructures (base salary converted to prorated bonus)
- Extensions
- Expiring-contract reports

Every operation returns a ``CapTransactionResult`` and recalculates the
team's cap before returning.
"""

from typing import List, Optional, Tuple
import logging

from constants.league_constants import ContractRules, FreeAgency
from shared.money import round_money, format_money
from .cap_calculator import CapCalculator
from .cap_ledger import CapLedger
from .cap_validator import CapValidator
from .transaction_result import CapTransactionResult


class ContractManager:
    """
    Manages contract modifications and releases.

    Key Responsibilities:
    - Sign free agents within the cap and depth limits
    - Release players, booking dead money in the current (and next) season
    - Return released players to the free-agent pool on discounted terms
    - Restructure and extend contracts
    """

    def __init__(self, ledger: Optional[CapLedger] = None):
        self.ledger = ledger or CapLedger()
        self.calculator: CapCalculator = self.ledger.calculator
        self.validator = CapValidator(self.calculator)
        self.logger = logging.getLogger(__name__)

    # ========================================================================
    # RELEASES
    # ========================================================================

    def release_with_proration(
        self,
        league,
        team,
        player,
        is_post_june_1: bool = False
    ) -> CapTransactionResult:
        """
        Release a player and book the dead money.

        Args:
            league: League (current season keys the dead-cap book)
            team: Releasing team
            player: Player on ``team``'s roster
            is_post_june_1: Split proration across this season and next

        Returns:
            CapTransactionResult with dead_money_current / dead_money_next

        Example:
            years_total=4, signing_bonus=8.0, base_annual=10.0,
            guaranteed_pct=0.5, years=2, post-June 1
            -> 7.0 this season, 2.0 next season
        """
        if league is None or team is None or player is None:
            return CapTransactionResult.failure("Invalid league, team or player")

        if player not in team.roster:
            return CapTransactionResult.failure(
                f"{player.name} is not on the {team.name} roster", player_id=player.id
            )

        cap_hit_before = self.calculator.cap_hit_for(player, 0)
        current, deferred = self.calculator.release_dead_money(player, is_post_june_1)

        self.ledger.add_dead(team, league.season, current)
        self.ledger.add_dead(team, league.season + 1, deferred)

        base_annual = player.base_annual
        team.roster.remove(player)
        player.clear_contract()

        if league.free_agents is not None:
            self.list_free_agent(league, player, base_annual)

        self.ledger.recalc_cap(league, team)

        total = round_money(current + deferred)
        self.logger.info(
            f"{team.abbr} released {player.name}: {format_money(current)} dead now, "
            f"{format_money(deferred)} next season"
        )

        return CapTransactionResult(
            success=True,
            message=f"Released {player.name}. Dead money: {format_money(total)}",
            dead_money_current=current,
            dead_money_next=deferred,
            cap_savings=round_money(cap_hit_before - current),
            details={'player_id': player.id}
        )

    def list_free_agent(self, league, player, previous_base: float):
        """Put a released or expired player in the pool at a discount."""
        player.converted_base = 0.0
        player.base_annual = max(
            ContractRules.MIN_SALARY,
            round_money(previous_base * FreeAgency.CONTRACT_DISCOUNT)
        )
        player.years_total = FreeAgency.DEFAULT_YEARS
        player.years = FreeAgency.DEFAULT_YEARS
        player.guaranteed_pct = FreeAgency.GUARANTEED_PCT
        player.signing_bonus = round_money(
            player.base_annual * player.years * FreeAgency.SIGNING_BONUS_PCT
        )
        league.free_agents.append(player)

    # ========================================================================
    # FREE AGENCY
    # ========================================================================

    def sign_free_agent(self, league, team, player) -> CapTransactionResult:
        """
        Sign a player from the free-agent pool on their listed terms.

        The contract starts at its full length. The signing must fit under
        the cap and within the positional depth limit.

        Args:
            league: League holding the free-agent pool
            team: Signing team with up-to-date cap fields
            player: Player in ``league.free_agents``

        Returns:
            CapTransactionResult with the player's cap hit
        """
        if league is None or team is None or player is None:
            return CapTransactionResult.failure("Invalid league, team or player")

        if not league.free_agents or player not in league.free_agents:
            return CapTransactionResult.failure(f"{player.name} is not a free agent", player_id=player.id)
        if player.years_total <= 0:
            return CapTransactionResult.failure(f"{player.name} has no contract terms", player_id=player.id)

        player.years = player.years_total
        validation = self.validator.validate_signing(team, player)
        if not validation.success:
            return validation

        league.free_agents.remove(player)
        team.roster.append(player)
        self.ledger.recalc_cap(league, team)

        self.logger.info(
            f"{team.abbr} signed {player.name} ({player.pos}): "
            f"{player.years} years, {format_money(validation.cap_hit)} cap hit"
        )

        return CapTransactionResult(
            success=True,
            message=f"Signed {player.name} for {format_money(validation.cap_hit)} cap hit",
            cap_hit=validation.cap_hit,
            details={'player_id': player.id}
        )

    # ========================================================================
    # RESTRUCTURES
    # ========================================================================

    def can_restructure(self, player) -> Tuple[bool, str]:
        """
        Check restructure eligibility.

        Rules:
            - At least 2 years remaining
            - Guaranteed share below 80%
            - Not on a long injury (more than 4 weeks)
            - Base salary above $1.0M
        """
        if player is None:
            return False, "No player selected"
        if player.years < ContractRules.RESTRUCTURE_MIN_YEARS:
            return False, f"{player.name} needs at least {ContractRules.RESTRUCTURE_MIN_YEARS} years remaining"
        if player.guaranteed_pct >= ContractRules.RESTRUCTURE_MAX_GUARANTEED_PCT:
            return False, f"{player.name}'s contract is already heavily guaranteed"
        if player.injury_weeks > ContractRules.RESTRUCTURE_MAX_INJURY_WEEKS:
            return False, f"{player.name} is injured for {player.injury_weeks} weeks"
        if player.current_base <= ContractRules.RESTRUCTURE_MIN_BASE:
            return False, f"{player.name}'s base salary is too low to restructure"
        return True, "Eligible"

    def restructure_contract(
        self,
        league,
        team,
        player,
        amount: Optional[float] = None
    ) -> CapTransactionResult:
        """
        Convert this season's base salary into signing bonus to free cap
        space now.

        The converted amount joins the bonus still to be amortized and the
        combined bonus is re-spread over the years remaining, so the total
        charged over the rest of the contract does not change. Later seasons
        keep their full base.

        Args:
            amount: Base salary to convert (defaults to half this season's base)

        Returns:
            CapTransactionResult with cap_savings for this season

        Example:
            base 10.0, bonus 8.0 over 4 years, 2 years left: convert 5.0
            -> unamortized 4.0 + 5.0 = 9.0 over 2 years (4.5/yr)
            -> this season 5.0 + 4.5 = 9.5 (was 12.0), next season 14.5
        """
        eligible, reason = self.can_restructure(player)
        if not eligible:
            return CapTransactionResult.failure(reason)

        current_base = player.current_base
        if amount is None:
            amount = round_money(current_base * 0.5)
        if amount <= 0:
            return CapTransactionResult.failure("Restructure amount must be positive")

        hit_before = self.calculator.cap_hit_for(player, 0)

        new_base = max(ContractRules.RESTRUCTURE_BASE_FLOOR, round_money(current_base - amount))
        converted = round_money(current_base - new_base)
        unamortized = self.calculator.proration_per_year(player) * player.years

        player.converted_base = round_money(player.converted_base + converted)
        player.signing_bonus = round_money(unamortized + converted)
        player.years_total = player.years
        player.guaranteed_pct = min(
            ContractRules.RESTRUCTURE_GUARANTEE_CAP,
            round(player.guaranteed_pct + ContractRules.RESTRUCTURE_GUARANTEE_BUMP, 2)
        )

        self.ledger.recalc_cap(league, team)

        hit_after = self.calculator.cap_hit_for(player, 0)
        savings = round_money(hit_before - hit_after)

        return CapTransactionResult(
            success=True,
            message=f"Restructured {player.name}: converted {format_money(converted)}, saved {format_money(savings)}",
            cap_hit=hit_after,
            cap_savings=savings,
            details={'amount_restructured': converted}
        )

    # ========================================================================
    # EXTENSIONS
    # ========================================================================

    def extend_contract(
        self,
        league,
        team,
        player,
        years: int,
        base_annual: float,
        signing_bonus: float
    ) -> CapTransactionResult:
        """
        Add years to a contract on new terms.

        Args:
            years: Years added to the remaining term (2..7)
            base_annual: New per-year base salary
            signing_bonus: New signing bonus

        Returns:
            CapTransactionResult with the new cap hit

        Formula:
            cap_impact = (base + bonus / years) - current cap hit
            guaranteed_pct = min(0.95, round(bonus / total_value, 2) + 0.1)
        """
        if player is None or player not in team.roster:
            return CapTransactionResult.failure("Player is not on this roster")

        if not ContractRules.EXTENSION_MIN_YEARS <= years <= ContractRules.EXTENSION_MAX_YEARS:
            return CapTransactionResult.failure(
                f"Extensions must be {ContractRules.EXTENSION_MIN_YEARS}-"
                f"{ContractRules.EXTENSION_MAX_YEARS} years"
            )
        if base_annual < ContractRules.MIN_SALARY or signing_bonus < 0:
            return CapTransactionResult.failure("Invalid extension terms")

        total_value = round_money(base_annual * years + signing_bonus)
        first_year_hit = round_money(base_annual + signing_bonus / years)
        cap_impact = round_money(first_year_hit - self.calculator.cap_hit_for(player, 0))

        if team.cap_room < cap_impact:
            return CapTransactionResult(
                success=False,
                message=(
                    f"Extension adds {format_money(cap_impact)} to the cap, "
                    f"exceeding {format_money(team.cap_room)} of room"
                ),
                cap_hit=first_year_hit
            )

        guaranteed_pct = round(signing_bonus / total_value, 2) if total_value else 0.0
        guaranteed_pct = min(ContractRules.MAX_GUARANTEED_PCT, guaranteed_pct + 0.1)

        player.years = player.years + years
        player.years_total = player.years
        player.base_annual = round_money(base_annual)
        player.signing_bonus = round_money(signing_bonus)
        player.converted_base = 0.0
        player.guaranteed_pct = guaranteed_pct
        player.extended = True

        self.ledger.recalc_cap(league, team)

        return CapTransactionResult(
            success=True,
            message=f"Extended {player.name} for {years} more years, {format_money(total_value)} total",
            cap_hit=self.calculator.cap_hit_for(player, 0),
            details={'total_value': total_value, 'guaranteed_pct': guaranteed_pct}
        )

    # ========================================================================
    # REPORTS
    # ========================================================================

    def get_expiring_contracts(self, team) -> List:
        """Players entering the final year of their contract."""
        return [p for p in team.roster if p.years == 1]
