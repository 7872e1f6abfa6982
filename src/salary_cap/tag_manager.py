"""
Tag Manager

Manages franchise tags, transition tags and fifth-year options including:
- Tag salaries from the league's top cap hits at the position
- One franchise tag and one transition tag per team per season
- Fifth-year options for first-round picks finishing their third season
"""

from typing import List
import logging

from constants.league_constants import ContractRules
from shared.money import round_money, format_money
from .cap_ledger import CapLedger
from .transaction_result import CapTransactionResult


class TagManager:
    """
    Manages franchise tags, transition tags and fifth-year options.

    Key Responsibilities:
    - Franchise tag salary: top 5 cap hits at the position x 1.2
    - Transition tag salary: top 10 cap hits at the position x 1.1
    - Apply tags as 1-year contracts
    - Exercise fifth-year options
    """

    FRANCHISE_TAG_TOP_N = ContractRules.FRANCHISE_TAG_TOP_N
    TRANSITION_TAG_TOP_N = ContractRules.TRANSITION_TAG_TOP_N

    def __init__(self, ledger: CapLedger = None):
        self.ledger = ledger or CapLedger()
        self.calculator = self.ledger.calculator
        self.logger = logging.getLogger(__name__)

    # ========================================================================
    # TAG SALARIES
    # ========================================================================

    def _top_cap_hits(self, league, position: str) -> List[float]:
        hits = [
            self.calculator.cap_hit_for(player, 0)
            for team in league.teams
            for player in team.roster
            if player.pos == position and player.base_annual > 0
        ]
        return sorted(hits, reverse=True)

    def franchise_tag_salary(self, league, position: str) -> float:
        """
        Franchise tag salary for a position.

        Returns:
            Average of the top 5 cap hits x 1.2, or a position estimate when
            fewer than 5 players exist
        """
        hits = self._top_cap_hits(league, position)
        if len(hits) < self.FRANCHISE_TAG_TOP_N:
            self.logger.warning(f"Only {len(hits)} {position}s under contract; using estimate")
            return ContractRules.FALLBACK_FRANCHISE_TAG.get(
                position, ContractRules.FALLBACK_FRANCHISE_DEFAULT
            )

        top = hits[:self.FRANCHISE_TAG_TOP_N]
        return round_money(sum(top) / len(top) * ContractRules.FRANCHISE_TAG_MULTIPLIER)

    def transition_tag_salary(self, league, position: str) -> float:
        """Average of the top 10 cap hits x 1.1 (estimate below 10 players)."""
        hits = self._top_cap_hits(league, position)
        if len(hits) < self.TRANSITION_TAG_TOP_N:
            self.logger.warning(f"Only {len(hits)} {position}s under contract; using estimate")
            return ContractRules.FALLBACK_TRANSITION_TAG.get(
                position, ContractRules.FALLBACK_TRANSITION_DEFAULT
            )

        top = hits[:self.TRANSITION_TAG_TOP_N]
        return round_money(sum(top) / len(top) * ContractRules.TRANSITION_TAG_MULTIPLIER)

    # ========================================================================
    # APPLY TAGS
    # ========================================================================

    def apply_franchise_tag(self, league, team, player) -> CapTransactionResult:
        """Tag an expiring player: 1 year, fully guaranteed, no bonus."""
        if player is None or player.years != 1:
            return CapTransactionResult.failure("Player must have an expiring contract to use the tag")
        if team.franchise_tag_used:
            return CapTransactionResult.failure("Team has already used the franchise tag this year")

        salary = self.franchise_tag_salary(league, player.pos)
        result = self._apply_tag(league, team, player, salary, 1.0, "franchise")
        if result.success:
            team.franchise_tag_used = True
        return result

    def apply_transition_tag(self, league, team, player) -> CapTransactionResult:
        """Tag an expiring player: 1 year, 80% guaranteed, no bonus."""
        if player is None or player.years != 1:
            return CapTransactionResult.failure("Player must have an expiring contract to use the transition tag")
        if team.transition_tag_used:
            return CapTransactionResult.failure("Team has already used the transition tag this year")

        salary = self.transition_tag_salary(league, player.pos)
        result = self._apply_tag(
            league, team, player, salary, ContractRules.TRANSITION_TAG_GUARANTEED_PCT, "transition"
        )
        if result.success:
            team.transition_tag_used = True
        return result

    def _apply_tag(self, league, team, player, salary: float, guaranteed_pct: float,
                   tag_type: str) -> CapTransactionResult:
        cap_impact = round_money(salary - self.calculator.cap_hit_for(player, 0))
        if team.cap_room < cap_impact:
            return CapTransactionResult(
                success=False,
                message=(
                    f"{tag_type.title()} tag costs {format_money(salary)} and only "
                    f"{format_money(team.cap_room)} of cap space is available"
                ),
                cap_hit=salary
            )

        player.years = 1
        player.years_total = 1
        player.base_annual = salary
        player.converted_base = 0.0
        player.signing_bonus = 0.0
        player.guaranteed_pct = guaranteed_pct
        player.tagged = tag_type

        self.ledger.recalc_cap(league, team)
        self.logger.info(f"{team.abbr} applied {tag_type} tag to {player.name} ({format_money(salary)})")

        return CapTransactionResult(
            success=True,
            message=f"Applied {tag_type} tag to {player.name} for {format_money(salary)}",
            cap_hit=salary,
            details={'tag_type': tag_type}
        )

    # ========================================================================
    # FIFTH-YEAR OPTIONS
    # ========================================================================

    def is_fifth_year_eligible(self, league, player) -> bool:
        """
        First-round pick, three seasons since the draft, final contract year,
        never extended.
        """
        return (
            player.draft_round == 1
            and player.draft_year is not None
            and league.year - player.draft_year == ContractRules.FIFTH_YEAR_OPTION_MIN_SEASONS
            and player.years == 1
            and not player.extended
            and not player.fifth_year_option
        )

    def get_fifth_year_eligible(self, league, team) -> List:
        return [p for p in team.roster if self.is_fifth_year_eligible(league, p)]

    def fifth_year_option_salary(self, player) -> float:
        return round_money((player.base_annual or 1.0) * ContractRules.FIFTH_YEAR_OPTION_MULTIPLIER)

    def exercise_fifth_year_option(self, league, team, player) -> CapTransactionResult:
        """
        Add one fully guaranteed year at 125% of the current base salary.

        The cap check compares the option salary with the current cap hit.
        """
        if player is None or not self.is_fifth_year_eligible(league, player):
            return CapTransactionResult.failure("Player is not eligible for the fifth-year option")

        option_salary = self.fifth_year_option_salary(player)
        cap_impact = round_money(option_salary - self.calculator.cap_hit_for(player, 0))
        if team.cap_room < cap_impact:
            return CapTransactionResult.failure(
                f"Fifth-year option adds {format_money(cap_impact)} to the cap, exceeding available room"
            )

        player.years += 1
        player.years_total = (player.years_total or ContractRules.ROOKIE_CONTRACT_LENGTH) + 1
        player.base_annual = option_salary
        player.guaranteed_pct = 1.0
        player.fifth_year_option = True

        self.ledger.recalc_cap(league, team)

        return CapTransactionResult(
            success=True,
            message=f"Fifth-year option exercised for {player.name} at {format_money(option_salary)}",
            cap_hit=self.calculator.cap_hit_for(player, 0),
            details={'option_salary': option_salary}
        )
