"""
Salary Cap Validator

Enforces cap and roster rules for transactions:
- Signing validation (cap room, positional depth limit)
- Cap compliance checks

User-facing checks return ``CapTransactionResult`` so the caller can render
the message.
"""

from typing import Tuple, List, Optional
import logging

from constants.league_constants import (
    DEPTH_NEEDS, DEFAULT_DEPTH_NEED, DEPTH_LIMIT_MULTIPLIER, SalaryCap
)
from shared.money import round_money, format_money
from .cap_calculator import CapCalculator
from .transaction_result import CapTransactionResult


class CapValidator:
    """
    Validates salary cap compliance for signings and rosters.

    Key Responsibilities:
    - Reject signings that would put a team over the cap
    - Reject signings beyond 1.5x the positional depth target
    - Report teams over the cap
    """

    def __init__(self, calculator: Optional[CapCalculator] = None, cap_constants=SalaryCap):
        self.calculator = calculator or CapCalculator(cap_constants)
        self.logger = logging.getLogger(__name__)

    # ========================================================================
    # SIGNINGS
    # ========================================================================

    def validate_signing(self, team, player) -> CapTransactionResult:
        """
        Check whether ``team`` can sign ``player`` on their current contract.

        Args:
            team: Team with up-to-date cap fields
            player: Player carrying the proposed contract

        Returns:
            CapTransactionResult with ``cap_hit`` on success
        """
        if team is None or player is None:
            return CapTransactionResult.failure("Invalid team or player")

        cap_hit = self.calculator.cap_hit_for(player, 0)
        projected = round_money(team.cap_used + cap_hit)

        if projected > team.cap_total:
            overage = round_money(projected - team.cap_total)
            return CapTransactionResult(
                success=False,
                message=f"Signing would exceed salary cap by {format_money(overage)}",
                cap_hit=cap_hit,
                details={'overage': overage}
            )

        target = DEPTH_NEEDS.get(player.pos, DEFAULT_DEPTH_NEED)
        position_count = len(team.players_at(player.pos))
        if position_count >= target * DEPTH_LIMIT_MULTIPLIER:
            return CapTransactionResult(
                success=False,
                message=f"Too many players at {player.pos} ({position_count}, limit {target * DEPTH_LIMIT_MULTIPLIER:g})",
                cap_hit=cap_hit,
                details={'position_count': position_count}
            )

        return CapTransactionResult(
            success=True,
            message=f"Can sign {player.name} for {format_money(cap_hit)} cap hit",
            cap_hit=cap_hit
        )

    # ========================================================================
    # COMPLIANCE
    # ========================================================================

    def check_cap_compliance(self, team) -> Tuple[bool, str]:
        """
        Check whether a team is under the cap.

        Returns:
            (is_compliant, message)
        """
        if team.cap_used <= team.cap_total:
            return True, f"Under cap by {format_money(team.cap_room)}"

        over_by = round_money(team.cap_used - team.cap_total)
        return False, f"Over cap by {format_money(over_by)}"

    def get_non_compliant_teams(self, league) -> List[int]:
        """Ids of teams currently over the cap."""
        offenders = [team.id for team in league.teams if not self.check_cap_compliance(team)[0]]
        if offenders:
            self.logger.warning(f"Teams over the cap: {offenders}")
        return offenders
