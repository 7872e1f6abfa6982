"""
Playoff errors.

    PlayoffException
    ├── InvalidRoundException       PLAYOFF_ROUND_001
    ├── InvalidSeedingException     PLAYOFF_SEED_002
    ├── InvalidBracketException     PLAYOFF_BRACKET_003
    └── PlayoffStateException       PLAYOFF_STATE_004
"""

from typing import Optional

from shared.exceptions import SimulationException, ExceptionSeverity, RecoveryStrategy

VALID_ROUNDS = ['wild_card', 'divisional', 'conference', 'super_bowl']


class PlayoffException(SimulationException):
    """Base for the playoff package."""

    def __init__(self, message: str, error_code: str = "PLAYOFF_000", **kwargs):
        super().__init__(message=message, error_code=error_code, **kwargs)


class InvalidRoundException(PlayoffException):
    """
    Round name outside ROUND_ORDER, or a round asked for before its bracket
    exists.
    """

    def __init__(self, round_name: str, message: Optional[str] = None, **kwargs):
        context = {
            "invalid_round": round_name,
            "valid_rounds": VALID_ROUNDS,
            **kwargs.pop('context_dict', {})
        }
        super().__init__(
            message=message or f"Invalid playoff round: '{round_name}'",
            error_code="PLAYOFF_ROUND_001",
            severity=ExceptionSeverity.ERROR,
            recovery_strategy=RecoveryStrategy.ABORT,
            context_dict=context,
            **kwargs
        )


class InvalidSeedingException(PlayoffException):
    """
    A conference cannot produce seven distinct seeds.

    Raised by the seeder for a conference with fewer than seven teams, and by
    the manager when handed a seeding with missing or repeated teams.
    """

    def __init__(
        self,
        message: str,
        conference: Optional[str] = None,
        seed_number: Optional[int] = None,
        team_id: Optional[int] = None,
        **kwargs
    ):
        context = {
            "conference": conference,
            "seed_number": seed_number,
            "team_id": team_id,
            **kwargs.pop('context_dict', {})
        }
        super().__init__(
            message=message,
            error_code="PLAYOFF_SEED_002",
            severity=ExceptionSeverity.CRITICAL,
            recovery_strategy=RecoveryStrategy.RESET,
            context_dict=context,
            **kwargs
        )


class InvalidBracketException(PlayoffException):
    """
    A round's bracket does not hold the games it should.

    Covers the game count per round (6/4/2/1), the even AFC/NFC split before
    the Super Bowl, a team listed twice, and a round's results not yet
    available for the next pairing.
    """

    def __init__(
        self,
        message: str,
        round_name: Optional[str] = None,
        expected_game_count: Optional[int] = None,
        actual_game_count: Optional[int] = None,
        **kwargs
    ):
        context = {
            "round": round_name,
            "expected_games": expected_game_count,
            "actual_games": actual_game_count,
            **kwargs.pop('context_dict', {})
        }
        super().__init__(
            message=message,
            error_code="PLAYOFF_BRACKET_003",
            severity=ExceptionSeverity.ERROR,
            recovery_strategy=RecoveryStrategy.RESET,
            context_dict=context,
            **kwargs
        )


class PlayoffStateException(PlayoffException):
    """Playoffs started twice, or driven while none are active."""

    def __init__(
        self,
        message: str,
        current_round: Optional[str] = None,
        total_games_played: Optional[int] = None,
        **kwargs
    ):
        context = {
            "current_round": current_round,
            "total_games_played": total_games_played,
            **kwargs.pop('context_dict', {})
        }
        super().__init__(
            message=message,
            error_code="PLAYOFF_STATE_004",
            severity=ExceptionSeverity.CRITICAL,
            recovery_strategy=RecoveryStrategy.ROLLBACK,
            context_dict=context,
            **kwargs
        )
