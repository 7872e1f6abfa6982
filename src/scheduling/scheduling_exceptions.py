"""
Scheduling Exception Hierarchy

Exception Hierarchy:
    SchedulingError (base)
    ├── LeagueStructureError
    └── GamePlacementError

Structural problems (wrong team count, malformed divisions) abort. Placement
failures recommend RETRY: ``make_schedule`` catches them once at the top
level and retries with a different shuffle seed.
"""

from typing import Optional, Tuple

from shared.exceptions import SimulationException, ExceptionSeverity, RecoveryStrategy


class SchedulingError(SimulationException):
    """Base exception for all scheduler errors."""

    def __init__(self, message: str, error_code: str = "SCHED_000", **kwargs):
        kwargs.setdefault('severity', ExceptionSeverity.CRITICAL)
        super().__init__(message=message, error_code=error_code, **kwargs)


class LeagueStructureError(SchedulingError):
    """
    Raised when the league cannot be partitioned into 2 conferences x 4
    divisions x 4 teams.
    """

    def __init__(self, message: str, team_count: Optional[int] = None, **kwargs):
        context = {
            "team_count": team_count,
            **kwargs.pop('context_dict', {})
        }
        super().__init__(
            message=message,
            error_code="SCHED_STRUCT_001",
            recovery_strategy=RecoveryStrategy.ABORT,
            context_dict=context,
            **kwargs
        )


class GamePlacementError(SchedulingError):
    """
    Raised when a game fits no week, even after a single-hop swap.
    """

    def __init__(
        self,
        message: str,
        matchup: Optional[Tuple[int, int]] = None,
        placed: Optional[int] = None,
        total: Optional[int] = None,
        seed: Optional[int] = None,
        **kwargs
    ):
        context = {
            "matchup": matchup,
            "placed": placed,
            "total": total,
            "seed": seed,
            **kwargs.pop('context_dict', {})
        }
        super().__init__(
            message=message,
            error_code="SCHED_PLACE_002",
            severity=ExceptionSeverity.ERROR,
            recovery_strategy=RecoveryStrategy.RETRY,
            context_dict=context,
            **kwargs
        )
