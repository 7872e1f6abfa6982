"""
Standings Exception Hierarchy

Exception Hierarchy:
    StandingsError (base)
    ├── InvalidScopeError
    └── MissingStandingError
"""

from typing import Any, Optional

from shared.exceptions import SimulationException, ExceptionSeverity, RecoveryStrategy


class StandingsError(SimulationException):
    """Base exception for standings and tie-break errors."""

    def __init__(self, message: str, error_code: str = "STAND_000", **kwargs):
        super().__init__(message=message, error_code=error_code, **kwargs)


class InvalidScopeError(StandingsError):
    """Raised when a tie-break scope is not division/leaders/conference/league."""

    def __init__(self, scope: Any, **kwargs):
        super().__init__(
            message=f"Unknown tie-break scope: {scope!r}",
            error_code="STAND_SCOPE_001",
            severity=ExceptionSeverity.ERROR,
            recovery_strategy=RecoveryStrategy.ABORT,
            context_dict={"scope": scope},
            **kwargs
        )


class MissingStandingError(StandingsError):
    """Raised when a team id has no entry in the standings map."""

    def __init__(self, team_id: Optional[int], **kwargs):
        super().__init__(
            message=f"No standing computed for team {team_id}",
            error_code="STAND_MISSING_002",
            severity=ExceptionSeverity.ERROR,
            recovery_strategy=RecoveryStrategy.ABORT,
            context_dict={"team_id": team_id},
            **kwargs
        )
