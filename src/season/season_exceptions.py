"""
Season driver errors.

    SeasonException
    └── InvalidSeasonStateException     SEASON_STATE_006
"""

from typing import Any, Dict, Optional

from shared.exceptions import SimulationException, ExceptionSeverity, RecoveryStrategy


class SeasonException(SimulationException):
    """
    Base for the season package.

    ``season_context`` (year, week, phase) is merged into the context dict
    along with the failing operation's name.
    """

    def __init__(
        self,
        message: str,
        error_code: str = "SEASON_000",
        season_context: Optional[Dict[str, Any]] = None,
        operation: Optional[str] = None,
        **kwargs
    ):
        self.season_context = season_context or {}
        self.operation = operation
        context = dict(self.season_context)
        if operation:
            context["operation"] = operation
        super().__init__(message=message, error_code=error_code, context_dict=context, **kwargs)


class InvalidSeasonStateException(SeasonException):
    """A week was requested during the playoffs, or the league has no schedule."""

    def __init__(self, message: str, state_issue: str, **kwargs):
        season_context = {"state_issue": state_issue, **kwargs.pop('season_context', {})}
        super().__init__(
            message=message,
            error_code="SEASON_STATE_006",
            season_context=season_context,
            operation=kwargs.pop('operation', 'state_validation'),
            severity=ExceptionSeverity.ERROR,
            recovery_strategy=RecoveryStrategy.ROLLBACK,
            **kwargs
        )
        self.state_issue = state_issue
