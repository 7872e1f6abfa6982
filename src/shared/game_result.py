"""
Shared Game Result Classes

Results recorded into ``league.results_by_week``. Kept in ``shared`` so the
scheduler, standings engine, playoffs and season driver can all import them
without circular dependencies.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional, Union


@dataclass(frozen=True)
class GameResult:
    """Final score of one game. Immutable once recorded."""
    home: int
    away: int
    score_home: int
    score_away: int
    week: Optional[int] = None
    round_name: Optional[str] = None  # set for playoff games

    @property
    def is_tie(self) -> bool:
        return self.score_home == self.score_away

    @property
    def winner(self) -> Optional[int]:
        """Winning team id, or None for a tie."""
        if self.score_home > self.score_away:
            return self.home
        if self.score_away > self.score_home:
            return self.away
        return None

    @property
    def loser(self) -> Optional[int]:
        winner = self.winner
        if winner is None:
            return None
        return self.away if winner == self.home else self.home

    def involves(self, team_id: int) -> bool:
        return team_id in (self.home, self.away)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'home': self.home,
            'away': self.away,
            'score_home': self.score_home,
            'score_away': self.score_away,
        }
        if self.week is not None:
            data['week'] = self.week
        if self.round_name:
            data['round'] = self.round_name
        return data


@dataclass(frozen=True)
class ByeResult:
    """Bye marker recorded for a team that did not play in a week."""
    bye: int
    week: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'bye': self.bye}
        if self.week is not None:
            data['week'] = self.week
        return data


WeekResult = Union[GameResult, ByeResult]
