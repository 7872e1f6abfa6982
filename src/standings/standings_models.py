"""
Standings Models

Per-team aggregates used by the tie-break comparator and playoff seeding.
"""

from dataclasses import dataclass, field
from typing import Dict


def _pct(wins: int, losses: int, ties: int) -> float:
    games = wins + losses + ties
    if games == 0:
        return 0.0
    return (wins + ties * 0.5) / games


@dataclass
class TeamStanding:
    """
    Aggregated season record for one team.

    ``h2h[opponent_id]`` is wins minus losses against that opponent over
    every meeting; it is zero-sum between the pair.
    """
    team_id: int
    conf: int
    div: int
    wins: int = 0
    losses: int = 0
    ties: int = 0
    points_for: int = 0
    points_against: int = 0
    division_wins: int = 0
    division_losses: int = 0
    division_ties: int = 0
    conference_wins: int = 0
    conference_losses: int = 0
    conference_ties: int = 0
    h2h: Dict[int, int] = field(default_factory=dict)

    @property
    def games_played(self) -> int:
        """Total games played"""
        return self.wins + self.losses + self.ties

    @property
    def win_percentage(self) -> float:
        """(wins + 0.5 * ties) / games, 0.0 before any game"""
        return _pct(self.wins, self.losses, self.ties)

    @property
    def division_win_percentage(self) -> float:
        return _pct(self.division_wins, self.division_losses, self.division_ties)

    @property
    def conference_win_percentage(self) -> float:
        return _pct(self.conference_wins, self.conference_losses, self.conference_ties)

    @property
    def point_differential(self) -> int:
        """Calculate point differential"""
        return self.points_for - self.points_against

    @property
    def record_string(self) -> str:
        """Get record as string (e.g., '10-6' or '9-7-1')"""
        if self.ties > 0:
            return f"{self.wins}-{self.losses}-{self.ties}"
        return f"{self.wins}-{self.losses}"

    @property
    def division_record(self) -> str:
        return f"{self.division_wins}-{self.division_losses}"

    @property
    def conference_record(self) -> str:
        return f"{self.conference_wins}-{self.conference_losses}"

    def head_to_head(self, opponent_id: int) -> int:
        return self.h2h.get(opponent_id, 0)

    def to_dict(self) -> Dict:
        return {
            'team_id': self.team_id,
            'record': self.record_string,
            'win_percentage': round(self.win_percentage, 3),
            'division_record': self.division_record,
            'conference_record': self.conference_record,
            'points_for': self.points_for,
            'points_against': self.points_against,
            'point_differential': self.point_differential,
        }
