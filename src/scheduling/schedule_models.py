"""
Schedule Data Models

Game, bye and week containers produced by the scheduler.
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Tuple, Any, FrozenSet


class GameKind(Enum):
    """Which matchup rule produced a game"""
    DIVISION = "division"
    INTRA_ROTATION = "intra_rotation"
    INTER_ROTATION = "inter_rotation"
    SAME_PLACE = "same_place"
    SEVENTEENTH = "seventeenth"


@dataclass(frozen=True)
class Game:
    """A scheduled regular-season game."""
    home: int
    away: int
    kind: GameKind = GameKind.DIVISION

    def __post_init__(self):
        if self.home == self.away:
            raise ValueError(f"Team {self.home} cannot play itself")

    @property
    def pair(self) -> FrozenSet[int]:
        """Unordered pairing key."""
        return frozenset((self.home, self.away))

    def involves(self, team_id: int) -> bool:
        return team_id in (self.home, self.away)

    def opponent_of(self, team_id: int) -> int:
        if team_id == self.home:
            return self.away
        if team_id == self.away:
            return self.home
        raise ValueError(f"Team {team_id} is not in game {self.away}@{self.home}")

    def to_dict(self) -> Dict[str, Any]:
        return {'home': self.home, 'away': self.away, 'kind': self.kind.value}


@dataclass(frozen=True)
class Bye:
    """Bye marker for a team with no game in a week."""
    team_id: int

    def to_dict(self) -> Dict[str, Any]:
        return {'bye': self.team_id}


@dataclass
class Week:
    """One week of the schedule (1-based number)."""
    number: int
    games: List[Game] = field(default_factory=list)
    byes: List[Bye] = field(default_factory=list)

    @property
    def entries(self) -> List[Any]:
        """Games followed by byes, in the order results are recorded."""
        return list(self.games) + list(self.byes)

    def teams(self) -> List[int]:
        """Every team id appearing in the week (duplicates kept)."""
        ids = []
        for game in self.games:
            ids.extend((game.home, game.away))
        ids.extend(bye.team_id for bye in self.byes)
        return ids

    def playing_teams(self) -> List[int]:
        ids = []
        for game in self.games:
            ids.extend((game.home, game.away))
        return ids

    def to_dict(self) -> Dict[str, Any]:
        return {
            'week': self.number,
            'games': [game.to_dict() for game in self.games],
            'byes': [bye.team_id for bye in self.byes],
        }


@dataclass
class Schedule:
    """A full regular season."""
    year: int
    weeks: List[Week] = field(default_factory=list)
    seed: int = 0

    @property
    def total_games(self) -> int:
        return sum(len(week.games) for week in self.weeks)

    def all_games(self) -> List[Game]:
        return [game for week in self.weeks for game in week.games]

    def games_for_team(self, team_id: int) -> List[Tuple[int, Game]]:
        """(week number, game) for every game the team plays."""
        return [
            (week.number, game)
            for week in self.weeks
            for game in week.games
            if game.involves(team_id)
        ]

    def bye_week_for(self, team_id: int) -> List[int]:
        return [week.number for week in self.weeks
                if any(bye.team_id == team_id for bye in week.byes)]

    def pair_counts(self) -> Counter:
        """Number of meetings per unordered pairing."""
        return Counter(game.pair for game in self.all_games())

    def validate(self, team_ids: Iterable[int]) -> Tuple[bool, List[str]]:
        """
        Check that every team appears exactly once per week and that no
        pairing meets more than twice.

        Returns:
            (is_valid, errors)
        """
        errors = []
        expected = set(team_ids)

        for week in self.weeks:
            counts = Counter(week.teams())
            for team_id in expected:
                if counts.get(team_id, 0) != 1:
                    errors.append(
                        f"Week {week.number}: team {team_id} appears {counts.get(team_id, 0)} times"
                    )
            unknown = set(counts) - expected
            if unknown:
                errors.append(f"Week {week.number}: unknown teams {sorted(unknown)}")

        for pair, count in self.pair_counts().items():
            if count > 2:
                errors.append(f"Pairing {sorted(pair)} meets {count} times")

        return len(errors) == 0, errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            'year': self.year,
            'seed': self.seed,
            'weeks': [week.to_dict() for week in self.weeks],
        }
