"""
Seeding results: seven seeds per conference, leaders first.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Tuple


@dataclass
class PlayoffSeed:
    """One qualified team and the record that put it there."""
    seed: int                      # 1-7
    team_id: int
    wins: int
    losses: int
    ties: int
    win_percentage: float
    division_winner: bool          # seeds 1-4
    division_name: str             # "AFC North"
    conference: str
    points_for: int
    points_against: int
    point_differential: int
    division_record: str           # "5-1"
    conference_record: str         # "9-3"

    @property
    def record_string(self) -> str:
        if self.ties:
            return f"{self.wins}-{self.losses}-{self.ties}"
        return f"{self.wins}-{self.losses}"

    @property
    def seed_label(self) -> str:
        if self.seed == 1:
            return "#1 Seed (Bye)"
        if self.division_winner:
            return f"#{self.seed} Seed (Division Winner)"
        return f"#{self.seed} Seed (Wild Card)"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'seed': self.seed,
            'team_id': self.team_id,
            'conference': self.conference,
            'division_name': self.division_name,
            'division_winner': self.division_winner,
            'record': self.record_string,
            'win_percentage': self.win_percentage,
            'division_record': self.division_record,
            'conference_record': self.conference_record,
            'points_for': self.points_for,
            'points_against': self.points_against,
        }


@dataclass
class ConferenceSeeding:
    conference: str
    seeds: List[PlayoffSeed]           # ordered 1-7

    @property
    def division_winners(self) -> List[PlayoffSeed]:
        return [s for s in self.seeds if s.division_winner]

    @property
    def wildcards(self) -> List[PlayoffSeed]:
        return [s for s in self.seeds if not s.division_winner]

    @property
    def team_ids(self) -> List[int]:
        return [s.team_id for s in self.seeds]

    def get_seed_by_number(self, seed_number: int) -> Optional[PlayoffSeed]:
        return next((s for s in self.seeds if s.seed == seed_number), None)

    def get_seed_by_team(self, team_id: int) -> Optional[PlayoffSeed]:
        return next((s for s in self.seeds if s.team_id == team_id), None)

    def wild_card_pairs(self) -> List[Tuple[int, int]]:
        """(home, away) team ids for 2v7, 3v6 and 4v5."""
        return [
            (self.seeds[home - 1].team_id, self.seeds[away - 1].team_id)
            for home, away in ((2, 7), (3, 6), (4, 5))
        ]


@dataclass
class PlayoffSeeding:
    """
    Both conferences' seeds for one season.

    ``tiebreakers_applied`` records each division title that was decided by
    the tie-break cascade rather than by record alone.
    """
    season: int
    week: int                          # week the seeding was taken
    afc: ConferenceSeeding
    nfc: ConferenceSeeding
    tiebreakers_applied: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def conferences(self) -> List[ConferenceSeeding]:
        return [self.afc, self.nfc]

    def get_seed(self, team_id: int) -> Optional[PlayoffSeed]:
        """Seed for ``team_id`` in either conference, None if it missed out."""
        for conference in self.conferences:
            seed = conference.get_seed_by_team(team_id)
            if seed is not None:
                return seed
        return None

    def is_in_playoffs(self, team_id: int) -> bool:
        return self.get_seed(team_id) is not None

    def get_matchups(self) -> Dict[str, List[Tuple[int, int]]]:
        """Wild card pairs keyed by conference name."""
        return {c.conference: c.wild_card_pairs() for c in self.conferences}

    def to_dict(self) -> Dict[str, Any]:
        return {
            'season': self.season,
            'week': self.week,
            'afc': [s.to_dict() for s in self.afc.seeds],
            'nfc': [s.to_dict() for s in self.nfc.seeds],
            'tiebreakers_applied': self.tiebreakers_applied
        }
