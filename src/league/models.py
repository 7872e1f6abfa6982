"""
League Data Models

The League aggregate owns its Teams, which own their Players and Picks.
Every model validates on construction, so downstream code reads one
canonical field per fact.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TYPE_CHECKING
import random

from constants.league_constants import DRAFT_ROUNDS, SalaryCap
from constants.team_ids import CONF_NAMES, division_label

if TYPE_CHECKING:
    from config.league_settings import LeagueSettings
    from scheduling.schedule_models import Schedule
    from playoff_system.playoff_state import PlayoffState


@dataclass
class Player:
    """
    A rostered or free-agent player.

    Contract fields (money in $M):
        years: Seasons remaining (0 = no contract)
        years_total: Original contract length, used for bonus proration
        base_annual: Per-year salary
        signing_bonus: Total signing bonus
        guaranteed_pct: Share of base salary that is guaranteed (0..1)
        converted_base: This season's base already turned into bonus by a
            restructure; cleared when the contract year rolls over
    """
    id: int
    name: str
    pos: str
    age: int
    ovr: int
    years: int = 0
    years_total: int = 0
    base_annual: float = 0.0
    signing_bonus: float = 0.0
    guaranteed_pct: float = SalaryCap.GUARANTEED_PCT_DEFAULT
    converted_base: float = 0.0

    draft_round: Optional[int] = None
    draft_year: Optional[int] = None
    fifth_year_option: bool = False
    extended: bool = False
    tagged: Optional[str] = None        # "franchise" / "transition"
    injury_weeks: int = 0
    awards: List[Dict[str, Any]] = field(default_factory=list)

    def __post_init__(self):
        if self.years < 0:
            raise ValueError(f"Player {self.id}: years cannot be negative ({self.years})")
        if self.years > self.years_total:
            raise ValueError(
                f"Player {self.id}: years ({self.years}) exceeds years_total ({self.years_total})"
            )
        if not 0.0 <= self.guaranteed_pct <= 1.0:
            raise ValueError(f"Player {self.id}: guaranteed_pct must be 0..1, got {self.guaranteed_pct}")
        if self.base_annual < 0 or self.signing_bonus < 0 or self.converted_base < 0:
            raise ValueError(f"Player {self.id}: contract money cannot be negative")

    @property
    def under_contract(self) -> bool:
        return self.years > 0

    @property
    def current_base(self) -> float:
        """Base salary paid this season."""
        return self.base_annual - self.converted_base

    def clear_contract(self):
        """Zero every contract field (release, expiry)."""
        self.years = 0
        self.years_total = 0
        self.base_annual = 0.0
        self.signing_bonus = 0.0
        self.guaranteed_pct = 0.0
        self.converted_base = 0.0
        self.tagged = None
        self.extended = False
        self.fifth_year_option = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'pos': self.pos,
            'age': self.age,
            'ovr': self.ovr,
            'years': self.years,
            'years_total': self.years_total,
            'base_annual': self.base_annual,
            'signing_bonus': self.signing_bonus,
            'guaranteed_pct': self.guaranteed_pct,
            'converted_base': self.converted_base,
            'draft_round': self.draft_round,
            'draft_year': self.draft_year,
            'awards': list(self.awards),
        }


@dataclass
class Pick:
    """A draft pick. ``owner`` changes on trade; ``original_owner`` never does."""
    id: str
    round: int
    year: int
    original_owner: int
    owner: int

    def __post_init__(self):
        if not 1 <= self.round <= DRAFT_ROUNDS:
            raise ValueError(f"Pick round must be 1..{DRAFT_ROUNDS}, got {self.round}")

    @property
    def is_traded(self) -> bool:
        return self.owner != self.original_owner


@dataclass
class TeamRecord:
    """Won-loss-tie record with points."""
    w: int = 0
    l: int = 0
    t: int = 0
    pf: int = 0
    pa: int = 0

    @property
    def games(self) -> int:
        return self.w + self.l + self.t

    def add_game(self, points_for: int, points_against: int):
        self.pf += points_for
        self.pa += points_against
        if points_for > points_against:
            self.w += 1
        elif points_for < points_against:
            self.l += 1
        else:
            self.t += 1

    def reset(self):
        self.w = self.l = self.t = self.pf = self.pa = 0

    def __str__(self) -> str:
        if self.t > 0:
            return f"{self.w}-{self.l}-{self.t}"
        return f"{self.w}-{self.l}"


@dataclass
class Team:
    """
    A franchise. ``id`` doubles as the index into ``League.teams``.

    Cap fields are maintained by ``salary_cap.cap_ledger.CapLedger``:
    after ``recalc_cap`` ``cap_room == cap_total - cap_used``.
    """
    id: int
    abbr: str
    name: str
    conf: int
    div: int
    record: TeamRecord = field(default_factory=TeamRecord)
    roster: List[Player] = field(default_factory=list)
    picks: List[Pick] = field(default_factory=list)

    cap_total: float = SalaryCap.BASE
    cap_used: float = 0.0
    cap_room: float = SalaryCap.BASE
    dead_cap: float = 0.0
    dead_cap_book: Dict[int, float] = field(default_factory=dict)
    cap_rollover: float = 0.0

    last_division_rank: int = 0
    franchise_tag_used: bool = False
    transition_tag_used: bool = False

    def __post_init__(self):
        if self.conf not in (0, 1):
            raise ValueError(f"Team {self.id}: conf must be 0 or 1, got {self.conf}")
        if not 0 <= self.div <= 3:
            raise ValueError(f"Team {self.id}: div must be 0..3, got {self.div}")

    @property
    def conference_name(self) -> str:
        return CONF_NAMES[self.conf]

    @property
    def division_name(self) -> str:
        return division_label(self.conf, self.div)

    def players_at(self, pos: str) -> List[Player]:
        return [p for p in self.roster if p.pos == pos]

    def find_player(self, player_id: int) -> Optional[Player]:
        return next((p for p in self.roster if p.id == player_id), None)


@dataclass
class League:
    """
    League aggregate: teams, calendar, schedule, results and playoff state.

    ``year`` is the calendar year (rotation, picks); ``season`` is the
    1-based key of the dead-cap books.
    """
    teams: List[Team]
    settings: 'LeagueSettings'
    year: int
    season: int = 1
    week: int = 1
    schedule: Optional['Schedule'] = None
    results_by_week: List[List[Any]] = field(default_factory=list)
    playoffs: Optional['PlayoffState'] = None
    free_agents: Optional[List[Player]] = None
    champions: List[Dict[str, Any]] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _next_player_id: int = field(default=1, repr=False)

    def __post_init__(self):
        for index, team in enumerate(self.teams):
            if team.id != index:
                raise ValueError(f"Team at index {index} has id {team.id}")

    def team(self, team_id: int) -> Team:
        if not self.is_valid_team_id(team_id):
            raise KeyError(f"Unknown team id: {team_id}")
        return self.teams[team_id]

    def is_valid_team_id(self, team_id: Any) -> bool:
        return isinstance(team_id, int) and 0 <= team_id < len(self.teams)

    def next_player_id(self) -> int:
        player_id = self._next_player_id
        self._next_player_id += 1
        return player_id

    @property
    def total_weeks(self) -> int:
        return len(self.schedule.weeks) if self.schedule else 0

    @property
    def regular_season_complete(self) -> bool:
        return self.schedule is not None and self.week > self.total_weeks
