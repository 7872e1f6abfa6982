"""
Playoff State Management

PlayoffState tracks an ongoing playoff tournament: the current round, the
original seeding, the bracket for each round and the result log.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any

from standings.standings_models import TeamStanding
from .seeding_models import PlayoffSeeding
from .bracket_models import PlayoffBracket, EXPECTED_GAME_COUNTS
from .playoff_exceptions import InvalidRoundException, VALID_ROUNDS

ROUND_ORDER = list(VALID_ROUNDS)


def next_round_name(round_name: str) -> Optional[str]:
    """Round after ``round_name``, or None after the Super Bowl."""
    if round_name not in ROUND_ORDER:
        raise InvalidRoundException(round_name)
    index = ROUND_ORDER.index(round_name)
    return ROUND_ORDER[index + 1] if index + 1 < len(ROUND_ORDER) else None


@dataclass
class PlayoffState:
    """
    Manages the state of an ongoing playoff tournament.

    Attributes:
        current_round: The round the next ``simulate_playoff_round`` plays
        seeding: Seeding computed when the playoffs started
        standings: Final regular-season standings (used for host decisions)
        brackets: Round name -> bracket (None until the round is generated)
        results: Human-readable result lines, one per game
        total_games_played: Total number of playoff games completed
    """

    seeding: PlayoffSeeding
    standings: Dict[int, TeamStanding]
    current_round: str = 'wild_card'
    brackets: Dict[str, Optional[PlayoffBracket]] = field(
        default_factory=lambda: {name: None for name in ROUND_ORDER}
    )
    results: List[str] = field(default_factory=list)
    total_games_played: int = 0

    @property
    def current_bracket(self) -> Optional[PlayoffBracket]:
        return self.brackets.get(self.current_round)

    def is_round_complete(self, round_name: str) -> bool:
        """
        A round is complete when its bracket exists and every game has a result.
        """
        if round_name not in self.brackets:
            raise InvalidRoundException(round_name)
        bracket = self.brackets[round_name]
        return bracket is not None and bracket.is_complete()

    def get_active_round(self) -> str:
        """
        First incomplete round, or 'complete' once the Super Bowl is played.
        """
        for round_name in ROUND_ORDER:
            if not self.is_round_complete(round_name):
                return round_name
        return 'complete'

    def validate(self) -> List[str]:
        """
        Validate the playoff state for consistency.

        Returns:
            A list of validation error messages. Empty list means state is valid.

        Raises:
            InvalidRoundException: ``current_round`` is not a playoff round
        """
        if self.current_round not in ROUND_ORDER:
            raise InvalidRoundException(self.current_round)

        errors = []
        current_index = ROUND_ORDER.index(self.current_round)

        for round_name in ROUND_ORDER[:current_index]:
            if not self.is_round_complete(round_name):
                errors.append(
                    f"Cannot be in {self.current_round} round when {round_name} round is incomplete"
                )

        if self.brackets.get(self.current_round) is None:
            errors.append(f"Bracket for round '{self.current_round}' has not been generated")

        played = sum(
            1
            for bracket in self.brackets.values() if bracket is not None
            for game in bracket.games if game.is_played
        )
        if played != self.total_games_played:
            errors.append(
                f"total_games_played ({self.total_games_played}) does not match "
                f"actual completed games count ({played})"
            )

        for round_name, bracket in self.brackets.items():
            if bracket is not None and len(bracket.games) != EXPECTED_GAME_COUNTS[round_name]:
                errors.append(
                    f"Round '{round_name}' has {len(bracket.games)} games, "
                    f"expected {EXPECTED_GAME_COUNTS[round_name]}"
                )

        return errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            'current_round': self.current_round,
            'seeding': self.seeding.to_dict(),
            'results': list(self.results),
            'total_games_played': self.total_games_played,
        }
