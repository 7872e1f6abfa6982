"""
Playoff Bracket Data Models

Data structures for representing playoff brackets and games.
"""

from dataclasses import dataclass
from typing import List, Optional

from shared.game_result import GameResult
from .playoff_exceptions import InvalidBracketException

ROUND_DISPLAY_NAMES = {
    'wild_card': 'Wild Card',
    'divisional': 'Divisional Round',
    'conference': 'Conference Championship',
    'super_bowl': 'Super Bowl'
}

EXPECTED_GAME_COUNTS = {
    'wild_card': 6,      # 3 AFC + 3 NFC
    'divisional': 4,     # 2 AFC + 2 NFC
    'conference': 2,     # 1 AFC + 1 NFC
    'super_bowl': 1
}


@dataclass
class PlayoffGame:
    """
    Represents a single playoff game.

    ``result`` is filled in once the game is simulated.
    """
    home_team_id: int
    away_team_id: int
    home_seed: int
    away_seed: int
    round_name: str             # 'wild_card', 'divisional', 'conference', 'super_bowl'
    conference: Optional[str]   # 'AFC', 'NFC', or None for Super Bowl
    game_number: int            # Game within round (1-6 for wild card, etc.)
    result: Optional[GameResult] = None

    def is_super_bowl(self) -> bool:
        return self.round_name == 'super_bowl'

    @property
    def is_played(self) -> bool:
        return self.result is not None

    @property
    def winner_id(self) -> Optional[int]:
        return self.result.winner if self.result else None

    @property
    def matchup_string(self) -> str:
        """Get matchup as string (e.g., '(7) Team 3 @ (2) Team 1')."""
        if self.conference:
            return f"({self.away_seed}) Team {self.away_team_id} @ ({self.home_seed}) Team {self.home_team_id}"
        return f"Team {self.away_team_id} @ Team {self.home_team_id}"

    @property
    def round_display_name(self) -> str:
        return ROUND_DISPLAY_NAMES.get(self.round_name, self.round_name)


@dataclass
class PlayoffBracket:
    """
    Collection of playoff games for one round.
    """
    round_name: str
    season: int
    games: List[PlayoffGame]

    def get_afc_games(self) -> List[PlayoffGame]:
        return [g for g in self.games if g.conference == 'AFC']

    def get_nfc_games(self) -> List[PlayoffGame]:
        return [g for g in self.games if g.conference == 'NFC']

    def get_super_bowl_game(self) -> Optional[PlayoffGame]:
        if self.round_name == 'super_bowl' and self.games:
            return self.games[0]
        return None

    def is_complete(self) -> bool:
        return all(game.is_played for game in self.games)

    @property
    def expected_game_count(self) -> int:
        return EXPECTED_GAME_COUNTS.get(self.round_name, 0)

    def validate(self) -> bool:
        """
        Validate bracket structure.

        Returns:
            True if bracket is valid

        Raises:
            InvalidBracketException if bracket is invalid
        """
        if len(self.games) != self.expected_game_count:
            raise InvalidBracketException(
                f"Expected {self.expected_game_count} games for {self.round_name}, "
                f"got {len(self.games)}",
                round_name=self.round_name,
                expected_game_count=self.expected_game_count,
                actual_game_count=len(self.games)
            )

        seen = set()
        for game in self.games:
            if game.round_name != self.round_name:
                raise InvalidBracketException(
                    f"Game round_name '{game.round_name}' doesn't match "
                    f"bracket round_name '{self.round_name}'",
                    round_name=self.round_name
                )
            if game.home_team_id == game.away_team_id:
                raise InvalidBracketException(
                    f"Team {game.home_team_id} cannot play itself",
                    round_name=self.round_name
                )
            for team_id in (game.home_team_id, game.away_team_id):
                if team_id in seen:
                    raise InvalidBracketException(
                        f"Team {team_id} appears twice in {self.round_name}",
                        round_name=self.round_name
                    )
                seen.add(team_id)

        if self.round_name != 'super_bowl':
            afc_count = len(self.get_afc_games())
            nfc_count = len(self.get_nfc_games())
            expected_per_conf = self.expected_game_count // 2

            if afc_count != expected_per_conf or nfc_count != expected_per_conf:
                raise InvalidBracketException(
                    f"Expected {expected_per_conf} games per conference, "
                    f"got AFC: {afc_count}, NFC: {nfc_count}",
                    round_name=self.round_name
                )

        return True
