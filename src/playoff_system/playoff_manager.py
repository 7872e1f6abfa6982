"""
Playoff Manager

Pure logic for playoff bracket generation and progression, plus the
playoff game model. Implements re-seeding after the wild card round.
"""

from typing import List, Dict, Optional
import logging
import math
import random

from constants.league_constants import GameSimulation
from league.league_factory import team_rating
from shared.game_result import GameResult
from standings.standings_models import TeamStanding
from standings.tiebreakers import TiebreakScope, compare
from .seeding_models import PlayoffSeeding, PlayoffSeed, ConferenceSeeding
from .bracket_models import PlayoffGame, PlayoffBracket
from .playoff_exceptions import InvalidBracketException, InvalidSeedingException


class PlayoffManager:
    """
    Manages playoff bracket generation and progression.

    Pure business logic apart from ``sim_playoff_game``'s use of the rng.
    Takes seeding/results as input, returns brackets as output.

    Playoff rules:
    - Wild Card: (2)v(7), (3)v(6), (4)v(5), #1 gets bye
    - Divisional: #1 hosts the LOWEST remaining seed; the other two play,
      hosted by the better team under the conference-scope comparator
    - Conference: higher seed hosts
    - Super Bowl: host decided by the league-scope comparator
    """

    def __init__(self, game_constants=GameSimulation):
        self.constants = game_constants
        self.logger = logging.getLogger(__name__)

    # ========================================================================
    # PAIRINGS
    # ========================================================================

    def wild_card_pairings(self, conference_seeding: ConferenceSeeding, game_offset: int = 0) -> List[PlayoffGame]:
        """
        Create wild card games for one conference.

        Matchups: (2)v(7), (3)v(6), (4)v(5), higher seed hosting.

        Raises:
            InvalidSeedingException: Seeding does not hold 7 distinct teams
        """
        seeds = conference_seeding.seeds
        if len(seeds) != 7 or len(set(conference_seeding.team_ids)) != 7:
            raise InvalidSeedingException(
                f"Expected 7 distinct seeds, got {conference_seeding.team_ids}",
                conference=conference_seeding.conference
            )

        matchups = [
            (seeds[1], seeds[6]),  # (2) vs (7)
            (seeds[2], seeds[5]),  # (3) vs (6)
            (seeds[3], seeds[4]),  # (4) vs (5)
        ]

        return [
            self._make_game(home, away, 'wild_card', conference_seeding.conference, game_offset + idx + 1)
            for idx, (home, away) in enumerate(matchups)
        ]

    def divisional_pairings(
        self,
        remaining: List[PlayoffSeed],
        standings: Dict[int, TeamStanding],
        game_offset: int = 0
    ) -> List[PlayoffGame]:
        """
        Create divisional matchups with re-seeding.

        Args:
            remaining: The #1 seed plus the three wild card winners
            standings: Regular-season standings for the host comparison

        Returns:
            List of 2 PlayoffGame objects
        """
        if len(remaining) != 4:
            raise InvalidBracketException(
                f"Expected 4 divisional teams, got {len(remaining)}",
                round_name='divisional', expected_game_count=2
            )

        ordered = sorted(remaining, key=lambda s: s.seed)
        top, lowest = ordered[0], ordered[-1]
        first, second = ordered[1], ordered[2]

        if compare(standings[second.team_id], standings[first.team_id], TiebreakScope.CONFERENCE) < 0:
            first, second = second, first

        conference = top.conference
        return [
            self._make_game(top, lowest, 'divisional', conference, game_offset + 1),
            self._make_game(first, second, 'divisional', conference, game_offset + 2),
        ]

    def conference_pairing(self, remaining: List[PlayoffSeed], game_number: int = 1) -> PlayoffGame:
        """Conference championship: the higher seed hosts."""
        if len(remaining) != 2:
            raise InvalidBracketException(
                f"Expected 2 conference finalists, got {len(remaining)}",
                round_name='conference', expected_game_count=1
            )
        home, away = sorted(remaining, key=lambda s: s.seed)
        return self._make_game(home, away, 'conference', home.conference, game_number)

    def super_bowl_pairing(
        self,
        champion_a: PlayoffSeed,
        champion_b: PlayoffSeed,
        standings: Dict[int, TeamStanding]
    ) -> PlayoffGame:
        """Super Bowl: the conference champion ranking ahead league-wide hosts."""
        if compare(standings[champion_a.team_id], standings[champion_b.team_id], TiebreakScope.LEAGUE) <= 0:
            home, away = champion_a, champion_b
        else:
            home, away = champion_b, champion_a
        return self._make_game(home, away, 'super_bowl', None, 1)

    def _make_game(self, home: PlayoffSeed, away: PlayoffSeed, round_name: str,
                   conference: Optional[str], game_number: int) -> PlayoffGame:
        return PlayoffGame(
            home_team_id=home.team_id,
            away_team_id=away.team_id,
            home_seed=home.seed,
            away_seed=away.seed,
            round_name=round_name,
            conference=conference,
            game_number=game_number
        )

    # ========================================================================
    # BRACKETS
    # ========================================================================

    def generate_wild_card_bracket(self, seeding: PlayoffSeeding) -> PlayoffBracket:
        """Six wild card games; #1 seeds are not in the bracket."""
        games = self.wild_card_pairings(seeding.afc, 0) + self.wild_card_pairings(seeding.nfc, 3)
        bracket = PlayoffBracket(round_name='wild_card', season=seeding.season, games=games)
        bracket.validate()
        return bracket

    def generate_divisional_bracket(
        self,
        wild_card: PlayoffBracket,
        seeding: PlayoffSeeding,
        standings: Dict[int, TeamStanding]
    ) -> PlayoffBracket:
        games = []
        for offset, conference in enumerate(seeding.conferences):
            winners = self._winning_seeds(wild_card, seeding, conference.conference)
            remaining = [conference.seeds[0]] + winners
            games.extend(self.divisional_pairings(remaining, standings, game_offset=offset * 2))

        bracket = PlayoffBracket(round_name='divisional', season=seeding.season, games=games)
        bracket.validate()
        return bracket

    def generate_conference_championship_bracket(
        self,
        divisional: PlayoffBracket,
        seeding: PlayoffSeeding
    ) -> PlayoffBracket:
        games = [
            self.conference_pairing(
                self._winning_seeds(divisional, seeding, conference.conference),
                game_number=idx + 1
            )
            for idx, conference in enumerate(seeding.conferences)
        ]
        bracket = PlayoffBracket(round_name='conference', season=seeding.season, games=games)
        bracket.validate()
        return bracket

    def generate_super_bowl_bracket(
        self,
        conference_round: PlayoffBracket,
        seeding: PlayoffSeeding,
        standings: Dict[int, TeamStanding]
    ) -> PlayoffBracket:
        champions = [
            self._winning_seeds(conference_round, seeding, conference.conference)[0]
            for conference in seeding.conferences
        ]
        game = self.super_bowl_pairing(champions[0], champions[1], standings)
        bracket = PlayoffBracket(round_name='super_bowl', season=seeding.season, games=[game])
        bracket.validate()
        return bracket

    def _winning_seeds(self, bracket: PlayoffBracket, seeding: PlayoffSeeding, conference: str) -> List[PlayoffSeed]:
        winners = []
        for game in bracket.games:
            if game.conference != conference:
                continue
            if not game.is_played:
                raise InvalidBracketException(
                    f"{game.matchup_string} has not been played",
                    round_name=bracket.round_name
                )
            winners.append(seeding.get_seed(game.winner_id))
        return sorted(winners, key=lambda s: s.seed)

    # ========================================================================
    # GAME SIMULATION
    # ========================================================================

    def home_win_probability(self, home, away) -> float:
        """
        Logistic home-win probability.

        Formula:
            x = (rating_home - rating_away) + 0.1 * (pd_home - pd_away)
            p_home = 1 / (1 + e^(-x / 10))
        """
        home_pd = home.record.pf - home.record.pa
        away_pd = away.record.pf - away.record.pa
        x = (team_rating(home) - team_rating(away)) + \
            self.constants.PLAYOFF_POINT_DIFF_WEIGHT * (home_pd - away_pd)
        return 1.0 / (1.0 + math.exp(-x / self.constants.PLAYOFF_LOGISTIC_SCALE))

    def sim_playoff_game(self, home, away, rng: Optional[random.Random] = None,
                         round_name: Optional[str] = None) -> GameResult:
        """
        Simulate one playoff game. Playoff games cannot end tied.

        Args:
            home: Home Team
            away: Away Team
            rng: Random source (a fresh unseeded Random when omitted)

        Returns:
            GameResult; an exact tie awards the home team a field goal
        """
        rng = rng or random.Random()
        p_home = self.home_win_probability(home, away)
        bias = round((p_home - 0.5) * self.constants.PLAYOFF_SCORE_BIAS)

        score_home = max(0, rng.randint(self.constants.BASE_SCORE_MIN, self.constants.BASE_SCORE_MAX) + bias)
        score_away = max(0, rng.randint(self.constants.BASE_SCORE_MIN, self.constants.BASE_SCORE_MAX) - bias)

        if score_home == score_away:
            score_home += self.constants.TIE_BREAK_POINTS

        self.logger.debug(
            f"Playoff {round_name}: {away.abbr} {score_away} @ {home.abbr} {score_home} (p_home={p_home:.2f})"
        )
        return GameResult(
            home=home.id,
            away=away.id,
            score_home=score_home,
            score_away=score_away,
            round_name=round_name
        )
