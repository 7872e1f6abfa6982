"""
Playoff Controller

Round-by-round playoff state machine:

    wild_card -> divisional -> conference -> super_bowl -> offseason

Coordinates the seeder (seeding), the manager (pairings and game model),
and the offseason process that runs once a champion is crowned.
"""

import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from shared.game_result import GameResult
from standings.standings_calculator import StandingsCalculator
from .playoff_seeder import PlayoffSeeder
from .playoff_manager import PlayoffManager
from .playoff_state import PlayoffState, next_round_name
from .playoff_exceptions import PlayoffStateException, InvalidRoundException
from .bracket_models import ROUND_DISPLAY_NAMES

SUPER_BOWL_AWARD = "Super Bowl Champion"


@dataclass
class PlayoffRoundSummary:
    """Outcome of one ``simulate_playoff_round`` call."""
    round_name: str
    games: List[GameResult]
    results: List[str]
    next_round: Optional[str] = None
    champion_id: Optional[int] = None
    offseason: Optional[Any] = None

    @property
    def is_final(self) -> bool:
        return self.champion_id is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'round_name': self.round_name,
            'games': [g.to_dict() for g in self.games],
            'results': list(self.results),
            'next_round': self.next_round,
            'champion_id': self.champion_id,
        }


class PlayoffController:
    """
    Core orchestration logic for playoff simulation.

    Usage:
        controller = PlayoffController()
        controller.start_playoffs(league)
        while league.playoffs is not None:
            summary = controller.simulate_playoff_round(league)
    """

    def __init__(
        self,
        seeder: Optional[PlayoffSeeder] = None,
        manager: Optional[PlayoffManager] = None,
        standings_calculator: Optional[StandingsCalculator] = None,
        offseason_controller=None
    ):
        """
        Initialize playoff controller.

        Args:
            seeder: Seeding calculator
            manager: Pairing logic and playoff game model
            standings_calculator: Standings source for seeding
            offseason_controller: Runs after the Super Bowl (created on first use)
        """
        self.standings_calculator = standings_calculator or StandingsCalculator()
        self.seeder = seeder or PlayoffSeeder(self.standings_calculator)
        self.manager = manager or PlayoffManager()
        self.offseason_controller = offseason_controller
        self.logger = logging.getLogger(__name__)

    # ========================================================================
    # ENTRY
    # ========================================================================

    def start_playoffs(self, league) -> PlayoffState:
        """
        Seed the playoffs and build the wild card bracket.

        Raises:
            PlayoffStateException: Playoffs are already active
            InvalidSeedingException: Seeding is malformed
        """
        if league.playoffs is not None:
            raise PlayoffStateException(
                "Playoffs are already in progress",
                current_round=league.playoffs.current_round
            )

        standings = self.standings_calculator.compute(league)
        seeding = self.seeder.calculate_seeding(league, standings)
        bracket = self.manager.generate_wild_card_bracket(seeding)

        state = PlayoffState(seeding=seeding, standings=standings)
        state.brackets['wild_card'] = bracket
        league.playoffs = state

        self.logger.info(
            f"Playoffs started for {league.year}: AFC seeds {seeding.afc.team_ids}, "
            f"NFC seeds {seeding.nfc.team_ids}"
        )
        return state

    # ========================================================================
    # ROUNDS
    # ========================================================================

    def simulate_playoff_round(self, league, rng: Optional[random.Random] = None) -> PlayoffRoundSummary:
        """
        Simulate every game of the current round and advance the bracket.

        After the Super Bowl the champion's roster receives the award, the
        champion is recorded, the playoff state is cleared and (when
        enabled) the offseason runs.

        Raises:
            PlayoffStateException: No playoffs are active
            InvalidRoundException: The state holds an unknown round
        """
        state = league.playoffs
        if state is None:
            raise PlayoffStateException("No playoffs in progress")

        round_name = state.current_round
        bracket = state.current_bracket
        if bracket is None:
            raise InvalidRoundException(round_name, message=f"No bracket generated for {round_name}")

        rng = rng or league.rng
        games: List[GameResult] = []
        lines: List[str] = []

        for game in bracket.games:
            if game.is_played:
                continue
            home, away = league.team(game.home_team_id), league.team(game.away_team_id)
            result = self.manager.sim_playoff_game(home, away, rng, round_name=round_name)
            game.result = result
            state.total_games_played += 1
            games.append(result)

            line = (
                f"{ROUND_DISPLAY_NAMES[round_name]}: {away.abbr} {result.score_away} "
                f"@ {home.abbr} {result.score_home}"
            )
            lines.append(line)
            state.results.append(line)

        following = next_round_name(round_name)
        summary = PlayoffRoundSummary(round_name=round_name, games=games, results=lines, next_round=following)

        if following is None:
            champion_id = bracket.get_super_bowl_game().winner_id
            summary.champion_id = champion_id
            summary.offseason = self._finish_playoffs(league, champion_id)
            return summary

        state.brackets[following] = self._build_next_bracket(state, following)
        state.current_round = following
        self.logger.info(f"Completed {round_name}; advancing to {following}")
        return summary

    def simulate_remaining(self, league, rng: Optional[random.Random] = None) -> List[PlayoffRoundSummary]:
        """Simulate rounds until the playoffs finish."""
        summaries = []
        while league.playoffs is not None:
            summaries.append(self.simulate_playoff_round(league, rng))
        return summaries

    def _build_next_bracket(self, state: PlayoffState, round_name: str):
        completed = state.brackets[state.current_round]
        if round_name == 'divisional':
            return self.manager.generate_divisional_bracket(completed, state.seeding, state.standings)
        if round_name == 'conference':
            return self.manager.generate_conference_championship_bracket(completed, state.seeding)
        if round_name == 'super_bowl':
            return self.manager.generate_super_bowl_bracket(completed, state.seeding, state.standings)
        raise InvalidRoundException(round_name)

    # ========================================================================
    # COMPLETION
    # ========================================================================

    def _finish_playoffs(self, league, champion_id: int):
        champion = league.team(champion_id)
        for player in champion.roster:
            player.awards.append({"year": league.year, "award": SUPER_BOWL_AWARD})

        league.champions.append({
            "year": league.year,
            "team_id": champion_id,
            "team": champion.name,
        })
        league.playoffs = None
        self.logger.info(f"{champion.name} won the Super Bowl ({league.year})")

        if not league.settings.run_offseason:
            return None
        return self._get_offseason_controller().run(league)

    def _get_offseason_controller(self):
        if self.offseason_controller is None:
            from season.offseason_controller import OffseasonController
            self.offseason_controller = OffseasonController()
        return self.offseason_controller
