"""
Standings Calculator

Aggregates ``league.results_by_week`` into one ``TeamStanding`` per team.
Standings are always recomputed from results, never stored incrementally.
"""

from typing import Dict
import logging

from shared.game_result import GameResult
from .standings_models import TeamStanding


class StandingsCalculator:
    """Builds standings from recorded regular-season results."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def compute(self, league) -> Dict[int, TeamStanding]:
        """
        Compute standings for every team in the league.

        Args:
            league: League with ``teams`` and ``results_by_week``

        Returns:
            Dict of team_id -> TeamStanding
        """
        standings = {
            team.id: TeamStanding(team_id=team.id, conf=team.conf, div=team.div)
            for team in league.teams
        }

        for week_results in league.results_by_week:
            for result in week_results:
                if not isinstance(result, GameResult):
                    continue
                if result.home not in standings or result.away not in standings:
                    self.logger.warning(f"Skipping result with unknown team: {result}")
                    continue
                self._apply_result(standings[result.home], standings[result.away], result)

        return standings

    def _apply_result(self, home: TeamStanding, away: TeamStanding, result: GameResult):
        same_division = home.conf == away.conf and home.div == away.div
        same_conference = home.conf == away.conf

        home.points_for += result.score_home
        home.points_against += result.score_away
        away.points_for += result.score_away
        away.points_against += result.score_home

        if result.is_tie:
            for standing in (home, away):
                standing.ties += 1
                if same_division:
                    standing.division_ties += 1
                if same_conference:
                    standing.conference_ties += 1
            home.h2h.setdefault(away.team_id, 0)
            away.h2h.setdefault(home.team_id, 0)
            return

        winner, loser = (home, away) if result.winner == home.team_id else (away, home)
        winner.wins += 1
        loser.losses += 1
        if same_division:
            winner.division_wins += 1
            loser.division_losses += 1
        if same_conference:
            winner.conference_wins += 1
            loser.conference_losses += 1

        winner.h2h[loser.team_id] = winner.h2h.get(loser.team_id, 0) + 1
        loser.h2h[winner.team_id] = loser.h2h.get(winner.team_id, 0) - 1
