"""
Season Simulator

Drives the regular season one week at a time: plays every scheduled game,
records results, updates team records and keeps the cap ledger current.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from constants.league_constants import GameSimulation
from league.league_factory import team_rating
from playoff_system.playoff_controller import PlayoffController
from salary_cap.cap_ledger import CapLedger
from scheduling.schedule_models import Bye
from shared.game_result import ByeResult, GameResult
from .season_exceptions import InvalidSeasonStateException

GameSimulatorFn = Callable[..., Tuple[int, int]]


def sim_game_stats(home, away, rng: random.Random) -> Tuple[int, int]:
    """
    Default score model.

    Formula:
        diff = rating_home - rating_away + HOME_FIELD_EDGE
        score_home = randint(10, 31) + round(diff / 5) + randint(0, 7), floored at 0
        score_away = randint(10, 31) - round(diff / 5) + randint(0, 7), floored at 0
    """
    diff = team_rating(home) - team_rating(away) + GameSimulation.HOME_FIELD_EDGE
    edge = round(diff / GameSimulation.RATING_DIVISOR)

    score_home = rng.randint(GameSimulation.BASE_SCORE_MIN, GameSimulation.BASE_SCORE_MAX) + edge + \
        rng.randint(0, GameSimulation.SCORE_VARIANCE)
    score_away = rng.randint(GameSimulation.BASE_SCORE_MIN, GameSimulation.BASE_SCORE_MAX) - edge + \
        rng.randint(0, GameSimulation.SCORE_VARIANCE)
    return max(0, score_home), max(0, score_away)


@dataclass
class WeekSummary:
    """Outcome of one ``simulate_week`` call."""
    week: Optional[int]
    games: List[GameResult] = field(default_factory=list)
    byes: List[int] = field(default_factory=list)
    skipped: int = 0
    season_complete: bool = False
    playoffs_started: bool = False

    @property
    def games_played(self) -> int:
        return len(self.games)


class SeasonSimulator:
    """
    Regular-season week driver.

    The game simulator is a strategy ``(home, away, rng) -> (score_home,
    score_away)`` fixed at construction; ``sim_game_stats`` is the default.
    """

    def __init__(
        self,
        game_simulator: Optional[GameSimulatorFn] = None,
        ledger: Optional[CapLedger] = None,
        playoff_controller: Optional[PlayoffController] = None
    ):
        self.game_simulator = game_simulator or sim_game_stats
        self.ledger = ledger or CapLedger()
        self.playoff_controller = playoff_controller or PlayoffController()
        self.logger = logging.getLogger(__name__)

    def simulate_week(self, league, rng: Optional[random.Random] = None) -> WeekSummary:
        """
        Simulate the league's next week.

        Returns:
            WeekSummary; ``season_complete`` is True when the regular season
            had already ended (playoffs start if ``auto_start_playoffs``)

        Raises:
            InvalidSeasonStateException: Playoffs are active or there is no schedule
        """
        if league.playoffs is not None:
            raise InvalidSeasonStateException(
                "Cannot simulate a regular-season week during the playoffs",
                state_issue="playoffs_active",
                season_context={"year": league.year, "week": league.week}
            )
        if league.schedule is None:
            raise InvalidSeasonStateException(
                "League has no schedule",
                state_issue="missing_schedule",
                season_context={"year": league.year}
            )

        if league.regular_season_complete:
            summary = WeekSummary(week=None, season_complete=True)
            if league.settings.auto_start_playoffs:
                self.playoff_controller.start_playoffs(league)
                summary.playoffs_started = True
            return summary

        rng = rng or league.rng
        week_number = league.week
        week = league.schedule.weeks[week_number - 1]
        while len(league.results_by_week) < week_number:
            league.results_by_week.append([])
        recorded = league.results_by_week[week_number - 1]

        summary = WeekSummary(week=week_number)

        for entry in week.entries:
            if isinstance(entry, Bye):
                recorded.append(ByeResult(bye=entry.team_id, week=week_number))
                summary.byes.append(entry.team_id)
                continue

            if not (league.is_valid_team_id(entry.home) and league.is_valid_team_id(entry.away)):
                self.logger.warning(f"Week {week_number}: skipping game with invalid team id {entry}")
                summary.skipped += 1
                continue

            home, away = league.team(entry.home), league.team(entry.away)
            score_home, score_away = self.game_simulator(home, away, rng)
            result = GameResult(
                home=home.id,
                away=away.id,
                score_home=score_home,
                score_away=score_away,
                week=week_number
            )
            recorded.append(result)
            home.record.add_game(score_home, score_away)
            away.record.add_game(score_away, score_home)
            summary.games.append(result)
            self.logger.debug(f"Week {week_number}: {away.abbr} {score_away} @ {home.abbr} {score_home}")

        self.ledger.recalc_all(league)
        league.week += 1

        self.logger.info(f"Simulated week {week_number}: {summary.games_played} games")
        return summary

    def simulate_season(self, league, rng: Optional[random.Random] = None) -> List[WeekSummary]:
        """Simulate every remaining regular-season week."""
        summaries = []
        while not league.regular_season_complete:
            summaries.append(self.simulate_week(league, rng))
        return summaries
