"""
Tests for SeasonSimulator: week-by-week regular season play.
"""

import random

import pytest

from scheduling.schedule_models import Game
from season.season_exceptions import InvalidSeasonStateException
from season.season_simulator import SeasonSimulator, sim_game_stats
from shared.game_result import ByeResult, GameResult
from shared.money import round_money


def home_always_wins(home, away, rng):
    return 24, 17


@pytest.fixture
def simulator():
    return SeasonSimulator(game_simulator=home_always_wins)


class TestSimulateWeek:

    def test_week_one(self, simulator, league):
        summary = simulator.simulate_week(league)

        assert summary.week == 1
        assert league.week == 2
        # every team plays or rests exactly once
        assert summary.games_played * 2 + len(summary.byes) == 32
        assert summary.skipped == 0

    def test_results_recorded(self, simulator, league):
        summary = simulator.simulate_week(league)
        recorded = league.results_by_week[0]

        games = [r for r in recorded if isinstance(r, GameResult)]
        byes = [r for r in recorded if isinstance(r, ByeResult)]
        assert len(games) == summary.games_played
        assert len(byes) == len(summary.byes)
        assert all(r.week == 1 for r in recorded)

    def test_team_records_updated(self, simulator, league):
        summary = simulator.simulate_week(league)
        game = summary.games[0]

        home, away = league.team(game.home), league.team(game.away)
        assert (home.record.w, home.record.pf, home.record.pa) == (1, 24, 17)
        assert (away.record.l, away.record.pf, away.record.pa) == (1, 17, 24)

    def test_cap_recalculated(self, simulator, league):
        simulator.simulate_week(league)
        for team in league.teams:
            assert team.cap_room == round_money(team.cap_total - team.cap_used)

    def test_invalid_team_id_skipped(self, simulator, league):
        league.schedule.weeks[0].games.append(Game(0, 99))
        summary = simulator.simulate_week(league)

        assert summary.skipped == 1
        assert all(r.away != 99 for r in summary.games)

    def test_playoffs_active_raises(self, simulator, league):
        simulator.playoff_controller.start_playoffs(league)
        with pytest.raises(InvalidSeasonStateException) as exc_info:
            simulator.simulate_week(league)

        assert exc_info.value.error_code == "SEASON_STATE_006"

    def test_missing_schedule_raises(self, simulator, league):
        league.schedule = None
        with pytest.raises(InvalidSeasonStateException):
            simulator.simulate_week(league)


class TestSeasonCompletion:

    def test_full_regular_season(self, simulator, league):
        summaries = simulator.simulate_season(league)

        assert len(summaries) == 18
        assert league.regular_season_complete
        for team in league.teams:
            assert team.record.games == 17
        # home team always wins: every win is a home game
        assert sum(team.record.w for team in league.teams) == 272

    def test_week_after_season_starts_playoffs(self, simulator, league):
        simulator.simulate_season(league)
        summary = simulator.simulate_week(league)

        assert summary.season_complete
        assert summary.playoffs_started
        assert summary.week is None
        assert league.playoffs is not None
        assert league.playoffs.current_round == 'wild_card'

    def test_auto_start_disabled(self, simulator, league):
        league.settings.auto_start_playoffs = False
        simulator.simulate_season(league)
        summary = simulator.simulate_week(league)

        assert summary.season_complete
        assert not summary.playoffs_started
        assert league.playoffs is None


class TestDefaultScoreModel:

    def test_scores_non_negative(self, league):
        rng = random.Random(8)
        for _ in range(100):
            home_score, away_score = sim_game_stats(league.team(0), league.team(1), rng)
            assert home_score >= 0
            assert away_score >= 0

    def test_same_seed_same_scores(self, league):
        first = sim_game_stats(league.team(3), league.team(20), random.Random(12))
        second = sim_game_stats(league.team(3), league.team(20), random.Random(12))
        assert first == second

    def test_default_simulator_used(self, league):
        summary = SeasonSimulator().simulate_week(league, random.Random(1))
        assert summary.games_played > 0
