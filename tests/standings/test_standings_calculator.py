"""
Tests for StandingsCalculator.

Team ids: 0-3 are AFC East, 4-7 AFC North, 16-19 NFC East.
"""

import pytest

from shared.game_result import GameResult, ByeResult
from standings.standings_calculator import StandingsCalculator


@pytest.fixture
def calculator():
    return StandingsCalculator()


class TestRecordAggregation:
    """Wins, losses, ties and points"""

    def test_empty_results(self, league, calculator):
        league.results_by_week = [[] for _ in range(18)]
        standings = calculator.compute(league)

        assert len(standings) == 32
        assert all(s.games_played == 0 for s in standings.values())
        assert standings[0].win_percentage == 0.0

    def test_win_and_loss(self, league, calculator):
        league.results_by_week = [[GameResult(0, 1, 24, 17, week=1)]]
        standings = calculator.compute(league)

        assert standings[0].record_string == "1-0"
        assert standings[1].record_string == "0-1"
        assert standings[0].points_for == 24
        assert standings[0].points_against == 17
        assert standings[1].point_differential == -7

    def test_tie_counts_half(self, league, calculator):
        league.results_by_week = [
            [GameResult(0, 1, 20, 20, week=1)],
            [GameResult(0, 2, 30, 10, week=2)],
        ]
        standings = calculator.compute(league)

        assert standings[0].record_string == "1-0-1"
        # (1 + 0.5) / 2
        assert standings[0].win_percentage == pytest.approx(0.75)
        assert standings[1].win_percentage == pytest.approx(0.5)

    def test_byes_are_ignored(self, league, calculator):
        league.results_by_week = [[ByeResult(0, week=1), GameResult(1, 2, 14, 7, week=1)]]
        standings = calculator.compute(league)

        assert standings[0].games_played == 0
        assert standings[1].wins == 1

    def test_unknown_team_skipped(self, league, calculator):
        league.results_by_week = [[GameResult(0, 99, 10, 3, week=1)]]
        standings = calculator.compute(league)

        assert standings[0].games_played == 0


class TestSplits:
    """Division and conference records"""

    def test_division_game_counts_everywhere(self, league, calculator):
        league.results_by_week = [[GameResult(0, 1, 21, 14)]]
        standings = calculator.compute(league)

        assert standings[0].division_record == "1-0"
        assert standings[0].conference_record == "1-0"

    def test_conference_only_game(self, league, calculator):
        league.results_by_week = [[GameResult(0, 4, 21, 14)]]
        standings = calculator.compute(league)

        assert standings[0].division_record == "0-0"
        assert standings[0].conference_record == "1-0"

    def test_cross_conference_game(self, league, calculator):
        league.results_by_week = [[GameResult(0, 16, 21, 14)]]
        standings = calculator.compute(league)

        assert standings[0].wins == 1
        assert standings[0].conference_record == "0-0"
        assert standings[16].conference_record == "0-0"

    def test_tie_in_division(self, league, calculator):
        league.results_by_week = [[GameResult(2, 3, 17, 17)]]
        standings = calculator.compute(league)

        assert standings[2].division_ties == 1
        assert standings[3].conference_ties == 1
        assert standings[2].division_win_percentage == pytest.approx(0.5)


class TestHeadToHead:
    """h2h differential bookkeeping"""

    def test_h2h_is_zero_sum(self, league, calculator):
        league.results_by_week = [
            [GameResult(0, 1, 24, 17)],
            [GameResult(1, 0, 10, 13)],
            [GameResult(0, 2, 7, 27)],
        ]
        standings = calculator.compute(league)

        assert standings[0].head_to_head(1) == 2
        assert standings[1].head_to_head(0) == -2
        assert standings[0].head_to_head(2) == -1
        assert standings[2].head_to_head(0) == 1

    def test_split_series_cancels(self, league, calculator):
        league.results_by_week = [
            [GameResult(0, 1, 24, 17)],
            [GameResult(1, 0, 24, 17)],
        ]
        standings = calculator.compute(league)

        assert standings[0].head_to_head(1) == 0
        assert standings[1].head_to_head(0) == 0

    def test_tie_records_zero_entry(self, league, calculator):
        league.results_by_week = [[GameResult(0, 1, 3, 3)]]
        standings = calculator.compute(league)

        assert standings[0].h2h == {1: 0}
        assert standings[5].head_to_head(0) == 0

    def test_to_dict(self, league, calculator):
        league.results_by_week = [[GameResult(0, 1, 24, 17)]]
        data = calculator.compute(league)[0].to_dict()

        assert data['record'] == "1-0"
        assert data['win_percentage'] == 1.0
        assert data['point_differential'] == 7
