"""
Tests for the tie-break comparator and team ordering.
"""

import pytest

from shared.game_result import GameResult
from standings.standings_calculator import StandingsCalculator
from standings.standings_exceptions import InvalidScopeError, MissingStandingError
from standings.standings_models import TeamStanding
from standings.tiebreakers import (
    TiebreakScope, compare, sort_teams, resolve_scope, division_standings, division_ranks
)


def make_standing(team_id, wins=8, losses=8, **kwargs):
    return TeamStanding(
        team_id=team_id,
        conf=team_id // 16,
        div=(team_id % 16) // 4,
        wins=wins,
        losses=losses,
        **kwargs
    )


class TestScopes:

    def test_string_scopes_accepted(self):
        assert resolve_scope("division") is TiebreakScope.DIVISION
        assert resolve_scope("LEAGUE") is TiebreakScope.LEAGUE
        assert resolve_scope(TiebreakScope.LEADERS) is TiebreakScope.LEADERS

    def test_unknown_scope_raises(self):
        a, b = make_standing(0), make_standing(1)
        with pytest.raises(InvalidScopeError) as exc_info:
            compare(a, b, "playoffs")

        assert exc_info.value.error_code == "STAND_SCOPE_001"


class TestCascade:
    """Each step of the cascade decides when the earlier ones tie"""

    def test_win_percentage_first(self):
        a = make_standing(5, wins=10, losses=6)
        b = make_standing(1, wins=9, losses=7, points_for=500)

        assert compare(a, b, TiebreakScope.LEAGUE) < 0
        assert compare(b, a, TiebreakScope.LEAGUE) > 0

    def test_head_to_head_second(self):
        a = make_standing(5, h2h={1: 1})
        b = make_standing(1, h2h={5: -1}, points_for=400)

        assert compare(a, b, "conference") < 0
        assert compare(b, a, "conference") > 0

    def test_division_pct_only_in_division_scopes(self):
        # Same overall record; a owns the division, b the conference
        a = make_standing(
            2, division_wins=4, division_losses=0, conference_wins=4, conference_losses=4
        )
        b = make_standing(
            3, division_wins=0, division_losses=4, conference_wins=6, conference_losses=2
        )

        assert compare(a, b, TiebreakScope.DIVISION) < 0
        assert compare(a, b, TiebreakScope.LEADERS) < 0
        assert compare(a, b, TiebreakScope.CONFERENCE) > 0
        assert compare(a, b, TiebreakScope.LEAGUE) > 0

    def test_point_differential_then_points_for(self):
        a = make_standing(4, points_for=300, points_against=250)
        b = make_standing(0, points_for=350, points_against=320)
        assert compare(a, b, "league") < 0

        c = make_standing(6, points_for=300, points_against=300)
        d = make_standing(2, points_for=280, points_against=280)
        assert compare(c, d, "league") < 0

    def test_lower_id_breaks_full_tie(self):
        a, b = make_standing(3), make_standing(9)

        assert compare(a, b, "league") < 0
        assert compare(b, a, "league") > 0

    def test_same_team_compares_equal(self):
        a = make_standing(3)
        assert compare(a, a, "league") == 0

    @pytest.mark.parametrize("scope", list(TiebreakScope))
    def test_antisymmetric(self, scope):
        pairs = [
            (make_standing(1, wins=9, losses=7), make_standing(2)),
            (make_standing(1, h2h={2: -1}), make_standing(2, h2h={1: 1})),
            (make_standing(1, points_for=10), make_standing(2, points_for=20)),
        ]
        for a, b in pairs:
            assert compare(a, b, scope) == -compare(b, a, scope)


class TestSortTeams:

    def test_sort_best_first(self):
        standings = {
            0: make_standing(0, wins=6, losses=10),
            1: make_standing(1, wins=12, losses=4),
            2: make_standing(2, wins=9, losses=7),
        }
        assert sort_teams(standings, "league") == [1, 2, 0]

    def test_subset_of_teams(self):
        standings = {i: make_standing(i, wins=i, losses=16 - i) for i in range(4)}
        assert sort_teams(standings, TiebreakScope.DIVISION, [0, 2]) == [2, 0]

    def test_missing_team_raises(self):
        standings = {0: make_standing(0)}
        with pytest.raises(MissingStandingError) as exc_info:
            sort_teams(standings, "league", [0, 7])

        assert exc_info.value.context_dict['team_id'] == 7

    def test_three_way_cycle_is_deterministic(self):
        # 0 beat 1, 1 beat 2, 2 beat 0: head-to-head alone cannot order them
        standings = {
            0: make_standing(0, h2h={1: 1, 2: -1}),
            1: make_standing(1, h2h={0: -1, 2: 1}),
            2: make_standing(2, h2h={1: -1, 0: 1}),
        }
        first = sort_teams(standings, "division")
        second = sort_teams(standings, "division")

        assert sorted(first) == [0, 1, 2]
        assert first == second


class TestDivisionOrdering:

    def test_no_games_orders_by_id(self, league):
        league.results_by_week = []
        standings = StandingsCalculator().compute(league)

        divisions = division_standings(league, standings)
        assert len(divisions) == 8
        assert divisions[(0, 0)] == [0, 1, 2, 3]

        ranks = division_ranks(league, standings)
        assert ranks[0] == 0
        assert ranks[3] == 3
        assert ranks[31] == 3

    def test_results_drive_ranks(self, league):
        league.results_by_week = [
            [GameResult(3, 0, 21, 10), GameResult(2, 1, 14, 13)],
        ]
        standings = StandingsCalculator().compute(league)
        ranks = division_ranks(league, standings)

        # 3 and 2 are 1-0 (3 has the better differential), 1 and 0 are 0-1
        assert ranks[3] == 0
        assert ranks[2] == 1
        assert ranks[1] == 2
        assert ranks[0] == 3
