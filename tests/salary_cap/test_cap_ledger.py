"""
Unit Tests for CapLedger

Tests team cap recalculation, the dead money book and rollover.
"""

from salary_cap.cap_ledger import CapLedger


class TestRecalcCap:
    """recalc_cap(league, team)."""

    def test_recalc_sums_active_hits(self, cap_ledger, cap_league, empty_team, sample_veteran, make_test_player):
        empty_team.roster = [
            sample_veteran,
            make_test_player(years=1, years_total=1, base_annual=5.0, signing_bonus=0.0),
        ]
        cap_ledger.recalc_cap(cap_league, empty_team)

        # 12.0 + 5.0
        assert empty_team.cap_used == 17.0
        assert empty_team.cap_total == 220.0
        assert empty_team.cap_room == 203.0

    def test_current_season_dead_money_counts(self, cap_ledger, cap_league, empty_team, sample_veteran):
        empty_team.roster = [sample_veteran]
        empty_team.dead_cap_book = {1: 4.0, 2: 9.0}
        cap_ledger.recalc_cap(cap_league, empty_team)

        # 12.0 active + 4.0 dead for season 1; season 2 not counted yet
        assert empty_team.dead_cap == 4.0
        assert empty_team.cap_used == 16.0
        assert empty_team.cap_room == 204.0

    def test_rollover_raises_cap_total(self, cap_ledger, cap_league, empty_team):
        empty_team.cap_rollover = 7.5
        cap_ledger.recalc_cap(cap_league, empty_team)
        assert empty_team.cap_total == 227.5

    def test_cap_room_consistent_for_generated_league(self, league):
        CapLedger().recalc_all(league)
        for team in league.teams:
            assert team.cap_room == round(team.cap_total - team.cap_used, 1)


class TestDeadMoneyBook:
    """add_dead(team, season, amount)."""

    def test_accumulates_and_rounds(self, cap_ledger, empty_team):
        cap_ledger.add_dead(empty_team, 1, 1.25)
        cap_ledger.add_dead(empty_team, 1, 2.0)
        # 1.25 -> 1.3, then + 2.0
        assert empty_team.dead_cap_book[1] == 3.3

    def test_ignores_non_positive(self, cap_ledger, empty_team):
        cap_ledger.add_dead(empty_team, 1, 0.0)
        cap_ledger.add_dead(empty_team, 1, -3.0)
        assert empty_team.dead_cap_book == {}

    def test_seasons_kept_separately(self, cap_ledger, empty_team):
        cap_ledger.add_dead(empty_team, 1, 7.0)
        cap_ledger.add_dead(empty_team, 2, 2.0)
        assert empty_team.dead_cap_book == {1: 7.0, 2: 2.0}


class TestRolloverProcessing:

    def test_process_rollover_stores_amount(self, cap_ledger, cap_league, empty_team, sample_veteran):
        empty_team.roster = [sample_veteran]
        cap_ledger.recalc_cap(cap_league, empty_team)

        # 208.0 unused, capped at 10.0
        assert cap_ledger.process_cap_rollover(cap_league, empty_team) == 10.0
        assert empty_team.cap_rollover == 10.0

        cap_ledger.recalc_cap(cap_league, empty_team)
        assert empty_team.cap_total == 230.0

    def test_cap_summary(self, cap_ledger, cap_league, empty_team, sample_veteran):
        empty_team.roster = [sample_veteran]
        empty_team.dead_cap_book = {2: 1.5}
        cap_ledger.recalc_cap(cap_league, empty_team)

        summary = cap_ledger.cap_summary(cap_league, empty_team)
        assert summary['cap_used'] == 12.0
        assert summary['dead_cap_next_season'] == 1.5
        assert summary['committed_next_season'] == 12.0
        assert summary['roster_size'] == 1
