"""
Unit Tests for CapCalculator

Tests core salary cap calculation formulas:
- Signing bonus proration
- Per-season cap hits
- Dead money on release (pre/post June 1)
- Rollover of unused cap space

All amounts are in $M with $0.1M resolution.
"""

import pytest

from league.models import Team


class TestProration:
    """Signing bonus proration over the original contract length."""

    def test_bonus_split_evenly(self, cap_calculator, make_test_player):
        player = make_test_player(signing_bonus=8.0, years_total=4)
        # $8.0M / 4 years = $2.0M per year
        assert cap_calculator.proration_per_year(player) == 2.0

    def test_no_bonus_means_no_proration(self, cap_calculator, make_test_player):
        player = make_test_player(signing_bonus=0.0)
        assert cap_calculator.proration_per_year(player) == 0.0

    def test_missing_contract_length(self, cap_calculator, make_test_player):
        player = make_test_player(years=0, years_total=0, signing_bonus=5.0)
        assert cap_calculator.proration_per_year(player) == 0.0


class TestCapHit:
    """cap_hit_for(player, rel_season)."""

    def test_current_season_hit(self, cap_calculator, sample_veteran):
        # $10.0M base + $2.0M proration
        assert cap_calculator.cap_hit_for(sample_veteran, 0) == 12.0

    def test_future_season_within_contract(self, cap_calculator, sample_veteran):
        assert cap_calculator.cap_hit_for(sample_veteran, 1) == 12.0

    def test_season_past_contract_is_zero(self, cap_calculator, sample_veteran):
        # 2 years left: seasons 0 and 1 only
        assert cap_calculator.cap_hit_for(sample_veteran, 2) == 0.0

    def test_expired_contract_is_zero(self, cap_calculator, make_test_player):
        player = make_test_player(years=0, years_total=4)
        assert cap_calculator.cap_hit_for(player, 0) == 0.0

    def test_hit_rounded_to_tenth(self, cap_calculator, make_test_player):
        player = make_test_player(years=3, years_total=3, base_annual=1.0, signing_bonus=1.0)
        # 1.0 + 1.0/3 = 1.333 -> 1.3
        assert cap_calculator.cap_hit_for(player, 0) == 1.3


class TestReleaseDeadMoney:
    """Dead money acceleration on release."""

    def test_post_june_1_split(self, cap_calculator, sample_veteran):
        current, deferred = cap_calculator.release_dead_money(sample_veteran, is_post_june_1=True)
        # current = 2.0 proration + 5.0 guaranteed; next = 4.0 remaining - 2.0
        assert current == 7.0
        assert deferred == 2.0

    def test_pre_june_1_all_now(self, cap_calculator, sample_veteran):
        current, deferred = cap_calculator.release_dead_money(sample_veteran, is_post_june_1=False)
        # 4.0 remaining proration + 5.0 guaranteed
        assert current == 9.0
        assert deferred == 0.0

    def test_post_june_1_final_year_not_split(self, cap_calculator, make_test_player):
        player = make_test_player(years=1, years_total=4, base_annual=10.0, signing_bonus=8.0)
        current, deferred = cap_calculator.release_dead_money(player, is_post_june_1=True)
        # 2.0 proration + 5.0 guaranteed, nothing left to defer
        assert (current, deferred) == (7.0, 0.0)

    def test_uneven_proration_keeps_whole_bonus_pre_june_1(self, cap_calculator, make_test_player):
        player = make_test_player(years=3, years_total=3, base_annual=1.0, signing_bonus=10.0, guaranteed_pct=0.0)
        # 10.0 / 3 x 3 years, rounded once
        assert cap_calculator.release_dead_money(player) == (10.0, 0.0)

    def test_uneven_proration_split_post_june_1(self, cap_calculator, make_test_player):
        player = make_test_player(years=3, years_total=3, base_annual=1.0, signing_bonus=10.0, guaranteed_pct=0.0)
        current, deferred = cap_calculator.release_dead_money(player, is_post_june_1=True)
        # 3.333 -> 3.3 now, 6.667 -> 6.7 later
        assert (current, deferred) == (3.3, 6.7)
        assert current + deferred == pytest.approx(10.0)

    def test_guarantee_added_before_rounding(self, cap_calculator, make_test_player):
        player = make_test_player(years=1, years_total=3, base_annual=1.2, signing_bonus=1.0, guaranteed_pct=0.45)
        # 0.333 + 0.54 = 0.873 -> 0.9 (rounding each part first gives 0.3 + 0.5)
        assert cap_calculator.release_dead_money(player) == (0.9, 0.0)

    def test_default_guarantee_when_missing(self, cap_calculator, make_test_player):
        player = make_test_player(years=1, years_total=1, base_annual=6.0, signing_bonus=0.0)
        player.guaranteed_pct = None
        # 6.0 x 0.5 default
        assert cap_calculator.guaranteed_salary(player) == 3.0

    def test_dead_money_never_negative(self, cap_calculator, make_test_player):
        player = make_test_player(years=2, years_total=2, base_annual=0.5, signing_bonus=0.0, guaranteed_pct=0.0)
        current, deferred = cap_calculator.release_dead_money(player, is_post_june_1=True)
        assert current >= 0
        assert deferred >= 0


class TestRollover:
    """Unused cap space carried forward."""

    @pytest.mark.parametrize("cap_used,expected", [
        (215.0, 5.0),    # 5.0 unused
        (200.0, 10.0),   # 20.0 unused, capped at 10.0
        (230.0, 0.0),    # over the cap floors at 0
    ])
    def test_rollover_amount(self, cap_calculator, cap_used, expected):
        team = Team(id=0, abbr="TST", name="Test", conf=0, div=0, cap_total=220.0, cap_used=cap_used)
        assert cap_calculator.rollover_amount(team) == expected
