"""
Tests for the rookie draft: wage scale, draft class, selection order and
roster additions.
"""

import random

import pytest

from constants.league_constants import DEPTH_NEEDS, Draft
from league.draft import draft_order, generate_draft_class, rookie_contract, run_draft
from league.picks import make_pick_id, transfer_pick


class TestRookieContract:

    @pytest.mark.parametrize("round_number", range(1, 8))
    def test_base_within_round_scale(self, round_number):
        rng = random.Random(7)
        low, high = Draft.ROOKIE_SCALE[round_number]

        for _ in range(25):
            terms = rookie_contract(rng, round_number)
            assert low <= terms['base_annual'] <= high

    def test_four_year_guaranteed_deal(self):
        terms = rookie_contract(random.Random(1), 1)

        assert terms['years'] == terms['years_total'] == 4
        assert terms['signing_bonus'] == 0.0
        assert terms['guaranteed_pct'] == 1.0

    def test_unknown_round_uses_last_round_scale(self):
        assert 0.5 <= rookie_contract(random.Random(1), 9)['base_annual'] <= 0.7


class TestDraftClass:

    def test_prospects_sorted_best_first(self, league):
        prospects = generate_draft_class(league, 50)

        assert len(prospects) == 50
        ratings = [p.ovr for p in prospects]
        assert ratings == sorted(ratings, reverse=True)

    def test_prospects_are_young_with_fresh_ids(self, league):
        existing = {p.id for team in league.teams for p in team.roster}
        prospects = generate_draft_class(league, 40)

        assert all(21 <= p.age <= 23 for p in prospects)
        assert all(p.pos in DEPTH_NEEDS for p in prospects)
        assert not existing & {p.id for p in prospects}
        assert len({p.id for p in prospects}) == 40


class TestDraftOrder:

    def test_round_by_round_in_team_order(self, league):
        team_order = list(reversed(range(32)))
        selections = draft_order(league, team_order)

        assert len(selections) == 32 * 7
        assert [pick.round for _, pick in selections[:32]] == [1] * 32
        assert [pick.original_owner for _, pick in selections[:32]] == team_order
        assert all(pick.year == league.year for _, pick in selections)

    def test_traded_pick_keeps_original_slot(self, league):
        team_order = list(range(32))
        transfer_pick(make_pick_id(0, league.year, 1), league.team(0), league.team(31))

        team, pick = draft_order(league, team_order)[0]

        assert team is league.team(31)
        assert pick.original_owner == 0


class TestRunDraft:

    def test_every_current_pick_used(self, league):
        roster_sizes = {team.id: len(team.roster) for team in league.teams}

        drafted = run_draft(league, list(range(32)))

        assert len(drafted) == 32 * 7
        for team in league.teams:
            assert len(team.roster) == roster_sizes[team.id] + 7
            assert all(p.year > league.year for p in team.picks)
            assert len(team.picks) == 14

    def test_rookies_on_round_scale(self, league):
        drafted = run_draft(league, list(range(32)))

        for rookie in drafted:
            low, high = Draft.ROOKIE_SCALE[rookie.draft_round]
            assert rookie.draft_year == league.year
            assert low <= rookie.base_annual <= high
            assert rookie.years == rookie.years_total == 4
            assert rookie.signing_bonus == 0.0

    def test_first_rounders_go_in_team_order(self, league):
        team_order = list(range(32))
        drafted = run_draft(league, team_order)

        first_round = drafted[:32]
        assert all(p.draft_round == 1 for p in first_round)
        for team_id, rookie in zip(team_order, first_round):
            assert rookie in league.team(team_id).roster

    def test_new_owner_drafts_with_traded_pick(self, league):
        transfer_pick(make_pick_id(0, league.year, 1), league.team(0), league.team(1))

        drafted = {p.id for p in run_draft(league, list(range(32)))}

        def first_rounders(team):
            return [p for p in team.roster if p.id in drafted and p.draft_round == 1]

        assert len(first_rounders(league.team(1))) == 2
        assert first_rounders(league.team(0)) == []

    def test_no_current_picks_no_draft(self, league):
        for team in league.teams:
            team.picks = [p for p in team.picks if p.year != league.year]

        assert run_draft(league, list(range(32))) == []
