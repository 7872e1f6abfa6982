"""
Offseason Controller

Rolls a league from a finished season into the next one:

    1. Record final division ranks (drive next year's same-place games)
    2. Carry unused cap space forward
    3. Run down contracts; expired players enter free agency
    4. Age players and clear injuries
    5. Reset tag flags
    6. Advance season and year
    7. Top up the draft-pick window
    8. Hold the draft with this year's picks, worst record first
    9. Fill depth-chart holes from the free-agent pool
    10. Reset records, results and the week counter
    11. Generate the new schedule
    12. Recalculate every team's cap
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from constants.league_constants import DEPTH_NEEDS
from league.draft import run_draft
from league.picks import regenerate_picks
from salary_cap.cap_ledger import CapLedger
from salary_cap.contract_manager import ContractManager
from scheduling.schedule_generator import make_schedule
from standings.standings_calculator import StandingsCalculator
from standings.tiebreakers import division_ranks


@dataclass
class OffseasonSummary:
    """What the offseason changed."""
    completed_year: int
    new_year: int
    new_season: int
    division_ranks: Dict[int, int] = field(default_factory=dict)
    rollovers: Dict[int, float] = field(default_factory=dict)
    expired_player_ids: List[int] = field(default_factory=list)
    picks_created: int = 0
    drafted_player_ids: List[int] = field(default_factory=list)
    signed_player_ids: List[int] = field(default_factory=list)
    games_scheduled: int = 0


class OffseasonController:
    """
    Controller for the offseason transition.

    Usage:
        summary = OffseasonController().run(league)
    """

    def __init__(
        self,
        ledger: Optional[CapLedger] = None,
        standings_calculator: Optional[StandingsCalculator] = None
    ):
        self.ledger = ledger or CapLedger()
        self.contract_manager = ContractManager(self.ledger)
        self.standings_calculator = standings_calculator or StandingsCalculator()
        self.logger = logging.getLogger(__name__)

    def run(self, league) -> OffseasonSummary:
        """
        Advance the league to the next season.

        Returns:
            OffseasonSummary of ranks, rollovers, expirations, picks,
            draft selections and free-agent signings
        """
        summary = OffseasonSummary(
            completed_year=league.year,
            new_year=league.year + 1,
            new_season=league.season + 1
        )

        # 1. final division ranks
        standings = self.standings_calculator.compute(league)
        summary.division_ranks = division_ranks(league, standings)
        for team in league.teams:
            team.last_division_rank = summary.division_ranks.get(team.id, team.last_division_rank)
        team_order = sorted(
            (team.id for team in league.teams),
            key=lambda team_id: (
                standings[team_id].win_percentage,
                standings[team_id].point_differential,
                team_id
            )
        )

        # 2. rollover
        for team in league.teams:
            summary.rollovers[team.id] = self.ledger.process_cap_rollover(league, team)

        # 3-5. contracts, aging, tags
        for team in league.teams:
            summary.expired_player_ids.extend(self._run_down_contracts(league, team))
            for player in team.roster:
                player.age += 1
                player.injury_weeks = 0
            team.franchise_tag_used = False
            team.transition_tag_used = False

        # 6. calendar
        league.season += 1
        league.year += 1

        # 7. picks
        summary.picks_created = regenerate_picks(league)

        # 8. draft
        summary.drafted_player_ids = [p.id for p in run_draft(league, team_order)]
        self.ledger.recalc_all(league)

        # 9. free agency
        if league.free_agents is not None:
            for team_id in team_order:
                summary.signed_player_ids.extend(self._fill_depth_chart(league, league.team(team_id)))

        # 10. records and results
        for team in league.teams:
            team.record.reset()
        league.week = 1
        league.playoffs = None

        # 11. schedule
        league.schedule = make_schedule(league)
        league.results_by_week = [[] for _ in league.schedule.weeks]
        summary.games_scheduled = league.schedule.total_games

        # 12. cap
        self.ledger.recalc_all(league)

        self.logger.info(
            f"Offseason complete: {summary.completed_year} -> {summary.new_year}, "
            f"{len(summary.expired_player_ids)} contracts expired, "
            f"{len(summary.drafted_player_ids)} drafted, "
            f"{len(summary.signed_player_ids)} free agents signed"
        )
        return summary

    def _run_down_contracts(self, league, team) -> List[int]:
        """Decrement contract years; return ids of players whose deals expired."""
        expired = []
        for player in list(team.roster):
            player.years = max(0, player.years - 1)
            player.converted_base = 0.0
            if player.years > 0:
                continue
            team.roster.remove(player)
            previous_base = player.base_annual
            player.clear_contract()
            expired.append(player.id)
            if league.free_agents is not None:
                self.contract_manager.list_free_agent(league, player, previous_base)
        if expired:
            self.logger.debug(f"{team.abbr}: {len(expired)} contracts expired")
        return expired

    def _fill_depth_chart(self, league, team) -> List[int]:
        """
        Sign the best affordable free agent at each position below its
        depth target until the target is met or nobody fits.

        Returns:
            Ids of players signed
        """
        signed = []
        for pos, target in DEPTH_NEEDS.items():
            while len(team.players_at(pos)) < target:
                candidates = sorted(
                    (p for p in league.free_agents if p.pos == pos),
                    key=lambda p: p.ovr,
                    reverse=True
                )
                player = next(
                    (p for p in candidates if self.contract_manager.sign_free_agent(league, team, p).success),
                    None
                )
                if player is None:
                    break
                signed.append(player.id)
        return signed
