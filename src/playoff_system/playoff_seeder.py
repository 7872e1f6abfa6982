"""
Playoff Seeder

Calculates playoff seeding from standings.
Pure calculation logic - no side effects on the league.
"""

from typing import Dict, Any, List, Optional
import logging

from constants.team_ids import CONF_NAMES, division_label
from standings.standings_calculator import StandingsCalculator
from standings.standings_models import TeamStanding
from standings.tiebreakers import TiebreakScope, sort_teams
from .seeding_models import PlayoffSeeding, ConferenceSeeding, PlayoffSeed
from .playoff_exceptions import InvalidSeedingException

SEEDS_PER_CONFERENCE = 7
DIVISION_WINNER_SEEDS = 4


class PlayoffSeeder:
    """
    Calculates playoff seeding based on current standings.

    Per conference:
    - Each division's leader is the division sorted with scope ``leaders``
    - Leaders take seeds 1-4, ordered by the conference-scope comparator
    - The best 3 non-leaders by the conference-scope comparator take seeds 5-7

    Usage:
        seeder = PlayoffSeeder()
        seeding = seeder.calculate_seeding(league)
    """

    def __init__(self, standings_calculator: Optional[StandingsCalculator] = None):
        self.standings_calculator = standings_calculator or StandingsCalculator()
        self.tiebreakers_applied: List[Dict[str, Any]] = []
        self.logger = logging.getLogger(__name__)

    def calculate_seeding(
        self,
        league,
        standings: Optional[Dict[int, TeamStanding]] = None
    ) -> PlayoffSeeding:
        """
        Calculate playoff seeding from standings.

        Args:
            league: League whose teams are seeded
            standings: Precomputed standings (computed from results when omitted)

        Returns:
            PlayoffSeeding with 7 seeds for both conferences

        Raises:
            InvalidSeedingException: A conference has fewer than 7 teams
        """
        self.tiebreakers_applied = []
        if standings is None:
            standings = self.standings_calculator.compute(league)

        conferences = [
            self._calculate_conference_seeding(league, standings, conf)
            for conf in range(len(CONF_NAMES))
        ]

        return PlayoffSeeding(
            season=league.year,
            week=league.week,
            afc=conferences[0],
            nfc=conferences[1],
            tiebreakers_applied=self.tiebreakers_applied
        )

    def _calculate_conference_seeding(
        self,
        league,
        standings: Dict[int, TeamStanding],
        conf: int
    ) -> ConferenceSeeding:
        conference_name = CONF_NAMES[conf]
        conference_teams = [team for team in league.teams if team.conf == conf]

        if len(conference_teams) < SEEDS_PER_CONFERENCE:
            self.logger.error(f"{conference_name} has only {len(conference_teams)} teams")
            raise InvalidSeedingException(
                f"{conference_name} needs at least {SEEDS_PER_CONFERENCE} teams, "
                f"has {len(conference_teams)}",
                conference=conference_name
            )

        divisions: Dict[int, List[int]] = {}
        for team in conference_teams:
            divisions.setdefault(team.div, []).append(team.id)

        leaders = []
        for div, team_ids in sorted(divisions.items()):
            ordered = sort_teams(standings, TiebreakScope.LEADERS, team_ids)
            leaders.append(ordered[0])
            self._note_tiebreaker(standings, ordered, division_label(conf, div))

        leaders = sort_teams(standings, TiebreakScope.CONFERENCE, leaders)
        others = [team.id for team in conference_teams if team.id not in leaders]
        wildcards = sort_teams(standings, TiebreakScope.CONFERENCE, others)
        wildcards = wildcards[:SEEDS_PER_CONFERENCE - len(leaders)]

        seeds = [
            self._build_seed(league, standings[team_id], number, team_id in leaders)
            for number, team_id in enumerate(leaders + wildcards, start=1)
        ]

        return ConferenceSeeding(conference=conference_name, seeds=seeds)

    def _note_tiebreaker(self, standings, ordered: List[int], division_name: str):
        """Record when a division title was decided past win percentage."""
        if len(ordered) < 2:
            return
        first, second = standings[ordered[0]], standings[ordered[1]]
        if first.win_percentage == second.win_percentage:
            self.tiebreakers_applied.append({
                'division': division_name,
                'winner': first.team_id,
                'tied_with': second.team_id,
            })

    def _build_seed(self, league, standing: TeamStanding, number: int, leader: bool) -> PlayoffSeed:
        team = league.team(standing.team_id)
        return PlayoffSeed(
            seed=number,
            team_id=standing.team_id,
            wins=standing.wins,
            losses=standing.losses,
            ties=standing.ties,
            win_percentage=round(standing.win_percentage, 3),
            division_winner=leader,
            division_name=team.division_name,
            conference=team.conference_name,
            points_for=standing.points_for,
            points_against=standing.points_against,
            point_differential=standing.point_differential,
            division_record=standing.division_record,
            conference_record=standing.conference_record,
        )
