"""
Season Schedule Generator

Builds an 18-week, 17-game regular season for a 32-team league:
- Divisional: home and away against each division rival (6 games)
- Intra-conference rotation: one full division in the same conference (4 games)
- Inter-conference rotation: one full division in the other conference (4 games)
- Same-place: last year's same finisher in the two remaining conference divisions (2 games)
- Seventeenth game: a same-place opponent from a non-rotation division in the other conference

Every team gets exactly one bye. Division pairings follow the 8-year cycle in
``rotation.py``.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple
import logging
import random

from constants.team_ids import NUM_TEAMS, TEAMS_PER_DIVISION
from .config import ScheduleConfig, PlacementStrategy, DIVISION_BLOCK_SLOTS
from .placement import place_games
from .rotation import (
    rotation_index, intra_flip, inter_flip, intra_partner, inter_partner,
    seventeenth_target, extra_divisions, row_hosts
)
from .schedule_models import Game, GameKind, Bye, Week, Schedule
from .scheduling_exceptions import LeagueStructureError, GamePlacementError


@dataclass(frozen=True)
class _Fixture:
    """A generated game plus its slot in the round template."""
    game: Game
    round_index: int
    group: Tuple


class ScheduleGenerator:
    """
    Generates regular-season schedules.

    Placement strategies:
    - ROUND_TEMPLATE: every matchup family splits into perfect rounds
      (divisional double round robin, 4x4 grids, same-place cycles, one
      17th-game round). Each game prefers the week its round was assigned to.
    - GREEDY: shuffle and first-fit with swap and chain repair, no preferences.
    """

    ROUNDS_PER_PHASE = {
        GameKind.DIVISION: 6,
        GameKind.INTRA_ROTATION: 4,
        GameKind.INTER_ROTATION: 4,
        GameKind.SAME_PLACE: 2,
        GameKind.SEVENTEENTH: 1,
    }

    def __init__(self, config: Optional[ScheduleConfig] = None):
        self.config = config or ScheduleConfig()
        self.logger = logging.getLogger(__name__)

        is_valid, errors = self.config.validate()
        if not is_valid:
            raise ValueError(f"Invalid schedule configuration: {errors}")

    # ========================================================================
    # PUBLIC API
    # ========================================================================

    def generate(self, teams: Sequence, year: int, seed: int) -> Schedule:
        """
        Generate one schedule attempt.

        Args:
            teams: Team objects with ``id``, ``conf``, ``div`` and ``last_division_rank``
            year: Calendar year (drives the rotation)
            seed: Shuffle seed for this attempt

        Returns:
            Complete Schedule with byes

        Raises:
            LeagueStructureError: League is not 2 x 4 x 4
            GamePlacementError: Placement failed for this seed
        """
        buckets = self._bucket_teams(teams)
        fixtures = self._build_fixtures(buckets, year)
        rng = random.Random(seed)

        preferred = None
        if self.config.strategy == PlacementStrategy.ROUND_TEMPLATE:
            preferred = self._template_weeks(fixtures, rng)

        matchups = [(f.game.home, f.game.away) for f in fixtures]
        assigned = place_games(
            matchups,
            self.config.total_weeks,
            rng=rng,
            preferred_weeks=preferred,
            seed=seed
        )

        weeks = [Week(number=w + 1) for w in range(self.config.total_weeks)]
        for fixture, week_index in zip(fixtures, assigned):
            weeks[week_index].games.append(fixture.game)

        team_ids = sorted(team.id for team in teams)
        self._add_byes(weeks, team_ids)

        schedule = Schedule(year=year, weeks=weeks, seed=seed)
        is_valid, errors = schedule.validate(team_ids)
        if not is_valid:
            self.logger.error(f"Generated schedule failed validation: {errors[:5]}")
            raise GamePlacementError(
                "Generated schedule failed validation",
                seed=seed,
                context_dict={'errors': errors[:10]}
            )

        return schedule

    # ========================================================================
    # MATCHUP GENERATION
    # ========================================================================

    def _bucket_teams(self, teams: Sequence) -> Dict[Tuple[int, int], List[int]]:
        """Group team ids by (conf, div), each ordered by last season's finish."""
        if len(teams) != NUM_TEAMS:
            raise LeagueStructureError(
                f"Scheduler requires {NUM_TEAMS} teams, got {len(teams)}",
                team_count=len(teams)
            )

        buckets: Dict[Tuple[int, int], List] = {}
        for team in teams:
            buckets.setdefault((team.conf, team.div), []).append(team)

        expected_keys = {(c, d) for c in range(2) for d in range(4)}
        if set(buckets) != expected_keys:
            raise LeagueStructureError(
                f"Expected divisions {sorted(expected_keys)}, got {sorted(buckets)}",
                team_count=len(teams)
            )

        ordered = {}
        for key, members in buckets.items():
            if len(members) != TEAMS_PER_DIVISION:
                raise LeagueStructureError(
                    f"Division {key} has {len(members)} teams",
                    team_count=len(teams),
                    context_dict={'division': key}
                )
            members.sort(key=lambda t: (t.last_division_rank, t.id))
            ordered[key] = [t.id for t in members]

        return ordered

    def _build_fixtures(self, buckets: Dict[Tuple[int, int], List[int]], year: int) -> List[_Fixture]:
        rot = rotation_index(year, self.config.base_year)

        fixtures = []
        fixtures.extend(self._division_games(buckets))
        fixtures.extend(self._intra_rotation_games(buckets, rot))
        fixtures.extend(self._inter_rotation_games(buckets, rot))
        fixtures.extend(self._same_place_games(buckets, rot, year))
        fixtures.extend(self._seventeenth_games(buckets, rot, year))

        return self._dedupe(fixtures)

    def _division_games(self, buckets) -> List[_Fixture]:
        """Home-and-away round robin inside each division."""
        fixtures = []
        for key, team_ids in sorted(buckets.items()):
            for i in range(TEAMS_PER_DIVISION):
                for j in range(i + 1, TEAMS_PER_DIVISION):
                    matching = (i ^ j) - 1
                    first_leg_host = i if matching % 2 == 0 else j
                    for host, guest in ((i, j), (j, i)):
                        leg = 0 if host == first_leg_host else 1
                        fixtures.append(_Fixture(
                            game=Game(team_ids[host], team_ids[guest], GameKind.DIVISION),
                            round_index=matching + 3 * leg,
                            group=('division',) + key
                        ))
        return fixtures

    def _grid_games(self, rows: List[int], cols: List[int], flip: bool,
                    kind: GameKind, group: Tuple) -> List[_Fixture]:
        fixtures = []
        for i, row_team in enumerate(rows):
            for j, col_team in enumerate(cols):
                if row_hosts(i, j, flip):
                    game = Game(row_team, col_team, kind)
                else:
                    game = Game(col_team, row_team, kind)
                fixtures.append(_Fixture(game=game, round_index=(i + j) % 4, group=group))
        return fixtures

    def _intra_rotation_games(self, buckets, rot: int) -> List[_Fixture]:
        fixtures = []
        flip = intra_flip(rot)
        for conf in range(2):
            for div in range(4):
                partner = intra_partner(rot, div)
                if partner < div:
                    continue
                fixtures.extend(self._grid_games(
                    buckets[(conf, div)], buckets[(conf, partner)], flip,
                    GameKind.INTRA_ROTATION, ('intra', conf, div)
                ))
        return fixtures

    def _inter_rotation_games(self, buckets, rot: int) -> List[_Fixture]:
        fixtures = []
        flip = inter_flip(rot)
        for div in range(4):
            fixtures.extend(self._grid_games(
                buckets[(0, div)], buckets[(1, inter_partner(rot, div))], flip,
                GameKind.INTER_ROTATION, ('inter', div)
            ))
        return fixtures

    def _same_place_games(self, buckets, rot: int, year: int) -> List[_Fixture]:
        """
        Same finisher in the two conference divisions outside the rotation.

        Each pairing is generated once, from the lower division. ``k`` is the
        target's index among that division's two extra divisions.
        """
        fixtures = []
        for conf in range(2):
            for div in range(4):
                own_pair = sorted((div, intra_partner(rot, div)))
                extras = extra_divisions(rot, div)
                for k, other in enumerate(extras):
                    if other < div:
                        continue
                    round_index = (own_pair.index(div) + k) % 2
                    for rank in range(TEAMS_PER_DIVISION):
                        a = buckets[(conf, div)][rank]
                        b = buckets[(conf, other)][rank]
                        if (year + k + rank) % 2 == 0:
                            game = Game(a, b, GameKind.SAME_PLACE)
                        else:
                            game = Game(b, a, GameKind.SAME_PLACE)
                        fixtures.append(_Fixture(
                            game=game, round_index=round_index, group=('same_place', conf)
                        ))
        return fixtures

    def _seventeenth_games(self, buckets, rot: int, year: int) -> List[_Fixture]:
        """Cross-conference same-place game; AFC hosts in even years."""
        fixtures = []
        afc_hosts = year % 2 == 0
        for div in range(4):
            target = seventeenth_target(rot, div)
            for rank in range(TEAMS_PER_DIVISION):
                afc_team = buckets[(0, div)][rank]
                nfc_team = buckets[(1, target)][rank]
                if afc_hosts:
                    game = Game(afc_team, nfc_team, GameKind.SEVENTEENTH)
                else:
                    game = Game(nfc_team, afc_team, GameKind.SEVENTEENTH)
                fixtures.append(_Fixture(game=game, round_index=0, group=('seventeenth',)))
        return fixtures

    def _dedupe(self, fixtures: List[_Fixture]) -> List[_Fixture]:
        """Drop repeated non-divisional pairings; divisional doubles stay."""
        seen = set()
        unique = []
        for fixture in fixtures:
            if fixture.game.kind == GameKind.DIVISION:
                unique.append(fixture)
                continue
            key = tuple(sorted((fixture.game.home, fixture.game.away)))
            if key in seen:
                self.logger.warning(
                    f"Dropping duplicate pairing {key} ({fixture.game.kind.value})"
                )
                continue
            seen.add(key)
            unique.append(fixture)
        return unique

    # ========================================================================
    # ROUND TEMPLATE
    # ========================================================================

    def _template_weeks(self, fixtures: List[_Fixture], rng: random.Random) -> List[int]:
        """
        Preferred 0-based week per fixture.

        Divisional rounds occupy seven weeks drawn from the bye window; each
        division sits out one of them. The other phases share the remaining
        eleven weeks in shuffled order.
        """
        bye = self.config.bye_week
        window = list(range(bye.start_week - 1, bye.end_week))
        block_weeks = sorted(rng.sample(window, DIVISION_BLOCK_SLOTS))

        open_weeks = [w for w in range(self.config.total_weeks) if w not in block_weeks]
        rng.shuffle(open_weeks)

        phase_weeks: Dict[GameKind, List[int]] = {}
        cursor = 0
        for kind in (GameKind.INTRA_ROTATION, GameKind.INTER_ROTATION,
                     GameKind.SAME_PLACE, GameKind.SEVENTEENTH):
            count = self.ROUNDS_PER_PHASE[kind]
            phase_weeks[kind] = open_weeks[cursor:cursor + count]
            cursor += count

        groups = sorted({f.group for f in fixtures})
        division_groups = [g for g in groups if g[0] == 'division']
        rng.shuffle(division_groups)

        round_weeks: Dict[Tuple, List[int]] = {}
        for slot, group in enumerate(division_groups):
            bye_week = block_weeks[slot % DIVISION_BLOCK_SLOTS]
            playing = [w for w in block_weeks if w != bye_week]
            rng.shuffle(playing)
            round_weeks[group] = playing

        for group in groups:
            if group in round_weeks:
                continue
            kind = self._kind_for_group(group)
            weeks = list(phase_weeks[kind])
            rng.shuffle(weeks)
            round_weeks[group] = weeks

        return [round_weeks[f.group][f.round_index] for f in fixtures]

    @staticmethod
    def _kind_for_group(group: Tuple) -> GameKind:
        return {
            'intra': GameKind.INTRA_ROTATION,
            'inter': GameKind.INTER_ROTATION,
            'same_place': GameKind.SAME_PLACE,
            'seventeenth': GameKind.SEVENTEENTH,
        }[group[0]]

    # ========================================================================
    # BYES
    # ========================================================================

    @staticmethod
    def _add_byes(weeks: List[Week], team_ids: List[int]):
        """Every team without a game in a week gets a bye entry."""
        for week in weeks:
            playing = set(week.playing_teams())
            week.byes = [Bye(team_id) for team_id in team_ids if team_id not in playing]


def make_schedule(
    league,
    seed: Optional[int] = None,
    config: Optional[ScheduleConfig] = None
) -> Schedule:
    """
    Generate the regular season for ``league.year``.

    Placement failures are retried with ``seed + attempt`` up to
    ``max_placement_attempts`` times before the last error is re-raised.

    Args:
        league: League whose teams and year drive the rotation
        seed: Base shuffle seed (drawn from ``league.rng`` when omitted)
        config: Scheduler configuration (defaults to the league settings)

    Returns:
        Schedule with 18 weeks

    Raises:
        LeagueStructureError: League is not 2 x 4 x 4
        GamePlacementError: Every attempt failed
    """
    logger = logging.getLogger(__name__)

    if config is None:
        config = league.settings.schedule
    if seed is None:
        seed = league.rng.randrange(1 << 30)

    generator = ScheduleGenerator(config)
    last_error = None
    for attempt in range(config.max_placement_attempts):
        try:
            schedule = generator.generate(league.teams, league.year, seed + attempt)
        except GamePlacementError as e:
            logger.warning(f"Placement attempt {attempt + 1} failed (seed {seed + attempt}): {e.message}")
            last_error = e
            continue

        logger.info(
            f"Generated {league.year} schedule: {schedule.total_games} games "
            f"over {len(schedule.weeks)} weeks (seed {schedule.seed})"
        )
        return schedule

    raise last_error
