"""
Tie-Break Comparator

One scope-parameterized comparator serves division ordering, division
leader selection, wild-card ordering and Super Bowl home field.

Cascade (first difference decides):
    1. Overall win percentage
    2. Head-to-head differential
    3. Division win percentage (division / leaders scope only)
    4. Conference win percentage
    5. Point differential
    6. Points for
    7. Lower team id

Head-to-head makes the relation non-transitive for three-way cycles
(A beat B, B beat C, C beat A); ``sort_teams`` still returns a
deterministic order for a fixed input order.
"""

from enum import Enum
from functools import cmp_to_key
from typing import Dict, List, Optional, Union

from .standings_exceptions import InvalidScopeError, MissingStandingError
from .standings_models import TeamStanding


class TiebreakScope(Enum):
    DIVISION = "division"
    LEADERS = "leaders"
    CONFERENCE = "conference"
    LEAGUE = "league"


_DIVISION_SCOPES = (TiebreakScope.DIVISION, TiebreakScope.LEADERS)


def resolve_scope(scope: Union[TiebreakScope, str]) -> TiebreakScope:
    if isinstance(scope, TiebreakScope):
        return scope
    try:
        return TiebreakScope(str(scope).lower())
    except ValueError:
        raise InvalidScopeError(scope)


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def compare(a: TeamStanding, b: TeamStanding, scope: Union[TiebreakScope, str]) -> int:
    """
    Compare two standings.

    Returns:
        Negative if ``a`` ranks ahead of ``b``, positive if behind, 0 only
        when ``a`` and ``b`` are the same team

    Raises:
        InvalidScopeError: Unknown scope
    """
    scope = resolve_scope(scope)

    diff = b.win_percentage - a.win_percentage
    if diff:
        return _sign(diff)

    h2h = a.head_to_head(b.team_id)
    if h2h:
        return -_sign(h2h)

    if scope in _DIVISION_SCOPES:
        diff = b.division_win_percentage - a.division_win_percentage
        if diff:
            return _sign(diff)

    diff = b.conference_win_percentage - a.conference_win_percentage
    if diff:
        return _sign(diff)

    diff = b.point_differential - a.point_differential
    if diff:
        return _sign(diff)

    diff = b.points_for - a.points_for
    if diff:
        return _sign(diff)

    return _sign(a.team_id - b.team_id)


def sort_teams(
    standings: Dict[int, TeamStanding],
    scope: Union[TiebreakScope, str],
    team_ids: Optional[List[int]] = None
) -> List[int]:
    """
    Order team ids best-first under ``scope`` (all standings when
    ``team_ids`` is omitted).

    Raises:
        MissingStandingError: A team id has no standing
    """
    scope = resolve_scope(scope)
    if team_ids is None:
        team_ids = list(standings)
    for team_id in team_ids:
        if team_id not in standings:
            raise MissingStandingError(team_id)

    key = cmp_to_key(lambda x, y: compare(standings[x], standings[y], scope))
    return sorted(team_ids, key=key)


def division_standings(league, standings: Dict[int, TeamStanding]) -> Dict[tuple, List[int]]:
    """Return {(conf, div): [team ids best-first]} using division scope."""
    divisions: Dict[tuple, List[int]] = {}
    for team in league.teams:
        divisions.setdefault((team.conf, team.div), []).append(team.id)
    return {
        key: sort_teams(standings, TiebreakScope.DIVISION, ids)
        for key, ids in sorted(divisions.items())
    }


def division_ranks(league, standings: Dict[int, TeamStanding]) -> Dict[int, int]:
    """Return {team_id: 0-based finish within its division}."""
    ranks = {}
    for ordered in division_standings(league, standings).values():
        for rank, team_id in enumerate(ordered):
            ranks[team_id] = rank
    return ranks
