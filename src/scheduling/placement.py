"""
Week Placement

Packs a list of matchups into weeks so that no team plays twice in a week.

Algorithm:
1. Shuffle the matchup order (when an RNG is given)
2. Place each matchup in the first week where neither team plays,
   trying its preferred week first when it has one
3. Otherwise attempt a single-hop swap: move the one game blocking some
   week into another week that can take it, then use the freed week
4. Otherwise repair along an alternating chain: for a week free for one
   team and a week free for the other, swap those two weeks on the chain
   of games linking them, which frees one week for both teams
5. If nothing works, raise GamePlacementError
"""

import logging
import random
from typing import List, Optional, Sequence, Tuple, Dict

from .scheduling_exceptions import GamePlacementError

logger = logging.getLogger(__name__)

Matchup = Tuple[int, int]


def place_games(
    matchups: Sequence[Matchup],
    num_weeks: int,
    rng: Optional[random.Random] = None,
    preferred_weeks: Optional[Sequence[Optional[int]]] = None,
    seed: Optional[int] = None
) -> List[int]:
    """
    Assign every matchup to a 0-based week index.

    Args:
        matchups: (home, away) pairs
        num_weeks: Number of weeks available
        rng: Shuffles the placement order; None keeps the given order
        preferred_weeks: Optional preferred week per matchup
        seed: Reported in the error context only

    Returns:
        Week index for each matchup, aligned with ``matchups``

    Raises:
        GamePlacementError: When a matchup fits no week even after repair
    """
    busy: List[Dict[int, int]] = [dict() for _ in range(num_weeks)]
    assigned: List[Optional[int]] = [None] * len(matchups)

    order = list(range(len(matchups)))
    if rng is not None:
        rng.shuffle(order)

    def put(index: int, week: int):
        home, away = matchups[index]
        busy[week][home] = index
        busy[week][away] = index
        assigned[index] = week

    def take(index: int):
        home, away = matchups[index]
        week = assigned[index]
        del busy[week][home]
        del busy[week][away]
        assigned[index] = None

    def is_free(week: int, home: int, away: int) -> bool:
        return home not in busy[week] and away not in busy[week]

    for placed, index in enumerate(order):
        home, away = matchups[index]
        preferred = preferred_weeks[index] if preferred_weeks else None

        candidates = list(range(num_weeks))
        if preferred is not None:
            candidates.remove(preferred)
            candidates.insert(0, preferred)

        week = next((w for w in candidates if is_free(w, home, away)), None)
        if week is not None:
            put(index, week)
            continue

        if _swap_into_week(index, matchups, busy, num_weeks, put, take):
            continue

        if _chain_repair(index, matchups, busy, assigned, num_weeks, put, take):
            continue

        logger.error(f"Could not place {away}@{home} ({placed}/{len(matchups)} placed)")
        raise GamePlacementError(
            f"No week accepts game {away}@{home}",
            matchup=(home, away),
            placed=placed,
            total=len(matchups),
            seed=seed
        )

    return assigned


def _swap_into_week(index, matchups, busy, num_weeks, put, take) -> bool:
    """Single-hop swap: relocate the only game blocking a week, then use it."""
    home, away = matchups[index]

    for week in range(num_weeks):
        blockers = {busy[week].get(home), busy[week].get(away)} - {None}
        if len(blockers) != 1:
            continue

        blocker = blockers.pop()
        b_home, b_away = matchups[blocker]
        for target in range(num_weeks):
            if target == week:
                continue
            if b_home in busy[target] or b_away in busy[target]:
                continue

            take(blocker)
            put(blocker, target)
            put(index, week)
            logger.debug(f"Swapped {b_away}@{b_home} to week {target + 1} for {away}@{home}")
            return True

    return False


def _chain_repair(index, matchups, busy, assigned, num_weeks, put, take) -> bool:
    """
    Alternating-chain repair for a game whose teams share no free week.

    Take week ``a`` free for one team and week ``b`` free for the other.
    The games alternating between ``a`` and ``b`` from the second team form
    a path; swapping ``a`` and ``b`` along it frees ``a`` for both teams
    unless the path ends at the first team.
    """
    home, away = matchups[index]

    for first, second in ((home, away), (away, home)):
        first_free = [w for w in range(num_weeks) if first not in busy[w]]
        second_free = [w for w in range(num_weeks) if second not in busy[w]]

        for a in first_free:
            for b in second_free:
                chain = _alternating_chain(second, a, b, matchups, busy)
                if any(first in matchups[game] for game in chain):
                    continue

                old_weeks = {game: assigned[game] for game in chain}
                for game in chain:
                    take(game)
                for game in chain:
                    put(game, b if old_weeks[game] == a else a)
                put(index, a)
                logger.debug(
                    f"Swapped weeks {a + 1}/{b + 1} along {len(chain)} games for {away}@{home}"
                )
                return True

    return False


def _alternating_chain(team, a, b, matchups, busy) -> List[int]:
    """Games reached from ``team`` alternating between weeks ``a`` and ``b``."""
    chain = []
    week, other = a, b
    while team in busy[week]:
        game = busy[week][team]
        chain.append(game)
        g_home, g_away = matchups[game]
        team = g_away if g_home == team else g_home
        week, other = other, week
    return chain
