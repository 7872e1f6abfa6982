"""
Playoff fixtures.

Both conferences share one win table (team id -> wins, NFC = AFC id + 16):

    East  (0-3):   12, 11,  5,  4
    North (4-7):    9,  3,  3,  2
    South (8-11):  10,  8,  7,  1
    West  (12-15):  6,  2,  2,  2

Leaders: 0 (12), 8 (10), 4 (9), 12 (6) -> seeds 1-4.
Wild cards: 1 (11), 9 (8), 10 (7) -> seeds 5-7.
"""

import pytest

from standings.standings_models import TeamStanding

AFC_WINS = [12, 11, 5, 4, 9, 3, 3, 2, 10, 8, 7, 1, 6, 2, 2, 2]


@pytest.fixture
def seeded_standings(league):
    standings = {}
    for team in league.teams:
        wins = AFC_WINS[team.id % 16]
        standings[team.id] = TeamStanding(
            team_id=team.id,
            conf=team.conf,
            div=team.div,
            wins=wins,
            losses=17 - wins,
            points_for=20 * wins,
            points_against=20 * (17 - wins),
        )
    return standings


@pytest.fixture
def seeding(league, seeded_standings):
    from playoff_system.playoff_seeder import PlayoffSeeder
    return PlayoffSeeder().calculate_seeding(league, seeded_standings)


@pytest.fixture
def manager():
    from playoff_system.playoff_manager import PlayoffManager
    return PlayoffManager()
