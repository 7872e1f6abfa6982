"""
League Team ID Constants

Readable constants for the 32 team ids. Ids are 0-based and double as the
index into ``League.teams``; the layout is fixed:

    conference = id // 16          (0 = AFC, 1 = NFC)
    division   = (id % 16) // 4    (0 = East, 1 = North, 2 = South, 3 = West)

Example:
    # Instead of:
    league.teams[21]

    # Use:
    league.teams[TeamIDs.DETROIT_LIONS]
"""

from typing import Dict, List, Tuple

CONF_NAMES = ["AFC", "NFC"]
DIV_NAMES = ["East", "North", "South", "West"]

NUM_CONFERENCES = 2
DIVISIONS_PER_CONFERENCE = 4
TEAMS_PER_DIVISION = 4
NUM_TEAMS = NUM_CONFERENCES * DIVISIONS_PER_CONFERENCE * TEAMS_PER_DIVISION


class TeamIDs:
    """Constants for team ids (0-based, conference/division ordered)"""

    # AFC East
    BUFFALO_BILLS = 0
    MIAMI_DOLPHINS = 1
    NEW_ENGLAND_PATRIOTS = 2
    NEW_YORK_JETS = 3

    # AFC North
    BALTIMORE_RAVENS = 4
    CINCINNATI_BENGALS = 5
    CLEVELAND_BROWNS = 6
    PITTSBURGH_STEELERS = 7

    # AFC South
    HOUSTON_TEXANS = 8
    INDIANAPOLIS_COLTS = 9
    JACKSONVILLE_JAGUARS = 10
    TENNESSEE_TITANS = 11

    # AFC West
    DENVER_BRONCOS = 12
    KANSAS_CITY_CHIEFS = 13
    LAS_VEGAS_RAIDERS = 14
    LOS_ANGELES_CHARGERS = 15

    # NFC East
    DALLAS_COWBOYS = 16
    NEW_YORK_GIANTS = 17
    PHILADELPHIA_EAGLES = 18
    WASHINGTON_COMMANDERS = 19

    # NFC North
    CHICAGO_BEARS = 20
    DETROIT_LIONS = 21
    GREEN_BAY_PACKERS = 22
    MINNESOTA_VIKINGS = 23

    # NFC South
    ATLANTA_FALCONS = 24
    CAROLINA_PANTHERS = 25
    NEW_ORLEANS_SAINTS = 26
    TAMPA_BAY_BUCCANEERS = 27

    # NFC West
    ARIZONA_CARDINALS = 28
    LOS_ANGELES_RAMS = 29
    SAN_FRANCISCO_49ERS = 30
    SEATTLE_SEAHAWKS = 31

    @classmethod
    def get_all_team_ids(cls) -> List[int]:
        """Get list of all valid team IDs"""
        return list(range(NUM_TEAMS))

    @classmethod
    def get_division_teams(cls, conf: int, div: int) -> List[int]:
        """
        Get team IDs for a division.

        Args:
            conf: Conference index (0 = AFC, 1 = NFC)
            div: Division index (0..3)

        Returns:
            The four team ids in that division
        """
        first = conf * 16 + div * TEAMS_PER_DIVISION
        return list(range(first, first + TEAMS_PER_DIVISION))

    @classmethod
    def get_conference_teams(cls, conf: int) -> List[int]:
        """Get the 16 team IDs for a conference index."""
        return list(range(conf * 16, conf * 16 + 16))


# (abbreviation, full name) in id order
NFL_TEAMS: List[Tuple[str, str]] = [
    ("BUF", "Buffalo Bills"), ("MIA", "Miami Dolphins"),
    ("NE", "New England Patriots"), ("NYJ", "New York Jets"),
    ("BAL", "Baltimore Ravens"), ("CIN", "Cincinnati Bengals"),
    ("CLE", "Cleveland Browns"), ("PIT", "Pittsburgh Steelers"),
    ("HOU", "Houston Texans"), ("IND", "Indianapolis Colts"),
    ("JAX", "Jacksonville Jaguars"), ("TEN", "Tennessee Titans"),
    ("DEN", "Denver Broncos"), ("KC", "Kansas City Chiefs"),
    ("LV", "Las Vegas Raiders"), ("LAC", "Los Angeles Chargers"),
    ("DAL", "Dallas Cowboys"), ("NYG", "New York Giants"),
    ("PHI", "Philadelphia Eagles"), ("WAS", "Washington Commanders"),
    ("CHI", "Chicago Bears"), ("DET", "Detroit Lions"),
    ("GB", "Green Bay Packers"), ("MIN", "Minnesota Vikings"),
    ("ATL", "Atlanta Falcons"), ("CAR", "Carolina Panthers"),
    ("NO", "New Orleans Saints"), ("TB", "Tampa Bay Buccaneers"),
    ("ARI", "Arizona Cardinals"), ("LAR", "Los Angeles Rams"),
    ("SF", "San Francisco 49ers"), ("SEA", "Seattle Seahawks"),
]

TEAM_ABBREVIATIONS: Dict[str, str] = {name: abbr for abbr, name in NFL_TEAMS}


def conference_of(team_id: int) -> int:
    """Conference index for a team id."""
    return team_id // 16


def division_of(team_id: int) -> int:
    """Division index (within the conference) for a team id."""
    return (team_id % 16) // TEAMS_PER_DIVISION


def division_label(conf: int, div: int) -> str:
    """Display label such as ``"AFC North"``."""
    return f"{CONF_NAMES[conf]} {DIV_NAMES[div]}"
