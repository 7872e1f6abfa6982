"""
Rotation Tables

Eight-year cycles that decide which divisions meet each season.

INTRA_ROT_8[rot][div] -> partner division in the same conference
INTER_ROT_8[rot][afc_div] -> NFC division met by that AFC division
HOST_GRID_CANON[i][j] -> True when row team i hosts column team j

``rot = (year - base_year) % 8``. Host parity is flipped every 3 rotation
years for intra-conference pairings and every 4 for inter-conference ones,
so the same two divisions swap venues when they meet again.
"""

from typing import List, Tuple

ROTATION_CYCLE = 8

# The three ways to split four divisions into two pairs
_M1 = (1, 0, 3, 2)   # East-North, South-West
_M2 = (2, 3, 0, 1)   # East-South, North-West
_M3 = (3, 2, 1, 0)   # East-West, North-South

INTRA_ROT_8: Tuple[Tuple[int, ...], ...] = (_M1, _M2, _M3, _M1, _M2, _M3, _M1, _M2)

INTER_ROT_8: Tuple[Tuple[int, ...], ...] = tuple(
    tuple((div + shift) % 4 for div in range(4))
    for shift in (0, 1, 2, 3, 0, 1, 2, 3)
)

# Each row and each column hosts exactly twice
HOST_GRID_CANON: Tuple[Tuple[bool, ...], ...] = tuple(
    tuple((i + j) % 2 == 0 for j in range(4))
    for i in range(4)
)


def rotation_index(year: int, base_year: int) -> int:
    """Position of ``year`` in the 8-year cycle."""
    return (year - base_year) % ROTATION_CYCLE


def intra_flip(rot: int) -> bool:
    return (rot // 3) % 2 == 1


def inter_flip(rot: int) -> bool:
    return (rot // 4) % 2 == 1


def intra_partner(rot: int, div: int) -> int:
    return INTRA_ROT_8[rot][div]


def inter_partner(rot: int, afc_div: int) -> int:
    return INTER_ROT_8[rot][afc_div]


def seventeenth_target(rot: int, afc_div: int) -> int:
    """NFC division for the cross-conference same-place game (never the rotation partner)."""
    return (INTER_ROT_8[rot][afc_div] + 2) % 4


def extra_divisions(rot: int, div: int) -> List[int]:
    """The two same-conference divisions not met through the intra rotation."""
    partner = intra_partner(rot, div)
    return sorted(d for d in range(4) if d not in (div, partner))


def row_hosts(i: int, j: int, flip: bool) -> bool:
    """Host rule for a division-vs-division grid cell."""
    return HOST_GRID_CANON[i][j] != flip
