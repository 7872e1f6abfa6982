"""
Money Helpers

All salary figures are carried in millions of dollars with $0.1M resolution.
Values are rounded after every arithmetic step, half-up, so results match
across platforms regardless of banker's rounding.
"""

import math
from typing import Union

Number = Union[int, float]


def round_money(value: Number) -> float:
    """
    Round a money value to one decimal place, halves rounded up.

    Examples:
        >>> round_money(2.25)
        2.3
        >>> round_money(-1.25)
        -1.2
    """
    return math.floor(value * 10 + 0.5) / 10


def format_money(value: Number) -> str:
    """Format a money value for messages, e.g. ``$4.5M``."""
    return f"${round_money(value):.1f}M"
