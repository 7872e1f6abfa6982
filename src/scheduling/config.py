"""
Configuration for the Season Scheduler

Placement strategy, retry count and bye-week window used by
``ScheduleGenerator``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple
from enum import Enum
import json


class PlacementStrategy(Enum):
    """How games are packed into weeks"""
    ROUND_TEMPLATE = "round_template"  # Preferred weeks from a round template, first-fit fallback
    GREEDY = "greedy"                  # Shuffle, first-fit, swap and chain repair


# Six divisional rounds plus the division's bye week
DIVISION_BLOCK_SLOTS = 7


@dataclass
class ByeWeekConfig:
    """Configuration for bye week scheduling"""
    start_week: int = 6           # Earliest bye week
    end_week: int = 14            # Latest bye week

    @property
    def window_size(self) -> int:
        return self.end_week - self.start_week + 1

    def validate(self, total_weeks: int = 18) -> bool:
        """Validate bye week configuration"""
        if self.start_week < 1 or self.end_week > total_weeks:
            return False
        if self.start_week >= self.end_week:
            return False

        # Every division needs its bye inside the window
        if self.window_size < DIVISION_BLOCK_SLOTS:
            return False

        return True


@dataclass
class ScheduleConfig:
    """Complete configuration for regular-season schedule generation"""

    base_year: int = 2025
    strategy: PlacementStrategy = PlacementStrategy.ROUND_TEMPLATE
    total_weeks: int = 18
    games_per_team: int = 17
    max_placement_attempts: int = 25

    bye_week: ByeWeekConfig = field(default_factory=ByeWeekConfig)

    def validate(self) -> Tuple[bool, List[str]]:
        """Validate entire configuration"""
        errors = []

        if self.total_weeks != 18:
            errors.append(f"Schedule uses 18 weeks, got {self.total_weeks}")

        if self.games_per_team != 17:
            errors.append(f"Teams play 17 games, got {self.games_per_team}")

        if not self.bye_week.validate(self.total_weeks):
            errors.append("Invalid bye week configuration")

        if self.max_placement_attempts < 1:
            errors.append("Need at least 1 placement attempt")

        return len(errors) == 0, errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            'base_year': self.base_year,
            'strategy': self.strategy.value,
            'total_weeks': self.total_weeks,
            'games_per_team': self.games_per_team,
            'max_placement_attempts': self.max_placement_attempts,
            'bye_week': {
                'start_week': self.bye_week.start_week,
                'end_week': self.bye_week.end_week,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ScheduleConfig':
        config = cls(
            base_year=data.get('base_year', 2025),
            strategy=PlacementStrategy(data.get('strategy', 'round_template')),
            total_weeks=data.get('total_weeks', 18),
            games_per_team=data.get('games_per_team', 17),
            max_placement_attempts=data.get('max_placement_attempts', 25),
        )

        if 'bye_week' in data:
            bye_data = data['bye_week']
            config.bye_week = ByeWeekConfig(
                start_week=bye_data.get('start_week', 6),
                end_week=bye_data.get('end_week', 14),
            )

        return config

    def to_json(self, filepath: str):
        """Save configuration to JSON file"""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_json(cls, filepath: str) -> 'ScheduleConfig':
        """Load configuration from JSON file"""
        with open(filepath, 'r') as f:
            return cls.from_dict(json.load(f))


# Global default configuration
DEFAULT_CONFIG = ScheduleConfig()
