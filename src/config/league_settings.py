"""
League Settings

Per-league configuration: starting year, draft-pick window, RNG seed and
season-flow toggles, plus the nested scheduler configuration.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import json

from constants.league_constants import YEARS_OF_PICKS
from scheduling.config import ScheduleConfig


@dataclass
class LeagueSettings:
    """Complete configuration for one league instance"""

    start_year: int = 2025
    years_of_picks: int = YEARS_OF_PICKS
    random_seed: Optional[int] = None

    # Season flow
    auto_start_playoffs: bool = True   # simulate_week past the last week starts the playoffs
    run_offseason: bool = True         # Super Bowl completion runs the offseason
    free_agent_pool: bool = True       # Released/expired players enter league.free_agents

    schedule: ScheduleConfig = field(default_factory=ScheduleConfig)

    def validate(self) -> Tuple[bool, List[str]]:
        """Validate entire configuration"""
        errors = []

        if self.start_year < 1920 or self.start_year > 2200:
            errors.append(f"Invalid start year: {self.start_year}")

        if self.years_of_picks < 1:
            errors.append(f"Need at least one year of picks, got {self.years_of_picks}")

        schedule_valid, schedule_errors = self.schedule.validate()
        if not schedule_valid:
            errors.extend(schedule_errors)

        return len(errors) == 0, errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            'start_year': self.start_year,
            'years_of_picks': self.years_of_picks,
            'random_seed': self.random_seed,
            'auto_start_playoffs': self.auto_start_playoffs,
            'run_offseason': self.run_offseason,
            'free_agent_pool': self.free_agent_pool,
            'schedule': self.schedule.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LeagueSettings':
        settings = cls(
            start_year=data.get('start_year', 2025),
            years_of_picks=data.get('years_of_picks', YEARS_OF_PICKS),
            random_seed=data.get('random_seed'),
            auto_start_playoffs=data.get('auto_start_playoffs', True),
            run_offseason=data.get('run_offseason', True),
            free_agent_pool=data.get('free_agent_pool', True),
        )
        if 'schedule' in data:
            settings.schedule = ScheduleConfig.from_dict(data['schedule'])
        return settings

    def to_json(self, filepath: str):
        """Save configuration to JSON file"""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_json(cls, filepath: str) -> 'LeagueSettings':
        """Load configuration from JSON file"""
        with open(filepath, 'r') as f:
            return cls.from_dict(json.load(f))

    @classmethod
    def default(cls) -> 'LeagueSettings':
        """Default settings: 2025 start, rotation anchored at 2025"""
        return cls(start_year=2025, schedule=ScheduleConfig(base_year=2025))
