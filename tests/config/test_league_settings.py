"""
Tests for LeagueSettings validation and JSON persistence.
"""

from config.league_settings import LeagueSettings
from scheduling.config import ScheduleConfig, PlacementStrategy


class TestValidation:

    def test_default_is_valid(self):
        settings = LeagueSettings.default()
        is_valid, errors = settings.validate()

        assert is_valid
        assert errors == []
        assert settings.schedule.base_year == settings.start_year

    def test_bad_values_reported(self):
        settings = LeagueSettings(start_year=1800, years_of_picks=0)
        is_valid, errors = settings.validate()

        assert not is_valid
        assert len(errors) == 2

    def test_schedule_errors_bubble_up(self):
        settings = LeagueSettings(schedule=ScheduleConfig(games_per_team=16))
        is_valid, errors = settings.validate()

        assert not is_valid
        assert "Teams play 17 games, got 16" in errors


class TestPersistence:

    def test_json_round_trip(self, tmp_path):
        settings = LeagueSettings(
            start_year=2030,
            years_of_picks=4,
            random_seed=17,
            auto_start_playoffs=False,
            run_offseason=False,
            schedule=ScheduleConfig(base_year=2030, strategy=PlacementStrategy.GREEDY)
        )
        path = tmp_path / "league.json"

        settings.to_json(str(path))
        loaded = LeagueSettings.from_json(str(path))

        assert loaded == settings

    def test_missing_keys_use_defaults(self):
        settings = LeagueSettings.from_dict({'start_year': 2027})

        assert settings.start_year == 2027
        assert settings.years_of_picks == 3
        assert settings.random_seed is None
        assert settings.auto_start_playoffs
        assert settings.schedule == ScheduleConfig()
