"""
Tests for ScheduleConfig and ByeWeekConfig.
"""

from scheduling.config import ScheduleConfig, ByeWeekConfig, PlacementStrategy, DEFAULT_CONFIG


class TestByeWeekConfig:

    def test_default_window(self):
        bye = ByeWeekConfig()
        assert bye.window_size == 9
        assert bye.validate()

    def test_window_must_hold_division_block(self):
        # 6 weeks cannot host six divisional rounds plus the bye
        assert not ByeWeekConfig(start_week=6, end_week=11).validate()
        assert ByeWeekConfig(start_week=6, end_week=12).validate()

    def test_window_inside_season(self):
        assert not ByeWeekConfig(start_week=0, end_week=10).validate()
        assert not ByeWeekConfig(start_week=10, end_week=19).validate()


class TestScheduleConfig:

    def test_default_is_valid(self):
        is_valid, errors = DEFAULT_CONFIG.validate()
        assert is_valid
        assert errors == []

    def test_invalid_values_reported(self):
        config = ScheduleConfig(total_weeks=17, games_per_team=16, max_placement_attempts=0)
        is_valid, errors = config.validate()

        assert not is_valid
        assert len(errors) == 3

    def test_json_round_trip(self, tmp_path):
        config = ScheduleConfig(
            base_year=2030,
            strategy=PlacementStrategy.GREEDY,
            max_placement_attempts=5,
            bye_week=ByeWeekConfig(start_week=5, end_week=13)
        )
        path = tmp_path / "schedule.json"

        config.to_json(str(path))
        loaded = ScheduleConfig.from_json(str(path))

        assert loaded == config

    def test_from_dict_defaults(self):
        config = ScheduleConfig.from_dict({})
        assert config.strategy == PlacementStrategy.ROUND_TEMPLATE
        assert config.bye_week.start_week == 6
