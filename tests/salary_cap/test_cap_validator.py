"""
Unit Tests for CapValidator

Tests signing validation (cap room, positional depth limit) and compliance.
"""


class TestValidateSigning:

    def test_signing_within_cap(self, cap_validator, empty_team, sample_veteran):
        result = cap_validator.validate_signing(empty_team, sample_veteran)
        assert result.success
        assert result.cap_hit == 12.0
        assert result.message == f"Can sign {sample_veteran.name} for $12.0M cap hit"

    def test_signing_over_cap(self, cap_validator, empty_team, sample_veteran):
        empty_team.cap_used = 215.0
        result = cap_validator.validate_signing(empty_team, sample_veteran)
        # 215.0 + 12.0 - 220.0
        assert not result.success
        assert result.message == "Signing would exceed salary cap by $7.0M"

    def test_signing_exactly_at_cap_allowed(self, cap_validator, empty_team, sample_veteran):
        empty_team.cap_used = 208.0
        assert cap_validator.validate_signing(empty_team, sample_veteran).success

    def test_depth_limit(self, cap_validator, empty_team, make_test_player):
        # K target 1 -> limit 1.5
        empty_team.roster = [make_test_player(pos='K'), make_test_player(pos='K')]
        result = cap_validator.validate_signing(empty_team, make_test_player(pos='K'))
        assert not result.success
        assert result.message.startswith("Too many players at K")

    def test_depth_below_limit(self, cap_validator, empty_team, make_test_player):
        empty_team.roster = [make_test_player(pos='K')]
        assert cap_validator.validate_signing(empty_team, make_test_player(pos='K')).success

    def test_missing_arguments(self, cap_validator, empty_team):
        assert not cap_validator.validate_signing(empty_team, None).success
        assert not cap_validator.validate_signing(None, None).success


class TestCompliance:

    def test_under_cap(self, cap_validator, empty_team):
        empty_team.cap_used = 200.0
        empty_team.cap_room = 20.0
        compliant, message = cap_validator.check_cap_compliance(empty_team)
        assert compliant
        assert message == "Under cap by $20.0M"

    def test_over_cap(self, cap_validator, empty_team):
        empty_team.cap_used = 222.5
        compliant, message = cap_validator.check_cap_compliance(empty_team)
        assert not compliant
        assert message == "Over cap by $2.5M"

    def test_non_compliant_teams(self, cap_validator, league):
        league.teams[3].cap_used = league.teams[3].cap_total + 1.0
        assert 3 in cap_validator.get_non_compliant_teams(league)
