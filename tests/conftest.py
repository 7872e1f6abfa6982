"""
Pytest configuration for test discovery and imports.

Provides fixtures for testing including:
- Generated leagues (deterministic seed)
- Salary cap services
- Player and team builders
"""

import sys
from pathlib import Path
import pytest


# Determine paths
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
tests_path = project_root / "tests"


def pytest_configure(config):
    """Configure pytest - runs very early in startup.

    src/ MUST come before tests/ so test directories named after packages
    (tests/salary_cap, tests/season, ...) never shadow the real packages.
    """
    seen = set()
    new_path = []
    for p in sys.path:
        if p not in seen and p != str(tests_path):
            seen.add(p)
            new_path.append(p)

    if str(src_path) in new_path:
        new_path.remove(str(src_path))
    new_path.insert(0, str(src_path))

    sys.path[:] = new_path


# ============================================================================
# LEAGUE FIXTURES
# ============================================================================

@pytest.fixture
def league():
    """Fresh 32-team league with a generated schedule (seed 42)."""
    from league.league_factory import make_league
    return make_league(seed=42)


@pytest.fixture
def settings():
    from config.league_settings import LeagueSettings
    return LeagueSettings.default()


# ============================================================================
# SALARY CAP FIXTURES
# ============================================================================

@pytest.fixture
def cap_calculator():
    from salary_cap.cap_calculator import CapCalculator
    return CapCalculator()


@pytest.fixture
def cap_ledger(cap_calculator):
    from salary_cap.cap_ledger import CapLedger
    return CapLedger(cap_calculator)


@pytest.fixture
def contract_manager(cap_ledger):
    from salary_cap.contract_manager import ContractManager
    return ContractManager(cap_ledger)


@pytest.fixture
def tag_manager(cap_ledger):
    from salary_cap.tag_manager import TagManager
    return TagManager(cap_ledger)


@pytest.fixture
def cap_validator(cap_calculator):
    from salary_cap.cap_validator import CapValidator
    return CapValidator(cap_calculator)


# ============================================================================
# PLAYER / TEAM BUILDERS
# ============================================================================

@pytest.fixture
def make_test_player():
    """
    Factory for players with explicit contracts.

    Usage:
        player = make_test_player(years=2, years_total=4, base_annual=10.0)
    """
    from league.models import Player

    counter = {'next_id': 10_000}

    def _make(**overrides):
        counter['next_id'] += 1
        fields = {
            'id': counter['next_id'],
            'name': f"Test Player {counter['next_id']}",
            'pos': 'QB',
            'age': 26,
            'ovr': 75,
            'years': 3,
            'years_total': 4,
            'base_annual': 10.0,
            'signing_bonus': 8.0,
            'guaranteed_pct': 0.5,
        }
        fields.update(overrides)
        return Player(**fields)

    return _make


@pytest.fixture
def empty_team():
    """AFC East team with no roster and a fresh cap."""
    from league.models import Team
    return Team(id=0, abbr="TST", name="Test Team", conf=0, div=0)


@pytest.fixture
def sample_veteran(make_test_player):
    """
    Canonical release example:
    4-year deal, $8.0M bonus ($2.0M/yr), $10.0M base, 50% guaranteed, 2 years left.
    """
    return make_test_player(years=2, years_total=4, base_annual=10.0, signing_bonus=8.0, guaranteed_pct=0.5)


@pytest.fixture
def cap_league(empty_team, settings):
    """One-team league with a free-agent pool, for focused cap tests."""
    from league.models import League
    return League(teams=[empty_team], settings=settings, year=2025, free_agents=[])
