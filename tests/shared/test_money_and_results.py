"""
Tests for money rounding, game result records and the base exception.
"""

from shared.exceptions import SimulationException, ExceptionSeverity, RecoveryStrategy
from shared.game_result import GameResult, ByeResult
from shared.money import round_money, format_money


class TestMoney:

    def test_half_rounds_up(self):
        assert round_money(2.25) == 2.3
        assert round_money(2.24) == 2.2
        assert round_money(-1.25) == -1.2

    def test_format(self):
        assert format_money(4.45) == "$4.5M"
        assert format_money(10) == "$10.0M"


class TestGameResult:

    def test_winner_and_loser(self):
        result = GameResult(home=3, away=9, score_home=13, score_away=20, week=4)

        assert result.winner == 9
        assert result.loser == 3
        assert not result.is_tie
        assert result.involves(3)
        assert not result.involves(4)

    def test_tie(self):
        result = GameResult(home=3, away=9, score_home=20, score_away=20)
        assert result.is_tie
        assert result.winner is None
        assert result.loser is None

    def test_to_dict(self):
        assert GameResult(1, 2, 7, 3, week=2).to_dict() == {
            'home': 1, 'away': 2, 'score_home': 7, 'score_away': 3, 'week': 2
        }
        assert GameResult(1, 2, 7, 3, round_name='super_bowl').to_dict()['round'] == 'super_bowl'
        assert ByeResult(bye=5, week=9).to_dict() == {'bye': 5, 'week': 9}


class TestSimulationException:

    def test_message_includes_code_and_context(self):
        error = SimulationException(
            "Something broke",
            error_code="SIM_123",
            severity=ExceptionSeverity.WARNING,
            recovery_strategy=RecoveryStrategy.SKIP,
            context_dict={'team_id': 4}
        )

        text = str(error)
        assert "[SIM_123] Something broke" in text
        assert "team_id: 4" in text
        assert error.to_dict()['recovery_strategy'] == "skip"

    def test_wraps_original(self):
        error = SimulationException("Wrapped", original_exception=KeyError("x"))
        assert "Original Error: KeyError" in str(error)
        assert error.to_dict()['original_error'] == "'x'"
