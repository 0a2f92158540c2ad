"""
Smoke tests for guardrails pipeline.
Run: python -m pytest tests/ -v
"""
import pytest

from career_path.errors import InputValidationError
from career_path.guardrails import (
    EMPTY_GOAL_MESSAGE,
    MAX_GOAL_LENGTH,
    GuardrailLevel,
    GuardrailsPipeline,
    InputGuardrails,
    OutputGuardrails,
)
from career_path.models import ExperienceLevel, LearningStep
from career_path.path_generator import MOCK_LEARNING_PATH
from factories import make_step_dict


def _path(numbers):
    return [LearningStep(**make_step_dict(n)) for n in numbers]


class TestInputGuardrails:
    def setup_method(self):
        self.guard = InputGuardrails()

    def test_valid_input_passes(self):
        result = self.guard.check("Data Engineer", ExperienceLevel.BEGINNER)
        assert result.passed
        assert result.violations == []

    @pytest.mark.parametrize("goal", ["", "   ", "\t\n", None])
    def test_g01_empty_goal_blocks(self, goal):
        result = self.guard.check(goal, ExperienceLevel.BEGINNER)
        assert result.blocked
        assert result.first_block().code == "G-01"
        assert result.first_block().message == EMPTY_GOAL_MESSAGE

    def test_g02_overlong_goal_warns(self):
        result = self.guard.check("x" * (MAX_GOAL_LENGTH + 1), ExperienceLevel.BEGINNER)
        assert result.passed
        assert [v.code for v in result.warnings] == ["G-02"]

    def test_g02_overlong_goal_does_not_raise(self):
        self.guard.validate("x" * (MAX_GOAL_LENGTH + 1), ExperienceLevel.BEGINNER)

    def test_goal_at_limit_passes(self):
        assert self.guard.check("x" * MAX_GOAL_LENGTH, ExperienceLevel.BEGINNER).passed

    def test_g03_unknown_level_blocks(self):
        result = self.guard.check("Data Engineer", "Guru")
        assert result.first_block().code == "G-03"

    def test_level_value_string_accepted(self):
        assert self.guard.check("Data Engineer", "Intermediate").passed

    def test_validate_raises_with_message(self):
        with pytest.raises(InputValidationError) as exc_info:
            self.guard.validate("  ", ExperienceLevel.BEGINNER)
        assert str(exc_info.value) == EMPTY_GOAL_MESSAGE
        assert exc_info.value.code == "G-01"


class TestOutputGuardrails:
    def setup_method(self):
        self.guard = OutputGuardrails()

    def test_mock_path_is_clean(self):
        assert self.guard.check(MOCK_LEARNING_PATH).violations == []

    @pytest.mark.parametrize("count", [3, 9])
    def test_g04_step_count_warns(self, count):
        result = self.guard.check(_path(range(1, count + 1)))
        codes = [v.code for v in result.violations]
        assert "G-04" in codes
        assert not result.blocked

    def test_g05_gap_warns(self):
        result = self.guard.check(_path([1, 2, 4, 5, 6]))
        assert [v.code for v in result.warnings] == ["G-05"]

    def test_g06_harmful_text_warns(self):
        path = _path(range(1, 6))
        path[2] = LearningStep(**make_step_dict(3, description="Write ransomware for fun."))
        result = self.guard.check(path)
        assert any(v.code == "G-06" and v.level == GuardrailLevel.WARN for v in result.violations)


class TestGuardrailsPipeline:
    def test_summary_all_passed(self):
        gp = GuardrailsPipeline()
        assert gp.check_path(MOCK_LEARNING_PATH).summary().startswith("✅")

    def test_summary_lists_violations(self):
        gp = GuardrailsPipeline()
        summary = gp.check_input("", ExperienceLevel.BEGINNER).summary()
        assert "[G-01]" in summary
