"""
Tests for data models: ExperienceLevel, StepType, LearningStep.
"""
import pytest
from pydantic import ValidationError

from career_path.models import ExperienceLevel, LearningStep, StepType
from factories import make_step_dict


class TestExperienceLevel:
    def test_closed_set_of_three(self):
        assert [lvl.value for lvl in ExperienceLevel] == ["Beginner", "Intermediate", "Advanced"]

    def test_lookup_by_value(self):
        assert ExperienceLevel("Advanced") is ExperienceLevel.ADVANCED


class TestLearningStep:
    def test_basic_construction(self):
        s = LearningStep(**make_step_dict(1))
        assert s.step == 1
        assert s.type == StepType.COURSE
        assert s.is_course and not s.is_project

    @pytest.mark.parametrize("raw_type", ["project", "PROJECT", " Project "])
    def test_type_is_case_insensitive(self, raw_type):
        s = LearningStep(**make_step_dict(2, raw_type))
        assert s.type == StepType.PROJECT

    @pytest.mark.parametrize("raw_type, expected", [
        ("Hands-on Project", StepType.PROJECT),
        ("Capstone project", StepType.PROJECT),
        ("Online course", StepType.COURSE),
    ])
    def test_type_variants_normalised(self, raw_type, expected):
        assert LearningStep(**make_step_dict(2, raw_type)).type == expected

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            LearningStep(**make_step_dict(1, "Workshop"))

    def test_step_must_be_positive(self):
        with pytest.raises(ValidationError):
            LearningStep(**make_step_dict(0))

    def test_missing_field_rejected(self):
        data = make_step_dict(1)
        del data["duration"]
        with pytest.raises(ValidationError):
            LearningStep(**data)

    def test_caption(self):
        s = LearningStep(**make_step_dict(3, "Project", duration="2 weeks"))
        assert s.caption == "Project • 2 weeks"
