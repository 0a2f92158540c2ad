"""
Tests for the HTML cards the page renders (render.py).
"""
import pytest

from career_path.models import LearningStep, StepType
from career_path.path_generator import MOCK_LEARNING_PATH
from career_path.render import STEP_ICON, render_path, render_step
from factories import make_step_dict


class TestRenderStep:
    @pytest.mark.parametrize("raw_type", ["Course", "Project"])
    def test_icon_matches_type(self, raw_type):
        step = LearningStep(**make_step_dict(1, raw_type))
        other = StepType.PROJECT if step.is_course else StepType.COURSE
        card = render_step(step, is_last=True)
        assert STEP_ICON[step.type] in card
        assert STEP_ICON[other] not in card

    def test_heading_and_caption(self):
        step = LearningStep(**make_step_dict(3, "Project", title="Portfolio", duration="2 weeks"))
        card = render_step(step, is_last=False)
        assert "3. Portfolio" in card
        assert "Project • 2 weeks" in card

    def test_model_text_is_escaped(self):
        step = LearningStep(**make_step_dict(
            1,
            title="<script>alert(1)</script>",
            description="Tom & Jerry <b>bold</b>",
        ))
        card = render_step(step, is_last=True)
        assert "<script>" not in card
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in card
        assert "Tom &amp; Jerry &lt;b&gt;bold&lt;/b&gt;" in card

    def test_last_card_has_no_connector(self):
        step = LearningStep(**make_step_dict(1))
        assert "lp-connector" not in render_step(step, is_last=True)
        assert "lp-connector" in render_step(step, is_last=False)


class TestRenderPath:
    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_connector_between_each_pair(self, count):
        path = [LearningStep(**make_step_dict(n)) for n in range(1, count + 1)]
        html = render_path(path)
        assert html.count("lp-step") == count
        assert html.count("lp-connector") == count - 1

    def test_cards_in_path_order(self):
        html = render_path(MOCK_LEARNING_PATH)
        positions = [html.index(f"{s.step}. {s.title}") for s in MOCK_LEARNING_PATH]
        assert positions == sorted(positions)

    def test_empty_path_renders_nothing(self):
        assert render_path([]) == ""
