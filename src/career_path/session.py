"""
session.py – Form submission state for the learning path page
==============================================================
PathSession holds everything the page renders between Streamlit reruns:

  Idle ──submit()──▶ Submitting ──▶ Success   (path stored)
                               └──▶ Failed    (message stored)

Success and Failed are both re-enterable through another ``submit()``.
The object lives in ``st.session_state`` and has no Streamlit dependency,
so the state machine can be exercised directly from tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from career_path.errors import GenerationError, InputValidationError
from career_path.guardrails import GuardrailsPipeline, GuardrailResult, GuardrailViolation
from career_path.models import ExperienceLevel, LearningStep
from career_path.path_generator import PathGenerator

logger = logging.getLogger(__name__)

DEFAULT_GOAL = "Frontend Web Developer"


class SubmissionState(str, Enum):
    IDLE       = "idle"
    SUBMITTING = "submitting"
    SUCCESS    = "success"
    FAILED     = "failed"


@dataclass
class PathSession:
    goal:   str             = DEFAULT_GOAL
    level:  ExperienceLevel = ExperienceLevel.BEGINNER
    state:  SubmissionState = SubmissionState.IDLE
    path:   Optional[list[LearningStep]] = None
    error:  Optional[str]   = None
    input_check:  GuardrailResult = field(default_factory=GuardrailResult)
    output_check: GuardrailResult = field(default_factory=GuardrailResult)

    @property
    def is_submitting(self) -> bool:
        return self.state == SubmissionState.SUBMITTING

    @property
    def can_submit(self) -> bool:
        return not self.is_submitting

    @property
    def warnings(self) -> list[GuardrailViolation]:
        return self.input_check.warnings + self.output_check.warnings

    def begin(self, goal: str, level: ExperienceLevel) -> bool:
        """
        Enter Submitting with fresh inputs.  Returns False (state → Failed)
        when the input is rejected; the generator must not be called then.
        """
        self.goal  = goal
        self.level = level
        guardrails = GuardrailsPipeline()
        try:
            guardrails.validate_input(goal, level)
        except InputValidationError as exc:
            self.state = SubmissionState.FAILED
            self.path  = None
            self.error = str(exc)
            return False

        self.state        = SubmissionState.SUBMITTING
        self.error        = None
        self.path         = None
        self.input_check  = guardrails.check_input(goal, level)
        self.output_check = GuardrailResult()
        return True

    def run(self, generator: PathGenerator) -> None:
        """Call the generator for the current inputs and settle the state."""
        try:
            path = generator.generate(self.goal.strip(), ExperienceLevel(self.level))
        except GenerationError as exc:
            self._fail(str(exc))
            return
        except Exception:
            logger.exception("Unexpected error while generating a learning path")
            self._fail(GenerationError.GENERIC)
            return

        self.path         = path
        self.output_check = GuardrailsPipeline().check_path(path)
        self.state        = SubmissionState.SUCCESS

    def submit(self, generator: PathGenerator, goal: str, level: ExperienceLevel) -> SubmissionState:
        """Validate, generate and store the outcome; returns the final state."""
        if not self.can_submit:
            logger.info("Submission ignored: a request is already in flight")
            return self.state
        if self.begin(goal, level):
            self.run(generator)
        return self.state

    def _fail(self, message: str) -> None:
        self.path  = None
        self.error = message
        self.state = SubmissionState.FAILED
