"""
guardrails.py – Input and output checks around the path generator
==================================================================
Wraps the single generator call with validation before and sanity
checks after.

Guardrail levels
----------------
BLOCK   – Hard-stop: the generator is not called.
WARN    – Soft-stop: the path is shown with a visible warning.
INFO    – Advisory only.

Guards implemented
------------------
Input guards (before PathGenerator.generate):
  G-01  Goal must not be empty or whitespace-only
  G-02  Goal length ≤ MAX_GOAL_LENGTH characters (WARN)
  G-03  Level is a recognised ExperienceLevel

Output guards (after PathGenerator.generate):
  G-04  Path has between MIN_STEPS and MAX_STEPS steps
  G-05  Step numbers form the sequence 1..N
  G-06  No profanity / harmful keywords in step free text   [heuristic]
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from career_path.errors import InputValidationError
from career_path.models import ExperienceLevel, LearningStep

logger = logging.getLogger(__name__)


# ─── Enums & data models ─────────────────────────────────────────────────────

class GuardrailLevel(str, Enum):
    BLOCK = "BLOCK"
    WARN  = "WARN"
    INFO  = "INFO"


@dataclass
class GuardrailViolation:
    code:    str
    level:   GuardrailLevel
    message: str
    field:   str = ""   # which field triggered the violation


@dataclass
class GuardrailResult:
    violations: list[GuardrailViolation] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.blocked

    @property
    def blocked(self) -> bool:
        return any(v.level == GuardrailLevel.BLOCK for v in self.violations)

    @property
    def warnings(self) -> list[GuardrailViolation]:
        return [v for v in self.violations if v.level == GuardrailLevel.WARN]

    def first_block(self) -> GuardrailViolation | None:
        return next((v for v in self.violations if v.level == GuardrailLevel.BLOCK), None)

    def summary(self) -> str:
        if not self.violations:
            return "✅ All guardrails passed."
        icons = {GuardrailLevel.BLOCK: "🚫", GuardrailLevel.WARN: "⚠️", GuardrailLevel.INFO: "ℹ️"}
        return "\n".join(f"{icons[v.level]} [{v.code}] {v.message}" for v in self.violations)


# ─── Constants ────────────────────────────────────────────────────────────────

EMPTY_GOAL_MESSAGE = "Please enter a learning goal."
MAX_GOAL_LENGTH    = 200
MIN_STEPS          = 5
MAX_STEPS          = 8

_HARMFUL_PATTERN = re.compile(
    r"\b(fuck|shit|bitch|cunt|asshole|bastard"
    r"|kill\s+myself|suicide|self.harm"
    r"|bomb|terrorist|explosive"
    r"|malware|ransomware|phishing)\b",
    re.IGNORECASE,
)


# ─── Guardrail checks ─────────────────────────────────────────────────────────

class InputGuardrails:
    """G-01 – G-03: Validates the form input before the generator is called."""

    def check(self, goal: str, level) -> GuardrailResult:
        violations: list[GuardrailViolation] = []

        # G-01 Non-empty goal
        if not (goal or "").strip():
            violations.append(GuardrailViolation(
                code="G-01", level=GuardrailLevel.BLOCK,
                field="goal",
                message=EMPTY_GOAL_MESSAGE,
            ))
        # G-02 Goal length
        elif len(goal.strip()) > MAX_GOAL_LENGTH:
            violations.append(GuardrailViolation(
                code="G-02", level=GuardrailLevel.WARN,
                field="goal",
                message=f"Goals longer than {MAX_GOAL_LENGTH} characters may produce a less focused path.",
            ))

        # G-03 Recognised level
        try:
            ExperienceLevel(level)
        except ValueError:
            violations.append(GuardrailViolation(
                code="G-03", level=GuardrailLevel.BLOCK,
                field="level",
                message=f"Unknown experience level '{level}'.",
            ))

        return GuardrailResult(violations=violations)

    def validate(self, goal: str, level) -> None:
        """Raise InputValidationError with the first BLOCK message, if any."""
        blocking = self.check(goal, level).first_block()
        if blocking is not None:
            logger.info("Input rejected [%s]: %s", blocking.code, blocking.message)
            raise InputValidationError(blocking.message, code=blocking.code)


class OutputGuardrails:
    """G-04 – G-06: Sanity checks on a generated path. Never blocks."""

    def check(self, path: list[LearningStep]) -> GuardrailResult:
        violations: list[GuardrailViolation] = []

        # G-04 Step count
        if not MIN_STEPS <= len(path) <= MAX_STEPS:
            violations.append(GuardrailViolation(
                code="G-04", level=GuardrailLevel.WARN,
                field="steps",
                message=f"Path has {len(path)} steps; {MIN_STEPS}–{MAX_STEPS} were requested.",
            ))

        # G-05 Sequential numbering
        numbers = [s.step for s in path]
        if numbers != list(range(1, len(path) + 1)):
            violations.append(GuardrailViolation(
                code="G-05", level=GuardrailLevel.WARN,
                field="step",
                message="Step numbers are not a gap-free 1..N sequence.",
            ))

        # G-06 Harmful content
        for s in path:
            text = f"{s.title} {s.description}"
            if _HARMFUL_PATTERN.search(text):
                violations.append(GuardrailViolation(
                    code="G-06", level=GuardrailLevel.WARN,
                    field=f"LearningStep[{s.step}]",
                    message=f"Step {s.step} contains potentially harmful wording.",
                ))

        for v in violations:
            logger.warning("Output guardrail [%s]: %s", v.code, v.message)
        return GuardrailResult(violations=violations)


# ─── Convenience façade ───────────────────────────────────────────────────────

class GuardrailsPipeline:
    """
    Single entry-point for both guardrail stages.

    Usage::

        gp = GuardrailsPipeline()
        gp.validate_input(goal, level)      # raises InputValidationError
        result = gp.check_path(path)        # warnings only
    """

    def __init__(self):
        self.input_guard  = InputGuardrails()
        self.output_guard = OutputGuardrails()

    def check_input(self, goal: str, level) -> GuardrailResult:
        return self.input_guard.check(goal, level)

    def validate_input(self, goal: str, level) -> None:
        self.input_guard.validate(goal, level)

    def check_path(self, path: list[LearningStep]) -> GuardrailResult:
        return self.output_guard.check(path)
