"""
path_generator.py – Learning Path Generator (mock + live)
==========================================================
Turns a (goal, experience level) pair into an ordered LearningPath.

Two interchangeable strategies implement the same ``generate`` contract:

MockPathGenerator
    No credential configured.  Sleeps for a fixed delay to simulate the
    network round-trip and returns the canned 5-step web-frontend path,
    whatever the goal or level.

LivePathGenerator
    Sends a natural-language prompt to the OpenAI chat-completions API with
    a strict JSON-schema response format, parses and validates the reply,
    and returns the steps sorted by ``step``.

``build_generator(settings)`` picks one of them once, at startup.

Failure contract
----------------
Every failure inside ``generate`` (network, service error, bad JSON, wrong
shape, invalid step) is logged with its cause and re-raised as a single
``GenerationError`` carrying the generic user-facing message.
"""

from __future__ import annotations

import json
import logging
import textwrap
import time
from typing import Any, Callable, Optional

from openai import OpenAI
from pydantic import ValidationError

from career_path.config import Settings, get_settings
from career_path.errors import ConfigurationError, GenerationError
from career_path.models import (
    LEARNING_PATH_ADAPTER,
    ExperienceLevel,
    LearningStep,
    StepType,
)

logger = logging.getLogger(__name__)


# ─── Canned mock path ────────────────────────────────────────────────────────

MOCK_LEARNING_PATH: list[LearningStep] = [
    LearningStep(
        step=1, title="HTML Fundamentals", type=StepType.COURSE,
        description="Learn the basic structure of web pages and semantic tags.",
        duration="1 week",
    ),
    LearningStep(
        step=2, title="Styling with CSS", type=StepType.COURSE,
        description="Master selectors, the box model and flexbox to design attractive sites.",
        duration="2 weeks",
    ),
    LearningStep(
        step=3, title="Project: Personal Portfolio Page", type=StepType.PROJECT,
        description="Build your first static web page to showcase your skills.",
        duration="1 week",
    ),
    LearningStep(
        step=4, title="Basic JavaScript", type=StepType.COURSE,
        description="Add interactivity with variables, functions and DOM manipulation.",
        duration="3 weeks",
    ),
    LearningStep(
        step=5, title="Project: Interactive Calculator", type=StepType.PROJECT,
        description="Apply your JavaScript knowledge to build a working calculator.",
        duration="1 week",
    ),
]


# ─── Structured output schema ────────────────────────────────────────────────
# The OpenAI json_schema response format needs an object root, so the step
# array travels under "steps".

_STEP_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "step": {
            "type": "integer",
            "description": "Sequential step number, starting at 1.",
        },
        "title": {
            "type": "string",
            "description": "Concise name of the course or project.",
        },
        "type": {
            "type": "string",
            "enum": [t.value for t in StepType],
            "description": 'Kind of activity: "Course" or "Project".',
        },
        "description": {
            "type": "string",
            "description": "One-sentence description of what will be learned or built.",
        },
        "duration": {
            "type": "string",
            "description": 'Estimated time to complete the step, e.g. "2 weeks", "30 hours".',
        },
    },
    "required": ["step", "title", "type", "description", "duration"],
    "additionalProperties": False,
}

LEARNING_PATH_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "steps": {"type": "array", "items": _STEP_SCHEMA},
    },
    "required": ["steps"],
    "additionalProperties": False,
}

RESPONSE_FORMAT: dict[str, Any] = {
    "type": "json_schema",
    "json_schema": {
        "name":   "learning_path",
        "strict": True,
        "schema": LEARNING_PATH_SCHEMA,
    },
}

_SYSTEM_PROMPT = textwrap.dedent("""
    You are an experienced career mentor for software and technology roles.
    You design learning paths that alternate theory courses with hands-on
    projects. Respond with ONLY a JSON object matching the requested schema.
""").strip()


def build_prompt(goal: str, level: ExperienceLevel) -> str:
    """Return the user instruction embedding *goal* and *level*."""
    level_value = ExperienceLevel(level).value
    return textwrap.dedent(f"""
        Based on a user's career goal of "{goal}" and their experience level
        "{level_value}", generate a step-by-step learning path. The path must be
        clear, logical and progressive.
        Include a mix of theory courses to learn concepts and practical projects
        to apply the knowledge.
        The complete path must have between 5 and 8 steps.
    """).strip()


# ─── Response parsing ────────────────────────────────────────────────────────

def parse_learning_path(text: str | None) -> list[LearningStep]:
    """
    Decode a service reply into a LearningPath sorted by ``step``.

    Accepts either a bare JSON array or an object carrying the array under
    ``steps``.  Anything else raises ``GenerationError(UNEXPECTED_SHAPE)``.
    """
    try:
        data = json.loads((text or "").strip())
    except json.JSONDecodeError as exc:
        raise GenerationError(GenerationError.UNEXPECTED_SHAPE) from exc

    if isinstance(data, dict) and "steps" in data:
        data = data["steps"]
    if not isinstance(data, list):
        raise GenerationError(GenerationError.UNEXPECTED_SHAPE)

    try:
        steps = LEARNING_PATH_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise GenerationError(GenerationError.UNEXPECTED_SHAPE) from exc

    return sorted(steps, key=lambda s: s.step)


# ─── Strategies ──────────────────────────────────────────────────────────────

MOCK_REASON_FORCED         = "FORCE_MOCK_MODE is on"
MOCK_REASON_NOT_CONFIGURED = "OPENAI_API_KEY is not configured"


class PathGenerator:
    """Common interface for both strategies."""

    mode: str = "abstract"

    def generate(self, goal: str, level: ExperienceLevel) -> list[LearningStep]:
        raise NotImplementedError


class MockPathGenerator(PathGenerator):
    """Returns the canned path after a fixed delay."""

    mode = "mock"

    def __init__(
        self,
        delay_seconds: float = 1.5,
        sleep: Callable[[float], None] = time.sleep,
        reason: str = MOCK_REASON_NOT_CONFIGURED,
    ) -> None:
        self.delay_seconds = delay_seconds
        self.reason = reason
        self._sleep = sleep

    def generate(self, goal: str, level: ExperienceLevel) -> list[LearningStep]:
        logger.info("Using mock learning path (%s)", self.reason)
        if self.delay_seconds > 0:
            self._sleep(self.delay_seconds)
        return [s.model_copy() for s in MOCK_LEARNING_PATH]


class LivePathGenerator(PathGenerator):
    """
    Calls the OpenAI chat-completions API with a strict JSON-schema format.

    The client is injected so tests (and alternative endpoints) can supply
    their own; ``from_settings`` builds the default one.
    """

    mode = "live"

    def __init__(self, client: OpenAI, model: str, temperature: float = 0.7) -> None:
        self._client     = client
        self.model       = model
        self.temperature = temperature

    @classmethod
    def from_settings(cls, settings: Settings) -> "LivePathGenerator":
        client = OpenAI(
            api_key=settings.genai.api_key,
            base_url=settings.genai.base_url or None,
            max_retries=0,
        )
        return cls(client, settings.genai.model, settings.genai.temperature)

    def _request(self, prompt: str) -> str | None:
        response = self._client.chat.completions.create(
            model=self.model,
            response_format=RESPONSE_FORMAT,
            messages=[
                {"role": "system", "content": _SYSTEM_PROMPT},
                {"role": "user",   "content": prompt},
            ],
            temperature=self.temperature,
        )
        return response.choices[0].message.content

    def generate(self, goal: str, level: ExperienceLevel) -> list[LearningStep]:
        try:
            prompt = build_prompt(goal, level)
            text   = self._request(prompt)
            path   = parse_learning_path(text)
        except Exception as exc:
            logger.exception("Learning path generation failed for level=%s", level)
            raise GenerationError(GenerationError.GENERIC) from exc

        logger.info("Generated %d-step learning path via %s", len(path), self.model)
        return path


# ─── Strategy selection ──────────────────────────────────────────────────────

def build_generator(
    settings: Optional[Settings] = None,
    client: Optional[OpenAI] = None,
) -> PathGenerator:
    """
    Choose the generator once from configuration.

    Raises:
        ConfigurationError – REQUIRE_LIVE_MODE is set but no usable key exists.
    """
    settings = settings or get_settings()

    if settings.live_mode:
        if client is not None:
            return LivePathGenerator(client, settings.genai.model, settings.genai.temperature)
        return LivePathGenerator.from_settings(settings)

    if settings.app.require_live_mode:
        raise ConfigurationError(
            "REQUIRE_LIVE_MODE is set but OPENAI_API_KEY is missing or a placeholder "
            "(or FORCE_MOCK_MODE is on)."
        )

    reason = MOCK_REASON_FORCED if settings.genai.is_configured else MOCK_REASON_NOT_CONFIGURED
    logger.warning("Serving the mock learning path: %s.", reason)
    return MockPathGenerator(delay_seconds=settings.app.mock_delay_seconds, reason=reason)
