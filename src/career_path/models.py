"""
Data models for the Career Path Generator.

A LearningPath is a plain ``list[LearningStep]`` ordered by ``step``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, TypeAdapter, field_validator


# ─── Enumerations ────────────────────────────────────────────────────────────

class ExperienceLevel(str, Enum):
    """Self-reported experience of the learner; used verbatim in the prompt."""
    BEGINNER     = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED     = "Advanced"


class StepType(str, Enum):
    """Kind of activity a step represents."""
    COURSE  = "Course"   # theory
    PROJECT = "Project"  # hands-on practice


# ─── Path models ─────────────────────────────────────────────────────────────

class LearningStep(BaseModel):
    """One unit of a learning path."""
    step:        int      = Field(ge=1, description="1-based position in the path")
    title:       str      = Field(description="Concise course or project name")
    type:        StepType
    description: str      = Field(description="One-sentence summary")
    duration:    str      = Field(description='Free-form estimate, e.g. "2 weeks"')

    @field_validator("type", mode="before")
    @classmethod
    def _normalise_type(cls, value):
        # "Hands-on Project", "online course" → Project / Course
        if isinstance(value, str):
            lowered = value.strip().lower()
            for kind in (StepType.PROJECT, StepType.COURSE):
                if kind.value.lower() in lowered:
                    return kind
            return value.strip().capitalize()
        return value

    # ── Derived helpers ──────────────────────────────────────────────────────

    @property
    def is_course(self) -> bool:
        return self.type == StepType.COURSE

    @property
    def is_project(self) -> bool:
        return self.type == StepType.PROJECT

    @property
    def caption(self) -> str:
        return f"{self.type.value} • {self.duration}"


LearningPath = list[LearningStep]

LEARNING_PATH_ADAPTER: TypeAdapter[list[LearningStep]] = TypeAdapter(list[LearningStep])
