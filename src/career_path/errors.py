"""
Exception hierarchy for the career path generator.

Only ``CareerPathError`` subclasses cross the boundary into the UI; the
messages they carry are safe to show to the user as-is.
"""

from __future__ import annotations


class CareerPathError(Exception):
    """Base class for all errors raised by the career_path package."""


class InputValidationError(CareerPathError):
    """The submitted goal/level was rejected before any generator call."""

    def __init__(self, message: str, code: str = "") -> None:
        super().__init__(message)
        self.code = code


class GenerationError(CareerPathError):
    """The learning path could not be produced by the generation service."""

    GENERIC          = "could not generate the learning path, try again"
    UNEXPECTED_SHAPE = "unexpected response shape"

    def __init__(self, message: str = GENERIC) -> None:
        super().__init__(message)


class ConfigurationError(CareerPathError):
    """Live mode was required but no usable credential is configured."""
