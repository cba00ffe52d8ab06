"""Exceptions raised by the behavioral fit engine."""

from __future__ import annotations

from typing import Any


class FitEngineError(Exception):
    """Base exception for fit engine failures."""

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class InvalidProfileError(FitEngineError):
    """Raised when a measured profile dimension is missing or out of bounds."""


class InvalidIdealRangeError(FitEngineError):
    """Raised when an ideal profile range or weight group is malformed."""


class ProfileNotFoundError(FitEngineError, LookupError):
    """Raised when a profile source has no record for the requested id."""
