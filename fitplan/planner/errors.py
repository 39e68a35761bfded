"""Planner error types."""

from __future__ import annotations


class FitnessError(Exception):
    """Base class for recoverable planner failures."""


class InvalidMeasurement(FitnessError, ValueError):
    """A biometric value cannot be used for the requested computation."""


class SessionLogError(FitnessError, OSError):
    """The session log file could not be opened for append."""
