"""Custom exception hierarchy for the application."""
from __future__ import annotations


class WorkoutLogException(Exception):
    """Base exception for all workout log errors."""
    pass


class ParsingError(WorkoutLogException):
    """Raised when workout text cannot be turned into a workout."""
    pass


class TextImportError(WorkoutLogException):
    """Raised when input text cannot be read or decoded."""
    pass


class StorageError(WorkoutLogException):
    """Raised when handing a workout to storage fails."""
    pass


class ConfigurationError(WorkoutLogException):
    """Raised when configuration is invalid or missing."""
    pass
