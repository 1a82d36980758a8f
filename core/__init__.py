"""Core infrastructure shared by the parser front ends."""
from __future__ import annotations

from .exceptions import (
    WorkoutLogException,
    ParsingError,
    TextImportError,
    StorageError,
    ConfigurationError,
)
from .result import Result, Success, Failure

__all__ = [
    "WorkoutLogException",
    "ParsingError",
    "TextImportError",
    "StorageError",
    "ConfigurationError",
    "Result",
    "Success",
    "Failure",
]
