"""
Data model for parsed workout text.

Classes:
    ParsedSet: One set's load and repetition count
    ParsedExercise: One exercise line turned into structured sets
    ParsedLine: Outcome of parsing a single line of workout text

All three are frozen dataclasses built fresh per parse call and never mutated
afterwards, so they can be shared freely between threads.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class ParsedSet:
    """
    A single performed set.

    Attributes:
        weight: Load for the set, None for a bodyweight set
        reps: Repetition count, always positive
    """
    weight: Optional[float]
    reps: int

    def __post_init__(self):
        if self.reps <= 0:
            raise ValueError(f"reps must be positive, got {self.reps}")

    @property
    def volume(self) -> float:
        """Weight moved in this set (0 for bodyweight sets)."""
        if self.weight is None:
            return 0.0
        return self.weight * self.reps

    def to_dict(self) -> Dict[str, Any]:
        return {'weight': self.weight, 'reps': self.reps}


@dataclass(frozen=True)
class ParsedExercise:
    """
    Structured result for one exercise line.

    Attributes:
        name: Spelling-corrected, title-cased exercise name
        weight: Primary weight used for summaries, None for bodyweight work
        is_bodyweight: True exactly when ``weight`` is None
        sets: Rep count of every set, in order
        detailed_sets: Per-set weight/reps, only present when the line gave
            a weight per set; it is the source of truth for per-set weight
        notes: Free-text note that followed the ``....`` marker
        id: Unique identifier, not part of equality

    Raises:
        ValueError: If the invariants between the fields do not hold
    """
    name: str
    weight: Optional[float]
    is_bodyweight: bool
    sets: Tuple[int, ...]
    detailed_sets: Optional[Tuple[ParsedSet, ...]] = None
    notes: Optional[str] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4, compare=False)

    def __post_init__(self):
        # Accept lists from callers but store tuples
        object.__setattr__(self, 'sets', tuple(self.sets))
        if self.detailed_sets is not None:
            object.__setattr__(self, 'detailed_sets', tuple(self.detailed_sets))

        if not self.sets:
            raise ValueError("an exercise needs at least one set")
        if self.is_bodyweight != (self.weight is None):
            raise ValueError("is_bodyweight must be True exactly when weight is None")
        if self.detailed_sets is not None and len(self.detailed_sets) != len(self.sets):
            raise ValueError("detailed_sets and sets must have the same length")

    @property
    def set_weights(self) -> Tuple[Optional[float], ...]:
        """Weight of every set, taken from ``detailed_sets`` when present."""
        if self.detailed_sets is not None:
            return tuple(s.weight for s in self.detailed_sets)
        return tuple(self.weight for _ in self.sets)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exercise to dictionary format."""
        return {
            'id': str(self.id),
            'name': self.name,
            'weight': self.weight,
            'is_bodyweight': self.is_bodyweight,
            'sets': list(self.sets),
            'detailed_sets': (
                [s.to_dict() for s in self.detailed_sets]
                if self.detailed_sets is not None else None
            ),
            'notes': self.notes,
        }


@dataclass(frozen=True)
class ParsedLine:
    """
    Outcome of parsing one line.

    Exactly one of these holds: ``exercise`` is set, ``is_comment`` is True,
    or neither (a blank or unparseable line).
    """
    original_text: str
    exercise: Optional[ParsedExercise] = None
    is_comment: bool = False

    def __post_init__(self):
        if self.exercise is not None and self.is_comment:
            raise ValueError("a line cannot be both an exercise and a comment")

    @property
    def is_blank(self) -> bool:
        return not self.original_text.strip()

    @property
    def is_unparseable(self) -> bool:
        """True for non-blank lines that are neither an exercise nor a comment."""
        return self.exercise is None and not self.is_comment and not self.is_blank

    def to_dict(self) -> Dict[str, Any]:
        return {
            'original_text': self.original_text,
            'exercise': self.exercise.to_dict() if self.exercise else None,
            'is_comment': self.is_comment,
            'is_unparseable': self.is_unparseable,
        }
