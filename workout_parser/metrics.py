"""
Derived workout metrics.

Volume, set and rep counts for parsed exercises, plus the flat per-set
records a storage layer persists. Volume is the sum of weight x reps over
sets that carry a weight; bodyweight sets add nothing.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from .models import ParsedExercise


@dataclass(frozen=True)
class WorkoutSummary:
    """Aggregate numbers for a parsed workout."""
    exercise_count: int = 0
    set_count: int = 0
    total_reps: int = 0
    total_volume: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'exercise_count': self.exercise_count,
            'set_count': self.set_count,
            'total_reps': self.total_reps,
            'total_volume': self.total_volume,
        }


@dataclass(frozen=True)
class SetRecord:
    """
    One set as handed to storage.

    Attributes:
        exercise_name: Canonical exercise name
        set_number: 1-based position, per exercise or across the workout
        weight: Load for this set, None for bodyweight
        weight_unit: Unit label stored with the weight
        reps: Repetition count
        is_bodyweight: Copied from the exercise
        notes: Exercise note, if any
    """
    exercise_name: str
    set_number: int
    weight: Optional[float]
    weight_unit: str
    reps: int
    is_bodyweight: bool
    notes: Optional[str] = None

    @property
    def volume(self) -> float:
        return 0.0 if self.weight is None else self.weight * self.reps

    def to_dict(self) -> Dict[str, Any]:
        return {
            'exercise_name': self.exercise_name,
            'set_number': self.set_number,
            'weight': self.weight,
            'weight_unit': self.weight_unit,
            'reps': self.reps,
            'is_bodyweight': self.is_bodyweight,
            'notes': self.notes,
        }


def set_count(exercise: ParsedExercise) -> int:
    return len(exercise.sets)


def total_reps(exercise: ParsedExercise) -> int:
    return sum(exercise.sets)


def exercise_volume(exercise: ParsedExercise) -> float:
    """Sum of weight x reps over the exercise's weighted sets."""
    return sum((
        weight * reps
        for weight, reps in zip(exercise.set_weights, exercise.sets)
        if weight is not None
    ), 0.0)


def summarize(exercises: Iterable[ParsedExercise]) -> WorkoutSummary:
    """Aggregate exercise, set, rep and volume totals."""
    exercises = list(exercises)
    return WorkoutSummary(
        exercise_count=len(exercises),
        set_count=sum(set_count(e) for e in exercises),
        total_reps=sum(total_reps(e) for e in exercises),
        total_volume=sum((exercise_volume(e) for e in exercises), 0.0),
    )


def format_volume(volume: float) -> str:
    """
    Short display form of a volume.

    Examples:
        - 0 -> "0"
        - 840 -> "840"
        - 12500 -> "12.5k"
    """
    if volume == 0:
        return "0"
    if volume >= 1000:
        return f"{volume / 1000:.1f}k"
    return str(int(volume))


def build_set_records(
    exercises: Iterable[ParsedExercise],
    restart_numbering: bool = False,
    weight_unit: str = "kg",
) -> List[SetRecord]:
    """
    Flatten exercises into one record per set.

    Args:
        exercises: Parsed exercises in workout order
        restart_numbering: Number sets from 1 within each exercise instead of
            counting across the whole workout
        weight_unit: Unit label stored on every record

    Returns:
        List[SetRecord]: Records in workout order; per-set weights come from
        ``detailed_sets`` when the exercise has them
    """
    records: List[SetRecord] = []
    number = 0
    for exercise in exercises:
        if restart_numbering:
            number = 0
        for weight, reps in zip(exercise.set_weights, exercise.sets):
            number += 1
            records.append(SetRecord(
                exercise_name=exercise.name,
                set_number=number,
                weight=weight,
                weight_unit=weight_unit,
                reps=reps,
                is_bodyweight=exercise.is_bodyweight,
                notes=exercise.notes,
            ))
    return records
