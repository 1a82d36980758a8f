"""Use cases for workout logging business logic.

Implements the use case layer following Clean Architecture principles,
encapsulating business rules and orchestrating data flow between
the presentation layer and storage.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Protocol

from loguru import logger

from core.exceptions import ParsingError, StorageError, WorkoutLogException
from core.result import Success, Failure, Result
from workout_parser import WorkoutParser
from workout_parser.metrics import SetRecord, WorkoutSummary, build_set_records, summarize
from workout_parser.models import ParsedExercise, ParsedLine


@dataclass
class WorkoutPreview:
    """Everything a user needs to review before saving a workout.

    Attributes:
        lines: One outcome per input line, in order
        set_records: Flattened sets of the recognized exercises
        summary: Workout totals
    """
    lines: List[ParsedLine]
    set_records: List[SetRecord]
    summary: WorkoutSummary

    @property
    def exercises(self) -> List[ParsedExercise]:
        return [line.exercise for line in self.lines if line.exercise is not None]

    @property
    def comments(self) -> List[ParsedLine]:
        return [line for line in self.lines if line.is_comment]

    @property
    def unparseable(self) -> List[ParsedLine]:
        return [line for line in self.lines if line.is_unparseable]

    @property
    def has_errors(self) -> bool:
        return bool(self.unparseable)

    def to_dict(self, exercises_only: bool = False) -> Dict[str, Any]:
        lines = [line for line in self.lines if line.exercise is not None] if exercises_only else self.lines
        return {
            'lines': [line.to_dict() for line in lines],
            'set_records': [record.to_dict() for record in self.set_records],
            'summary': self.summary.to_dict(),
        }


@dataclass
class WorkoutRecord:
    """A workout accepted for storage.

    Attributes:
        exercises: Parsed exercises in order
        set_records: One record per set
        summary: Workout totals
        raw_text: Text the workout was parsed from
        performed_at: Workout time (defaults to current time)
        id: Unique identifier
    """
    exercises: List[ParsedExercise]
    set_records: List[SetRecord]
    summary: WorkoutSummary
    raw_text: str = ""
    performed_at: Optional[datetime] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self):
        if self.performed_at is None:
            self.performed_at = datetime.now()


class WorkoutStore(Protocol):
    """Persistence port for committed workouts."""

    def save_workout(self, record: WorkoutRecord) -> None:
        ...


class PreviewWorkoutTextUseCase:
    """Use case for previewing pasted workout text.

    Parses every line and keeps comments and unparseable lines so the
    caller can show them next to the recognized exercises.
    """

    def __init__(
        self,
        workout_parser: Optional[WorkoutParser] = None,
        weight_unit: str = "kg",
        restart_set_numbering: bool = False,
    ):
        self.workout_parser = workout_parser or WorkoutParser()
        self.weight_unit = weight_unit
        self.restart_set_numbering = restart_set_numbering

    def execute(self, text: str) -> Result[WorkoutPreview, ParsingError]:
        """Parse text into a preview.

        Args:
            text: Raw workout log

        Returns:
            Result containing WorkoutPreview on success or ParsingError on failure
        """
        try:
            lines = self.workout_parser.parse_lines(text)
            exercises = [line.exercise for line in lines if line.exercise is not None]
            preview = WorkoutPreview(
                lines=lines,
                set_records=build_set_records(
                    exercises,
                    restart_numbering=self.restart_set_numbering,
                    weight_unit=self.weight_unit,
                ),
                summary=summarize(exercises),
            )
        except Exception as e:
            logger.error(f"Failed to parse workout text: {e}")
            return Failure(ParsingError(f"Failed to parse: {e}"))

        logger.info(
            f"[preview] exercises={preview.summary.exercise_count} "
            f"sets={preview.summary.set_count} unparseable={len(preview.unparseable)}"
        )
        return Success(preview)


class CommitWorkoutUseCase:
    """Use case for saving a parsed workout.

    Sets are numbered within each exercise, matching how a single
    workout is stored.
    """

    def __init__(
        self,
        store: WorkoutStore,
        workout_parser: Optional[WorkoutParser] = None,
        weight_unit: str = "kg",
    ):
        self.store = store
        self.workout_parser = workout_parser or WorkoutParser()
        self.weight_unit = weight_unit

    def execute(
        self,
        text: str,
        performed_at: Optional[datetime] = None,
    ) -> Result[WorkoutRecord, WorkoutLogException]:
        """Parse text and hand the workout to the store.

        Args:
            text: Raw workout log
            performed_at: Workout time (now if None)

        Returns:
            Result containing the saved WorkoutRecord, ParsingError when no
            exercise was recognized, or StorageError when saving failed
        """
        exercises = self.workout_parser.parse(text)
        if not exercises:
            logger.warning("[commit] No exercises recognized; nothing saved")
            return Failure(ParsingError("No exercises recognized"))

        record = WorkoutRecord(
            exercises=exercises,
            set_records=build_set_records(exercises, restart_numbering=True, weight_unit=self.weight_unit),
            summary=summarize(exercises),
            raw_text=text,
            performed_at=performed_at,
        )

        try:
            self.store.save_workout(record)
        except Exception as e:
            logger.error(f"Failed to save workout: {e}")
            return Failure(StorageError(f"Failed to save: {e}"))

        logger.info(
            f"[commit] Saved workout {record.id} with {record.summary.exercise_count} exercises, "
            f"{record.summary.set_count} sets"
        )
        return Success(record)
