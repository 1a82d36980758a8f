"""Unit tests for use cases."""
from datetime import datetime
from unittest.mock import Mock

from app.use_cases import (
    CommitWorkoutUseCase,
    PreviewWorkoutTextUseCase,
    WorkoutRecord,
)
from core.exceptions import ParsingError, StorageError
from workout_parser import SAMPLE_WORKOUT


class TestPreviewWorkoutTextUseCase:
    """Tests for PreviewWorkoutTextUseCase."""

    def test_successful_preview(self):
        # Arrange
        use_case = PreviewWorkoutTextUseCase()
        text = "bench 80kg 8/8/6\nfelt strong .... (good day)\nwarm up\n\nrow 10kg 13 / 34kg 12"

        # Act
        result = use_case.execute(text)

        # Assert
        assert result.is_success()
        preview = result.unwrap()
        assert len(preview.lines) == 5
        assert [e.name for e in preview.exercises] == ["Bench", "Row"]
        assert [line.original_text for line in preview.comments] == ["felt strong .... (good day)"]
        assert [line.original_text for line in preview.unparseable] == ["warm up"]
        assert preview.has_errors
        assert preview.summary.set_count == 5
        assert [r.set_number for r in preview.set_records] == [1, 2, 3, 4, 5]

    def test_restart_numbering_and_unit(self):
        use_case = PreviewWorkoutTextUseCase(weight_unit="lbs", restart_set_numbering=True)
        preview = use_case.execute("bench 185lbs 5/5\nrow 135 8/8").unwrap()
        assert [r.set_number for r in preview.set_records] == [1, 2, 1, 2]
        assert preview.set_records[0].weight_unit == "lbs"

    def test_clean_text_has_no_errors(self):
        preview = PreviewWorkoutTextUseCase().execute(SAMPLE_WORKOUT).unwrap()
        assert not preview.has_errors
        assert preview.summary.exercise_count == 6

    def test_to_dict_exercises_only(self):
        preview = PreviewWorkoutTextUseCase().execute("bench 80kg 8/8\nwarm up").unwrap()

        full = preview.to_dict()
        trimmed = preview.to_dict(exercises_only=True)

        assert len(full['lines']) == 2
        assert len(trimmed['lines']) == 1
        assert trimmed['summary']['exercise_count'] == 1

    def test_parsing_failure(self):
        # Arrange
        mock_parser = Mock()
        mock_parser.parse_lines.side_effect = Exception("Parse error")
        use_case = PreviewWorkoutTextUseCase(mock_parser)

        # Act
        result = use_case.execute("bench 80kg 8/8")

        # Assert
        assert result.is_failure()
        assert isinstance(result.error, ParsingError)


class TestCommitWorkoutUseCase:
    """Tests for CommitWorkoutUseCase."""

    def test_successful_commit(self):
        # Arrange
        mock_store = Mock()
        use_case = CommitWorkoutUseCase(mock_store)
        performed_at = datetime(2024, 5, 1, 18, 30)

        # Act
        result = use_case.execute(SAMPLE_WORKOUT, performed_at=performed_at)

        # Assert
        assert result.is_success()
        record = result.unwrap()
        assert isinstance(record, WorkoutRecord)
        assert record.performed_at == performed_at
        assert record.raw_text == SAMPLE_WORKOUT
        assert len(record.exercises) == 6
        assert record.summary.total_volume == 5788.0
        mock_store.save_workout.assert_called_once_with(record)

    def test_sets_numbered_per_exercise(self):
        mock_store = Mock()
        record = CommitWorkoutUseCase(mock_store).execute("bench 80kg 8/8/6\nrow 10kg 13 / 34kg 12").unwrap()
        assert [r.set_number for r in record.set_records] == [1, 2, 3, 1, 2]

    def test_default_timestamp_and_id(self):
        record = CommitWorkoutUseCase(Mock()).execute("plank 45").unwrap()
        assert isinstance(record.performed_at, datetime)
        assert record.id

    def test_empty_workout_rejected(self):
        # Arrange
        mock_store = Mock()
        use_case = CommitWorkoutUseCase(mock_store)

        # Act
        result = use_case.execute("warm up\n\nnotes .... tired")

        # Assert
        assert result.is_failure()
        assert isinstance(result.error, ParsingError)
        mock_store.save_workout.assert_not_called()

    def test_storage_failure(self):
        # Arrange
        mock_store = Mock()
        mock_store.save_workout.side_effect = Exception("Database locked")
        use_case = CommitWorkoutUseCase(mock_store)

        # Act
        result = use_case.execute("bench 80kg 8/8/6")

        # Assert
        assert result.is_failure()
        assert isinstance(result.error, StorageError)
        assert "Database locked" in str(result.error)
