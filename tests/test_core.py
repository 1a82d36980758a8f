"""Unit tests for core infrastructure components."""
import pytest

from core.exceptions import (
    ConfigurationError,
    ParsingError,
    StorageError,
    TextImportError,
    WorkoutLogException,
)
from core.result import Success, Failure


class TestResult:
    """Tests for Result type (Success/Failure)."""

    def test_success_creation(self):
        # Arrange & Act
        result = Success(42)

        # Assert
        assert result.is_success()
        assert not result.is_failure()
        assert result.unwrap() == 42
        assert result.error is None

    def test_failure_creation(self):
        # Arrange
        error = ValueError("test error")

        # Act
        result = Failure(error)

        # Assert
        assert result.is_failure()
        assert not result.is_success()
        assert result.error is error

    def test_success_map(self):
        result = Success(10).map(lambda x: x * 2)
        assert result.unwrap() == 20

    def test_success_map_captures_exception(self):
        result = Success(0).map(lambda x: 1 / x)
        assert result.is_failure()
        assert isinstance(result.error, ZeroDivisionError)

    def test_failure_map(self):
        failure = Failure(ParsingError("bad"))
        assert failure.map(lambda x: x * 2) is failure

    def test_and_then(self):
        assert Success(3).and_then(lambda x: Success(x + 1)).unwrap() == 4
        assert Success(3).and_then(lambda x: Failure("no")).is_failure()
        failure = Failure("no")
        assert failure.and_then(lambda x: Success(x)) is failure

    def test_failure_unwrap_raises_error(self):
        with pytest.raises(StorageError):
            Failure(StorageError("disk full")).unwrap()

    def test_failure_unwrap_non_exception(self):
        with pytest.raises(RuntimeError, match="oops"):
            Failure("oops").unwrap()

    def test_unwrap_or(self):
        assert Success(42).unwrap_or(0) == 42
        assert Failure(ValueError("error")).unwrap_or(0) == 0


class TestExceptions:
    @pytest.mark.parametrize("exc_type", [ParsingError, TextImportError, StorageError, ConfigurationError])
    def test_hierarchy(self, exc_type):
        assert issubclass(exc_type, WorkoutLogException)
        with pytest.raises(WorkoutLogException):
            raise exc_type("failure")
