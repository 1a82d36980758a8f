"""Result type used by the use case layer instead of raising."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

T = TypeVar('T')
E = TypeVar('E')


@dataclass(frozen=True)
class Success(Generic[T]):
    """Outcome of an operation that produced a value."""
    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def map(self, fn: Callable[[T], Any]) -> "Result[Any, Exception]":
        """Apply ``fn`` to the value; an exception raised by ``fn`` becomes a Failure."""
        try:
            return Success(fn(self.value))
        except Exception as e:
            return Failure(e)

    def and_then(self, fn: Callable[[T], "Result[Any, Any]"]) -> "Result[Any, Any]":
        """Chain another Result-returning step."""
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    @property
    def error(self) -> Optional[Any]:
        return None


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Outcome of an operation that failed with ``error``."""
    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], Any]) -> "Failure[E]":
        return self

    def and_then(self, fn: Callable[[Any], "Result[Any, Any]"]) -> "Failure[E]":
        return self

    def unwrap(self):
        """Raise the stored error (wrapped in RuntimeError if it is not an exception)."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise RuntimeError(str(self.error))

    def unwrap_or(self, default):
        return default


Result = Union[Success[T], Failure[E]]
