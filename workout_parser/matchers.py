"""
Pattern matchers for single workout lines.

Each matcher recognizes one notation for an exercise line and either returns
a complete ParsedExercise or None. The parser tries them in the order given
by ``default_matchers()`` and keeps the first hit, so a line that several
notations could describe is always read the same way.

Matchers, in priority order:
    1. MultiWeightMatcher       "row 10kg 13 / 34kg 12"
    2. StandardMatcher          "bench 80kg 8/8/6"
    3. BodyweightTagMatcher     "dips BW 12/10/8"
    4. SetsTimesRepsMatcher     "squat 3x5 140kg"
    5. WeightFirstMatcher       "squat 140kg 3x5"
    6. ImplicitBodyweightMatcher "pull-ups 10/8/7"
    7. SingleSetMatcher         "deadlift 180kg 5"
    8. FlexibleMatcher          anything with a name followed by numbers

All patterns are compiled at import time, so a broken pattern fails on
import rather than on the first parse.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence, Tuple

from .models import ParsedExercise, ParsedSet
from .number_parser import UNIT_PATTERN, NumberParser
from .text_utils import split_rep_list

# Flexible fallback: a first number above this is read as a weight
WEIGHT_THRESHOLD = 20

# Sets x reps notations: a larger set count is read as malformed
MAX_SET_COUNT = 100

_NAME = r"^(.+?)\s+"
_WEIGHT = rf"(\d+(?:\.\d+)?)\s*{UNIT_PATTERN}?"
_REP_LIST = r"(\d+(?:[/,]\d+)+)"

NameFormatter = Callable[[str], str]


class ExerciseMatcher(ABC):
    """
    Base class for one line notation.

    Subclasses implement ``match`` and build their result through
    ``_exercise``, which enforces the rules every matcher shares: the name
    must not be empty and every rep count must be positive.
    """

    name = "base"

    def __init__(self, number_parser: NumberParser, format_name: NameFormatter) -> None:
        self.numbers = number_parser
        self.format_name = format_name

    @abstractmethod
    def match(self, text: str, notes: Optional[str]) -> Optional[ParsedExercise]:
        """
        Try to read ``text`` as an exercise.

        Args:
            text: Normalized working text (note already removed)
            notes: Note extracted from the line, attached to the result

        Returns:
            Optional[ParsedExercise]: The exercise, or None if the line does
            not fit this notation
        """

    def _exercise(
        self,
        name: str,
        weight: Optional[float],
        sets: Sequence[int],
        notes: Optional[str],
        detailed_sets: Optional[Sequence[ParsedSet]] = None,
    ) -> Optional[ParsedExercise]:
        name = name.strip()
        if not name or not sets or any(reps <= 0 for reps in sets):
            return None

        return ParsedExercise(
            name=self.format_name(name),
            weight=weight,
            is_bodyweight=weight is None,
            sets=tuple(sets),
            detailed_sets=tuple(detailed_sets) if detailed_sets is not None else None,
            notes=notes,
        )


class MultiWeightMatcher(ExerciseMatcher):
    """Several weight/reps pairs separated by "/" or ","."""

    name = "multi_weight"

    FIRST_DIGIT_PATTERN = re.compile(r"\d")

    def match(self, text: str, notes: Optional[str]) -> Optional[ParsedExercise]:
        first_digit = self.FIRST_DIGIT_PATTERN.search(text)
        if not first_digit:
            return None

        exercise_name = text[:first_digit.start()]
        rest = text[first_digit.start():]
        if "/" not in rest and "," not in rest:
            return None

        parts = split_rep_list(rest)
        if len(parts) < 2:
            return None

        pairs: List[Tuple[Optional[float], int]] = []
        for part in parts:
            pair = self.numbers.parse_weight_reps_pair(part)
            if pair is None:
                # One bad segment rejects the whole line
                return None
            pairs.append(pair)

        weights = [weight for weight, _ in pairs if weight is not None]
        if len(weights) < 2:
            # A single weight followed by a rep list is the standard notation
            return None

        # weights is never empty here, so the result is never bodyweight

        return self._exercise(
            exercise_name,
            weight=weights[0],
            sets=[reps for _, reps in pairs],
            notes=notes,
            detailed_sets=[ParsedSet(weight=weight, reps=reps) for weight, reps in pairs],
        )


class StandardMatcher(ExerciseMatcher):
    """One weight followed by a rep list: "bench 80kg 8/8/6"."""

    name = "standard"

    PATTERN = re.compile(rf"{_NAME}{_WEIGHT}\s+{_REP_LIST}$", re.IGNORECASE)

    def match(self, text: str, notes: Optional[str]) -> Optional[ParsedExercise]:
        match = self.PATTERN.match(text)
        if not match:
            return None

        weight = self.numbers.parse_weight(match.group(2))
        sets = self.numbers.parse_rep_list(match.group(3))
        if weight is None or sets is None:
            return None

        return self._exercise(match.group(1), weight, sets, notes)


class BodyweightTagMatcher(ExerciseMatcher):
    """Explicit bodyweight marker: "dips BW 12/10/8", "push-ups bodyweight 20"."""

    name = "bodyweight_tag"

    PATTERN = re.compile(rf"{_NAME}(?:bw|bodyweight)\s+(\d+(?:[/,]\d+)*)$", re.IGNORECASE)

    def match(self, text: str, notes: Optional[str]) -> Optional[ParsedExercise]:
        match = self.PATTERN.match(text)
        if not match:
            return None

        sets = self.numbers.parse_rep_list(match.group(2))
        if sets is None:
            return None

        return self._exercise(match.group(1), None, sets, notes)


class SetsTimesRepsMatcher(ExerciseMatcher):
    """Sets x reps at one weight: "squat 3x5 140kg"."""

    name = "sets_times_reps"

    PATTERN = re.compile(rf"{_NAME}(\d+)[x×](\d+)\s+{_WEIGHT}$", re.IGNORECASE)

    def match(self, text: str, notes: Optional[str]) -> Optional[ParsedExercise]:
        match = self.PATTERN.match(text)
        if not match:
            return None

        set_count = self.numbers.parse_reps(match.group(2))
        reps = self.numbers.parse_reps(match.group(3))
        weight = self.numbers.parse_weight(match.group(4))
        if set_count is None or reps is None or weight is None:
            return None
        if set_count > MAX_SET_COUNT:
            return None

        return self._exercise(match.group(1), weight, [reps] * set_count, notes)


class WeightFirstMatcher(ExerciseMatcher):
    """Weight before sets x reps: "squat 140kg 3x5"."""

    name = "weight_first"

    PATTERN = re.compile(rf"{_NAME}{_WEIGHT}\s+(\d+)[x×](\d+)$", re.IGNORECASE)

    def match(self, text: str, notes: Optional[str]) -> Optional[ParsedExercise]:
        match = self.PATTERN.match(text)
        if not match:
            return None

        weight = self.numbers.parse_weight(match.group(2))
        set_count = self.numbers.parse_reps(match.group(3))
        reps = self.numbers.parse_reps(match.group(4))
        if set_count is None or reps is None or weight is None:
            return None
        if set_count > MAX_SET_COUNT:
            return None

        return self._exercise(match.group(1), weight, [reps] * set_count, notes)


class ImplicitBodyweightMatcher(ExerciseMatcher):
    """Rep list without any weight: "pull-ups 10/8/7"."""

    name = "implicit_bodyweight"

    PATTERN = re.compile(rf"{_NAME}{_REP_LIST}$", re.IGNORECASE)

    def match(self, text: str, notes: Optional[str]) -> Optional[ParsedExercise]:
        match = self.PATTERN.match(text)
        if not match:
            return None

        sets = self.numbers.parse_rep_list(match.group(2))
        if sets is None:
            return None

        return self._exercise(match.group(1), None, sets, notes)


class SingleSetMatcher(ExerciseMatcher):
    """
    One weight with a unit and one rep count: "deadlift 180kg 5".

    Unitless "name N M" lines are left to FlexibleMatcher, whose weight
    threshold decides whether N is a weight or a rep count.
    """

    name = "single_set"

    PATTERN = re.compile(rf"{_NAME}(\d+(?:\.\d+)?)\s*{UNIT_PATTERN}\s+(\d+)$", re.IGNORECASE)

    def match(self, text: str, notes: Optional[str]) -> Optional[ParsedExercise]:
        match = self.PATTERN.match(text)
        if not match:
            return None

        weight = self.numbers.parse_weight(match.group(2))
        reps = self.numbers.parse_reps(match.group(3))
        if weight is None or reps is None:
            return None

        return self._exercise(match.group(1), weight, [reps], notes)


class FlexibleMatcher(ExerciseMatcher):
    """
    Last resort: a name followed by any numbers.

    Heuristic:
        - one number: a single bodyweight set of that many reps
        - a kg/lb unit anywhere, or a first number above WEIGHT_THRESHOLD:
          the first number is the weight, the rest are reps
        - otherwise every number is a bodyweight rep count
    """

    name = "flexible"

    def match(self, text: str, notes: Optional[str]) -> Optional[ParsedExercise]:
        numbers = self.numbers.find_numbers(text)
        if not numbers:
            return None

        exercise_name = text[:numbers[0][1]]
        values = [value for value, _ in numbers]

        if len(values) == 1:
            return self._exercise(exercise_name, None, [int(values[0])], notes)

        if self.numbers.has_weight_unit(text) or values[0] > WEIGHT_THRESHOLD:
            return self._exercise(exercise_name, values[0], [int(v) for v in values[1:]], notes)

        return self._exercise(exercise_name, None, [int(v) for v in values], notes)


MATCHER_TYPES = (
    MultiWeightMatcher,
    StandardMatcher,
    BodyweightTagMatcher,
    SetsTimesRepsMatcher,
    WeightFirstMatcher,
    ImplicitBodyweightMatcher,
    SingleSetMatcher,
    FlexibleMatcher,
)


def default_matchers(number_parser: NumberParser, format_name: NameFormatter) -> Tuple[ExerciseMatcher, ...]:
    """Build the matcher cascade in priority order."""
    return tuple(matcher_type(number_parser, format_name) for matcher_type in MATCHER_TYPES)
