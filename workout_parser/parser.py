"""
Main Workout Parser.

This module provides the WorkoutParser class that turns free-text workout
logs into structured exercises. It is the entry point of the parsing
subsystem and coordinates normalization, the matcher cascade and name
correction.

Classes:
    WorkoutParser: Line and document parser

Processing Pipeline (per line):
    1. Trim; blank lines end here
    2. Split off the trailing note after "...."
    3. Normalize spacing and unit suffixes
    4. Try each matcher in priority order; the first hit wins
    5. Correct and capitalize the exercise name (done by the matcher)
    6. Classify the line as exercise, comment or unparseable
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from loguru import logger

from .matchers import ExerciseMatcher, default_matchers
from .models import ParsedExercise, ParsedLine
from .number_parser import NumberParser
from .spelling_corrector import SpellingCorrector
from .text_normalizer import NOTE_MARKER, TextNormalizer
from .text_utils import normalize_exercise_name


class WorkoutParser:
    """
    Parser for free-text workout logs.

    The parser holds only read-only components after construction, so one
    instance can serve any number of threads.

    Usage:
        parser = WorkoutParser()
        for exercise in parser.parse("bench 80kg 8/8/6\\nsquat 3x5 140kg"):
            print(exercise.name, exercise.weight, exercise.sets)
    """

    def __init__(
        self,
        spelling_corrector: Optional[SpellingCorrector] = None,
        matchers: Optional[Sequence[ExerciseMatcher]] = None,
    ) -> None:
        """
        Args:
            spelling_corrector: Corrector for exercise names (default table if None)
            matchers: Matcher cascade in priority order (the built-in eight if None)
        """
        self.spelling_corrector = spelling_corrector or SpellingCorrector()
        self.text_normalizer = TextNormalizer()
        self.number_parser = NumberParser()

        if matchers is None:
            matchers = default_matchers(self.number_parser, self.format_name)
        self.matchers = tuple(matchers)

    def format_name(self, raw_name: str) -> str:
        """Spelling-correct and capitalize an extracted exercise name."""
        return normalize_exercise_name(self.spelling_corrector.correct(raw_name))

    def parse(self, text: str) -> List[ParsedExercise]:
        """
        Parse a whole workout log.

        Only lines that produced an exercise are returned; comments, blank
        and unparseable lines are dropped. Use ``parse_lines`` to keep them.
        """
        return [line.exercise for line in self.parse_lines(text) if line.exercise is not None]

    def parse_lines(self, text: str) -> List[ParsedLine]:
        """Parse every line of ``text``, keeping all outcomes in order."""
        return [self.parse_line(line) for line in text.split("\n")]

    def parse_line(self, line: str) -> ParsedLine:
        """
        Parse a single line.

        Returns:
            ParsedLine: exercise set for exercise lines; ``is_comment`` for
            lines carrying the note marker without a readable exercise;
            neither for blank and unparseable lines
        """
        trimmed = line.strip()
        if not trimmed:
            return ParsedLine(original_text=line)

        exercise = self._parse_exercise(trimmed)
        if exercise is not None:
            return ParsedLine(original_text=line, exercise=exercise)

        if NOTE_MARKER in trimmed:
            logger.debug(f"Comment line: '{trimmed}'")
            return ParsedLine(original_text=line, is_comment=True)

        logger.debug(f"Unparseable line: '{trimmed}'")
        return ParsedLine(original_text=line)

    def _parse_exercise(self, text: str) -> Optional[ParsedExercise]:
        working_text, notes = self.text_normalizer.extract_note(text)
        working_text = self.text_normalizer.normalize(working_text)
        if not working_text:
            return None

        for matcher in self.matchers:
            exercise = matcher.match(working_text, notes)
            if exercise is not None:
                logger.debug(f"Matched '{working_text}' with {matcher.name}: {exercise.name}")
                return exercise

        return None


_default_parser = WorkoutParser()


def parse(text: str) -> List[ParsedExercise]:
    """Parse a workout log with the default parser."""
    return _default_parser.parse(text)


def parse_line(line: str) -> ParsedLine:
    """Parse one line with the default parser."""
    return _default_parser.parse_line(line)
