"""
Workout Parser Package.

This package turns loosely structured, hand-typed workout notes such as
"bench 80kg 8/8/6" or "dumbell rows 10kg 13 / 34kg 12" into structured
exercise and set records. It tolerates inconsistent units and separators,
common misspellings and ambiguous numeric layouts.

Main Components:
    WorkoutParser: Line and document parser driving the matcher cascade
    SpellingCorrector: Table-driven exact, substring and fuzzy name correction
    TextNormalizer: Spacing/unit canonicalization and note extraction
    NumberParser: Weights, rep lists and weight/reps pairs
    levenshtein_distance: Edit distance used by the corrector
    metrics: Volume, set counts and per-set records

Architecture:
    - Pipeline pattern for per-line processing
    - Strategy pattern for the ordered matcher cascade (first match wins)
    - Read-only module-level tables and pre-compiled patterns

Design Philosophy:
    - Every operation is total: bad input yields an unparseable line, never
      an exception
    - No state survives a call, so parsers can be shared between threads
"""

from __future__ import annotations

from .models import ParsedSet, ParsedExercise, ParsedLine
from .parser import WorkoutParser, parse, parse_line
from .spelling_corrector import SpellingCorrector, correct_spelling
from .text_normalizer import TextNormalizer
from .number_parser import NumberParser
from .levenshtein import levenshtein_distance
from .text_utils import normalize_exercise_name
from .metrics import (
    SetRecord,
    WorkoutSummary,
    build_set_records,
    exercise_volume,
    format_volume,
    summarize,
)

__all__ = [
    # Main parser interface
    "WorkoutParser",
    "parse",
    "parse_line",

    # Data model
    "ParsedSet",
    "ParsedExercise",
    "ParsedLine",

    # Parsing components
    "SpellingCorrector",
    "correct_spelling",
    "TextNormalizer",
    "NumberParser",
    "levenshtein_distance",
    "normalize_exercise_name",

    # Metrics
    "SetRecord",
    "WorkoutSummary",
    "build_set_records",
    "exercise_volume",
    "format_volume",
    "summarize",
]

__version__ = "1.0.0"

SAMPLE_WORKOUT = """\
Bench 80kg 8/8/6
Incline 60kg 10/10/8
Dumbbell Press 25kg 12/12/10
Push-ups BW 15/12/10
Tricep Pushdown 30kg 12/10/10 .... (arms tired)
dumbell rows 10kg 13 / 34kg 12
"""
