"""
Exercise name spelling correction.

This module fixes common misspellings in user-typed exercise names using a
fixed correction table (see ``corrections.py``) and Levenshtein distance.

Classes:
    SpellingCorrector: Dictionary-driven exact, substring and fuzzy correction

Correction Strategies:
    1. Exact match of the whole name against the table (returns immediately)
    2. Substring replacement wherever a key appears, longest key first
    3. Per-word fuzzy replacement using edit distance (always runs after 2)

The corrector is a best-effort heuristic. Over-correction of a short but
legitimate word is an accepted tradeoff, bounded by the minimum key length
and the maximum edit distance below.
"""
import re
from typing import List, Mapping, Optional, Tuple

from loguru import logger

from .corrections import EXERCISE_CORRECTIONS
from .levenshtein import levenshtein_distance

# Substring pass: keys this short only match as whole words
MAX_WHOLE_WORD_KEY_LENGTH = 3

# Fuzzy pass limits
MAX_EDIT_DISTANCE = 2
MIN_FUZZY_KEY_LENGTH = 3  # keys must be strictly longer than this


class SpellingCorrector:
    """
    Corrects misspelled exercise names.

    Usage:
        corrector = SpellingCorrector()
        corrector.correct("dumbell rows")   # -> "dumbbell rows"
        corrector.correct("sqaut")          # -> "squat"

    The corrector holds only read-only data after construction, so one
    instance can be shared between threads.
    """

    def __init__(self, corrections: Optional[Mapping[str, str]] = None) -> None:
        """
        Args:
            corrections: Misspelling -> canonical mapping (lower-case keys).
                Defaults to the built-in exercise table. Its iteration order
                is the tie-break order for both the substring and fuzzy passes.
        """
        self.corrections = EXERCISE_CORRECTIONS if corrections is None else corrections

        # Substring pass order: longest key first; sorted() is stable so equal
        # lengths keep table order
        self._substring_patterns = self._compile_key_patterns()

        # Keys eligible for the fuzzy pass, in table order
        self._fuzzy_keys: List[Tuple[str, str]] = [
            (wrong, right) for wrong, right in self.corrections.items()
            if len(wrong) > MIN_FUZZY_KEY_LENGTH
        ]

    def _compile_key_patterns(self) -> List[Tuple[re.Pattern, str]]:
        """
        Pre-compile one pattern per table key.

        Keys match anywhere in the name, so glued compounds such as
        "dumbellpress" are still corrected. Two exceptions:
            - keys of MAX_WHOLE_WORD_KEY_LENGTH characters or fewer only match
              as whole words, so "bb" does not fire inside "dumbbell" and
              "lat" does not fire inside "lateral"
            - a key that is the start of its own canonical form does not fire
              where that form is already spelled out, so "pres" leaves
              "press" alone and "tricep" leaves "triceps" alone
        """
        ordered = sorted(self.corrections.items(), key=lambda item: len(item[0]), reverse=True)
        patterns: List[Tuple[re.Pattern, str]] = []
        for wrong, right in ordered:
            pattern = re.escape(wrong)
            if len(wrong) <= MAX_WHOLE_WORD_KEY_LENGTH:
                pattern = rf"(?<![\w-]){pattern}(?![\w-])"
            elif len(right) > len(wrong) and right.startswith(wrong):
                pattern = rf"{pattern}(?!{re.escape(right[len(wrong):])})"
            patterns.append((re.compile(pattern), right))
        return patterns

    def correct(self, name: str) -> str:
        """
        Correct a candidate exercise name.

        Args:
            name: Extracted exercise name in any case

        Returns:
            str: Lower-case corrected name; unchanged (lower-cased) when
            nothing in the table applies
        """
        lowered = name.lower()

        # Strategy 1: exact full-string match
        exact = self.corrections.get(lowered)
        if exact is not None:
            return exact

        # Strategy 2: whole-word substring replacement
        result = self._replace_substrings(lowered)

        # Strategy 3: per-word fuzzy pass
        result = " ".join(self._fuzzy_correct_word(word) for word in result.split())

        if result != lowered:
            logger.debug(f"Spelling corrected: '{lowered}' -> '{result}'")
        return result

    def _replace_substrings(self, text: str) -> str:
        """Replace every table key found in ``text`` with its canonical form."""
        result = text
        for pattern, right in self._substring_patterns:
            result = pattern.sub(right, result)
        return result

    def _fuzzy_correct_word(self, word: str) -> str:
        """Return the canonical form of the first key within edit distance of ``word``."""
        for wrong, right in self._fuzzy_keys:
            if levenshtein_distance(word, wrong) <= MAX_EDIT_DISTANCE:
                return right
        return word


_default_corrector = SpellingCorrector()


def correct_spelling(name: str) -> str:
    """Correct ``name`` with the built-in exercise table."""
    return _default_corrector.correct(name)
