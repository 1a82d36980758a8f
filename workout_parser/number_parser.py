"""Number, weight and rep parsing for workout lines."""

import math
import re
from typing import List, Optional, Tuple

from .text_utils import split_rep_list

# Matches the unit suffixes accepted after a weight
UNIT_PATTERN = r"(?:kg|lbs?)"


class NumberParser:
    """Handles parsing of weights, rep counts and weight/reps pairs."""

    def __init__(self) -> None:
        self._compile_patterns()

    def _compile_patterns(self) -> None:
        """Compile regex patterns for number extraction."""
        # "80kg 8", "80 8" (a unit or whitespace must separate the numbers)
        self._weight_reps_pattern = re.compile(
            rf"^(\d+(?:\.\d+)?)(?:\s*{UNIT_PATTERN}\s*|\s+)(\d+)$",
            re.IGNORECASE,
        )
        # "8"
        self._reps_only_pattern = re.compile(r"^(\d+)$")
        # "8x80kg", "8 × 80"
        self._reps_by_weight_pattern = re.compile(
            rf"^(\d+)\s*[x×]\s*(\d+(?:\.\d+)?)\s*{UNIT_PATTERN}?$",
            re.IGNORECASE,
        )
        # Every number in a line, with an optional unit suffix
        self._number_token_pattern = re.compile(
            rf"(\d+(?:\.\d+)?)\s*{UNIT_PATTERN}?",
            re.IGNORECASE,
        )
        self._unit_presence_pattern = re.compile(r"kg|lb", re.IGNORECASE)

    @staticmethod
    def parse_reps(token: str) -> Optional[int]:
        """Return a positive rep count, or None for zero and malformed tokens."""
        try:
            reps = int(token)
        except ValueError:
            return None
        return reps if reps > 0 else None

    @staticmethod
    def parse_weight(token: Optional[str]) -> Optional[float]:
        """Return the weight value, or None when the token is missing, malformed or overflows."""
        if token is None:
            return None
        try:
            value = float(token)
        except ValueError:
            return None
        return value if math.isfinite(value) else None

    def parse_rep_list(self, text: str) -> Optional[List[int]]:
        """
        Parse "8/8/6" style rep lists.

        Returns:
            List of rep counts, or None if the list is empty or any entry is
            not a positive integer
        """
        parts = split_rep_list(text)
        if not parts:
            return None

        reps: List[int] = []
        for part in parts:
            value = self.parse_reps(part)
            if value is None:
                return None
            reps.append(value)
        return reps

    def parse_weight_reps_pair(self, text: str) -> Optional[Tuple[Optional[float], int]]:
        """
        Parse one segment of a multi-weight line.

        Accepted shapes:
            - "80kg 8" / "80 8" -> (80.0, 8)
            - "8"               -> (None, 8)
            - "8x80kg"          -> (80.0, 8)

        Returns:
            Tuple of (weight, reps), or None when the segment has no positive
            rep count in one of those shapes
        """
        trimmed = text.strip()

        match = self._weight_reps_pattern.match(trimmed)
        if match:
            weight = self.parse_weight(match.group(1))
            reps = self.parse_reps(match.group(2))
            if weight is not None and reps is not None:
                return weight, reps
            return None

        match = self._reps_only_pattern.match(trimmed)
        if match:
            reps = self.parse_reps(match.group(1))
            return (None, reps) if reps is not None else None

        match = self._reps_by_weight_pattern.match(trimmed)
        if match:
            reps = self.parse_reps(match.group(1))
            weight = self.parse_weight(match.group(2))
            if weight is not None and reps is not None:
                return weight, reps

        return None

    def find_numbers(self, text: str) -> List[Tuple[float, int]]:
        """
        Find every number in ``text``.

        Returns:
            List of (value, start offset) in reading order; empty when any
            number cannot be read, so the line is not guessed at
        """
        numbers: List[Tuple[float, int]] = []
        for match in self._number_token_pattern.finditer(text):
            value = self.parse_weight(match.group(1))
            if value is None:
                return []
            numbers.append((value, match.start()))
        return numbers

    def has_weight_unit(self, text: str) -> bool:
        """True if ``kg`` or ``lb`` appears anywhere in the text."""
        return bool(self._unit_presence_pattern.search(text))
