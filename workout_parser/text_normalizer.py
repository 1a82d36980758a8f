"""Input canonicalization and note extraction for workout lines."""

import re
from typing import Optional, Tuple

NOTE_MARKER = "...."


class TextNormalizer:
    """Handles whitespace/unit canonicalization and trailing notes."""

    def __init__(self) -> None:
        self._compile_patterns()

    def _compile_patterns(self) -> None:
        """Pre-compile regex patterns for efficiency."""
        self._multi_space_pattern = re.compile(r" {2,}")
        # "80 kg" -> "80kg"; only a space directly after a number is removed
        self._unit_space_pattern = re.compile(r"(?<=\d) (?=(?:kg|lbs|lb)(?![a-z]))", re.IGNORECASE)

    def normalize(self, text: str) -> str:
        """
        Canonicalize working text before pattern matching.

        Runs of spaces collapse to one space, then the space between a number
        and a ``kg``/``lb``/``lbs`` suffix is removed. Nothing else changes.
        """
        result = self._multi_space_pattern.sub(" ", text)
        return self._unit_space_pattern.sub("", result)

    def extract_note(self, text: str) -> Tuple[str, Optional[str]]:
        """
        Split a trimmed line into working text and its trailing note.

        Everything after the first ``....`` is the note; one pair of wrapping
        parentheses is removed from it. An empty note is reported as None.

        Returns:
            Tuple of (working text, note)

        Examples:
            - "bench 80kg 8/8 .... (felt strong)" -> ("bench 80kg 8/8", "felt strong")
            - "squat 100kg 5/5" -> ("squat 100kg 5/5", None)
        """
        head, marker, tail = text.partition(NOTE_MARKER)
        if not marker:
            return text, None

        note = tail.strip()
        if len(note) >= 2 and note.startswith("(") and note.endswith(")"):
            note = note[1:-1].strip()

        return head.strip(), note or None
