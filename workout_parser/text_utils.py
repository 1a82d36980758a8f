"""Text utility functions for the workout parser."""

from typing import List


def normalize_exercise_name(name: str) -> str:
    """
    Capitalize the first letter of every word and lower-case the rest.

    Words are whitespace-delimited and re-joined with single spaces, so
    "pull-ups" becomes "Pull-ups". Only ASCII letters change case; anything
    else is kept as typed, so applying it twice gives the same result.
    """
    return " ".join(_format_word(word) for word in name.split())


def _format_word(word: str) -> str:
    head = word[:1]
    if head.isascii():
        head = head.upper()
    return head + "".join(c.lower() if c.isascii() else c for c in word[1:])


def split_rep_list(text: str) -> List[str]:
    """
    Split a rep list like "8/8/6" or "10, 8" into its trimmed parts.

    Commas and slashes are both separators; empty parts are dropped.
    """
    return [part.strip() for part in text.replace(",", "/").split("/") if part.strip()]
