"""Edit distance between exercise-name words."""

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Levenshtein distance with unit costs for insertion, deletion and substitution.

    Transpositions count as two edits. Inputs are compared as-is, so callers
    lower-case them first when case should not matter.

    Examples:
        - levenshtein_distance("kitten", "sitting") -> 3
        - levenshtein_distance("", "abc") -> 3
    """
    return Levenshtein.distance(s1, s2, weights=(1, 1, 1))
