"""Edit distance helpers used for typo-tolerant matching."""

from rapidfuzz.distance import Levenshtein


def distance(a: str, b: str) -> int:
    """
    Calculate the Levenshtein distance between two strings.

    The distance is the minimum number of single-character insertions,
    deletions or substitutions needed to turn ``a`` into ``b``. Empty
    strings are valid input.

    Args:
        a: Source string
        b: Target string

    Returns:
        Non-negative edit distance
    """
    return Levenshtein.distance(a, b)


def within_distance(a: str, b: str, max_distance: int) -> bool:
    """
    Check whether two strings are at most ``max_distance`` edits apart.

    Uses a score cutoff so long, unrelated strings are rejected early.

    Args:
        a: Source string
        b: Target string
        max_distance: Largest accepted edit distance

    Returns:
        True if ``distance(a, b) <= max_distance``
    """
    if max_distance < 0:
        return False

    # Returns max_distance + 1 once the cutoff is exceeded
    return Levenshtein.distance(a, b, score_cutoff=max_distance) <= max_distance
