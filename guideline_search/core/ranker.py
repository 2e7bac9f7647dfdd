"""Deterministic ordering of scored records."""

from typing import List, Sequence

from ..models.record import Record, ScoredRecord


def rank(scored: Sequence[ScoredRecord]) -> List[Record]:
    """
    Order scored records by relevance.

    Higher scores come first; equal scores are ordered by ascending id,
    ignoring case, so the result does not depend on collection order.

    Args:
        scored: Records with their match scores

    Returns:
        Records only, best match first
    """
    ordered = sorted(
        scored,
        key=lambda item: (-item.score, item.record.id.casefold(), item.record.id),
    )
    return [item.record for item in ordered]
