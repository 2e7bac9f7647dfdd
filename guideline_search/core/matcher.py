"""Exact and fuzzy field matching for guideline records."""

from typing import Callable, List, NamedTuple, Optional, Sequence

import structlog

from ..models.record import Record, ScoredRecord
from .edit_distance import within_distance

logger = structlog.get_logger()

# Largest edit distance at which a term still counts as a fuzzy hit
FUZZY_THRESHOLD = 2


class FieldRule(NamedTuple):
    """How one searchable field of a record is matched."""

    name: str
    values: Callable[[Record], Sequence[str]]
    fuzzy: bool


FIELD_RULES = (
    FieldRule("keywords", lambda record: record.keywords, fuzzy=True),
    FieldRule("category", lambda record: (record.category,), fuzzy=True),
    FieldRule("id", lambda record: (record.id,), fuzzy=False),
    FieldRule("instruction", lambda record: (record.instruction,), fuzzy=False),
)


class MatchEngine:
    """Scores records by how many query terms hit their searchable fields."""

    def __init__(
        self,
        fuzzy_threshold: int = FUZZY_THRESHOLD,
        rules: Optional[Sequence[FieldRule]] = None,
    ) -> None:
        """
        Initialize the match engine.

        Args:
            fuzzy_threshold: Maximum edit distance for a fuzzy hit
            rules: Field rules to evaluate (defaults to FIELD_RULES)
        """
        self.fuzzy_threshold = fuzzy_threshold
        self.rules = tuple(rules) if rules is not None else FIELD_RULES

    def is_hit(self, candidate: str, term: str, fuzzy: bool) -> bool:
        """
        Check whether a single field value is a hit for a term.

        Args:
            candidate: Raw field value
            term: Lower-cased search term
            fuzzy: Whether edit-distance matching applies to this field

        Returns:
            True on substring containment, or on a close enough fuzzy match
        """
        if not term:
            return False

        # An empty value is still within reach of terms no longer than the threshold
        lowered = (candidate or "").lower()
        if term in lowered:
            return True

        return fuzzy and within_distance(lowered, term, self.fuzzy_threshold)

    def term_hits(self, record: Record, term: str) -> bool:
        """Check whether a term hits any searchable field of a record."""
        for rule in self.rules:
            for value in rule.values(record):
                if self.is_hit(value, term, rule.fuzzy):
                    return True
        return False

    def score(self, record: Record, terms: Sequence[str]) -> int:
        """Count the terms that hit the record at least once."""
        return sum(1 for term in terms if self.term_hits(record, term))

    def match(self, records: Sequence[Record], terms: Sequence[str]) -> List[ScoredRecord]:
        """
        Score every record against the query terms.

        Args:
            records: Record collection to scan (never modified)
            terms: Search terms, already normalized

        Returns:
            Scored records with a score above zero, in collection order
        """
        if not terms:
            return []

        scored = []
        for record in records:
            try:
                entry_score = self.score(record, terms)
            except (AttributeError, TypeError) as e:
                logger.warning(
                    "record_match_failed",
                    record_id=getattr(record, "id", None),
                    error=str(e),
                )
                continue

            if entry_score > 0:
                scored.append(ScoredRecord(record=record, score=entry_score))

        return scored


def match(records: Sequence[Record], terms: Sequence[str]) -> List[ScoredRecord]:
    """Score records with the default fuzzy threshold."""
    return MatchEngine().match(records, terms)
