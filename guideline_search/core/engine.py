"""Main search engine implementation."""

import time
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence

import structlog

from ..models.record import Record
from ..models.response import SearchResponse
from .matcher import FUZZY_THRESHOLD, MatchEngine
from .ranker import rank
from .tokenizer import Tokenizer

if TYPE_CHECKING:
    from ..config.settings import Settings

logger = structlog.get_logger()


class SearchEngine:
    """Ranks guideline records against free-text queries."""

    def __init__(
        self,
        fuzzy_threshold: int = FUZZY_THRESHOLD,
        stop_words: Optional[Iterable[str]] = None,
    ) -> None:
        """
        Initialize the search engine.

        Args:
            fuzzy_threshold: Maximum edit distance for fuzzy matches
            stop_words: Custom stop-word set for the tokenizer
        """
        self.fuzzy_threshold = fuzzy_threshold
        self.tokenizer = Tokenizer(stop_words)
        self.matcher = MatchEngine(fuzzy_threshold)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "SearchEngine":
        """Build an engine from application settings."""
        return cls(
            fuzzy_threshold=settings.fuzzy_threshold,
            stop_words=settings.stop_words,
        )

    def search(self, records: Sequence[Record], query: str) -> SearchResponse:
        """
        Search a record collection.

        Args:
            records: Record collection to search (read only)
            query: Raw query text

        Returns:
            SearchResponse with records ordered by relevance
        """
        start_time = time.time()
        query = query or ""

        terms = self.tokenizer.tokenize(query)
        if not terms:
            return self._create_empty_response(query, start_time)

        scored = self.matcher.match(records, terms)
        results = rank(scored)

        execution_time = (time.time() - start_time) * 1000

        logger.debug(
            "search_completed",
            query=query,
            terms=terms,
            total_results=len(results),
            execution_time_ms=round(execution_time, 3),
        )

        return SearchResponse(
            query=query,
            terms=terms,
            results=results,
            total_results=len(results),
            execution_time_ms=execution_time,
        )

    def _create_empty_response(self, query: str, start_time: float) -> SearchResponse:
        """Create an empty response for blank queries."""
        execution_time = (time.time() - start_time) * 1000

        return SearchResponse(
            query=query,
            terms=[],
            results=[],
            total_results=0,
            execution_time_ms=execution_time,
        )


def search_records(records: Sequence[Record], query: str) -> List[Record]:
    """Search records with default settings and return them ranked."""
    return SearchEngine().search(records, query).results
