"""Caller-owned search state: the collection and the latest results."""

from typing import Dict, Iterable, List, Optional, Tuple

import httpx
import structlog

from .config import Settings, get_settings
from .core.engine import SearchEngine
from .loader import load_records
from .models.record import Record

logger = structlog.get_logger()


class SearchSession:
    """Holds a record collection and the result list of the last search."""

    def __init__(
        self,
        records: Iterable[Record] = (),
        engine: Optional[SearchEngine] = None,
    ) -> None:
        """
        Initialize the session.

        Args:
            records: Initial record collection
            engine: Search engine to use (defaults to SearchEngine())
        """
        self.engine = engine or SearchEngine()
        self._records: Tuple[Record, ...] = ()
        self._by_id: Dict[str, Record] = {}
        self._query = ""
        self._results: List[Record] = []
        self.load(records)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        client: Optional[httpx.Client] = None,
    ) -> "SearchSession":
        """Create a session with records loaded from the configured source."""
        settings = settings or get_settings()
        engine = SearchEngine.from_settings(settings)
        return cls(load_records(settings, client=client), engine=engine)

    @property
    def records(self) -> Tuple[Record, ...]:
        """The loaded record collection."""
        return self._records

    @property
    def results(self) -> List[Record]:
        """Results of the last search, best match first."""
        return list(self._results)

    @property
    def query(self) -> str:
        """The query string of the last search."""
        return self._query

    @property
    def has_query(self) -> bool:
        """Whether the last search had any non-blank query text."""
        return bool(self._query.strip())

    def load(self, records: Iterable[Record]) -> None:
        """Replace the record collection and clear previous results."""
        self._records = tuple(records)
        self._by_id = {}
        for record in self._records:
            # First occurrence wins for duplicate ids
            self._by_id.setdefault(record.id, record)
        self.clear()

        logger.debug("session_loaded", total_records=len(self._records))

    def search(self, query: str) -> List[Record]:
        """
        Run a query and replace the current result list.

        Args:
            query: Raw query text

        Returns:
            Ranked records for the query
        """
        response = self.engine.search(self._records, query)
        self._query = response.query
        self._results = response.results
        return self.results

    def get(self, record_id: str) -> Optional[Record]:
        """Look up a record by id."""
        return self._by_id.get(record_id)

    def clear(self) -> None:
        """Forget the last query and its results."""
        self._query = ""
        self._results = []
