"""
Guideline Search - In-memory text matching for clinical guideline records.

This package ranks a fixed collection of guideline records against free-text
queries using substring containment and typo-tolerant edit-distance matching,
with stop-word filtering of the query.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine, search_records
from .loader import RecordLoadError, load_records
from .models.record import Record, ScoredRecord
from .models.response import SearchResponse
from .session import SearchSession

__all__ = [
    "SearchEngine",
    "SearchSession",
    "SearchResponse",
    "Record",
    "ScoredRecord",
    "RecordLoadError",
    "load_records",
    "search_records",
]
