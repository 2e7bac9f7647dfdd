"""Data models for guideline search."""

from .record import Record, ScoredRecord
from .response import SearchResponse

__all__ = [
    "Record",
    "ScoredRecord",
    "SearchResponse",
]
