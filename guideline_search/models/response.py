"""Response models for search calls."""

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field

from .record import Record


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SearchResponse(BaseModel):
    """Ranked results of one search call."""

    query: str = Field(..., description="Original search query")
    terms: List[str] = Field(default_factory=list, description="Terms used for matching")
    results: List[Record] = Field(default_factory=list, description="Records ordered by relevance")
    total_results: int = Field(default=0, description="Total number of results")
    execution_time_ms: float = Field(default=0.0, description="Query execution time in milliseconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")
