"""Record models for the guideline collection."""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Record(BaseModel):
    """A single guideline entry.

    Missing or null fields are read as empty so one incomplete entry
    cannot break a scan over the whole collection.
    """

    id: str = Field(default="", description="Unique identifier within the collection")
    category: str = Field(default="", description="Short classification label")
    instruction: str = Field(default="", description="Free-text guidance content")
    keywords: List[str] = Field(default_factory=list, description="Searchable synonyms and tags")
    policy: str = Field(default="", description="Citation or source label (not searched)")

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("id", "category", "instruction", "policy", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        """Read null as empty and scalars as their string form."""
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("keywords", mode="before")
    @classmethod
    def coerce_keywords(cls, v: Any) -> List[str]:
        """Accept null, a single keyword string, or a list with null gaps."""
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        if isinstance(v, (list, tuple)):
            return [str(keyword) for keyword in v if keyword is not None]
        return v


class ScoredRecord(BaseModel):
    """A record paired with the number of query terms it matched."""

    record: Record = Field(..., description="The matched record")
    score: int = Field(..., ge=0, description="Count of query terms that hit the record")
