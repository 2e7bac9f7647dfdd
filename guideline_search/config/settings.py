"""Application settings and configuration management."""

from functools import lru_cache
from typing import List, Optional

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings

from ..core.matcher import FUZZY_THRESHOLD
from ..core.tokenizer import STOP_WORDS

DEFAULT_DATA_URL = (
    "https://raw.githubusercontent.com/marksescon/Metis-Web/refs/heads/main/metis_data.json"
)


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Search Configuration
    fuzzy_threshold: int = Field(default=FUZZY_THRESHOLD, ge=0)
    stop_words: List[str] = Field(default_factory=lambda: sorted(STOP_WORDS))

    # Data source
    data_url: str = Field(default=DEFAULT_DATA_URL)
    data_path: Optional[str] = Field(default=None)
    request_timeout: float = Field(default=30.0, gt=0)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
