"""Loading and validating the guideline record collection."""

import json
from pathlib import Path
from typing import Any, List, Optional, Union

import httpx
import structlog
from pydantic import ValidationError

from .config import Settings, get_settings
from .models.record import Record

logger = structlog.get_logger()


class RecordLoadError(Exception):
    """Raised when the record collection cannot be obtained."""


def parse_records(payload: Any) -> List[Record]:
    """
    Validate a decoded JSON payload into records.

    Entries that are not objects or fail validation are logged and
    skipped; the rest of the collection is still returned.

    Args:
        payload: Decoded JSON, expected to be an array of objects

    Returns:
        Valid records in payload order

    Raises:
        RecordLoadError: If the payload is not an array
    """
    if not isinstance(payload, list):
        raise RecordLoadError(
            f"Expected a JSON array of records, got {type(payload).__name__}"
        )

    records = []
    for position, item in enumerate(payload):
        if not isinstance(item, dict):
            logger.warning(
                "record_skipped",
                position=position,
                reason=f"expected object, got {type(item).__name__}",
            )
            continue

        try:
            records.append(Record.model_validate(item))
        except ValidationError as e:
            logger.warning(
                "record_skipped",
                position=position,
                record_id=item.get("id"),
                reason=str(e),
            )

    skipped = len(payload) - len(records)
    logger.info("records_loaded", total_records=len(records), skipped=skipped)
    return records


def load_records_from_file(path: Union[str, Path]) -> List[Record]:
    """
    Load records from a JSON file.

    Args:
        path: Path to a JSON array of records

    Returns:
        Valid records from the file

    Raises:
        RecordLoadError: If the file cannot be read or decoded
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("record_load_failed", source=str(path), error=str(e))
        raise RecordLoadError(f"Failed to load records from {path}: {e}") from e

    return parse_records(payload)


def fetch_records(
    url: str,
    timeout: float = 30.0,
    client: Optional[httpx.Client] = None,
) -> List[Record]:
    """
    Fetch records from an HTTP endpoint serving a JSON array.

    Args:
        url: Location of the record collection
        timeout: Request timeout in seconds
        client: Optional preconfigured client

    Returns:
        Valid records from the response

    Raises:
        RecordLoadError: On transport errors, error statuses or invalid JSON
    """
    try:
        if client is None:
            response = httpx.get(url, timeout=timeout)
        else:
            response = client.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPError as e:
        logger.error("record_load_failed", source=url, error=str(e))
        raise RecordLoadError(f"Failed to fetch records from {url}: {e}") from e
    except ValueError as e:
        logger.error("record_load_failed", source=url, error=str(e))
        raise RecordLoadError(f"Invalid JSON returned by {url}: {e}") from e

    return parse_records(payload)


def load_records(
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
) -> List[Record]:
    """Load records from the configured file, or else the configured URL."""
    settings = settings or get_settings()

    if settings.data_path:
        return load_records_from_file(settings.data_path)

    return fetch_records(settings.data_url, timeout=settings.request_timeout, client=client)
