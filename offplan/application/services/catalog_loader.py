"""Catalog loading service.

Reads the static listings file once and turns it into an immutable tuple of
validated property records.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Union

from pydantic import ValidationError as PydanticValidationError

from offplan.core.exceptions import DataLoadError
from offplan.core.logging import get_logger
from offplan.core.settings import get_settings
from offplan.domain.models.property import PropertyRecord

log = get_logger(__name__)

Catalog = tuple[PropertyRecord, ...]


def build_catalog(raw_records: Iterable[dict[str, Any]]) -> Catalog:
    """Validate raw listing dicts into a catalog.

    Args:
        raw_records: Listing objects as found in the catalog file

    Returns:
        Tuple of PropertyRecord in source order

    Raises:
        DataLoadError: If a record is invalid or an id appears twice
    """
    records: list[PropertyRecord] = []
    seen: set[str] = set()

    for index, raw in enumerate(raw_records):
        try:
            record = PropertyRecord.model_validate(raw)
        except PydanticValidationError as e:
            raise DataLoadError(f"Invalid property record at index {index}: {e}") from e

        # "7" and 7 name the same listing
        key = str(record.id)
        if key in seen:
            raise DataLoadError(f"Duplicate property id {record.id!r} at index {index}")
        seen.add(key)
        records.append(record)

    return tuple(records)


def load_catalog(data_path: Union[str, Path, None] = None) -> Catalog:
    """Load the property catalog from a JSON file.

    Args:
        data_path: Path to the catalog JSON file. Defaults to settings.data_path.

    Returns:
        Immutable catalog

    Raises:
        DataLoadError: If the file is missing or unreadable, not UTF-8 JSON,
            not a list, or holds an invalid record
    """
    path = Path(data_path or get_settings().data_path)

    try:
        with open(path, encoding="utf-8") as f:
            raw_data = json.load(f)
    except FileNotFoundError as e:
        log.error("catalog_file_missing", path=str(path))
        raise DataLoadError(f"Catalog file not found: {path}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        log.error("catalog_file_invalid_json", path=str(path), error=str(e))
        raise DataLoadError(f"Catalog file is not valid UTF-8 JSON: {path}") from e
    except OSError as e:
        log.error("catalog_file_unreadable", path=str(path), error=str(e))
        raise DataLoadError(f"Cannot read catalog file: {path}") from e

    if not isinstance(raw_data, list):
        raise DataLoadError(f"Catalog file must hold a JSON list, got {type(raw_data).__name__}")

    catalog = build_catalog(raw_data)

    missing_photos = sum(1 for p in catalog if not p.photos)
    if missing_photos:
        log.warning("catalog_records_without_photos", count=missing_photos)

    log.info("catalog_loaded", path=str(path), count=len(catalog))
    return catalog
