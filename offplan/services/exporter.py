"""Export services for query and projection results.

Saves ROI projections and listing pages to JSON, and listing pages to CSV via
pandas, for offline analysis.
"""

from __future__ import annotations

import json
import os
from collections.abc import Sequence
from datetime import datetime
from typing import Any, Optional

import pandas as pd

from offplan.core.exceptions import ExportError
from offplan.core.logging import get_logger
from offplan.core.settings import get_settings
from offplan.domain.models.property import PropertyRecord
from offplan.domain.models.query import QueryResult, QueryState
from offplan.domain.models.roi import ROIInputs, ROIResult

log = get_logger(__name__)

LISTING_COLUMNS = [
    "id",
    "title",
    "developer",
    "region",
    "type",
    "price",
    "bedroom_min",
    "bedroom_max",
    "handover_time",
    "unit_count",
]


def records_to_frame(records: Sequence[PropertyRecord]) -> pd.DataFrame:
    """Flatten listings into a DataFrame, one row per listing.

    Args:
        records: Listings to tabulate

    Returns:
        DataFrame with LISTING_COLUMNS, in input order
    """
    rows = [
        {
            "id": p.id,
            "title": p.title,
            "developer": p.developer,
            "region": p.region,
            "type": p.type,
            "price": p.price,
            "bedroom_min": p.bedroom_min,
            "bedroom_max": p.bedroom_max,
            "handover_time": p.handover_time,
            "unit_count": len(p.floor_plan),
        }
        for p in records
    ]
    return pd.DataFrame(rows, columns=LISTING_COLUMNS)


class ResultExporter:
    """Handles exporting of query and projection results."""

    def __init__(self, output_dir: Optional[str] = None):
        """Initialize exporter.

        Args:
            output_dir: Directory where results will be saved. Defaults to settings.export_dir.
        """
        self.output_dir = output_dir or get_settings().export_dir

    def _ensure_dir(self) -> None:
        try:
            os.makedirs(self.output_dir, exist_ok=True)
        except OSError as e:
            log.error("output_directory_creation_failed", path=self.output_dir, error=str(e))
            raise ExportError(f"Cannot create export directory {self.output_dir}: {e}") from e

    def _path(self, prefix: str, extension: str) -> str:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        return os.path.join(self.output_dir, f"{prefix}_{timestamp}.{extension}")

    def _write_json(self, filepath: str, payload: dict[str, Any]) -> str:
        self._ensure_dir()
        try:
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
        except OSError as e:
            log.error("results_save_failed", path=filepath, error=str(e))
            raise ExportError(f"Cannot write {filepath}: {e}") from e
        return filepath

    def save_projection(
        self,
        inputs: ROIInputs,
        result: ROIResult,
        prefix: str = "roi",
        metadata: Optional[dict[str, Any]] = None,
    ) -> str:
        """Save an ROI projection with its inputs to a JSON file.

        Args:
            inputs: Projection inputs
            result: Projection output
            prefix: Filename prefix
            metadata: Optional extra metadata (e.g. property and unit ids)

        Returns:
            Path to the saved file.
        """
        payload = {
            "metadata": {
                "timestamp": datetime.now().isoformat(),
                **(metadata or {}),
            },
            "inputs": inputs.model_dump(),
            "result": result.model_dump(),
        }
        filepath = self._write_json(self._path(prefix, "json"), payload)
        log.info("results_saved", path=filepath, kind="projection")
        return filepath

    def save_query(
        self,
        state: QueryState,
        result: QueryResult,
        prefix: str = "listings",
    ) -> str:
        """Save a listing page with the query that produced it to a JSON file.

        Returns:
            Path to the saved file.
        """
        payload = {
            "metadata": {
                "timestamp": datetime.now().isoformat(),
                "total_matched": result.total_matched,
                "total_pages": result.total_pages,
                "count": len(result.page),
            },
            "query": state.model_dump(mode="json"),
            "properties": [p.model_dump(mode="json") for p in result.page],
        }
        filepath = self._write_json(self._path(prefix, "json"), payload)
        log.info("results_saved", path=filepath, kind="listings", count=len(result.page))
        return filepath

    def save_csv(self, records: Sequence[PropertyRecord], prefix: str = "listings") -> str:
        """Save listings as a CSV table.

        Returns:
            Path to the saved file.
        """
        self._ensure_dir()
        filepath = self._path(prefix, "csv")
        try:
            records_to_frame(records).to_csv(filepath, index=False)
        except OSError as e:
            log.error("results_save_failed", path=filepath, error=str(e))
            raise ExportError(f"Cannot write {filepath}: {e}") from e
        log.info("results_saved", path=filepath, kind="csv", count=len(records))
        return filepath
