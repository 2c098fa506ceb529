"""Export services."""

from .exporter import ResultExporter, records_to_frame

__all__ = [
    "ResultExporter",
    "records_to_frame",
]
