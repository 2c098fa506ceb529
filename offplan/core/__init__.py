"""Core exceptions, logging and settings."""

from .exceptions import (
    DataLoadError,
    EmptyCatalogError,
    ExportError,
    OffplanError,
    ProjectionError,
    PropertyNotFoundError,
    UnitNotFoundError,
    ValidationError,
    ZeroDownPaymentError,
)

__all__ = [
    "OffplanError",
    "DataLoadError",
    "PropertyNotFoundError",
    "UnitNotFoundError",
    "EmptyCatalogError",
    "ProjectionError",
    "ValidationError",
    "ZeroDownPaymentError",
    "ExportError",
]
