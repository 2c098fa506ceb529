"""Custom exceptions for offplan.

Domain-specific exception types for better error handling and debugging.
"""

from __future__ import annotations

from typing import Any


class OffplanError(Exception):
    """Base exception for all offplan errors."""
    pass


# --- Data Errors ---

class DataLoadError(OffplanError):
    """Failed to load or parse the catalog file."""
    pass


class PropertyNotFoundError(OffplanError):
    """No property with the requested id exists in the catalog."""

    def __init__(self, property_id: Any):
        self.property_id = property_id
        super().__init__(f"Property not found: {property_id!r}")


class UnitNotFoundError(OffplanError):
    """No unit with the requested id exists in the property's floor plan."""

    def __init__(self, property_id: Any, unit_id: Any):
        self.property_id = property_id
        self.unit_id = unit_id
        super().__init__(f"Unit {unit_id!r} not found in property {property_id!r}")


class EmptyCatalogError(OffplanError):
    """Aggregation requested over a catalog with no records."""
    pass


# --- Calculation Errors ---

class ProjectionError(OffplanError):
    """Error during ROI projection."""
    pass


class ValidationError(ProjectionError, ValueError):
    """Invalid ROI input (negative, non-numeric or zero holding period)."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        self.errors = errors or []
        super().__init__(message)


class ZeroDownPaymentError(ProjectionError, ZeroDivisionError):
    """Total ROI is undefined because the down payment is zero."""
    pass


# --- Export Errors ---

class ExportError(OffplanError):
    """Failed to write an export file."""
    pass
