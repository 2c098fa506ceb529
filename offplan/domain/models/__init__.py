"""Data models for offplan."""

from .property import AgentContact, PaymentPlan, PropertyRecord, UnitRecord
from .query import QueryResult, QueryState, SortKey
from .roi import ROIInputs, ROIResult

__all__ = [
    "AgentContact",
    "PaymentPlan",
    "PropertyRecord",
    "UnitRecord",
    "QueryResult",
    "QueryState",
    "SortKey",
    "ROIInputs",
    "ROIResult",
]
