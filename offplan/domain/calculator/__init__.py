"""Financial calculators."""

from .roi import annualized_return_pct, future_value, project, share_pct

__all__ = [
    "project",
    "future_value",
    "annualized_return_pct",
    "share_pct",
]
