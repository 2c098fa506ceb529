"""Application services."""

from .catalog_loader import Catalog, build_catalog, load_catalog
from .catalog_query import clamp_page, query
from .catalog_stats import (
    CatalogSummary,
    DeveloperSummary,
    average_price,
    distinct_developers,
    distinct_regions,
    distinct_types,
    featured,
    price_range,
    summarize,
    top_developers,
)
from .navigation import (
    find_property,
    find_unit,
    report_inputs_for_unit,
    roi_inputs_for_unit,
    roi_inputs_from_params,
    roi_params,
)

__all__ = [
    "Catalog",
    "build_catalog",
    "load_catalog",
    "query",
    "clamp_page",
    "CatalogSummary",
    "DeveloperSummary",
    "average_price",
    "distinct_developers",
    "distinct_regions",
    "distinct_types",
    "featured",
    "price_range",
    "summarize",
    "top_developers",
    "find_property",
    "find_unit",
    "report_inputs_for_unit",
    "roi_inputs_for_unit",
    "roi_inputs_from_params",
    "roi_params",
]
