"""Catalog aggregations for summary displays.

All reductions run over the full catalog, not the filtered subset.
"""

from __future__ import annotations

import math
from collections import Counter, defaultdict
from collections.abc import Sequence
from dataclasses import dataclass

from offplan.core.exceptions import EmptyCatalogError
from offplan.core.settings import get_settings
from offplan.domain.models.property import PropertyRecord


@dataclass(frozen=True)
class DeveloperSummary:
    """Listing count and average price for one developer."""
    name: str
    count: int
    average_price: int
    logo: str | None = None


@dataclass(frozen=True)
class CatalogSummary:
    """Header figures of the listing page."""
    total_properties: int
    filtered_count: int
    region_count: int
    developer_count: int
    average_price: int
    min_price: float
    max_price: float


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounded up."""
    return math.floor(value + 0.5)


def _distinct(catalog: Sequence[PropertyRecord], field: str) -> list[str]:
    return sorted({getattr(p, field) for p in catalog if getattr(p, field)})


def distinct_regions(catalog: Sequence[PropertyRecord]) -> list[str]:
    """Sorted distinct non-empty regions."""
    return _distinct(catalog, "region")


def distinct_types(catalog: Sequence[PropertyRecord]) -> list[str]:
    """Sorted distinct non-empty property types."""
    return _distinct(catalog, "type")


def distinct_developers(catalog: Sequence[PropertyRecord]) -> list[str]:
    """Sorted distinct non-empty developers."""
    return _distinct(catalog, "developer")


def average_price(catalog: Sequence[PropertyRecord]) -> int:
    """Mean listing price, rounded half up.

    Raises:
        EmptyCatalogError: If the catalog is empty
    """
    if not catalog:
        raise EmptyCatalogError("Average price is undefined for an empty catalog")
    return round_half_up(sum(p.price for p in catalog) / len(catalog))


def price_range(catalog: Sequence[PropertyRecord]) -> tuple[float, float]:
    """(min, max) listing price.

    Raises:
        EmptyCatalogError: If the catalog is empty
    """
    if not catalog:
        raise EmptyCatalogError("Price range is undefined for an empty catalog")
    prices = [p.price for p in catalog]
    return min(prices), max(prices)


def top_developers(catalog: Sequence[PropertyRecord], n: int | None = None) -> list[DeveloperSummary]:
    """Developers with the most listings.

    Ties keep the order in which developers first appear in the catalog.
    The logo is the first one found among the developer's listings.

    Args:
        catalog: Full catalog
        n: Number of developers to return. Defaults to settings.popular_developers_count.

    Returns:
        Up to `n` DeveloperSummary, most listings first
    """
    if n is None:
        n = get_settings().popular_developers_count

    counts: Counter[str] = Counter()
    totals: dict[str, float] = defaultdict(float)
    logos: dict[str, str] = {}

    for p in catalog:
        if not p.developer:
            continue
        counts[p.developer] += 1
        totals[p.developer] += p.price
        if p.developer_logo and p.developer not in logos:
            logos[p.developer] = p.developer_logo

    # Counter preserves insertion order and sorted() is stable
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)[:n]
    return [
        DeveloperSummary(
            name=name,
            count=count,
            average_price=round_half_up(totals[name] / count),
            logo=logos.get(name),
        )
        for name, count in ranked
    ]


def featured(catalog: Sequence[PropertyRecord], n: int | None = None) -> list[PropertyRecord]:
    """Most expensive listings, ties in catalog order. Defaults to settings.featured_count."""
    if n is None:
        n = get_settings().featured_count
    return sorted(catalog, key=lambda p: p.price, reverse=True)[:n]


def summarize(catalog: Sequence[PropertyRecord], matched: int) -> CatalogSummary:
    """Build the listing header figures.

    Args:
        catalog: Full catalog
        matched: Number of records matching the current query

    Raises:
        EmptyCatalogError: If the catalog is empty
    """
    low, high = price_range(catalog)
    return CatalogSummary(
        total_properties=len(catalog),
        filtered_count=matched,
        region_count=len(distinct_regions(catalog)),
        developer_count=len(distinct_developers(catalog)),
        average_price=average_price(catalog),
        min_price=low,
        max_price=high,
    )
