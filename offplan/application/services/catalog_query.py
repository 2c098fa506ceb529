"""Catalog query engine.

Filters, sorts and paginates the catalog for a given QueryState. Every
function here is pure: the catalog is never modified.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from typing import Any

from offplan.core.logging import get_logger
from offplan.domain.models.property import PropertyRecord
from offplan.domain.models.query import QueryResult, QueryState, SortKey

log = get_logger(__name__)

# key function, reverse
_SORT_ORDERS: dict[SortKey, tuple[Callable[[PropertyRecord], Any], bool]] = {
    SortKey.TITLE: (lambda p: p.title.casefold(), False),
    SortKey.PRICE_ASC: (lambda p: p.price, False),
    SortKey.PRICE_DESC: (lambda p: p.price, True),
    SortKey.HANDOVER: (lambda p: p.handover_sort_key, False),
}


def matches(record: PropertyRecord, state: QueryState) -> bool:
    """Check a record against every active filter of the state.

    Args:
        record: Catalog record
        state: Query state

    Returns:
        True if the record passes all filters
    """
    if state.search:
        term = state.search.casefold()
        if not (
            term in record.title.casefold()
            or term in record.developer.casefold()
            or term in record.region.casefold()
        ):
            return False

    if state.region and record.region != state.region:
        return False

    if state.type and record.type != state.type:
        return False

    if state.developer and record.developer != state.developer:
        return False

    if state.max_price is not None and record.price > state.max_price:
        return False

    if state.min_bedrooms is not None and record.effective_bedroom_min < state.min_bedrooms:
        return False

    return True


def filter_catalog(catalog: Sequence[PropertyRecord], state: QueryState) -> list[PropertyRecord]:
    """Return the records passing every filter, in catalog order."""
    return [p for p in catalog if matches(p, state)]


def sort_records(records: Sequence[PropertyRecord], sort_key: SortKey) -> list[PropertyRecord]:
    """Stable sort of records by the given key.

    Descending price keeps catalog order among equal prices.
    """
    key, reverse = _SORT_ORDERS[SortKey(sort_key)]
    return sorted(records, key=key, reverse=reverse)


def count_pages(total: int, page_size: int) -> int:
    """Number of pages for `total` items, at least 1."""
    return max(1, math.ceil(total / page_size))


def paginate(records: Sequence[PropertyRecord], page: int, page_size: int) -> list[PropertyRecord]:
    """Slice one page out of `records`.

    Pages are 1-based. Pages before the first or past the last are empty.
    """
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(records[start:start + page_size])


def query(catalog: Sequence[PropertyRecord], state: QueryState) -> QueryResult:
    """Filter, sort and paginate the catalog.

    Args:
        catalog: Full catalog
        state: Filters, sort key and requested page

    Returns:
        QueryResult with the requested page, match count and page count
    """
    matched = sort_records(filter_catalog(catalog, state), state.sort_key)
    total_pages = count_pages(len(matched), state.page_size)
    page = paginate(matched, state.page, state.page_size)

    log.debug(
        "catalog_query_executed",
        matched=len(matched),
        page=state.page,
        total_pages=total_pages,
        sort=state.sort_key.value,
    )

    return QueryResult(
        page=tuple(page),
        total_matched=len(matched),
        total_pages=total_pages,
        page_number=state.page,
        page_size=state.page_size,
    )


def clamp_page(state: QueryState, total_pages: int) -> QueryState:
    """Return a state whose page lies within [1, total_pages]."""
    page = min(max(state.page, 1), max(total_pages, 1))
    if page == state.page:
        return state
    return state.with_page(page)
