"""UI helper functions.

Framework-agnostic formatting shared by every rendering layer.
"""

from __future__ import annotations

import re
from datetime import datetime
from decimal import ROUND_HALF_UP, Context, Decimal

from offplan.domain.models.query import QueryResult

CURRENCY = "AED"
PRICE_ON_REQUEST = "Price on request"
HANDOVER_UNKNOWN = "TBA"

_BEDROOM_PATTERN = re.compile(r"(\d+)")
# Wide enough for the integer digits of any finite float
_ROUNDING_CONTEXT = Context(prec=400)


def _half_up(value: float, decimals: int = 0) -> Decimal:
    """Round on the decimal representation, halves away from zero."""
    return Decimal(str(value)).quantize(
        Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP, context=_ROUNDING_CONTEXT
    )


def format_aed(value: float | None, decimals: int = 1) -> str:
    """Format an amount in compact AED notation.

    Args:
        value: Amount in AED
        decimals: Decimal places for the millions form

    Returns:
        Formatted string like "AED 1.5M", "AED 850K" or "AED 900"
    """
    if value is None:
        return "—"
    if value >= 1_000_000:
        return f"{CURRENCY} {_half_up(value / 1_000_000, decimals)}M"
    if value >= 1_000:
        return f"{CURRENCY} {_half_up(value / 1_000)}K"
    return f"{CURRENCY} {_half_up(value)}"


def format_listing_price(value: float | None) -> str:
    """Like format_aed, but missing or zero prices read "Price on request"."""
    if not value:
        return PRICE_ON_REQUEST
    return format_aed(value)


def format_thousands(value: float) -> str:
    """Format an amount with thousands separators, e.g. "AED 1,250,000"."""
    return f"{CURRENCY} {int(value):,}"


def format_pct(value: float | None, decimals: int = 1) -> str:
    """Format a percentage value, e.g. "354.7%"."""
    if value is None:
        return "—"
    return f"{_half_up(value, decimals)}%"


def bar_width_pct(share_pct: float) -> float:
    """Clamp a share percentage to a drawable bar width in [0, 100]."""
    return min(max(share_pct, 0.0), 100.0)


def _parse_date(value: str) -> datetime | None:
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def format_handover(value: str | None) -> str:
    """Month and year of a handover date, e.g. "Dec 2027".

    Missing dates read "TBA"; unparseable ones are returned unchanged.
    """
    if not value:
        return HANDOVER_UNKNOWN
    parsed = _parse_date(value)
    if parsed is None:
        return value
    return parsed.strftime("%b %Y")


def format_handover_date(value: str | None) -> str:
    """Full handover date, e.g. "31 Dec 2027"."""
    if not value:
        return HANDOVER_UNKNOWN
    parsed = _parse_date(value)
    if parsed is None:
        return value
    return f"{parsed.day} {parsed.strftime('%b %Y')}"


def extract_bedrooms(unit_name: str) -> str:
    """Bedroom label from a unit name ("2 Bedroom Apartment" -> "2 BR")."""
    match = _BEDROOM_PATTERN.search(unit_name)
    return f"{match.group(1)} BR" if match else unit_name


def pagination_label(result: QueryResult) -> str:
    """Text like "Page 2 of 5 (13-24 of 58)"."""
    return (
        f"Page {result.page_number} of {result.total_pages} "
        f"({result.start_item}-{result.end_item} of {result.total_matched})"
    )
