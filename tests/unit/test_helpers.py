"""Unit tests for offplan.ui.helpers formatting functions."""

import pytest

from offplan.domain.models.query import QueryResult
from offplan.ui.helpers import (
    bar_width_pct,
    extract_bedrooms,
    format_aed,
    format_handover,
    format_handover_date,
    format_listing_price,
    format_pct,
    format_thousands,
    pagination_label,
)


class TestFormatAed:
    """Tests for compact AED formatting."""

    @pytest.mark.parametrize("value, expected", [
        (1_500_000, "AED 1.5M"),
        (15_000_000, "AED 15.0M"),
        (850_000, "AED 850K"),
        (1_000, "AED 1K"),
        (900, "AED 900"),
        (0, "AED 0"),
    ])
    def test_compact(self, value, expected):
        assert format_aed(value) == expected

    @pytest.mark.parametrize("value, expected", [
        (2_500, "AED 3K"),
        (1_250_000, "AED 1.3M"),
        (3_450_000, "AED 3.5M"),
        (500, "AED 500"),
        (2.5, "AED 3"),
    ])
    def test_halves_round_up(self, value, expected):
        assert format_aed(value) == expected

    def test_large_projection_amount(self):
        text = format_aed(1e200)
        assert text.endswith(".0M")
        assert text[len("AED "):-len(".0M")].isdigit()

    def test_none(self):
        assert format_aed(None) == "—"

    def test_listing_price_on_request(self):
        assert format_listing_price(None) == "Price on request"
        assert format_listing_price(0) == "Price on request"
        assert format_listing_price(2_500_000) == "AED 2.5M"

    def test_thousands(self):
        assert format_thousands(1_250_000) == "AED 1,250,000"


class TestFormatPct:
    """Tests for percentage formatting."""

    def test_one_decimal(self):
        assert format_pct(354.664) == "354.7%"

    def test_half_rounds_up(self):
        assert format_pct(12.25) == "12.3%"

    def test_none(self):
        assert format_pct(None) == "—"

    def test_bar_width_clamped(self):
        assert bar_width_pct(120) == 100.0
        assert bar_width_pct(-15) == 0.0
        assert bar_width_pct(66.2) == 66.2


class TestHandover:
    """Tests for handover date formatting."""

    def test_month_year(self):
        assert format_handover("2027-06-30") == "Jun 2027"

    def test_timestamp_with_zone(self):
        assert format_handover("2027-12-31T00:00:00Z") == "Dec 2027"

    def test_missing_is_tba(self):
        assert format_handover(None) == "TBA"
        assert format_handover("") == "TBA"

    def test_unparseable_passthrough(self):
        assert format_handover("Q4 2027") == "Q4 2027"

    def test_full_date(self):
        assert format_handover_date("2027-06-30") == "30 Jun 2027"
        assert format_handover_date(None) == "TBA"


class TestExtractBedrooms:
    """Tests for extract_bedrooms."""

    def test_number_in_name(self):
        assert extract_bedrooms("2 Bedroom Apartment") == "2 BR"

    def test_no_number(self):
        assert extract_bedrooms("Studio") == "Studio"


class TestPaginationLabel:
    """Tests for pagination_label."""

    def test_label(self, catalog):
        result = QueryResult(page=catalog[:4], total_matched=6, total_pages=2, page_number=1, page_size=4)
        assert pagination_label(result) == "Page 1 of 2 (1-4 of 6)"
