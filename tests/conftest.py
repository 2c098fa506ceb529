"""Pytest fixtures for offplan tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from offplan.application.services.catalog_loader import build_catalog  # noqa: E402


@pytest.fixture
def raw_listings():
    """Raw catalog entries, mixing the flat and "newParam" layouts."""
    return [
        {
            "id": 1,
            "title": "Marina Vista",
            "region": "Dubai Marina",
            "developer": "Emaar",
            "type": "Apartment",
            "price": 2_500_000,
            "developerLogo": "https://cdn.example.com/emaar.png",
            "photos": ["https://cdn.example.com/mv-1.jpg", "https://cdn.example.com/mv-2.jpg"],
            "amenities": ["Pool", "Gym", "Concierge", "Marina view"],
            "agent": {"name": "Layla Haddad", "phone": "+971500000000", "email": "sales@example.com"},
            "newParam": {
                "bedroomMin": 1,
                "bedroomMax": 3,
                "handoverTime": "2027-06-30",
                "paymentPlan": '{"one": 10, "two": 50, "three": 40}',
                "floorPlan": [
                    {
                        "id": "u1",
                        "name": "1 Bedroom Apartment",
                        "area": 750,
                        "price": 1_800_000,
                        "imgUrl": ["https://cdn.example.com/u1.png"],
                    },
                    {
                        "id": "u3",
                        "name": "3 Bedroom Apartment",
                        "area": 1600,
                        "price": "",
                        "imgUrl": [],
                    },
                ],
            },
        },
        {
            "id": 2,
            "title": "Creek Horizon",
            "region": "Dubai Creek Harbour",
            "developer": "Emaar",
            "type": "Apartment",
            "price": 1_200_000,
            "bedroomMin": 2,
            "handoverTime": "2026-12-31",
            "photos": ["https://cdn.example.com/ch-1.jpg"],
        },
        {
            "id": 3,
            "title": "Palm Villas",
            "region": "Palm Jumeirah",
            "developer": "Nakheel",
            "type": "Villa",
            "price": 15_000_000,
            "photos": ["https://cdn.example.com/pv-1.jpg"],
            "newParam": {"bedroomMin": 4, "bedroomMax": 6},
        },
        {
            "id": "4",
            "title": "azure Residences",
            "region": "JVC",
            "developer": "Sobha",
            "type": "Apartment",
            "price": 850_000,
            "photos": ["https://cdn.example.com/az-1.jpg"],
            "newParam": {"handoverTime": "2026-03-31", "paymentPlan": "to be announced"},
        },
        {
            "id": 5,
            "title": "Emerald Hills Townhouses",
            "region": "Dubai Hills",
            "developer": "Damac",
            "type": "Townhouse",
            "price": 3_200_000,
            "photos": [],
            "newParam": {"bedroomMin": 3, "handoverTime": "2028-01-15"},
        },
        {
            "id": 6,
            "title": "Sobha Hartland",
            "region": "Mohammed Bin Rashid City",
            "developer": "Sobha",
            "type": "Apartment",
            "price": 1_200_000,
            "photos": ["https://cdn.example.com/sh-1.jpg"],
            "newParam": {"bedroomMin": 0, "handoverTime": "2027-06-30"},
        },
    ]


@pytest.fixture
def catalog(raw_listings):
    """Validated sample catalog."""
    return build_catalog(raw_listings)


@pytest.fixture
def roi_reference_inputs():
    """Reference ROI calculator inputs."""
    return {
        "property_price": 1_000_000,
        "down_payment_pct": 20,
        "annual_appreciation_pct": 8,
        "rental_yield_pct": 6,
        "holding_period_years": 5,
        "annual_service_charge": 12_000,
    }
