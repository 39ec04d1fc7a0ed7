"""
Pytest fixtures shared by the pricing and serviceability tests.
"""

from decimal import Decimal

import pytest

from rolloff.schemas.pricing import PricingRule
from rolloff.schemas.serviceability import GeoJsonPolygon, ServiceArea


SQUARE_RING = [[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]]
HOLE_RING = [[3, 3], [7, 3], [7, 7], [3, 7], [3, 3]]

# Rough box around Pittsburgh, (lng, lat)
PITTSBURGH_RING = [[-80.2, 40.2], [-79.7, 40.2], [-79.7, 40.7], [-80.2, 40.7], [-80.2, 40.2]]


@pytest.fixture
def sample_rule():
    """15 yard household trash rule matching the seed data."""
    return PricingRule(
        base_price=39900,       # $399.00
        delivery_fee=0,
        haul_fee=0,
        included_days=3,
        extra_day_fee=2500,     # $25.00/day
        included_tons=Decimal("1.00"),
        overage_per_ton=10000,  # $100.00/ton
        dumpster_size=15,
        waste_type="household_trash",
        public_notes="Test notes",
    )


@pytest.fixture
def rule_with_fees(sample_rule):
    """Same rule with delivery and disposal fees."""
    return sample_rule.model_copy(update={"delivery_fee": 5000, "haul_fee": 7500})


@pytest.fixture
def square_polygon():
    return GeoJsonPolygon(type="Polygon", coordinates=[SQUARE_RING])


@pytest.fixture
def square_with_hole():
    return GeoJsonPolygon(type="Polygon", coordinates=[SQUARE_RING, HOLE_RING])


def make_area(area_id, name, ring, active=True, holes=()):
    return ServiceArea(
        id=area_id,
        name=name,
        polygon={"type": "Polygon", "coordinates": [ring, *holes]},
        active=active,
    )


@pytest.fixture
def square_area():
    return make_area("area-square", "Test Square", SQUARE_RING)


@pytest.fixture
def pittsburgh_area():
    return make_area("area-pgh", "Greater Pittsburgh", PITTSBURGH_RING)
