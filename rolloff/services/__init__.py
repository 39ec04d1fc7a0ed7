# Services module
from rolloff.services.pricing_engine import (
    PricingError,
    InvalidDateRange,
    calculate_rental_days,
    calculate_pricing,
    calculate_overage,
    calculate_overage_charge,
    calculate_processing_fee,
    format_cents,
    parse_date,
)

# Serviceability
from rolloff.services.serviceability_service import (
    is_point_in_polygon,
    is_point_in_geojson_polygon,
    check_serviceability,
    is_valid_polygon,
    polygon_errors,
)

__all__ = [
    "PricingError",
    "InvalidDateRange",
    "calculate_rental_days",
    "calculate_pricing",
    "calculate_overage",
    "calculate_overage_charge",
    "calculate_processing_fee",
    "format_cents",
    "parse_date",
    # Serviceability
    "is_point_in_polygon",
    "is_point_in_geojson_polygon",
    "check_serviceability",
    "is_valid_polygon",
    "polygon_errors",
]
