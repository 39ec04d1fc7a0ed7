from rolloff.schemas.pricing import (
    LineItemType,
    PricingRule,
    PricingOptions,
    LineItem,
    PricingSnapshot,
    PricingResult,
    OverageCharge,
)
from rolloff.schemas.serviceability import (
    Point,
    Ring,
    GeoJsonPolygon,
    ServiceArea,
    ServiceabilityResult,
)

__all__ = [
    # Pricing
    "LineItemType",
    "PricingRule",
    "PricingOptions",
    "LineItem",
    "PricingSnapshot",
    "PricingResult",
    "OverageCharge",
    # Serviceability
    "Point",
    "Ring",
    "GeoJsonPolygon",
    "ServiceArea",
    "ServiceabilityResult",
]
