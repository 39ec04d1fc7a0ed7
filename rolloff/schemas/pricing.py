"""
Pricing Schemas.

Covers:
1. PricingRule - rate card for one dumpster size / waste type
2. PricingOptions - optional tax and card processing fee
3. PricingSnapshot - frozen record of what a customer was quoted
4. LineItem - display/invoice rows derived from the snapshot
5. OverageCharge - post-pickup tonnage overage

All money fields are integer cents.
"""
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple

from pydantic import Field, field_validator

from rolloff.config import settings
from rolloff.core.money import to_decimal
from rolloff.schemas.base import InputSchema, FrozenSchema


# ==================== Enums ====================

class LineItemType(str, Enum):
    """Line item classification."""
    BASE = "base"                      # dumpster rental (taxable)
    DELIVERY = "delivery"
    HAUL = "haul"                      # disposal fee
    EXTRA_DAYS = "extra_days"          # extended service days
    TAX = "tax"
    PROCESSING_FEE = "processing_fee"  # card processing pass-through
    DISCOUNT = "discount"
    ADJUSTMENT = "adjustment"


# ==================== Inputs ====================

class PricingRule(InputSchema):
    """Pricing rule for a dumpster size and waste type."""
    base_price: int = Field(..., ge=0, description="Rental price in cents")
    delivery_fee: int = Field(0, ge=0, description="Delivery fee in cents")
    haul_fee: int = Field(0, ge=0, description="Haul/disposal fee in cents")
    included_days: int = Field(..., ge=0)
    extra_day_fee: int = Field(0, ge=0, description="Cents per day beyond included_days")
    included_tons: Decimal = Field(..., ge=0)
    overage_per_ton: int = Field(0, ge=0, description="Cents per ton beyond included_tons")
    dumpster_size: int = Field(..., ge=1, description="Container size in yards")
    waste_type: str = Field(..., min_length=1)
    public_notes: Optional[str] = None

    @field_validator('included_tons', mode='before')
    @classmethod
    def parse_tons(cls, v):
        if isinstance(v, (int, float, str)) and not isinstance(v, bool):
            return to_decimal(v)
        return v


class PricingOptions(InputSchema):
    """
    Optional charges layered on top of the base quote.

    The defaults add nothing, so total == subtotal unless a caller opts in.
    """
    tax_rate: Decimal = Field(Decimal("0"), ge=0, lt=1)
    tax_exempt: bool = False
    include_processing_fee: bool = False

    @classmethod
    def with_sales_tax(cls, **kwargs) -> "PricingOptions":
        """Options using the configured sales tax rate (checkout default)."""
        kwargs.setdefault("tax_rate", settings.SALES_TAX_RATE)
        kwargs.setdefault("include_processing_fee", True)
        return cls(**kwargs)


# ==================== Outputs ====================

class LineItem(FrozenSchema):
    """Single display row of a quote or invoice."""
    label: str
    amount: int = Field(..., description="Cents; negative for discounts")
    type: LineItemType
    sort_order: int = Field(..., ge=0)
    taxable: Optional[bool] = None


class PricingSnapshot(FrozenSchema):
    """
    Point-in-time copy of the rule plus everything computed from it.

    Persisted verbatim with a quote/booking; never recalculated when the
    source rule changes later.
    """
    # Copied from the rule
    base_price: int
    delivery_fee: int
    haul_fee: int
    included_days: int
    extra_day_fee: int
    included_tons: Decimal
    overage_per_ton: int
    dumpster_size: int
    waste_type: str
    public_notes: Optional[str] = None

    # Computed
    rental_days: int
    extra_days: int
    extra_days_cost: int
    subtotal: int
    taxable_amount: int = 0
    tax_rate: Decimal = Decimal("0")
    tax_amount: int = 0
    processing_fee: int = 0
    tax_exempt: bool = False
    total: int

    @field_validator('included_tons', 'tax_rate', mode='before')
    @classmethod
    def parse_decimal(cls, v):
        if isinstance(v, (int, float, str)) and not isinstance(v, bool):
            return to_decimal(v)
        return v


class PricingResult(FrozenSchema):
    """Snapshot plus its line items, in display order."""
    snapshot: PricingSnapshot
    line_items: Tuple[LineItem, ...]


class OverageCharge(FrozenSchema):
    """Tonnage overage billed after the dump ticket comes back."""
    overage_tons: Decimal
    overage_amount: int
    processing_fee: int = 0
    total: int
