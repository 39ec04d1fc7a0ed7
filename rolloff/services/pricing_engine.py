"""
Pricing Engine for Dumpster Rentals.

This service handles:
1. Rental day counting (calendar days between dropoff and pickup)
2. Quote calculation (snapshot + line items) from a pricing rule
3. Optional sales tax and card processing fee
4. Tonnage overage after the dump ticket comes back

Everything here is a pure function of its arguments. Money is integer cents;
tons and rates are Decimal.

Tax model (PA waste management):
- TAXABLE: container rental only (base_price)
- NON-TAXABLE: delivery, haul/disposal, extended service days, overages
"""
import logging
from decimal import Decimal
from typing import Optional

from rolloff.config import settings
from rolloff.core.dates import DateLike, calendar_date, comparable_instants, parse_date
from rolloff.core.money import Number, to_decimal, ceil_cents, round_cents, format_cents
from rolloff.schemas.pricing import (
    LineItem,
    LineItemType,
    OverageCharge,
    PricingOptions,
    PricingResult,
    PricingRule,
    PricingSnapshot,
)

logger = logging.getLogger(__name__)

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
]


class PricingError(Exception):
    """Base error for pricing calculations."""
    pass


class InvalidDateRange(PricingError):
    """Pickup is earlier than dropoff."""

    def __init__(self, message: str = "Pickup date must be on or after dropoff date"):
        super().__init__(message)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def _percent(rate: Decimal) -> str:
    return format((rate * 100).normalize(), "f")


# ============================================
# RENTAL PERIOD
# ============================================

def calculate_rental_days(dropoff: DateLike, pickup: DateLike) -> int:
    """
    Number of rental days between two dates.

    Counts calendar days: pickup_date - dropoff_date, ignoring time of day.
    - Jan 1 -> Jan 1 = 0 (same-day pickup)
    - Jan 1 -> Jan 2 = 1
    - Jan 30 -> Feb 2 = 3
    Never negative; a pickup dated before the dropoff yields 0.
    """
    days = (calendar_date(pickup) - calendar_date(dropoff)).days
    return max(0, days)


# ============================================
# QUOTE
# ============================================

def calculate_processing_fee(amount: int) -> int:
    """Card processing fee for a charge of `amount` cents (0 for nothing owed)."""
    if amount <= 0:
        return 0
    return round_cents(Decimal(amount) * settings.PROCESSING_FEE_RATE) + settings.PROCESSING_FEE_FIXED_CENTS


def calculate_pricing(
    rule: PricingRule,
    dropoff: DateLike,
    pickup: DateLike,
    options: Optional[PricingOptions] = None,
) -> PricingResult:
    """
    Calculate a rental quote.

    Raises InvalidDateRange when the pickup instant is strictly before the
    dropoff instant. Same-day pickup is allowed.

    Returns the snapshot to persist with the booking and the line items to
    show/invoice, in sort_order.
    """
    options = options or PricingOptions()

    dropoff_at, pickup_at = comparable_instants(dropoff, pickup)
    if pickup_at < dropoff_at:
        logger.warning(f"Rejected quote: pickup {pickup_at} is before dropoff {dropoff_at}")
        raise InvalidDateRange()

    rental_days = calculate_rental_days(dropoff, pickup)
    extra_days = max(0, rental_days - rule.included_days)
    extra_days_cost = extra_days * rule.extra_day_fee

    subtotal = rule.base_price + rule.delivery_fee + rule.haul_fee + extra_days_cost

    # Tax: only the rental itself is taxable
    taxable_amount = rule.base_price
    tax_rate = Decimal("0") if options.tax_exempt else options.tax_rate
    tax_amount = round_cents(Decimal(taxable_amount) * tax_rate)

    # Processing fee is charged on what the card will actually be billed
    processing_fee = (
        calculate_processing_fee(subtotal + tax_amount)
        if options.include_processing_fee
        else 0
    )

    total = subtotal + tax_amount + processing_fee

    snapshot = PricingSnapshot(
        base_price=rule.base_price,
        delivery_fee=rule.delivery_fee,
        haul_fee=rule.haul_fee,
        included_days=rule.included_days,
        extra_day_fee=rule.extra_day_fee,
        included_tons=rule.included_tons,
        overage_per_ton=rule.overage_per_ton,
        dumpster_size=rule.dumpster_size,
        waste_type=rule.waste_type,
        public_notes=rule.public_notes,
        rental_days=rental_days,
        extra_days=extra_days,
        extra_days_cost=extra_days_cost,
        subtotal=subtotal,
        taxable_amount=taxable_amount,
        tax_rate=tax_rate,
        tax_amount=tax_amount,
        processing_fee=processing_fee,
        tax_exempt=options.tax_exempt,
        total=total,
    )

    line_items = []

    def add(label: str, amount: int, item_type: LineItemType, taxable: Optional[bool] = None):
        line_items.append(LineItem(
            label=label,
            amount=amount,
            type=item_type,
            sort_order=len(line_items),
            taxable=taxable,
        ))

    add(
        f"{rule.dumpster_size} Yard Dumpster Rental ({_plural(rule.included_days, 'day')} included)",
        rule.base_price,
        LineItemType.BASE,
        taxable=True,
    )

    if rule.delivery_fee > 0:
        add("Delivery Fee", rule.delivery_fee, LineItemType.DELIVERY, taxable=False)

    if rule.haul_fee > 0:
        add("Disposal Fee", rule.haul_fee, LineItemType.HAUL, taxable=False)

    # Labelled as a service ("Extended Service Days"), never as extra rental
    if extra_days > 0:
        add(
            f"Extended Service Days ({_plural(extra_days, 'day')} @ {format_cents(rule.extra_day_fee)}/day)",
            extra_days_cost,
            LineItemType.EXTRA_DAYS,
            taxable=False,
        )

    if tax_amount > 0:
        add(
            f"Sales Tax ({_percent(tax_rate)}% on {format_cents(taxable_amount)})",
            tax_amount,
            LineItemType.TAX,
        )

    if processing_fee > 0:
        add("Card Processing Fee", processing_fee, LineItemType.PROCESSING_FEE, taxable=False)

    logger.debug(
        f"Quoted {rule.dumpster_size}yd {rule.waste_type}: {rental_days} days "
        f"({extra_days} extra), subtotal={subtotal}, total={total}"
    )

    return PricingResult(snapshot=snapshot, line_items=tuple(line_items))


# ============================================
# OVERAGE
# ============================================

def _overage_tons(snapshot: PricingSnapshot, actual_tons: Number) -> Decimal:
    return max(Decimal("0"), to_decimal(actual_tons) - snapshot.included_tons)


def calculate_overage(snapshot: PricingSnapshot, actual_tons: Number) -> int:
    """
    Overage charge in cents for the weight on the dump ticket.

    Rounds up to the next cent so a fractional ton is never undercharged.
    Example: 1.0 t included, 10000c/t, 1.5 t actual -> 5000.
    """
    overage_tons = _overage_tons(snapshot, actual_tons)
    return ceil_cents(overage_tons * snapshot.overage_per_ton)


def calculate_overage_charge(
    snapshot: PricingSnapshot,
    actual_tons: Number,
    include_processing_fee: bool = False,
) -> OverageCharge:
    """Overage charge with its optional processing fee. Overages are not taxed."""
    overage_tons = _overage_tons(snapshot, actual_tons)
    overage_amount = calculate_overage(snapshot, actual_tons)
    processing_fee = calculate_processing_fee(overage_amount) if include_processing_fee else 0

    if overage_amount:
        logger.debug(f"Overage {overage_tons} t over {snapshot.included_tons} t = {overage_amount}c")

    return OverageCharge(
        overage_tons=overage_tons,
        overage_amount=overage_amount,
        processing_fee=processing_fee,
        total=overage_amount + processing_fee,
    )
