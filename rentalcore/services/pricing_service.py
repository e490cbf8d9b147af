"""
Quote Pricing Service

Computes the itemized price of a rental quote:
line items -> insurance -> delivery -> subtotal -> tax -> total.

Everything stays in full Decimal precision; rounding is a display concern
(see formatting.py).
"""

import logging
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Sequence, Union

from rentalcore.errors import InvalidDateRange, InvalidInput
from rentalcore.models.common import DateInput, RentalPeriod
from rentalcore.models.quotes import (
    ZERO,
    LineItem,
    LineTotal,
    PriceBreakdown,
    PricingConfig,
    QuoteResult,
)

logger = logging.getLogger(__name__)

Number = Union[Decimal, int, float, str]


# =============================================================================
# Dates
# =============================================================================

def parse_rental_date(value: DateInput, field: str = "date") -> datetime:
    """
    Normalize a date input to a datetime.

    Plain dates become midnight. Anything unparsable is an InvalidDateRange.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str) and value.strip():
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            pass
    raise InvalidDateRange(
        f"Unparsable {field}: {value!r}",
        details={"field": field, "value": str(value)},
    )


def rental_duration_days(start: DateInput, end: DateInput) -> int:
    """Billable days: whole days rounded up, never less than 1."""
    start_dt = parse_rental_date(start, "start_date")
    end_dt = parse_rental_date(end, "end_date")

    try:
        delta = end_dt - start_dt
    except TypeError:
        # mixing timezone-aware and naive values
        raise InvalidDateRange(
            "Start and end dates must both include or both omit a timezone",
            details={"start_date": str(start), "end_date": str(end)},
        )

    if delta.total_seconds() < 0:
        raise InvalidDateRange(
            "End date is before start date",
            details={"start_date": str(start), "end_date": str(end)},
        )

    days = delta.days
    if delta.seconds or delta.microseconds:
        days += 1
    return max(1, days)


# =============================================================================
# Pricing
# =============================================================================

def _to_decimal(value: Number, field: str) -> Decimal:
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise InvalidInput(f"{field} is not a number: {value!r}", details={"field": field})
    if not result.is_finite():
        raise InvalidInput(f"{field} must be finite", details={"field": field})
    if result < 0:
        raise InvalidInput(f"{field} must not be negative", details={"field": field, "value": str(value)})
    # -0 passes the check above but would render as "$-0.00"
    return result.copy_abs() if result == 0 else result


def _validate_items(items: Sequence[LineItem]) -> None:
    for item in items:
        if item.quantity < 1:
            raise InvalidInput(
                f"Quantity for {item.sku} must be a positive integer",
                details={"equipment_id": item.equipment_id, "quantity": item.quantity},
            )
        if item.unit_daily_rate is not None:
            _to_decimal(item.unit_daily_rate, "unit_daily_rate")


def compute_quote(
    items: Sequence[LineItem],
    period: RentalPeriod,
    delivery_required: bool = False,
    delivery_cost: Number = ZERO,
    insurance_rate: Number = ZERO,
    tax_rate: Number = ZERO,
) -> QuoteResult:
    """
    Price a quote.

    Items without a daily rate contribute zero and are listed in
    `pricing_unavailable`. An empty item list is valid and yields an
    all-zero breakdown flagged `is_empty`. Either the full result is
    returned or InvalidDateRange / InvalidInput is raised.
    """
    duration_days = rental_duration_days(period.start_date, period.end_date)

    delivery_cost = _to_decimal(delivery_cost, "delivery_cost")
    insurance_rate = _to_decimal(insurance_rate, "insurance_rate")
    tax_rate = _to_decimal(tax_rate, "tax_rate")
    _validate_items(items)

    line_totals: List[LineTotal] = []
    pricing_unavailable: List[str] = []
    line_items_total = ZERO

    for item in items:
        rate = _to_decimal(item.unit_daily_rate, "unit_daily_rate") if item.has_pricing else ZERO
        if not item.has_pricing:
            pricing_unavailable.append(item.equipment_id)

        line_total = rate * item.quantity * duration_days
        line_items_total += line_total
        line_totals.append(LineTotal(
            equipment_id=item.equipment_id,
            sku=item.sku,
            name=item.name,
            quantity=item.quantity,
            unit_daily_rate=item.unit_daily_rate,
            duration_days=duration_days,
            total=line_total,
        ))

    insurance = line_items_total * insurance_rate
    delivery = delivery_cost if delivery_required else ZERO
    subtotal = line_items_total + insurance + delivery
    tax = subtotal * tax_rate
    total = subtotal + tax

    return QuoteResult(
        breakdown=PriceBreakdown(
            line_items_total=line_items_total,
            insurance=insurance,
            delivery=delivery,
            subtotal=subtotal,
            tax=tax,
            total=total,
        ),
        duration_days=duration_days,
        line_totals=line_totals,
        pricing_unavailable=pricing_unavailable,
        is_empty=len(items) == 0,
    )


class PricingService:
    """Pricing calculator bound to one insurance/tax policy."""

    def __init__(self, config: Optional[PricingConfig] = None):
        self.config = config or PricingConfig()

    def quote(
        self,
        items: Sequence[LineItem],
        start_date: DateInput,
        end_date: DateInput,
        delivery_required: bool = False,
        delivery_cost: Number = ZERO,
    ) -> QuoteResult:
        """Price items for a date range using the configured rates."""
        result = compute_quote(
            items,
            RentalPeriod(start_date=start_date, end_date=end_date),
            delivery_required=delivery_required,
            delivery_cost=delivery_cost,
            insurance_rate=self.config.insurance_rate,
            tax_rate=self.config.tax_rate,
        )

        if result.pricing_unavailable:
            logger.debug(f"Quote has unpriced items: {result.pricing_unavailable}")

        return result
