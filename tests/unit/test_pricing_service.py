"""Tests for the quote pricing calculator."""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from rentalcore.errors import InvalidDateRange, InvalidInput
from rentalcore.models.common import RentalPeriod
from rentalcore.models.quotes import LineItem, PricingConfig
from rentalcore.services.formatting import format_breakdown
from rentalcore.services.pricing_service import (
    PricingService,
    compute_quote,
    parse_rental_date,
    rental_duration_days,
)

INSURANCE = Decimal("0.05")
TAX = Decimal("0.08875")


def create_item(equipment_id: str = "eq-1", rate="100", quantity: int = 1) -> LineItem:
    """Create a test line item."""
    return LineItem(
        equipment_id=equipment_id,
        sku=equipment_id.upper(),
        name=f"Item {equipment_id}",
        unit_daily_rate=Decimal(rate) if rate is not None else None,
        quantity=quantity,
    )


def period(start: str, end: str) -> RentalPeriod:
    return RentalPeriod(start_date=start, end_date=end)


class TestDuration:
    """Tests for billable day calculation."""

    def test_same_day_bills_one_day(self):
        assert rental_duration_days("2024-06-01", "2024-06-01") == 1

    def test_whole_days(self):
        assert rental_duration_days(date(2024, 6, 1), date(2024, 6, 4)) == 3

    def test_partial_day_rounds_up(self):
        start = datetime(2024, 6, 1, 9, 0)
        end = datetime(2024, 6, 2, 10, 0)
        assert rental_duration_days(start, end) == 2

    def test_mixed_date_and_string(self):
        assert rental_duration_days(date(2024, 2, 28), "2024-03-01") == 2

    def test_end_before_start_raises(self):
        with pytest.raises(InvalidDateRange):
            rental_duration_days("2024-06-05", "2024-06-01")

    def test_unparsable_date_raises(self):
        with pytest.raises(InvalidDateRange) as exc_info:
            rental_duration_days("next tuesday", "2024-06-01")
        assert exc_info.value.details["field"] == "start_date"

    def test_empty_date_raises(self):
        with pytest.raises(InvalidDateRange):
            parse_rental_date("", "end_date")

    def test_utc_z_suffix(self):
        parsed = parse_rental_date("2024-06-01T09:00:00Z")
        assert parsed == datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)
        assert rental_duration_days("2024-06-01T09:00:00Z", "2024-06-03T09:00:00+00:00") == 2

    def test_mixed_timezone_awareness_raises(self):
        with pytest.raises(InvalidDateRange):
            rental_duration_days("2024-06-01T09:00:00+00:00", datetime(2024, 6, 3, 9, 0))


class TestComputeQuote:
    """Tests for compute_quote."""

    def test_reference_scenario(self):
        """$100/day x 2 for 3 days, 5% insurance, no delivery, 8.875% tax."""
        result = compute_quote(
            [create_item(rate="100", quantity=2)],
            period("2024-06-01", "2024-06-04"),
            delivery_required=False,
            delivery_cost=Decimal("0"),
            insurance_rate=INSURANCE,
            tax_rate=TAX,
        )
        b = result.breakdown

        assert result.duration_days == 3
        assert b.line_items_total == Decimal("600.00")
        assert b.insurance == Decimal("30.00")
        assert b.delivery == Decimal("0")
        assert b.subtotal == Decimal("630.00")
        assert b.tax == Decimal("55.9125")
        assert b.total == Decimal("685.9125")
        assert result.is_final is True

    def test_identities_hold_exactly(self):
        items = [
            create_item("a", rate="33.33", quantity=3),
            create_item("b", rate="19.99", quantity=7),
            create_item("c", rate="0.01", quantity=1),
        ]
        result = compute_quote(
            items, period("2024-01-01", "2024-01-11"),
            delivery_required=True, delivery_cost="74.95",
            insurance_rate=INSURANCE, tax_rate=TAX,
        )
        b = result.breakdown

        assert b.subtotal == b.line_items_total + b.insurance + b.delivery
        assert b.total == b.subtotal + b.tax

    def test_line_total_scales_with_duration(self):
        items = [create_item(rate="45.50", quantity=2)]
        three = compute_quote(items, period("2024-01-01", "2024-01-04"))
        six = compute_quote(items, period("2024-01-01", "2024-01-07"))

        assert six.breakdown.line_items_total == three.breakdown.line_items_total * 2

    def test_delivery_only_when_required(self):
        items = [create_item()]
        without = compute_quote(items, period("2024-01-01", "2024-01-02"), False, "150")
        with_delivery = compute_quote(items, period("2024-01-01", "2024-01-02"), True, "150")

        assert without.breakdown.delivery == 0
        assert with_delivery.breakdown.delivery == Decimal("150")

    def test_insurance_excludes_delivery(self):
        result = compute_quote(
            [create_item(rate="200")], period("2024-01-01", "2024-01-02"),
            True, "100", insurance_rate=Decimal("0.10"),
        )
        assert result.breakdown.insurance == Decimal("20")

    def test_empty_items_is_all_zero_and_flagged(self):
        result = compute_quote(
            [], period("2024-01-01", "2024-01-05"),
            insurance_rate=INSURANCE, tax_rate=TAX,
        )
        b = result.breakdown

        assert result.is_empty is True
        assert result.is_final is False
        assert b.line_items_total == 0
        assert b.insurance == 0
        assert b.subtotal == 0
        assert b.tax == 0
        assert b.total == 0

    def test_null_rate_contributes_zero_and_is_listed(self):
        items = [
            create_item("priced", rate="50", quantity=1),
            create_item("call-us", rate=None, quantity=4),
        ]
        result = compute_quote(items, period("2024-01-01", "2024-01-03"))

        assert result.breakdown.line_items_total == Decimal("100")
        assert result.pricing_unavailable == ["call-us"]
        assert result.is_final is False
        assert result.line_totals[1].total == 0

    def test_line_totals_follow_item_order(self):
        items = [create_item("z"), create_item("a"), create_item("m")]
        result = compute_quote(items, period("2024-01-01", "2024-01-02"))

        assert [lt.equipment_id for lt in result.line_totals] == ["z", "a", "m"]

    def test_end_before_start_raises(self):
        with pytest.raises(InvalidDateRange):
            compute_quote([create_item()], period("2024-01-10", "2024-01-01"))

    def test_negative_delivery_cost_raises(self):
        with pytest.raises(InvalidInput):
            compute_quote([create_item()], period("2024-01-01", "2024-01-02"), True, "-5")

    def test_negative_delivery_cost_raises_even_without_delivery(self):
        with pytest.raises(InvalidInput):
            compute_quote([create_item()], period("2024-01-01", "2024-01-02"), False, "-5")

    def test_negative_zero_inputs_are_plain_zero(self):
        result = compute_quote(
            [create_item(rate="-0")],
            period("2024-01-01", "2024-01-02"),
            delivery_required=True,
            delivery_cost="-0",
            insurance_rate="-0",
        )
        breakdown = result.breakdown

        for amount in (breakdown.delivery, breakdown.insurance, breakdown.total, result.line_totals[0].total):
            assert amount == 0
            assert not amount.is_signed()
        assert format_breakdown(breakdown)["delivery"] == "$0.00"

    def test_negative_rates_raise(self):
        p = period("2024-01-01", "2024-01-02")
        with pytest.raises(InvalidInput):
            compute_quote([create_item()], p, insurance_rate="-0.01")
        with pytest.raises(InvalidInput):
            compute_quote([create_item()], p, tax_rate=Decimal("-1"))

    def test_negative_unit_rate_raises(self):
        with pytest.raises(InvalidInput):
            compute_quote([create_item(rate="-10")], period("2024-01-01", "2024-01-02"))

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_raises(self, quantity):
        with pytest.raises(InvalidInput):
            compute_quote([create_item(quantity=quantity)], period("2024-01-01", "2024-01-02"))


class TestPricingService:
    """Tests for the config-bound wrapper."""

    def test_uses_injected_rates(self):
        service = PricingService(PricingConfig(insurance_rate=Decimal("0"), tax_rate=Decimal("0.10")))
        result = service.quote([create_item(rate="100")], "2024-01-01", "2024-01-02")

        assert result.breakdown.insurance == 0
        assert result.breakdown.tax == Decimal("10")
        assert result.breakdown.total == Decimal("110")

    def test_default_policy(self):
        result = PricingService().quote([create_item(rate="100", quantity=2)], "2024-06-01", "2024-06-04")

        assert result.breakdown.total == Decimal("685.9125")
