"""
Display Formatting

The only place money gets rounded. Also renders fulfillment lists as plain
text for printing.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List

from rentalcore.models.fulfillment import FulfillmentEntry, FulfillmentResult
from rentalcore.models.quotes import PriceBreakdown

CENTS = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    """Round to cents, half up."""
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_currency(value: Decimal) -> str:
    """$1,234.56"""
    return f"${round_money(value):,.2f}"


def format_breakdown(breakdown: PriceBreakdown) -> Dict[str, str]:
    """Currency strings for every breakdown field, in display order."""
    return {
        "line_items_total": format_currency(breakdown.line_items_total),
        "insurance": format_currency(breakdown.insurance),
        "delivery": format_currency(breakdown.delivery),
        "subtotal": format_currency(breakdown.subtotal),
        "tax": format_currency(breakdown.tax),
        "total": format_currency(breakdown.total),
    }


def _entry_lines(entry: FulfillmentEntry, owned: bool) -> List[str]:
    lines = [f"  [ ] {entry.name} ({entry.sku}) x {entry.quantity}"]
    if owned:
        if entry.storage_location:
            lines.append(f"      Location: {entry.storage_location}")
        if entry.serial_numbers:
            lines.append(f"      S/N: {', '.join(entry.serial_numbers)}")
    return lines


def fulfillment_print_text(result: FulfillmentResult, title: str = "Fulfillment Lists") -> str:
    """Printable pull list and partner order, in the order items were quoted."""
    summary = result.summary
    lines = [
        title,
        f"Owned: {summary.owned_item_count}  "
        f"Partner: {summary.partner_item_count}  "
        f"Total: {summary.total_item_count}",
        "",
        f"PULL FROM STOCK ({len(result.owned_pull_list)} items)",
    ]
    for entry in result.owned_pull_list:
        lines.extend(_entry_lines(entry, owned=True))
    if not result.owned_pull_list:
        lines.append("  (none)")

    lines.append("")
    lines.append(f"ORDER FROM PARTNER ({len(result.partner_order_list)} items)")
    for entry in result.partner_order_list:
        lines.extend(_entry_lines(entry, owned=False))
    if not result.partner_order_list:
        lines.append("  (none)")

    return "\n".join(lines)
