"""
Quote Data Models

Line items, pricing inputs and the itemized price breakdown.
Money is Decimal throughout and is never rounded inside the core.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from rentalcore.models.common import DateInput, QuoteStatus

DEFAULT_INSURANCE_RATE = Decimal("0.05")
DEFAULT_TAX_RATE = Decimal("0.08875")

ZERO = Decimal("0")


class LineItem(BaseModel):
    """
    One equipment SKU plus requested quantity within a quote.

    Snapshot taken when the quote is built. A missing daily rate means
    "call for pricing": it prices as zero and is reported separately.
    Quantity and rate bounds are checked by the services so callers get
    InvalidInput rather than a schema error.
    """
    model_config = ConfigDict(frozen=True)

    equipment_id: str
    sku: str
    name: str
    category: Optional[str] = None
    unit_daily_rate: Optional[Decimal] = None
    quantity: int = 1

    @property
    def has_pricing(self) -> bool:
        return self.unit_daily_rate is not None


class PricingConfig(BaseModel):
    """Rates injected by the caller so one core can serve many policies."""
    insurance_rate: Decimal = Field(default=DEFAULT_INSURANCE_RATE, ge=0)
    tax_rate: Decimal = Field(default=DEFAULT_TAX_RATE, ge=0)


class PriceBreakdown(BaseModel):
    """Fully itemized price. subtotal and total are exact sums."""
    line_items_total: Decimal = ZERO
    insurance: Decimal = ZERO
    delivery: Decimal = ZERO
    subtotal: Decimal = ZERO
    tax: Decimal = ZERO
    total: Decimal = ZERO


class LineTotal(BaseModel):
    """Per-item extension: rate x quantity x days."""
    equipment_id: str
    sku: str
    name: str
    quantity: int
    unit_daily_rate: Optional[Decimal] = None
    duration_days: int
    total: Decimal


class QuoteResult(BaseModel):
    """
    Output of the pricing calculator.

    `pricing_unavailable` lists equipment ids priced at zero because they
    have no rate. A quote is only final when it has items and every item
    is priced.
    """
    breakdown: PriceBreakdown
    duration_days: int
    line_totals: List[LineTotal] = Field(default_factory=list)
    pricing_unavailable: List[str] = Field(default_factory=list)
    is_empty: bool = False

    @computed_field
    @property
    def is_final(self) -> bool:
        return not self.is_empty and not self.pricing_unavailable


class ClientInfo(BaseModel):
    """Customer contact details captured on the quote form."""
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: Optional[str] = None
    company: Optional[str] = None


class QuoteRequest(BaseModel):
    """Everything the quote builder submits."""
    client: ClientInfo
    start_date: DateInput
    end_date: DateInput
    items: List[LineItem] = Field(default_factory=list)
    delivery_required: bool = False
    delivery_cost: Decimal = ZERO
    notes: Optional[str] = None


class PreviewRequest(BaseModel):
    """Pricing-only request used to render the running summary."""
    start_date: DateInput
    end_date: DateInput
    items: List[LineItem] = Field(default_factory=list)
    delivery_required: bool = False
    delivery_cost: Decimal = ZERO


class Quote(BaseModel):
    """A persisted quote record."""
    quote_id: str
    created_at: datetime = Field(default_factory=datetime.utcnow)
    status: QuoteStatus = QuoteStatus.SUBMITTED

    client: ClientInfo
    start_date: DateInput
    end_date: DateInput
    duration_days: int

    items: List[LineItem]
    delivery_required: bool = False
    pricing: PriceBreakdown
    pricing_unavailable: List[str] = Field(default_factory=list)

    notes: Optional[str] = None


class QuoteStatusUpdate(BaseModel):
    """Move a quote through its lifecycle."""
    status: QuoteStatus
