"""
Quote Service

Builds quote records from the quote form and tracks their status.
Pricing is delegated to PricingService; persistence to the injected store.
"""

import logging
import uuid
from typing import List, Optional

from rentalcore.errors import InvalidInput
from rentalcore.models.common import QuoteStatus
from rentalcore.models.quotes import PreviewRequest, Quote, QuoteRequest, QuoteResult
from rentalcore.services.pricing_service import PricingService, parse_rental_date

logger = logging.getLogger(__name__)


class QuoteService:
    """Service for pricing, submitting and tracking quotes."""

    def __init__(self, store, pricing: Optional[PricingService] = None):
        self.store = store
        self.pricing = pricing or PricingService()

    def preview(self, request: PreviewRequest) -> QuoteResult:
        """Price a cart without saving anything."""
        return self.pricing.quote(
            request.items,
            request.start_date,
            request.end_date,
            delivery_required=request.delivery_required,
            delivery_cost=request.delivery_cost,
        )

    def submit(self, request: QuoteRequest) -> Quote:
        """
        Price and persist a quote.

        Empty quotes are rejected here; unpriced items are allowed through
        and recorded in `pricing_unavailable` for follow-up.
        """
        result = self.pricing.quote(
            request.items,
            request.start_date,
            request.end_date,
            delivery_required=request.delivery_required,
            delivery_cost=request.delivery_cost,
        )
        if result.is_empty:
            raise InvalidInput("Cannot submit an empty quote", details={"items": 0})

        quote = Quote(
            quote_id=f"qt_{uuid.uuid4().hex[:12]}",
            client=request.client,
            start_date=parse_rental_date(request.start_date, "start_date").date(),
            end_date=parse_rental_date(request.end_date, "end_date").date(),
            duration_days=result.duration_days,
            items=list(request.items),
            delivery_required=request.delivery_required,
            pricing=result.breakdown,
            pricing_unavailable=result.pricing_unavailable,
            notes=request.notes,
        )
        self.store.save_quote(quote)

        logger.info(f"Submitted quote {quote.quote_id} ({len(quote.items)} items, total {quote.pricing.total})")
        return quote

    def get_quote(self, quote_id: str) -> Optional[Quote]:
        """Get a quote by ID."""
        return self.store.get_quote(quote_id)

    def list_quotes(self, status: Optional[QuoteStatus] = None) -> List[Quote]:
        """List quotes, newest first."""
        return self.store.list_quotes(status)

    def set_status(self, quote_id: str, status: QuoteStatus) -> Optional[Quote]:
        """Move a quote to a new status."""
        quote = self.store.get_quote(quote_id)
        if not quote:
            return None
        quote.status = status
        self.store.save_quote(quote)
        logger.info(f"Quote {quote_id} -> {status.value}")
        return quote
