"""
Quote API Routes

Running price preview for the quote builder, quote submission and the
per-quote fulfillment lists.
"""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.dependencies import get_fulfillment_service, get_quote_service
from api.middleware.errors import NotFoundError
from rentalcore.models.common import QuoteStatus
from rentalcore.models.fulfillment import FulfillmentResult
from rentalcore.models.quotes import PreviewRequest, Quote, QuoteRequest, QuoteResult, QuoteStatusUpdate
from rentalcore.services import FulfillmentService, QuoteService
from rentalcore.services.formatting import format_breakdown, fulfillment_print_text

router = APIRouter()


class QuotePreviewResponse(BaseModel):
    """Exact pricing plus the rounded strings to display."""
    result: QuoteResult
    display: Dict[str, str]


class QuoteFulfillmentResponse(BaseModel):
    """Fulfillment lists for a stored quote."""
    quote_id: str
    fulfillment: FulfillmentResult
    print_text: str


def _require_quote(quote_svc: QuoteService, quote_id: str) -> Quote:
    quote = quote_svc.get_quote(quote_id)
    if not quote:
        raise NotFoundError("Quote", quote_id)
    return quote


@router.post("/preview", response_model=QuotePreviewResponse)
def preview_quote(
    request: PreviewRequest,
    quote_svc: QuoteService = Depends(get_quote_service),
):
    """
    Price a cart without saving it.

    `result.is_final` is false while the cart is empty or holds items
    without a daily rate.
    """
    result = quote_svc.preview(request)
    return QuotePreviewResponse(result=result, display=format_breakdown(result.breakdown))


@router.post("", response_model=Quote, status_code=201)
def submit_quote(
    request: QuoteRequest,
    quote_svc: QuoteService = Depends(get_quote_service),
):
    """Price and save a quote. Empty quotes are rejected."""
    return quote_svc.submit(request)


@router.get("", response_model=List[Quote])
def list_quotes(
    status: Optional[QuoteStatus] = None,
    quote_svc: QuoteService = Depends(get_quote_service),
):
    """List quotes, newest first."""
    return quote_svc.list_quotes(status)


@router.get("/{quote_id}", response_model=Quote)
def get_quote(
    quote_id: str,
    quote_svc: QuoteService = Depends(get_quote_service),
):
    """Get a specific quote."""
    return _require_quote(quote_svc, quote_id)


@router.post("/{quote_id}/status", response_model=Quote)
def update_status(
    quote_id: str,
    update: QuoteStatusUpdate,
    quote_svc: QuoteService = Depends(get_quote_service),
):
    """Accept, fulfill or cancel a quote."""
    quote = quote_svc.set_status(quote_id, update.status)
    if not quote:
        raise NotFoundError("Quote", quote_id)
    return quote


@router.get("/{quote_id}/fulfillment", response_model=QuoteFulfillmentResponse)
def quote_fulfillment(
    quote_id: str,
    quote_svc: QuoteService = Depends(get_quote_service),
    fulfillment_svc: FulfillmentService = Depends(get_fulfillment_service),
):
    """Pull list and partner order for a quote, with printable text."""
    quote = _require_quote(quote_svc, quote_id)
    result = fulfillment_svc.split(quote.items)
    return QuoteFulfillmentResponse(
        quote_id=quote.quote_id,
        fulfillment=result,
        print_text=fulfillment_print_text(result, title=f"Fulfillment Lists - {quote.client.name}"),
    )
