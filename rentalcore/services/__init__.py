"""rentalcore Services - Business Logic"""

from rentalcore.services.fulfillment_service import (
    FulfillmentService,
    lookup_from_records,
    split_fulfillment,
)
from rentalcore.services.pricing_service import (
    PricingService,
    compute_quote,
    parse_rental_date,
    rental_duration_days,
)
from rentalcore.services.quote_service import QuoteService

__all__ = [
    "PricingService",
    "compute_quote",
    "parse_rental_date",
    "rental_duration_days",
    "FulfillmentService",
    "split_fulfillment",
    "lookup_from_records",
    "QuoteService",
]
