"""rentalcore Data Models"""

from rentalcore.models.cart import Cart, CartLine, CatalogBrowseState
from rentalcore.models.catalog import (
    Equipment,
    EquipmentCategory,
    EquipmentFilter,
    EquipmentPage,
)
from rentalcore.models.common import (
    Availability,
    Pagination,
    PaginationParams,
    QuoteStatus,
    RentalPeriod,
)
from rentalcore.models.fulfillment import (
    FulfillmentEntry,
    FulfillmentRequest,
    FulfillmentResult,
    FulfillmentSummary,
    InventoryRecord,
    InventoryUpdate,
)
from rentalcore.models.quotes import (
    ClientInfo,
    LineItem,
    LineTotal,
    PreviewRequest,
    PriceBreakdown,
    PricingConfig,
    Quote,
    QuoteRequest,
    QuoteResult,
    QuoteStatusUpdate,
)

__all__ = [
    # Common
    "Availability", "QuoteStatus", "RentalPeriod", "Pagination", "PaginationParams",
    # Catalog
    "Equipment", "EquipmentCategory", "EquipmentFilter", "EquipmentPage",
    # Cart
    "Cart", "CartLine", "CatalogBrowseState",
    # Quotes
    "LineItem", "LineTotal", "PricingConfig", "PriceBreakdown", "QuoteResult",
    "ClientInfo", "QuoteRequest", "PreviewRequest", "Quote", "QuoteStatusUpdate",
    # Fulfillment
    "InventoryRecord", "InventoryUpdate", "FulfillmentEntry", "FulfillmentSummary",
    "FulfillmentResult", "FulfillmentRequest",
]
