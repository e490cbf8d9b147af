"""
API Dependencies

Dependency injection for the store and services.
"""

import logging
from functools import lru_cache

from fastapi import Depends

from api.config import Settings, get_settings
from api.storage import MemoryRepository
from api.supabase import SupabaseRepository, get_supabase_client_optional
from rentalcore.services import FulfillmentService, PricingService, QuoteService

logger = logging.getLogger(__name__)


@lru_cache()
def get_repository():
    """
    Get the singleton store.

    Supabase when configured, otherwise an in-memory repository.
    """
    client = get_supabase_client_optional()
    if client is not None:
        return SupabaseRepository(client)

    logger.warning("Supabase not configured - using in-memory store")
    return MemoryRepository()


def get_pricing_service(settings: Settings = Depends(get_settings)) -> PricingService:
    """Pricing calculator bound to the configured rates."""
    return PricingService(settings.pricing_config)


def get_quote_service(
    repo=Depends(get_repository),
    pricing: PricingService = Depends(get_pricing_service),
) -> QuoteService:
    return QuoteService(repo, pricing)


def get_fulfillment_service(repo=Depends(get_repository)) -> FulfillmentService:
    return FulfillmentService(repo)
