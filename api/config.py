"""
API Configuration

All secrets loaded from environment variables.
NEVER hardcode API keys, passwords, or secrets.
"""

from decimal import Decimal
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings

from rentalcore.models.quotes import DEFAULT_INSURANCE_RATE, DEFAULT_TAX_RATE, PricingConfig


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App info
    app_name: str = "Rental Quote API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3001

    # CORS
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # Pricing policy (one jurisdiction per deployment)
    insurance_rate: Decimal = DEFAULT_INSURANCE_RATE
    tax_rate: Decimal = DEFAULT_TAX_RATE

    # Catalog
    default_page_size: int = 25

    # Supabase - leave unset to run on the in-memory store
    supabase_url: Optional[str] = None  # Loaded from SUPABASE_URL env var
    supabase_anon_key: Optional[str] = None  # Loaded from SUPABASE_ANON_KEY env var
    supabase_service_role_key: Optional[str] = None

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @property
    def cors_origin_list(self) -> List[str]:
        """Parse comma-separated CORS origins."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def supabase_enabled(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)

    @property
    def pricing_config(self) -> PricingConfig:
        return PricingConfig(insurance_rate=self.insurance_rate, tax_rate=self.tax_rate)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
