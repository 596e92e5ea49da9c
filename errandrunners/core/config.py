"""ErrandRunners Configuration"""

from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "ErrandRunners Cart"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # Delivery pricing (GYD, no fractional subunit)
    base_price: float = 800
    price_per_km: float = 150
    minimum_total: float = 800
    service_fee: float = 200
    currency_symbol: str = "GYD$"

    # Hosted backend (pricing_rules / service_zones tables)
    backend_url: Optional[str] = None
    backend_api_key: Optional[str] = None
    backend_timeout_seconds: float = 10.0

    # Sessions
    session_max_age_hours: int = 24

    # Abandoned cart reminders
    cart_reminders_enabled: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "ERRANDRUNNERS_"
        case_sensitive = False

    @property
    def backend_configured(self) -> bool:
        """Check if the hosted backend is configured"""
        return bool(self.backend_url)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
