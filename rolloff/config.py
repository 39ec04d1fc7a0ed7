from pydantic_settings import BaseSettings
from pydantic import field_validator
from decimal import Decimal
from functools import lru_cache


class Settings(BaseSettings):
    """Pricing and serviceability settings loaded from environment variables."""

    # App Settings
    APP_NAME: str = "Roll-Off Pricing Core"
    APP_VERSION: str = "1.0.0"

    # Money display
    CURRENCY_SYMBOL: str = "$"

    # Sales tax (PA 7% = state 6% + Allegheny County 1%), applied to rental only
    SALES_TAX_RATE: Decimal = Decimal("0.07")

    # Card processing pass-through (Stripe: 2.9% + 30c)
    PROCESSING_FEE_RATE: Decimal = Decimal("0.029")
    PROCESSING_FEE_FIXED_CENTS: int = 30

    # Serviceability messages shown to end users
    NO_ACTIVE_AREAS_MESSAGE: str = "No active service areas configured"
    OUT_OF_AREA_MESSAGE: str = (
        "Sorry, this location is outside our service area. We currently serve "
        "the Greater Pittsburgh area including parts of Western PA, Northern WV, "
        "and Eastern OH."
    )

    @field_validator('SALES_TAX_RATE', 'PROCESSING_FEE_RATE', mode='before')
    @classmethod
    def parse_rate(cls, v):
        # "7%" style values are accepted from the environment
        if isinstance(v, str) and v.strip().endswith('%'):
            return Decimal(v.strip()[:-1]) / 100
        return v

    @field_validator('SALES_TAX_RATE', 'PROCESSING_FEE_RATE')
    @classmethod
    def check_rate(cls, v: Decimal) -> Decimal:
        if v < 0 or v >= 1:
            raise ValueError("rate must be between 0 and 1")
        return v

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
