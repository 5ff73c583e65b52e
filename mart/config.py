# mart/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

# Fixed pricing rates; never read from the environment.
TAX_RATE = 0.10
FREE_SHIPPING_THRESHOLD = 20.0


class Settings(BaseSettings):
    # Legacy storefront constants. Neither is read by the pricing engine:
    # calc_tax multiplies by TAX_RATE, not SALES_TAX, and no shipping cost is charged.
    SALES_TAX: float = 0.13
    SHIPPING_COST: float = 0.08

    LOG_LEVEL: str = "INFO"

    # Example .env:
    # LOG_LEVEL=DEBUG

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

@lru_cache()
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()

settings = Settings()
