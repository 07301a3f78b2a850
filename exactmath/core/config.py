"""
Library configuration.

Defaults for approximate computations and logging, overridable through
``EXACTMATH_*`` environment variables or a ``.env`` file.
"""

from decimal import Decimal
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings"""

    # Precision context used when callers pass none
    DEFAULT_PRECISION: int = 34
    DEFAULT_ROUNDING: str = "ROUND_HALF_EVEN"

    # Heron's method defaults
    SQRT_ABORT_CRITERION: Decimal = Decimal("0.0000000001")
    SQRT_MAX_ITERATIONS: int = 100
    SQRT_INITIAL_SCALE: int = 10

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="EXACTMATH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
