"""Application configuration via Pydantic Settings."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Central configuration loaded from environment variables and .env file."""

    model_config = {
        "env_prefix": "POOLBET_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_json: bool = False

    # Odds arithmetic
    decimal_precision: int = Field(default=28, ge=1)

    # CLI display
    display_places: int = Field(default=2, ge=0)
    currency_symbol: str = "$"


settings = Settings()
