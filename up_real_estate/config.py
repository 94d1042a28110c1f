"""
Application configuration using Pydantic Settings.
"""

import os
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from up_real_estate.calculations.assumptions import InvestmentAssumptions


def get_env_file() -> str:
    """Determine which env file to use based on environment."""
    env = os.getenv("UPRE_APP_ENV", "development")
    if env == "production":
        return ".env.production"
    return ".env.development"


class Settings(BaseSettings):
    """Application settings loaded from UPRE_* environment variables."""

    # App settings
    app_name: str = "UP Real Estate"
    debug: bool = False
    log_level: str = "INFO"
    app_env: str = "development"

    # Server
    host: str = "0.0.0.0"
    port: int = 8787

    # Frontend origins allowed to call the API
    cors_origins: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    # Financing used when a request omits a parameter
    default_down_payment: float = Field(default=90000.0, ge=0)
    default_interest_rate: float = Field(default=6.5, ge=0)
    default_loan_term: int = Field(default=30, gt=0)

    # Underwriting constants, e.g. UPRE_ASSUMPTIONS__AIRBNB_PREMIUM=1.5
    assumptions: InvestmentAssumptions = InvestmentAssumptions()

    model_config = SettingsConfigDict(
        env_prefix="UPRE_",
        env_file=get_env_file(),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
