"""Configuration loading for the TuxMart store.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from decimal import Decimal
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Payment configuration
    payment_backend: Literal["credit_line", "always_approve"] = Field(
        default="credit_line",
        description="Payment service backend type",
    )
    credit_limit: Decimal = Field(
        default=Decimal("1000"),
        description="Credit available to the credit line payment backend",
    )

    # Inventory configuration
    inventory_stock_file: str = Field(
        default="",
        description="JSON file mapping SKU to starting stock level",
    )
    allow_backorder: bool = Field(
        default=False,
        description="Allow stock levels to go negative",
    )

    # Financial configuration
    financial_backend: Literal["stdout", "markdown"] = Field(
        default="stdout",
        description="Financial service backend type",
    )
    ledger_dir: str = Field(
        default="./ledger",
        description="Output directory for the markdown order ledger",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose journal output",
    )

    @field_validator("credit_limit")
    @classmethod
    def validate_credit_limit(cls, v: Decimal) -> Decimal:
        """Ensure credit limit is non-negative."""
        if v < 0:
            raise ValueError("credit_limit must be non-negative")
        return v

    @field_validator("ledger_dir")
    @classmethod
    def validate_ledger_dir(cls, v: str) -> str:
        """Ensure ledger directory is not blank."""
        if not v.strip():
            raise ValueError("ledger_dir must be a non-empty path")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
