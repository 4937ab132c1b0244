"""Configuration system using pydantic-settings with environment variable loading."""

from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ftx_derivatives.precision import DEFAULT_PRECISIONS, DEFAULT_QUOTE_CURRENCY


class ApiSettings(BaseSettings):
    """FTX Derivatives (LedgerX) API connection settings."""

    model_config = SettingsConfigDict(env_prefix="LEDGERX_")

    api_key: SecretStr = SecretStr("")
    base_url: str = "https://api.ledgerx.com"
    page_size: int = 100  # `limit` sent to list endpoints; no further pages are fetched
    timeout_seconds: float = 30.0


class PrecisionSettings(BaseSettings):
    """Fractional-digit count per currency code.

    The venue has changed the ETH scale between API revisions (8 vs 9), so
    the table is configurable. Override with a JSON object, e.g.
    LEDGERX_PRECISION_CURRENCIES='{"USD": 2, "CBTC": 8, "ETH": 8}'.
    """

    model_config = SettingsConfigDict(env_prefix="LEDGERX_PRECISION_")

    currencies: dict[str, int] = Field(default_factory=lambda: dict(DEFAULT_PRECISIONS))
    quote_currency: str = DEFAULT_QUOTE_CURRENCY  # prices, fees and strikes are quoted in this

    @field_validator("currencies")
    @classmethod
    def _non_negative(cls, value: dict[str, int]) -> dict[str, int]:
        for currency, digits in value.items():
            if digits < 0:
                raise ValueError(f"precision for {currency} must be non-negative, got {digits}")
        return value


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"  # LOG_FORMAT
    api: ApiSettings = ApiSettings()
    precision: PrecisionSettings = PrecisionSettings()

    @field_validator("log_format", mode="before")
    @classmethod
    def _lower_format(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value
