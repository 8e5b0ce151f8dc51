"""
Zwanski API: Application Configuration
=======================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the app factory, the upstream service and the landing page.
When:  Loaded once at module import time.

Every default reproduces the public API contract, so the service runs with
no environment at all. Overrides exist for deployment (host/port, log level)
and for pointing the outbound calls somewhere else.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # What: Controls verbosity of application logging
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # What: Serve /docs, /redoc and /openapi.json
    # Off by default: unknown paths must all fall through to the 404 handler
    enable_docs: bool = Field(default=False)

    # ── Outbound Calls ────────────────────────────────────────────────────
    # What: Timeout (seconds) for the single outbound call made by /api/ping
    # and /api/crypto. 5.0 is httpx's own default.
    upstream_timeout: float = Field(default=5.0, ge=0.1, le=60.0)

    # What: Scheme prepended to the host given to /api/ping
    ping_scheme: str = Field(default="https")

    @field_validator("ping_scheme")
    @classmethod
    def validate_ping_scheme(cls, v: str) -> str:
        lower = v.lower()
        if lower not in {"http", "https"}:
            raise ValueError(f"Invalid ping_scheme '{v}'. Must be 'http' or 'https'")
        return lower

    # What: CoinGecko simple-price endpoint queried by /api/crypto
    crypto_price_url: str = Field(
        default="https://api.coingecko.com/api/v3/simple/price",
        description="Public price API (no key required)",
    )

    # ── Landing Page ──────────────────────────────────────────────────────
    # What: Base URL shown in the curl examples on the root page
    public_base_url: str = Field(default="https://api.zwanski.tech")

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # LOG_LEVEL and log_level both work
    }


# Singleton instance, imported throughout the application
settings = Settings()
