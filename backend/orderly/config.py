"""Configuration for the Orderly embedded app backend."""

from __future__ import annotations

import os


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Base configuration for the Flask application."""

    PORT: int = int(os.getenv("PORT", "3000"))
    SERVICE_NAME: str = "orderly-starter"
    CORS_ALLOWED_ORIGINS: str = os.getenv("CORS_ALLOWED_ORIGINS", "https://admin.shopify.com")
    SETTINGS_WRITE_RATE_LIMIT: str = os.getenv("SETTINGS_WRITE_RATE_LIMIT", "60 per minute")
    RATELIMIT_STORAGE_URI: str = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    # Number of reverse proxies in front of the app whose X-Forwarded-* headers are trusted.
    TRUSTED_PROXY_COUNT: int = int(os.getenv("TRUSTED_PROXY_COUNT", "0"))
    # When enabled, notification flags missing from an update are reset to False.
    RESET_MISSING_NOTIFICATION_FLAGS: bool = _env_flag("RESET_MISSING_NOTIFICATION_FLAGS")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
