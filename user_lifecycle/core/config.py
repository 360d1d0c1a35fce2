"""
Configuration helpers for the user lifecycle service.

Settings are read from environment variables once and cached; call
get_settings.cache_clear() after changing the environment (tests do).
"""

from dataclasses import dataclass
from functools import lru_cache
import os

from user_lifecycle.domain.users import normalize_domain_suffix

DEFAULT_ALLOWED_EMAIL_DOMAIN = "@example.com"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    allowed_email_domain: str
    database_url: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    domain = normalize_domain_suffix(os.getenv("ALLOWED_EMAIL_DOMAIN"))
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        allowed_email_domain=domain or DEFAULT_ALLOWED_EMAIL_DOMAIN,
        database_url=(os.getenv("DATABASE_URL") or "").strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
    )
