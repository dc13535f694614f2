"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_WORDPRESS_API_URL = "https://electrifydc.org/wp-json/wp/v2"


class ConfigError(RuntimeError):
    """Raised when a configured value cannot be parsed."""


@dataclass(frozen=True)
class Settings:
    wordpress_api_url: str = DEFAULT_WORDPRESS_API_URL
    request_timeout: int = 10
    page_size: int = 10
    port: int = 8080


def _get_int_env(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc
    if value < minimum:
        raise ConfigError(f"{name} must be >= {minimum}, got {value}")
    return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    wordpress_api_url = (os.getenv("WORDPRESS_API_URL") or DEFAULT_WORDPRESS_API_URL).rstrip("/")
    request_timeout = _get_int_env("WORDPRESS_TIMEOUT", 10)
    page_size = _get_int_env("CONTRACTORS_PAGE_SIZE", 10)
    port = _get_int_env("PORT", 8080)

    if wordpress_api_url == DEFAULT_WORDPRESS_API_URL:
        logger.warning("WORDPRESS_API_URL is not set; using default %s", DEFAULT_WORDPRESS_API_URL)

    return Settings(
        wordpress_api_url=wordpress_api_url,
        request_timeout=request_timeout,
        page_size=page_size,
        port=port,
    )
