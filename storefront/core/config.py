"""Environment-driven configuration for the cart engine."""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import CART_BACKENDS, DEFAULT_CART_FILE_PATH, DEFAULT_CART_STORAGE_KEY
from .exceptions import ConfigurationException


@dataclass(slots=True)
class Settings:
    cart_backend: str
    cart_storage_key: str
    cart_file_path: str
    redis_url: str | None
    cart_ttl_seconds: int
    log_level: str


def load_settings() -> Settings:
    """Load environment variables once and expose typed settings."""
    load_dotenv()

    backend = os.getenv("CART_BACKEND", "memory").strip().lower()
    if backend not in CART_BACKENDS:
        raise ConfigurationException(
            f"CART_BACKEND must be one of {sorted(CART_BACKENDS)}, got {backend!r}"
        )

    try:
        ttl = int(os.getenv("CART_TTL_SECONDS", "0"))
    except ValueError as exc:
        raise ConfigurationException("CART_TTL_SECONDS must be an integer") from exc
    if ttl < 0:
        raise ConfigurationException("CART_TTL_SECONDS must not be negative")

    return Settings(
        cart_backend=backend,
        cart_storage_key=os.getenv("CART_STORAGE_KEY", DEFAULT_CART_STORAGE_KEY),
        cart_file_path=os.getenv("CART_FILE_PATH", DEFAULT_CART_FILE_PATH),
        redis_url=os.getenv("REDIS_URL") or None,
        cart_ttl_seconds=ttl,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
