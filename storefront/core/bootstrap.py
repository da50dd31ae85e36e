"""Application bootstrap wiring cart persistence and the cart store."""
from __future__ import annotations

from logging_config import logger, setup_logging
from storefront.domain.pricing import MemberContext
from storefront.integrations.cart_persistence import (
    CartPersistence,
    JsonFileCartPersistence,
    MemoryCartPersistence,
    RedisCartPersistence,
)
from storefront.services.cart_service import CartStore

from .config import Settings
from .constants import CART_BACKEND_FILE, CART_BACKEND_REDIS


def build_cart_persistence(settings: Settings) -> CartPersistence:
    """Pick the cart storage backend from configuration."""
    if settings.cart_backend == CART_BACKEND_REDIS:
        if settings.redis_url:
            logger.info("Using Redis for cart storage")
            return RedisCartPersistence(
                settings.redis_url,
                storage_key=settings.cart_storage_key,
                ttl_seconds=settings.cart_ttl_seconds,
            )
        logger.warning("CART_BACKEND=redis but REDIS_URL is empty, using memory storage")
        return MemoryCartPersistence(settings.cart_storage_key)

    if settings.cart_backend == CART_BACKEND_FILE:
        logger.info("Using JSON file %s for cart storage", settings.cart_file_path)
        return JsonFileCartPersistence(settings.cart_file_path)

    logger.info("Using memory for cart storage (cart is lost on restart)")
    return MemoryCartPersistence(settings.cart_storage_key)


def build_cart_store(settings: Settings, member_context: MemberContext | None = None) -> CartStore:
    """Create the cart store from configuration."""
    setup_logging(settings.log_level)
    return CartStore(build_cart_persistence(settings), member_context)
