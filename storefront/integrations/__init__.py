"""Integrations package - storage backends for the cart."""

from storefront.integrations.cart_persistence import (
    CartPersistence,
    JsonFileCartPersistence,
    MemoryCartPersistence,
    RedisCartPersistence,
)

__all__ = [
    "CartPersistence",
    "MemoryCartPersistence",
    "JsonFileCartPersistence",
    "RedisCartPersistence",
]
