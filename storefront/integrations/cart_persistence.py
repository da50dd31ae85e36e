"""Durable storage slots for the cart.

Every adapter keeps one string-keyed slot holding the JSON array of
serialized cart lines. ``load`` never raises: a missing, unreadable or
corrupt slot comes back as an empty cart. ``save`` overwrites the slot and
reports success instead of raising.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Protocol, Sequence

import redis

from logging_config import logger
from storefront.core.constants import DEFAULT_CART_STORAGE_KEY
from storefront.core.exceptions import StorageException
from storefront.domain.entities.cart import CartLine


class CartPersistence(Protocol):
    def load(self) -> list[CartLine]: ...

    def save(self, lines: Sequence[CartLine]) -> bool: ...


def serialize_lines(lines: Sequence[CartLine]) -> str:
    return json.dumps([line.to_dict() for line in lines], ensure_ascii=False)


def deserialize_lines(raw: str | bytes | None) -> list[CartLine]:
    """Parse a stored slot. Raises StorageException on malformed payloads."""
    if not raw:
        return []
    try:
        payload = json.loads(raw)
        if not isinstance(payload, list):
            raise ValueError(f"cart payload must be a list, got {type(payload).__name__}")
        lines = [CartLine.from_dict(row) for row in payload]
    except (ValueError, KeyError, TypeError) as exc:
        raise StorageException(f"Malformed cart payload: {exc}") from exc
    return [line for line in lines if line.quantity > 0]


class MemoryCartPersistence:
    """Cart slots kept in process memory."""

    def __init__(self, storage_key: str = DEFAULT_CART_STORAGE_KEY):
        self.storage_key = storage_key
        self._slots: dict[str, str] = {}

    def load(self) -> list[CartLine]:
        try:
            return deserialize_lines(self._slots.get(self.storage_key))
        except Exception as exc:
            logger.error("Error loading cart items from memory slot %s: %s", self.storage_key, exc)
            return []

    def save(self, lines: Sequence[CartLine]) -> bool:
        try:
            self._slots[self.storage_key] = serialize_lines(lines)
            return True
        except Exception as exc:
            logger.error("Error saving cart items to memory slot %s: %s", self.storage_key, exc)
            return False

    def raw(self) -> str | None:
        return self._slots.get(self.storage_key)

    def put_raw(self, value: str) -> None:
        self._slots[self.storage_key] = value


class JsonFileCartPersistence:
    """Cart slot stored as a JSON file on local disk."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> list[CartLine]:
        if not self.path.exists():
            return []
        try:
            return deserialize_lines(self.path.read_text(encoding="utf-8"))
        except Exception as exc:
            logger.error("Error loading cart items from %s: %s", self.path, exc)
            return []

    def save(self, lines: Sequence[CartLine]) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp_path.write_text(serialize_lines(lines), encoding="utf-8")
            tmp_path.replace(self.path)
            return True
        except Exception as exc:
            logger.error("Error saving cart items to %s: %s", self.path, exc)
            return False


class RedisCartPersistence:
    """Cart slot persisted under one Redis key, with in-memory fallback."""

    def __init__(
        self,
        redis_url: str | None,
        storage_key: str = DEFAULT_CART_STORAGE_KEY,
        ttl_seconds: int = 0,
    ):
        self._redis_url = redis_url
        self.storage_key = storage_key
        self.ttl_seconds = ttl_seconds
        self._memory = MemoryCartPersistence(storage_key)
        self._client: Any = self._init_client()

    @property
    def is_redis_enabled(self) -> bool:
        return self._client is not None

    def _init_client(self):
        if not self._redis_url:
            logger.warning("REDIS_URL is not set; cart uses in-memory fallback")
            return None

        try:
            client = redis.from_url(
                self._redis_url,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
            )
            client.ping()
            logger.info("Redis cart storage enabled")
            return client
        except Exception as exc:
            logger.warning("Redis cart init failed, fallback to in-memory: %s", exc)
            return None

    def _switch_to_memory_fallback(self, reason: Exception | str) -> None:
        logger.warning("Redis cart fallback to memory mode: %s", reason)
        self._client = None

    def load(self) -> list[CartLine]:
        if not self._client:
            return self._memory.load()

        try:
            raw = self._client.get(self.storage_key)
        except Exception as exc:
            self._switch_to_memory_fallback(exc)
            return self._memory.load()

        try:
            return deserialize_lines(raw)
        except Exception as exc:
            logger.error("Error loading cart items from Redis key %s: %s", self.storage_key, exc)
            return []

    def save(self, lines: Sequence[CartLine]) -> bool:
        if self._client:
            serialized = serialize_lines(lines)
            try:
                if self.ttl_seconds > 0:
                    self._client.setex(self.storage_key, self.ttl_seconds, serialized)
                else:
                    self._client.set(self.storage_key, serialized)
                return True
            except Exception as exc:
                self._switch_to_memory_fallback(exc)
        return self._memory.save(lines)
