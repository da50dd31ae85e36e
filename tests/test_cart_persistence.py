from __future__ import annotations

import json
from dataclasses import dataclass, field

import pytest

from storefront.core.exceptions import StorageException
from storefront.domain.entities import AddOn, CartLine, Variation
from storefront.integrations.cart_persistence import (
    JsonFileCartPersistence,
    MemoryCartPersistence,
    RedisCartPersistence,
    deserialize_lines,
    serialize_lines,
)


@dataclass
class FakeRedisClient:
    data: dict[str, str] = field(default_factory=dict)
    expiry: dict[str, int] = field(default_factory=dict)
    setex_calls: list[tuple[str, int]] = field(default_factory=list)
    fail: bool = False

    def ping(self) -> bool:
        return True

    def get(self, key: str):
        if self.fail:
            raise ConnectionError("redis down")
        return self.data.get(key)

    def set(self, key: str, value: str):
        if self.fail:
            raise ConnectionError("redis down")
        self.data[key] = value
        return True

    def setex(self, key: str, ttl: int, value: str) -> bool:
        if self.fail:
            raise ConnectionError("redis down")
        self.data[key] = value
        self.expiry[key] = ttl
        self.setex_calls.append((key, ttl))
        return True


@pytest.fixture
def fake_redis(monkeypatch):
    import storefront.integrations.cart_persistence as persistence_module

    client = FakeRedisClient()
    monkeypatch.setattr(persistence_module.redis, "from_url", lambda *args, **kwargs: client)
    return client


@pytest.fixture
def lines() -> list[CartLine]:
    return [
        CartLine(
            id="A:::CART:::1700000000000-abcdefghi",
            catalog_item_id="A",
            name="Mobile Legends",
            quantity=2,
            base_price=100,
            selected_variation=Variation(id="V", price=20, member_price=10, reseller_price=5),
            selected_add_ons=[AddOn(id="X", price=3, quantity=2)],
            total_price=999,
        ),
        CartLine(id="B:::CART:::1700000000001-zzzzzzzzz", catalog_item_id="B", name="", quantity=1, base_price=50),
    ]


def test_serialized_form_omits_total_price(lines) -> None:
    payload = json.loads(serialize_lines(lines))

    assert "total_price" not in payload[0]
    assert payload[0]["catalog_item_id"] == "A"
    assert payload[0]["selected_add_ons"][0]["quantity"] == 2


def test_deserialize_accepts_legacy_rows() -> None:
    legacy = json.dumps(
        [
            {
                "id": "item-uuid-1:::CART:::1700000000000-k2j3h4g5f",
                "name": "Valorant Points",
                "basePrice": 100,
                "quantity": 3,
                "selectedVariation": {"id": "V", "name": "475 VP", "price": 20, "member_price": None},
                "selectedAddOns": [{"id": "X", "name": "Fast", "price": 3, "quantity": 1}],
                "totalPrice": 123,
            }
        ]
    )

    [line] = deserialize_lines(legacy)

    assert line.catalog_item_id == "item-uuid-1"
    assert line.base_price == 100
    assert line.selected_variation.id == "V"
    assert line.selected_add_ons[0].id == "X"


def test_deserialize_drops_non_positive_quantities(lines) -> None:
    raw = json.loads(serialize_lines(lines))
    raw[1]["quantity"] = 0

    assert [line.catalog_item_id for line in deserialize_lines(json.dumps(raw))] == ["A"]


def test_deserialize_rejects_non_list() -> None:
    with pytest.raises(StorageException):
        deserialize_lines('{"id": "x"}')


def test_deserialize_rejects_legacy_id_without_separator() -> None:
    with pytest.raises(StorageException):
        deserialize_lines('[{"id": "abc-123", "quantity": 1}]')


class TestMemoryPersistence:
    def test_round_trip(self, lines) -> None:
        storage = MemoryCartPersistence()
        assert storage.save(lines) is True
        assert storage.load() == lines


class TestJsonFilePersistence:
    def test_missing_file_is_empty(self, tmp_path) -> None:
        assert JsonFileCartPersistence(tmp_path / "cart.json").load() == []

    def test_round_trip(self, tmp_path, lines) -> None:
        path = tmp_path / "nested" / "cart.json"
        storage = JsonFileCartPersistence(path)

        assert storage.save(lines) is True
        assert path.exists()
        assert JsonFileCartPersistence(path).load() == lines

    def test_corrupt_file_is_empty(self, tmp_path) -> None:
        path = tmp_path / "cart.json"
        path.write_text("[{broken", encoding="utf-8")

        assert JsonFileCartPersistence(path).load() == []

    def test_save_failure_returns_false(self, tmp_path, lines) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        assert JsonFileCartPersistence(blocker / "cart.json").save(lines) is False


class TestRedisPersistence:
    def test_round_trip_shared_between_instances(self, fake_redis, lines) -> None:
        writer = RedisCartPersistence("redis://fake", storage_key="cart:42")
        reader = RedisCartPersistence("redis://fake", storage_key="cart:42")

        assert writer.save(lines) is True
        assert "cart:42" in fake_redis.data
        assert reader.load() == lines

    def test_ttl_uses_setex(self, fake_redis, lines) -> None:
        storage = RedisCartPersistence("redis://fake", storage_key="cart:7", ttl_seconds=3600)
        storage.save(lines)

        assert fake_redis.setex_calls == [("cart:7", 3600)]

    def test_missing_url_uses_memory(self, lines) -> None:
        storage = RedisCartPersistence(None)

        assert storage.is_redis_enabled is False
        assert storage.save(lines) is True
        assert storage.load() == lines

    def test_falls_back_to_memory_on_error(self, fake_redis, lines) -> None:
        storage = RedisCartPersistence("redis://fake")
        fake_redis.fail = True

        assert storage.save(lines) is True
        assert storage.is_redis_enabled is False
        assert storage.load() == lines

    def test_corrupt_value_is_empty(self, fake_redis) -> None:
        fake_redis.data["amber_cartItems"] = "not json"
        assert RedisCartPersistence("redis://fake").load() == []
