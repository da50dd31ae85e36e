"""Shared pytest fixtures for cart and member tests."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from storefront.domain.entities import AddOn, Member, MenuItem, Variation
from storefront.domain.value_objects import MemberUserType
from storefront.integrations.cart_persistence import MemoryCartPersistence
from storefront.services.cart_service import CartStore
from storefront.services.member_session import MemberSession


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    """Keep cart settings from the developer's shell out of the tests."""
    for name in ("CART_BACKEND", "CART_STORAGE_KEY", "CART_FILE_PATH", "REDIS_URL", "CART_TTL_SECONDS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def variation() -> Variation:
    return Variation(id="V", name="1000 Diamonds", price=20, member_price=10, reseller_price=5)


@pytest.fixture
def add_on() -> AddOn:
    return AddOn(id="X", name="Gift wrap", price=3)


@pytest.fixture
def menu_item(variation: Variation, add_on: AddOn) -> MenuItem:
    return MenuItem(id="A", name="Mobile Legends", base_price=100, variations=[variation], add_ons=[add_on])


@pytest.fixture
def other_item() -> MenuItem:
    return MenuItem(id="B", name="Genshin Impact", base_price=50)


@pytest.fixture
def end_user() -> Member:
    return Member(
        id="m-1",
        username="player1",
        email="player1@example.com",
        user_type=MemberUserType.END_USER,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def reseller() -> Member:
    return Member(
        id="m-2",
        username="shop",
        email="shop@example.com",
        user_type=MemberUserType.RESELLER,
        created_at=datetime(2024, 2, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def session() -> MemberSession:
    return MemberSession()


@pytest.fixture
def persistence() -> MemoryCartPersistence:
    return MemoryCartPersistence()


@pytest.fixture
def cart(persistence: MemoryCartPersistence, session: MemberSession) -> CartStore:
    return CartStore(persistence, session)
